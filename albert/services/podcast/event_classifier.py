"""
Stage 1: Event Classifier

Decides whether the topic is a past event, an upcoming event, or not an
event at all. Two cascaded calls:
1. Research service writes a short prose analysis relative to today's date
2. LLM categorises that prose into exactly one of past / future / none
"""
import logging
from datetime import date
from typing import Optional

from ..llm_service import LLMService
from ..research_service import ResearchService
from .events import EventEmitter, EventType, StreamEvent
from .models import EventLabel, EventStatus
from .prompts import (
    CATEGORIZER_INSTRUCTION,
    CATEGORIZER_SYSTEM,
    CATEGORIZER_USER,
    STATUS_ANALYSIS_SYSTEM,
    STATUS_ANALYSIS_USER,
)

logger = logging.getLogger(__name__)


class EventClassifier:
    """Temporal classification of a topic."""

    def __init__(self, llm: LLMService, research: ResearchService):
        self.llm = llm
        self.research = research

    async def classify(
        self,
        topic: str,
        emit: EventEmitter,
        today: Optional[date] = None,
    ) -> EventStatus:
        today = today or date.today()

        logger.info(f"[CLASSIFIER] Analyzing event status for: {topic}")
        analysis = await self.research.ask(
            STATUS_ANALYSIS_SYSTEM,
            STATUS_ANALYSIS_USER.format(topic=topic, today=today.isoformat()),
        )
        analysis = analysis.strip()
        logger.debug(f"[CLASSIFIER] Analysis: {analysis[:200]}")

        raw_label = await self.llm.complete(
            [
                {"role": "system", "content": CATEGORIZER_SYSTEM},
                {"role": "user", "content": CATEGORIZER_USER.format(description=analysis)},
            ],
            temperature=0,
            max_tokens=1,
        )
        label = EventLabel.normalize(raw_label)
        if label.value != raw_label.strip().lower():
            logger.warning(f"[CLASSIFIER] Unrecognized label {raw_label!r} - using 'none'")

        status = EventStatus(detailed_status=analysis, simplified_label=label)
        logger.info(f"[CLASSIFIER] Simplified status: {label.value}")

        emit(StreamEvent(
            type=EventType.EVENT_STATUS,
            data=status.to_dict(),
            model=self.llm.model,
            prompt=CATEGORIZER_INSTRUCTION,
        ))
        return status
