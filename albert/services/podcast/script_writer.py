"""
Stage 4: Script Writer

Synthesizes all answers into one narrative podcast script (about five
minutes of spoken delivery) tailored to the audience.
"""
import logging
from typing import List

from ..llm_service import LLMService
from .events import EventEmitter, EventType, StreamEvent
from .models import AnsweredQuestion
from .prompts import build_script_prompt

logger = logging.getLogger(__name__)


class ScriptWriter:

    def __init__(self, llm: LLMService):
        self.llm = llm

    async def write(
        self,
        answers: List[AnsweredQuestion],
        audience: str,
        country: str,
        emit: EventEmitter,
    ) -> str:
        prompt = build_script_prompt([a.answer for a in answers], audience, country)

        logger.info(f"[SCRIPT] Writing podcast script for audience: {audience}")
        script = await self.llm.complete(
            [{"role": "user", "content": prompt}],
            temperature=0.7,
            max_tokens=1500,
        )
        logger.info(f"[SCRIPT] Script generated: {len(script)} chars")

        # Script frame carries no model/prompt provenance
        emit(StreamEvent(type=EventType.PODCAST_SCRIPT, data=script))
        return script
