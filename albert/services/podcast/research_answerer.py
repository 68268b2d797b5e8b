"""
Stage 3: Research Answerer

Answers every question concurrently. Each answer is emitted the moment it
arrives (completion order); the stage itself returns only after all
questions are answered, in question order.

A single failed answer fails the whole stage: remaining calls are cancelled
and the error propagates to the orchestrator.
"""
import asyncio
import logging
from typing import List

from ..research_service import ResearchService
from .events import EventEmitter, EventType, StreamEvent
from .models import AnsweredQuestion
from .prompts import RESEARCH_SYSTEM_PROMPT

logger = logging.getLogger(__name__)


class ResearchAnswerer:
    """Fan-out / fan-in over the question batch."""

    def __init__(self, research: ResearchService):
        self.research = research

    async def answer_all(self, questions: List[str], emit: EventEmitter) -> List[AnsweredQuestion]:
        logger.info(f"[RESEARCH] Answering {len(questions)} questions in parallel...")

        # Tasks are created in batch order so request issuance follows question order
        tasks = [
            asyncio.ensure_future(self._answer_one(question, index, len(questions), emit))
            for index, question in enumerate(questions)
        ]

        try:
            answers = await asyncio.gather(*tasks)
        except Exception:
            for task in tasks:
                task.cancel()
            raise

        logger.info(f"[RESEARCH] All {len(answers)} answers received")
        return list(answers)

    async def _answer_one(
        self,
        question: str,
        index: int,
        total: int,
        emit: EventEmitter,
    ) -> AnsweredQuestion:
        logger.info(f"[RESEARCH] Question {index+1}/{total}: {question[:80]}")
        answer = await self.research.ask(RESEARCH_SYSTEM_PROMPT, question)

        result = AnsweredQuestion(
            question=question,
            answer=answer,
            model=self.research.model,
            system_prompt=RESEARCH_SYSTEM_PROMPT,
        )
        logger.info(f"[RESEARCH] Answer {index+1}/{total} received")
        emit(StreamEvent(type=EventType.RESPONSE, data=result.to_dict()))
        return result
