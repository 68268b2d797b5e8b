"""
Stage 2: Question Generator

Produces the batch of audience-adapted questions, steered by the event
label (past events: outcomes only, upcoming events: expectations only).
"""
import logging
from typing import List

from ..llm_service import LLMService
from .events import EventEmitter, EventType, StreamEvent
from .models import EventLabel, PodcastRequest
from .prompts import build_question_directives

logger = logging.getLogger(__name__)


def split_questions(completion: str) -> List[str]:
    """Split a numbered list completion into ordered questions, dropping blank lines."""
    return [line.strip() for line in completion.split("\n") if line.strip()]


class QuestionGenerator:
    """Single batch call returning a newline-delimited numbered list."""

    def __init__(self, llm: LLMService):
        self.llm = llm

    async def generate(
        self,
        request: PodcastRequest,
        label: EventLabel,
        emit: EventEmitter,
    ) -> List[str]:
        system_prompt, user_prompt = build_question_directives(request, label)

        logger.info(f"[QUESTIONS] Generating questions ({label.value}) for: {request.topic}")
        completion = await self.llm.complete(
            [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            temperature=0.7,
            max_tokens=500,
        )

        questions = split_questions(completion)
        logger.info(f"[QUESTIONS] Generated {len(questions)} questions")

        emit(StreamEvent(
            type=EventType.PROMPTS,
            data=questions,
            model=self.llm.model,
            prompt=user_prompt,
        ))
        return questions
