"""
Stage 5: Image Prompt Composer

Derives two English, people-free image prompts from the script. The only
stage with local error containment: a failed or empty completion becomes
the placeholder "Error generating image prompt N" and the pipeline goes on.
"""
import logging
from typing import List

from ..llm_service import LLMService
from .events import EventEmitter, EventType, StreamEvent
from .prompts import (
    IMAGE_PROMPT_COUNT,
    IMAGE_PROMPT_SYSTEM,
    build_image_prompt_request,
    image_prompt_placeholder,
)

logger = logging.getLogger(__name__)


class ImagePromptComposer:

    def __init__(self, llm: LLMService):
        self.llm = llm

    async def compose(self, script: str, emit: EventEmitter) -> List[str]:
        logger.info(f"[IMAGE_PROMPTS] Generating {IMAGE_PROMPT_COUNT} image prompts...")

        prompts = []
        for number in range(1, IMAGE_PROMPT_COUNT + 1):
            prompts.append(await self._compose_one(script, number))

        emit(StreamEvent(type=EventType.IMAGE_PROMPTS, data=prompts))
        return prompts

    async def _compose_one(self, script: str, number: int) -> str:
        try:
            content = await self.llm.complete(
                [
                    {"role": "system", "content": IMAGE_PROMPT_SYSTEM},
                    {"role": "user", "content": build_image_prompt_request(script, number)},
                ],
                temperature=0.7,
                max_tokens=300,
            )
        except Exception as e:
            logger.error(f"[IMAGE_PROMPTS] Prompt {number} failed: {e}")
            return image_prompt_placeholder(number)

        if not content or not content.strip():
            logger.error(f"[IMAGE_PROMPTS] Empty response for prompt {number}")
            return image_prompt_placeholder(number)

        logger.info(f"[IMAGE_PROMPTS] Prompt {number}: {content.strip()[:100]}")
        return content.strip()
