"""
Stage 6: Image Renderer

Renders every image prompt concurrently with fixed generation settings and
emits a single event with the URLs in prompt order. Any failure, including
an output that is not a non-empty list, fails the whole stage.
"""
import asyncio
import logging
from typing import List

from ..exceptions import ImageServiceError
from ..image_service import ImageService
from .events import EventEmitter, EventType, StreamEvent
from .prompts import RENDER_SETTINGS

logger = logging.getLogger(__name__)


class ImageRenderer:

    def __init__(self, images: ImageService):
        self.images = images

    async def render_all(self, prompts: List[str], emit: EventEmitter) -> List[str]:
        logger.info(f"[IMAGES] Rendering {len(prompts)} images in parallel...")

        tasks = [asyncio.ensure_future(self._render_one(prompt)) for prompt in prompts]
        try:
            urls = await asyncio.gather(*tasks)
        except Exception:
            for task in tasks:
                task.cancel()
            raise

        urls = list(urls)
        logger.info(f"[IMAGES] Rendered {len(urls)} images")
        emit(StreamEvent(type=EventType.IMAGES, data=urls))
        return urls

    async def _render_one(self, prompt: str) -> str:
        output = await self.images.run({"prompt": prompt, **RENDER_SETTINGS})

        if not isinstance(output, list) or len(output) == 0:
            raise ImageServiceError("Unexpected output format from image service")

        return str(output[0])
