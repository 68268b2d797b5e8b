"""
Podcast stream client.

Posts a request to ``/api/getInfo``, reads the server-sent-events stream and
rebuilds the podcast package frame by frame. Partial results survive a later
``error`` frame: the package keeps them and records the error separately.
"""
import json
import logging
from typing import Callable, Optional

import httpx

from albert.services.podcast.events import EventType, StreamEvent
from albert.services.podcast.models import (
    AnsweredQuestion,
    EventLabel,
    EventStatus,
    PodcastPackage,
    PodcastRequest,
    Provenance,
    RenderedImage,
)

logger = logging.getLogger(__name__)

MISSING_AUDIENCE_MESSAGE = "Please select an audience"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


class ClientValidationError(Exception):
    """Raised for invalid input before any network call is made."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


def parse_frame(line: str) -> Optional[StreamEvent]:
    """Decode one ``data: <JSON>`` line; anything else is ignored."""
    if not line.startswith("data: "):
        return None
    return StreamEvent.from_dict(json.loads(line[len("data: "):]))


def apply_event(package: PodcastPackage, event: StreamEvent) -> PodcastPackage:
    """Fold one stream event into the package."""
    if event.type == EventType.EVENT_STATUS:
        package.event_status = EventStatus(
            detailed_status=event.data["perplexityStatus"],
            simplified_label=EventLabel.normalize(event.data["simplifiedStatus"]),
        )
        package.event_status_provenance = Provenance(model=event.model or "", prompt=event.prompt or "")

    elif event.type == EventType.PROMPTS:
        package.questions = [
            AnsweredQuestion(question=question, answer="", model="", system_prompt="")
            for question in event.data
        ]
        package.questions_provenance = Provenance(model=event.model or "", prompt=event.prompt or "")

    elif event.type == EventType.RESPONSE:
        # Answers arrive in completion order; the question text is the join key
        for item in package.questions:
            if item.question == event.data["prompt"]:
                item.answer = event.data["response"]
                item.model = event.data["model"]
                item.system_prompt = event.data["systemPrompt"]

    elif event.type == EventType.PODCAST_SCRIPT:
        package.script = event.data

    elif event.type == EventType.IMAGE_PROMPTS:
        package.images = [RenderedImage(prompt=prompt) for prompt in event.data]

    elif event.type == EventType.IMAGES:
        for index, image in enumerate(package.images):
            image.url = event.data[index] if index < len(event.data) else ""

    elif event.type == EventType.ERROR:
        package.error = event.data

    elif event.type == EventType.COMPLETE:
        package.completed = True
        logger.info("Request completed")

    return package


class PodcastClient:
    """Async client for the podcast streaming endpoint."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 600.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.client = client or httpx.AsyncClient(timeout=timeout)

    async def generate(
        self,
        request: PodcastRequest,
        on_event: Optional[Callable[[StreamEvent, PodcastPackage], None]] = None,
    ) -> PodcastPackage:
        """
        Stream a podcast package for ``request``.

        Args:
            request: topic, country and audience
            on_event: optional callback invoked after each frame is applied

        Returns:
            The package as rebuilt from the stream

        Raises:
            ClientValidationError: no audience selected (no request is sent)
        """
        if not request.audience:
            raise ClientValidationError(MISSING_AUDIENCE_MESSAGE)

        package = PodcastPackage()
        logger.info(f"Submitting topic: {request.topic} Country: {request.country} Audience: {request.audience}")

        try:
            async with self.client.stream(
                "POST",
                f"{self.base_url}/api/getInfo",
                json={"topic": request.topic, "country": request.country, "audience": request.audience},
            ) as response:
                response.raise_for_status()
                async for line in response.aiter_lines():
                    event = parse_frame(line)
                    if event is None:
                        continue
                    apply_event(package, event)
                    if on_event:
                        on_event(event, package)
        except (httpx.HTTPError, KeyError, ValueError) as e:
            logger.error(f"Error fetching information: {e}")
            package.error = UNEXPECTED_ERROR_MESSAGE

        if not package.finished:
            logger.error("Stream ended without a terminal frame")
            package.error = UNEXPECTED_ERROR_MESSAGE

        return package

    async def close(self):
        await self.client.aclose()
