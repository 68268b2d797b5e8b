"""
Stream Orchestrator

Runs the podcast pipeline and turns it into a stream of frames:

    classify -> questions -> answers (fan-out) -> script
             -> image prompts -> images (fan-out) -> complete

Stages run strictly in sequence and push their events into an EventSink the
moment they have them; the response generator forwards each one as soon as
it is queued. Any uncaught stage failure ends the stream with one ``error``
frame; success ends it with one ``complete`` frame. Frames already sent stay
valid in both cases.
"""
import asyncio
import logging
from datetime import date
from typing import AsyncIterator, Optional

from ..image_service import ImageService
from ..llm_service import LLMService
from ..research_service import ResearchService
from .event_classifier import EventClassifier
from .events import EventSink, EventType, StreamEvent
from .image_prompts import ImagePromptComposer
from .image_renderer import ImageRenderer
from .models import PodcastRequest
from .question_generator import QuestionGenerator
from .research_answerer import ResearchAnswerer
from .script_writer import ScriptWriter

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Une erreur inattendue s'est produite"


class PodcastOrchestrator:
    """
    Sequences the six podcast stages for a single request.

    Holds no per-request state; one instance can serve concurrent requests.
    """

    def __init__(
        self,
        llm: Optional[LLMService] = None,
        research: Optional[ResearchService] = None,
        images: Optional[ImageService] = None,
    ):
        self.llm = llm or LLMService()
        self.research = research or ResearchService()
        self.images = images or ImageService()

        self.classifier = EventClassifier(self.llm, self.research)
        self.question_generator = QuestionGenerator(self.llm)
        self.answerer = ResearchAnswerer(self.research)
        self.script_writer = ScriptWriter(self.llm)
        self.image_prompt_composer = ImagePromptComposer(self.llm)
        self.image_renderer = ImageRenderer(self.images)

        logger.info("[ORCHESTRATOR] Podcast pipeline initialized")

    async def stream(self, request: PodcastRequest, today: Optional[date] = None) -> AsyncIterator[str]:
        """Run the pipeline for ``request`` and yield encoded SSE frames."""
        async for event in self.events(request, today=today):
            yield event.to_frame()

    async def events(self, request: PodcastRequest, today: Optional[date] = None) -> AsyncIterator[StreamEvent]:
        """Run the pipeline for ``request`` and yield its events in emission order."""
        sink = EventSink()
        task = asyncio.ensure_future(self.run(request, sink, today=today))
        try:
            async for event in sink:
                yield event
        finally:
            if not task.done():
                logger.warning("[ORCHESTRATOR] Stream closed early - cancelling pipeline")
                task.cancel()

    async def run(self, request: PodcastRequest, sink: EventSink, today: Optional[date] = None) -> None:
        """Execute every stage, then close ``sink`` with exactly one terminal event."""
        logger.info("=" * 70)
        logger.info("[ORCHESTRATOR] STARTING PODCAST GENERATION")
        logger.info(f"  Topic: {request.topic}")
        logger.info(f"  Country: {request.country}")
        logger.info(f"  Audience: {request.audience}")
        logger.info("=" * 70)

        try:
            await self._run_stages(request, sink, today)
        except Exception as e:
            logger.error(f"[ORCHESTRATOR] Pipeline failed: {e}", exc_info=True)
            sink.emit(StreamEvent(type=EventType.ERROR, data=str(e) or GENERIC_ERROR_MESSAGE))
        else:
            logger.info("[ORCHESTRATOR] PIPELINE COMPLETE")
            sink.emit(StreamEvent(type=EventType.COMPLETE))
        finally:
            sink.close()

    async def _run_stages(self, request: PodcastRequest, sink: EventSink, today: Optional[date]) -> None:
        emit = sink.emit

        logger.info("[ORCHESTRATOR] PHASE 1: Event classification")
        status = await self.classifier.classify(request.topic, emit, today=today)

        logger.info("[ORCHESTRATOR] PHASE 2: Question generation")
        questions = await self.question_generator.generate(request, status.simplified_label, emit)

        logger.info("[ORCHESTRATOR] PHASE 3: Research answers")
        answers = await self.answerer.answer_all(questions, emit)

        logger.info("[ORCHESTRATOR] PHASE 4: Podcast script")
        script = await self.script_writer.write(answers, request.audience, request.country, emit)

        logger.info("[ORCHESTRATOR] PHASE 5: Image prompts")
        image_prompts = await self.image_prompt_composer.compose(script, emit)

        logger.info("[ORCHESTRATOR] PHASE 6: Image rendering")
        await self.image_renderer.render_all(image_prompts, emit)

    async def close(self) -> None:
        """Release the service clients' connection pools."""
        await self.llm.close()
        await self.research.close()
        await self.images.close()


_orchestrator: Optional[PodcastOrchestrator] = None


def get_orchestrator() -> PodcastOrchestrator:
    """Get singleton PodcastOrchestrator instance."""
    global _orchestrator
    if _orchestrator is None:
        _orchestrator = PodcastOrchestrator()
    return _orchestrator


async def close_orchestrator() -> None:
    """Close the singleton PodcastOrchestrator, if one was created."""
    global _orchestrator
    if _orchestrator is not None:
        logger.info("[ORCHESTRATOR] Closing service clients")
        await _orchestrator.close()
        _orchestrator = None
