"""
Podcast Generation API Routes.

Pipeline: Event status -> Questions -> Research answers -> Script -> Image prompts -> Images

The response is a server-sent-events stream; every intermediate artifact is
pushed as a ``data: <JSON>`` frame as soon as it exists, and the stream ends
with exactly one ``complete`` or ``error`` frame.
"""
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import StreamingResponse

from ..dependencies import get_podcast_orchestrator
from ..exceptions import MethodNotAllowedError
from ..schemas import PodcastInfoRequest
from albert.services.podcast import PodcastOrchestrator

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Podcast"])

STREAM_HEADERS = {
    "Cache-Control": "no-cache, no-transform",
    "Connection": "keep-alive",
}


@router.post(
    "/getInfo",
    summary="Generate Podcast",
    description="Stream the podcast package (status, questions, answers, script, images) for a topic.",
    response_class=StreamingResponse,
)
async def get_info(
    body: PodcastInfoRequest,
    orchestrator: PodcastOrchestrator = Depends(get_podcast_orchestrator),
) -> StreamingResponse:
    """
    Start the podcast pipeline and stream its events.

    Headers are committed before the first stage runs, so even a failure in
    event classification is reported as an ``error`` frame, not an HTTP error.
    """
    logger.info(f"Received request for topic: {body.topic} Country: {body.country} Audience: {body.audience}")

    return StreamingResponse(
        orchestrator.stream(body.to_request()),
        media_type="text/event-stream",
        headers=STREAM_HEADERS,
    )


@router.api_route(
    "/getInfo",
    methods=["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS"],
    include_in_schema=False,
)
async def get_info_method_not_allowed(request: Request):
    logger.info(f"Received unsupported method: {request.method}")
    raise MethodNotAllowedError(request.method, allowed=["POST"])
