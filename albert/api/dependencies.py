"""
Shared dependencies for API routes.
"""
import logging

from albert.config import config
from albert.services.podcast import PodcastOrchestrator, get_orchestrator

logger = logging.getLogger(__name__)


def get_podcast_orchestrator() -> PodcastOrchestrator:
    """Get the shared PodcastOrchestrator instance."""
    return get_orchestrator()


def check_services_configured() -> bool:
    """Check if every external service has credentials."""
    ready = config.ai.ready
    if not ready:
        logger.warning("External services not fully configured")
    return ready
