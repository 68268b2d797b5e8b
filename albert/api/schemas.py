"""
Pydantic schemas for API requests and responses.
"""
from pydantic import BaseModel, Field
from datetime import datetime

from albert import __version__
from albert.services.podcast import PodcastRequest


class PodcastInfoRequest(BaseModel):
    """POST /api/getInfo request body."""
    topic: str = Field(..., description="Podcast topic")
    country: str = Field(..., description="Country the audience lives in")
    audience: str = Field(..., description="Target audience (any string is accepted)")

    def to_request(self) -> PodcastRequest:
        return PodcastRequest(topic=self.topic, country=self.country, audience=self.audience)


class HealthResponse(BaseModel):
    """GET /health response."""
    status: str = "healthy"
    service: str = "albert-podcast-api"
    version: str = __version__
    services_configured: bool = False
    timestamp: datetime = Field(default_factory=datetime.utcnow)
