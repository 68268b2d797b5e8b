"""
Services Module - clients for the external generative services
and the podcast pipeline built on them.
"""
from .llm_service import LLMService
from .research_service import ResearchService
from .image_service import ImageService

__all__ = [
    "LLMService",
    "ResearchService",
    "ImageService",
]
