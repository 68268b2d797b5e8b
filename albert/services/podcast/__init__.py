"""
Podcast generation pipeline.

Architecture:
- Stage 1: Event Classifier - past / future / none label for the topic
- Stage 2: Question Generator - audience-adapted question batch
- Stage 3: Research Answerer - concurrent web-search answers
- Stage 4: Script Writer - narrative podcast script
- Stage 5: Image Prompt Composer - two illustration prompts
- Stage 6: Image Renderer - concurrent image inference
- Stream Orchestrator - sequences the stages and streams every artifact
"""

from .events import EventSink, EventType, StreamEvent
from .models import (
    AnsweredQuestion,
    Audience,
    EventLabel,
    EventStatus,
    PodcastPackage,
    PodcastRequest,
    RenderedImage,
)
from .orchestrator import PodcastOrchestrator, close_orchestrator, get_orchestrator

__all__ = [
    "AnsweredQuestion",
    "Audience",
    "EventLabel",
    "EventSink",
    "EventStatus",
    "EventType",
    "PodcastOrchestrator",
    "PodcastPackage",
    "PodcastRequest",
    "RenderedImage",
    "StreamEvent",
    "close_orchestrator",
    "get_orchestrator",
]
