"""
Podcast pipeline data model.

Every artifact produced by a stage is a plain dataclass with a ``to_dict()``
returning its wire shape (the keys the browser client reads).
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class EventLabel(str, Enum):
    """Temporal classification of a topic."""
    PAST = "past"
    FUTURE = "future"
    NONE = "none"

    @classmethod
    def normalize(cls, raw: Optional[str]) -> "EventLabel":
        """Map a categoriser completion onto a label; anything unknown is NONE."""
        value = (raw or "").strip().lower()
        for label in cls:
            if label.value == value:
                return label
        return cls.NONE


class Audience(str, Enum):
    """Audiences offered by the form. The core accepts any other string too."""
    PRIMARY_SCHOOL = "Primary school children"
    HIGH_SCHOOL = "High school children"
    TECH_SAVVY = "Tech Savvy people"
    ELDERLY = "Elderly"
    YOUNG_ADULTS = "Young adults eager to learn"


COUNTRIES = [
    "France", "États-Unis", "Royaume-Uni", "Allemagne", "Japon",
    "Canada", "Australie", "Italie", "Espagne", "Brésil",
]


@dataclass(frozen=True)
class PodcastRequest:
    """One podcast generation request, immutable for its lifetime."""
    topic: str
    country: str
    audience: str


@dataclass
class Provenance:
    """Model and prompt that produced an artifact."""
    model: str
    prompt: str


@dataclass
class EventStatus:
    """Classifier output: free-text analysis plus simplified label."""
    detailed_status: str
    simplified_label: EventLabel

    def to_dict(self) -> Dict[str, Any]:
        return {
            "perplexityStatus": self.detailed_status,
            "simplifiedStatus": self.simplified_label.value,
        }


@dataclass
class AnsweredQuestion:
    """Research answer, joined back to its question by the question text."""
    question: str
    answer: str
    model: str
    system_prompt: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "prompt": self.question,
            "response": self.answer,
            "model": self.model,
            "systemPrompt": self.system_prompt,
        }


@dataclass
class RenderedImage:
    """Illustration for the podcast; ``url`` stays empty until rendered."""
    prompt: str
    url: str = ""

    @property
    def pending(self) -> bool:
        return not self.url


@dataclass
class PodcastPackage:
    """Everything produced for one request, as rebuilt from the event stream."""
    event_status: Optional[EventStatus] = None
    event_status_provenance: Optional[Provenance] = None
    questions: List[AnsweredQuestion] = field(default_factory=list)
    questions_provenance: Optional[Provenance] = None
    script: str = ""
    images: List[RenderedImage] = field(default_factory=list)
    error: Optional[str] = None
    completed: bool = False

    @property
    def finished(self) -> bool:
        return self.completed or self.error is not None
