"""
Stream events - the wire representation of every pipeline state transition.

Each event is sent as one server-sent-events frame: ``data: <JSON>\\n\\n``.
"""
import asyncio
import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, AsyncIterator, Callable, Dict, Optional

logger = logging.getLogger(__name__)


class EventType(str, Enum):
    """Frame tags understood by the client."""
    EVENT_STATUS = "eventStatus"
    PROMPTS = "prompts"
    RESPONSE = "response"
    PODCAST_SCRIPT = "podcastScript"
    IMAGE_PROMPTS = "imagePrompts"
    IMAGES = "images"
    ERROR = "error"
    COMPLETE = "complete"


TERMINAL_EVENTS = (EventType.ERROR, EventType.COMPLETE)


@dataclass
class StreamEvent:
    """A single typed event of the podcast stream."""
    type: EventType
    data: Any = None
    model: Optional[str] = None
    prompt: Optional[str] = None

    @property
    def terminal(self) -> bool:
        return self.type in TERMINAL_EVENTS

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"type": self.type.value}
        if self.data is not None:
            payload["data"] = self.data
        if self.model is not None:
            payload["model"] = self.model
        if self.prompt is not None:
            payload["prompt"] = self.prompt
        return payload

    def to_frame(self) -> str:
        return f"data: {json.dumps(self.to_dict(), ensure_ascii=False)}\n\n"

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "StreamEvent":
        return cls(
            type=EventType(payload["type"]),
            data=payload.get("data"),
            model=payload.get("model"),
            prompt=payload.get("prompt"),
        )


# Stages receive an emitter and call it the moment an artifact is ready.
EventEmitter = Callable[[StreamEvent], None]


class EventSink:
    """
    Ordered, unbuffered channel between the pipeline and the transport.

    Stages call ``emit`` from any coroutine; the response generator drains
    events with ``async for``. Iteration ends once ``close`` is called. Events
    emitted after closing are dropped, so the terminal frame is always last.
    """

    def __init__(self):
        self._queue: "asyncio.Queue[Optional[StreamEvent]]" = asyncio.Queue()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def emit(self, event: StreamEvent) -> None:
        if self._closed:
            logger.debug(f"[SINK] Dropping {event.type.value} event after close")
            return
        self._queue.put_nowait(event)

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self._queue.put_nowait(None)

    async def __aiter__(self) -> AsyncIterator[StreamEvent]:
        while True:
            event = await self._queue.get()
            if event is None:
                return
            yield event
