"""Domain models for window events and folder activity."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .reporting import format_duration

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WindowEvent:
    """A span of time spent in one application window."""

    application: str
    title: str
    duration_seconds: float


@dataclass(frozen=True, slots=True)
class ExtractedFolder:
    path: str
    context: Optional[str] = None


@dataclass(slots=True)
class FolderActivity:
    """Accumulated time for one folder as seen from one application."""

    path: str
    application: str
    context: Optional[str]
    total_duration_seconds: float
    event_count: int

    @property
    def key(self) -> tuple[str, str]:
        return (self.path, self.application)

    @property
    def formatted_duration(self) -> str:
        return format_duration(self.total_duration_seconds)

    def add(self, duration_seconds: float, context: Optional[str]) -> None:
        """Fold another event into this record; the first non-null context sticks."""
        self.total_duration_seconds += duration_seconds
        self.event_count += 1
        if self.context is None:
            self.context = context

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "application": self.application,
            "context": self.context,
            "total_duration_seconds": self.total_duration_seconds,
            "formatted_duration": self.formatted_duration,
            "event_count": self.event_count,
        }


class RawWindowData(BaseModel):
    app: str
    title: str

    model_config = ConfigDict(extra="ignore")


class RawWindowEvent(BaseModel):
    """An event as exported by an ActivityWatch window watcher bucket."""

    timestamp: Any = None
    duration: float = Field(ge=0, allow_inf_nan=False)
    data: RawWindowData

    model_config = ConfigDict(extra="ignore")

    def to_window_event(self) -> WindowEvent:
        return WindowEvent(
            application=self.data.app,
            title=self.data.title,
            duration_seconds=self.duration,
        )


def parse_window_event(raw: Mapping[str, Any]) -> Optional[WindowEvent]:
    """Validate one raw event mapping; ``None`` when app, title or duration is unusable."""
    try:
        event = RawWindowEvent.model_validate(raw)
    except ValidationError as exc:
        logger.debug("Skipping malformed event: %s", exc.errors(include_url=False))
        return None
    return event.to_window_event()


def parse_window_events(raw_events: Iterable[Mapping[str, Any]]) -> Iterator[WindowEvent]:
    for raw in raw_events:
        event = parse_window_event(raw)
        if event is not None:
            yield event
