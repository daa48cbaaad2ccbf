"""Fold window events into per-folder activity totals."""

from __future__ import annotations

import logging
import math
from numbers import Real
from typing import Any, Iterable, Mapping, Optional, Union

from .classifier import classify
from .config import AnalyzerSettings
from .models import FolderActivity, WindowEvent, parse_window_event
from .resolver import PathResolver

logger = logging.getLogger(__name__)

ActivityKey = tuple[str, str]
EventInput = Union[WindowEvent, Mapping[str, Any]]


def aggregate(
    events: Iterable[WindowEvent],
    include_web: bool,
    resolver: PathResolver,
) -> dict[ActivityKey, FolderActivity]:
    """Accumulate durations per ``(path, application)`` across a batch of events."""
    activities: dict[ActivityKey, FolderActivity] = {}
    for event in events:
        try:
            folders = classify(event.application, event.title, include_web, resolver)
        except Exception:
            logger.exception(
                "Failed to classify %r window %r; skipping event.",
                event.application,
                event.title,
            )
            continue

        for folder in folders:
            key = (folder.path, event.application)
            existing = activities.get(key)
            if existing is not None:
                existing.add(event.duration_seconds, folder.context)
            else:
                activities[key] = FolderActivity(
                    path=folder.path,
                    application=event.application,
                    context=folder.context,
                    total_duration_seconds=event.duration_seconds,
                    event_count=1,
                )
    return activities


def rank(activities: Iterable[FolderActivity]) -> list[FolderActivity]:
    """Order by total time, longest first; ties fall back to path then application."""
    return sorted(
        activities,
        key=lambda item: (-item.total_duration_seconds, item.path, item.application),
    )


def _usable_duration(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value) and value >= 0


def _coerce_events(events: Iterable[EventInput]) -> list[WindowEvent]:
    window_events: list[WindowEvent] = []
    for event in events:
        if isinstance(event, Mapping):
            parsed = parse_window_event(event)
            if parsed is not None:
                window_events.append(parsed)
        elif isinstance(event, WindowEvent):
            if _usable_duration(event.duration_seconds):
                window_events.append(event)
            else:
                logger.debug(
                    "Skipping %r event with unusable duration %r",
                    event.application,
                    event.duration_seconds,
                )
        else:
            logger.debug("Skipping unsupported event of type %s", type(event).__name__)
    return window_events


class FolderActivityAnalyzer:
    """Stateless entry point: each ``analyze`` call is a fresh run."""

    def __init__(self, settings: Optional[AnalyzerSettings] = None) -> None:
        self.settings = settings or AnalyzerSettings()

    def analyze(
        self,
        events: Iterable[EventInput],
        include_web: Optional[bool] = None,
        limit: Optional[int] = None,
    ) -> list[FolderActivity]:
        include_web = self.settings.include_web if include_web is None else include_web
        resolver = PathResolver(
            self.settings.search_bases, cache=self.settings.cache_resolutions
        )
        window_events = _coerce_events(events)
        ranked = rank(aggregate(window_events, include_web, resolver).values())
        logger.info(
            "Attributed %d events to %d folder activities.",
            len(window_events),
            len(ranked),
        )
        if limit is not None and limit >= 0:
            ranked = ranked[:limit]
        return ranked
