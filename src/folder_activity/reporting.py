"""Text and JSON rendering of folder activity for CLI output."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Iterable, Sequence

if TYPE_CHECKING:
    from .models import FolderActivity


def format_duration(seconds: float) -> str:
    total_seconds = int(seconds)
    hours, remainder = divmod(total_seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours > 0:
        return f"{hours}h {minutes}m {secs}s"
    if minutes > 0:
        return f"{minutes}m {secs}s"
    return f"{secs}s"


def total_duration(activities: Iterable["FolderActivity"]) -> float:
    return sum(activity.total_duration_seconds for activity in activities)


def render_text(activities: Sequence["FolderActivity"]) -> str:
    """Render a human-readable table, one folder per line."""
    if not activities:
        return "No folder activity found."

    lines = [
        f"Folder activity ({len(activities)} folders, "
        f"{format_duration(total_duration(activities))} total)",
        "-" * 60,
    ]
    for activity in activities:
        line = (
            f"{activity.formatted_duration:>12}  {activity.application:<14} "
            f"{activity.path}  ({activity.event_count} events)"
        )
        if activity.context:
            line += f"  [{activity.context}]"
        lines.append(line)
    return "\n".join(lines)


def render_json(activities: Iterable["FolderActivity"]) -> str:
    return json.dumps([activity.to_dict() for activity in activities], indent=2)
