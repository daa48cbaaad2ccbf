"""Per-application heuristics that pull a project folder out of a window title."""

from __future__ import annotations

import re
from typing import Callable
from urllib.parse import unquote, urlsplit

from .models import ExtractedFolder
from .resolver import PathResolver, expand_home, is_absolute_like

Extractor = Callable[[str, PathResolver], list[ExtractedFolder]]

_TERMINAL_ALIAS_PATTERN = re.compile(r"^([^=\s]+)\s*=\s*(.+)$")
_EDITOR_BRACKET_PATTERN = re.compile(r"\[([^\]]+)\]")
_URL_PATTERN = re.compile(r"https?://([^/\s]+)(/[^?\s#]*)?")

_SHELL_NOISE: frozenset[str] = frozenset(
    {"zsh", "bash", "sh", "fish", "tcsh", "~", "-", "_", ".", "..", "git", "cd", "ls", "pwd"}
)

_EDITOR_SEPARATOR = " — "
_XCODE_SEPARATOR = "—"
_JETBRAINS_SEPARATOR = " – "


def _folder(path: str, context: str | None = None) -> list[ExtractedFolder]:
    return [ExtractedFolder(path=path, context=context)]


def _expand_or_resolve(value: str, resolver: PathResolver) -> str:
    if is_absolute_like(value):
        return expand_home(value)
    return resolver.resolve(value)


def extract_terminal(title: str, resolver: PathResolver) -> list[ExtractedFolder]:
    """Handle shell titles such as ``repo = nickname``, ``~/src/repo`` or ``repo``."""
    title = title.strip()

    match = _TERMINAL_ALIAS_PATTERN.match(title)
    if match:
        return _folder(resolver.resolve(match.group(1)), match.group(2).strip())

    if is_absolute_like(title) and len(title) > 1:
        return _folder(expand_home(title))

    if title.startswith(".."):
        name = title.lstrip("./").split("/", 1)[0].strip()
        if not name:
            return []
        return _folder(resolver.resolve(name))

    if "/" not in title and "\\" not in title:
        if len(title) > 1 and title not in _SHELL_NOISE:
            return _folder(resolver.resolve(title))
        return []

    if "/" in title:
        if is_absolute_like(title):
            return _folder(expand_home(title))
        segments = [segment for segment in title.split("/") if segment]
        if segments and segments[-1] != "~":
            return _folder(resolver.resolve(segments[-1]))

    return []


def extract_file_manager(title: str, resolver: PathResolver) -> list[ExtractedFolder]:
    title = title.strip()
    if not title:
        return []
    return _folder(resolver.resolve(title))


def extract_editor(title: str, resolver: PathResolver) -> list[ExtractedFolder]:
    """Editors show ``file — project``, ``[project] file`` or just ``project``."""
    if _EDITOR_SEPARATOR in title:
        project = title.split(_EDITOR_SEPARATOR, 1)[1].strip()
        if not project:
            return []
        return _folder(_expand_or_resolve(project, resolver))

    match = _EDITOR_BRACKET_PATTERN.search(title)
    if match:
        return _folder(_expand_or_resolve(match.group(1), resolver))

    bare = title.strip()
    if bare and "." not in bare and "/" not in bare:
        return _folder(resolver.resolve(bare))

    return []


def extract_xcode(title: str, resolver: PathResolver) -> list[ExtractedFolder]:
    project = title.split(_XCODE_SEPARATOR, 1)[0].strip()
    if not project:
        return []
    return _folder(resolver.resolve(project))


def extract_jetbrains(title: str, resolver: PathResolver) -> list[ExtractedFolder]:
    # JetBrains puts the project first: "project – src/main.kt"
    if _JETBRAINS_SEPARATOR not in title:
        return []
    project = title.split(_JETBRAINS_SEPARATOR, 1)[0].strip()
    if not project:
        return []
    return _folder(_expand_or_resolve(project, resolver))


def extract_web(title: str, resolver: PathResolver) -> list[ExtractedFolder]:
    """Turn the first URL in a browser title into a ``host/path`` pseudo folder."""
    match = _URL_PATTERN.search(title)
    if not match:
        return []
    try:
        parts = urlsplit(match.group(0))
        host = parts.hostname or ""
    except ValueError:
        return []

    path = host
    if parts.path and parts.path != "/":
        path += unquote(parts.path)
    if not path:
        return []
    return _folder(path, "web")
