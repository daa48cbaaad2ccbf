"""Best-effort resolution of bare folder names to absolute paths."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, Optional

from .config import DEFAULT_SEARCH_BASES

logger = logging.getLogger(__name__)


def expand_home(path: str) -> str:
    """Expand a leading ``~`` to the current user's home directory."""
    return os.path.expanduser(path)


def is_absolute_like(value: str) -> bool:
    return value.startswith("/") or value.startswith("~")


def _is_dir(path: Path) -> bool:
    try:
        return path.is_dir()
    except (OSError, ValueError):
        return False


def _subdirectories(base: Path) -> Iterator[Path]:
    try:
        entries = sorted(base.iterdir(), key=lambda entry: entry.name)
    except (OSError, ValueError):
        return
    for entry in entries:
        if _is_dir(entry):
            yield entry


class PathResolver:
    """Probe a fixed list of base directories for a folder with a given name.

    Lookups are read-only. A direct child of any base wins over a nested
    match, and bases are always visited in the configured order. When nothing
    matches the name is handed back unchanged so callers still have a label.
    """

    def __init__(
        self,
        search_bases: Optional[Iterable[str]] = None,
        *,
        cache: bool = False,
    ) -> None:
        self.search_bases = tuple(search_bases or DEFAULT_SEARCH_BASES)
        self._cache: Optional[dict[str, str]] = {} if cache else None

    def resolve(self, name: str) -> str:
        clean_name = name.strip()
        if not clean_name or clean_name.startswith("/"):
            return clean_name

        if self._cache is not None:
            cached = self._cache.get(clean_name)
            if cached is not None:
                return cached

        resolved = self._probe(clean_name)
        if self._cache is not None:
            self._cache[clean_name] = resolved
        return resolved

    def _bases(self) -> list[Path]:
        return [Path(expand_home(base)) for base in self.search_bases]

    def _probe(self, name: str) -> str:
        bases = self._bases()

        for base in bases:
            candidate = base / name
            if _is_dir(candidate):
                return str(candidate)

        for base in bases:
            for subdir in _subdirectories(base):
                candidate = subdir / name
                if _is_dir(candidate):
                    return str(candidate)

        logger.debug("No directory found for %r; keeping it as a label.", name)
        return name
