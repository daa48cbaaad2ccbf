"""Configuration models and helpers for the folder activity analyzer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

DEFAULT_SEARCH_BASES: tuple[str, ...] = (
    "~/Developer",
    "~/Documents",
    "~/Projects",
    "~/Code",
    "~/dev",
    "~/src",
    "~/workspace",
    "~/Desktop",
    "~/Downloads",
    "/tmp",
)


@dataclass(frozen=True, slots=True)
class AnalyzerSettings:
    """Options controlling how window titles are resolved to folders."""

    search_bases: tuple[str, ...] = DEFAULT_SEARCH_BASES
    include_web: bool = False
    cache_resolutions: bool = False

    @classmethod
    def from_options(
        cls,
        extra_bases: Optional[Iterable[str]] = None,
        include_web: bool = False,
        cache: bool = False,
    ) -> "AnalyzerSettings":
        bases: list[str] = []
        for base in (*(extra_bases or ()), *DEFAULT_SEARCH_BASES):
            if base and base not in bases:
                bases.append(base)
        return cls(
            search_bases=tuple(bases),
            include_web=include_web,
            cache_resolutions=cache,
        )
