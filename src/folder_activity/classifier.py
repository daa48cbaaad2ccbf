"""Route an application window to the extractor for its application family."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .extractors import (
    Extractor,
    extract_editor,
    extract_file_manager,
    extract_jetbrains,
    extract_terminal,
    extract_web,
    extract_xcode,
)
from .models import ExtractedFolder
from .resolver import PathResolver


class AppFamily(str, Enum):
    TERMINAL = "terminal"
    FILE_MANAGER = "file_manager"
    CODE_EDITOR = "code_editor"
    XCODE = "xcode"
    JETBRAINS = "jetbrains"
    BROWSER = "browser"


_FAMILY_MEMBERS: dict[AppFamily, tuple[str, ...]] = {
    AppFamily.TERMINAL: ("Warp", "Terminal", "iTerm", "iTerm2", "Hyper", "Alacritty", "kitty"),
    AppFamily.FILE_MANAGER: ("Finder", "Path Finder"),
    AppFamily.CODE_EDITOR: (
        "Cursor",
        "Visual Studio Code",
        "VSCode",
        "Code",
        "Sublime Text",
        "Atom",
        "TextMate",
        "Nova",
        "BBEdit",
    ),
    AppFamily.XCODE: ("Xcode",),
    AppFamily.JETBRAINS: (
        "IntelliJ IDEA",
        "WebStorm",
        "PyCharm",
        "RubyMine",
        "PhpStorm",
        "CLion",
        "GoLand",
        "DataGrip",
        "Android Studio",
    ),
    AppFamily.BROWSER: ("Safari", "Chrome", "Firefox", "Edge", "Brave", "Arc", "Vivaldi", "Opera"),
}

# Earlier families claim a name first if it is ever listed twice.
APP_FAMILIES: dict[str, AppFamily] = {}
for _family, _members in _FAMILY_MEMBERS.items():
    for _name in _members:
        APP_FAMILIES.setdefault(_name, _family)
del _family, _members, _name

EXTRACTORS: dict[AppFamily, Extractor] = {
    AppFamily.TERMINAL: extract_terminal,
    AppFamily.FILE_MANAGER: extract_file_manager,
    AppFamily.CODE_EDITOR: extract_editor,
    AppFamily.XCODE: extract_xcode,
    AppFamily.JETBRAINS: extract_jetbrains,
    AppFamily.BROWSER: extract_web,
}


def family_for(application: Optional[str]) -> Optional[AppFamily]:
    if not application:
        return None
    return APP_FAMILIES.get(application)


def classify(
    application: str,
    title: str,
    include_web: bool,
    resolver: PathResolver,
) -> list[ExtractedFolder]:
    """Extract the folders referenced by a window title, if its app is known."""
    family = family_for(application)
    if family is None:
        return []
    if family is AppFamily.BROWSER and not include_web:
        return []
    return EXTRACTORS[family](title, resolver)
