"""Tests for application family dispatch."""

from __future__ import annotations

import pytest

from folder_activity.classifier import APP_FAMILIES, EXTRACTORS, AppFamily, classify, family_for
from folder_activity.models import ExtractedFolder
from folder_activity.resolver import PathResolver


class TestFamilyFor:
    @pytest.mark.parametrize(
        ("application", "family"),
        [
            ("Warp", AppFamily.TERMINAL),
            ("kitty", AppFamily.TERMINAL),
            ("Path Finder", AppFamily.FILE_MANAGER),
            ("Code", AppFamily.CODE_EDITOR),
            ("Cursor", AppFamily.CODE_EDITOR),
            ("Xcode", AppFamily.XCODE),
            ("Android Studio", AppFamily.JETBRAINS),
            ("Arc", AppFamily.BROWSER),
        ],
    )
    def test_known_applications(self, application: str, family: AppFamily) -> None:
        assert family_for(application) is family

    @pytest.mark.parametrize("application", ["Slack", "", None, "warp", "Xcode-beta"])
    def test_unknown_applications(self, application) -> None:
        assert family_for(application) is None

    def test_every_family_has_an_extractor(self) -> None:
        assert set(APP_FAMILIES.values()) == set(EXTRACTORS) == set(AppFamily)


class TestClassify:
    """Tests for classify."""

    def test_dispatches_to_terminal(self, resolver: PathResolver) -> None:
        assert classify("Warp", "api = staging", False, resolver) == [
            ExtractedFolder("api", "staging")
        ]

    def test_dispatches_to_jetbrains(self, resolver: PathResolver) -> None:
        assert classify("PyCharm", "shop – cart.py", False, resolver) == [
            ExtractedFolder("shop")
        ]

    def test_unknown_application_is_skipped(self, resolver: PathResolver) -> None:
        assert classify("Slack", "general — team", True, resolver) == []

    def test_browser_requires_include_web(self, resolver: PathResolver) -> None:
        title = "https://github.com/foo/bar issues"
        assert classify("Chrome", title, False, resolver) == []
        assert classify("Chrome", title, True, resolver) == [
            ExtractedFolder("github.com/foo/bar", "web")
        ]

    def test_non_browsers_ignore_include_web(self, resolver: PathResolver) -> None:
        assert classify("Finder", "Downloads", True, resolver) == classify(
            "Finder", "Downloads", False, resolver
        )
