"""Attribute window activity to the project folders it happened in."""

from .analyzer import FolderActivityAnalyzer, aggregate, rank
from .classifier import AppFamily, classify
from .config import AnalyzerSettings
from .models import ExtractedFolder, FolderActivity, WindowEvent
from .resolver import PathResolver

__all__ = [
    "AnalyzerSettings",
    "AppFamily",
    "ExtractedFolder",
    "FolderActivity",
    "FolderActivityAnalyzer",
    "PathResolver",
    "WindowEvent",
    "aggregate",
    "classify",
    "rank",
]

__version__ = "0.1.0"
