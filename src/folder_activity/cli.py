"""Command-line interface for the folder activity analyzer."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

import typer

from .analyzer import FolderActivityAnalyzer
from .config import AnalyzerSettings
from .reporting import render_json, render_text

app = typer.Typer(help="Attribute window activity to project folders.")


@app.callback(no_args_is_help=True)
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logs.")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )


def load_events(source: str) -> list[dict[str, Any]]:
    """Read window events from an ActivityWatch export file, or stdin for ``-``."""
    if source == "-":
        payload = json.load(sys.stdin)
    else:
        with Path(source).open(encoding="utf-8") as handle:
            payload = json.load(handle)
    return extract_events(payload)


def extract_events(payload: Any) -> list[dict[str, Any]]:
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        if isinstance(payload.get("events"), list):
            return payload["events"]
        buckets = payload.get("buckets")
        if isinstance(buckets, dict):
            events: list[dict[str, Any]] = []
            for bucket in buckets.values():
                if isinstance(bucket, dict) and isinstance(bucket.get("events"), list):
                    events.extend(bucket["events"])
            return events
    raise ValueError("Expected a list of events, an 'events' list or a 'buckets' export.")


@app.command()
def analyze(
    events_file: str = typer.Argument(
        ..., help="ActivityWatch window events as JSON, or '-' to read stdin."
    ),
    include_web: bool = typer.Option(
        False,
        "--include-web/--no-include-web",
        help="Treat browser URLs as pseudo folders.",
    ),
    limit: Optional[int] = typer.Option(
        None, "--limit", min=1, help="Only show the top N folders."
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON instead of a table."),
    bases: Optional[List[str]] = typer.Option(
        None,
        "--base",
        help="Extra directory to search for folder names (repeatable, searched first).",
    ),
    cache: bool = typer.Option(
        False, "--cache", help="Reuse folder lookups within this run."
    ),
) -> None:
    """Summarize time spent per project folder."""
    try:
        events = load_events(events_file)
    except (OSError, ValueError) as exc:
        typer.echo(f"Could not read events from {events_file}: {exc}", err=True)
        raise typer.Exit(code=1)

    settings = AnalyzerSettings.from_options(
        extra_bases=bases, include_web=include_web, cache=cache
    )
    activities = FolderActivityAnalyzer(settings).analyze(events, limit=limit)
    typer.echo(render_json(activities) if as_json else render_text(activities))
