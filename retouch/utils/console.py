"""Console rendering of editor and history events."""

from __future__ import annotations

import sys
from typing import TextIO

from ..core.events import EditorEvent, EventSink
from .env import is_debug_mode

_PREFIXES = {
    "editor": "[Editor]",
    "history": "[History]",
}


def format_event(event: EditorEvent) -> str:
    prefix = _PREFIXES.get(event.source, f"[{event.source}]")
    return f"{prefix} {event.message}"


def console_sink(stream: TextIO | None = None) -> EventSink:
    """Build a sink that prints one line per event.

    Args:
        stream: Output stream (defaults to stdout at emit time)
    """
    def sink(event: EditorEvent) -> None:
        print(format_event(event), file=stream or sys.stdout)
        if is_debug_mode():
            debug_log(f"{event.source}.{event.action} {event.fields}")

    return sink


def debug_log(message: str) -> None:
    """Log debug message to stderr.
    
    Only outputs if RETOUCH_DEBUG is set.
    """
    if is_debug_mode():
        print(f"[retouch] {message}", file=sys.stderr)
