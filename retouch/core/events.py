"""Narration events emitted by the editor and the history."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Literal

EventSource = Literal["editor", "history"]


@dataclass(frozen=True, slots=True)
class EditorEvent:
    """A single state transition, with the resulting field values."""
    source: EventSource
    action: str
    message: str
    fields: dict[str, Any] = field(default_factory=dict)


EventSink = Callable[[EditorEvent], None]


def null_sink(event: EditorEvent) -> None:
    """Discard the event."""
    return None
