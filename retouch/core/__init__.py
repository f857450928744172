"""Core modules for Retouch."""

from .editor import ImageEditor
from .events import EditorEvent, EventSink
from .history import History, HistoryListing, UndoResult
from .snapshot import RestoreError, RestoreReason, Snapshot, SnapshotKind

__all__ = [
    "EditorEvent",
    "EventSink",
    "History",
    "HistoryListing",
    "ImageEditor",
    "RestoreError",
    "RestoreReason",
    "Snapshot",
    "SnapshotKind",
    "UndoResult",
]
