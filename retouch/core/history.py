"""Undo history for the image editor.

The history never opens a snapshot. It stores them, hands them back
to the editor on undo and reads their labels for display.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .editor import ImageEditor
from .events import EditorEvent, EventSink, null_sink
from .snapshot import RestoreError, Snapshot


@dataclass(frozen=True, slots=True)
class UndoResult:
    """Outcome of an undo."""
    restored: bool
    label: str = ""
    skipped: int = 0

    @property
    def noop(self) -> bool:
        return not self.restored


class HistoryListing:
    """Restartable view over the labels of a history, oldest first."""

    def __init__(self, snapshots: list[Snapshot]):
        self._snapshots = snapshots

    def __iter__(self) -> Iterator[str]:
        for snapshot in tuple(self._snapshots):
            yield snapshot.label

    def __len__(self) -> int:
        return len(self._snapshots)


class History:
    """Stack of snapshots taken from a single editor."""

    def __init__(self, editor: ImageEditor, *, sink: EventSink | None = None):
        self._editor = editor
        self._snapshots: list[Snapshot] = []
        self._sink = sink or null_sink

    def __len__(self) -> int:
        return len(self._snapshots)

    def backup(self) -> Snapshot:
        """Capture the editor state and push it on the stack."""
        self._emit("backup", "Saving state...")
        snapshot = self._editor.save()
        self.push(snapshot)
        return snapshot

    def push(self, snapshot: Snapshot) -> None:
        self._snapshots.append(snapshot)

    def undo(self) -> UndoResult:
        """Restore the most recent snapshot the editor accepts.

        Snapshots the editor rejects are dropped and the next one down
        is tried, until one restores or the stack runs out.

        Returns:
            UndoResult with the restored label, or a no-op result if
            nothing could be restored
        """
        skipped = 0
        while self._snapshots:
            snapshot = self._snapshots.pop()
            try:
                self._editor.restore(snapshot)
            except RestoreError as e:
                skipped += 1
                self._emit("skipped", f"Discarding unrestorable snapshot: {e}", kind=e.kind)
                continue
            return UndoResult(restored=True, label=snapshot.label, skipped=skipped)

        self._emit("empty", "No state to undo.", skipped=skipped)
        return UndoResult(restored=False, skipped=skipped)

    def show_history(self) -> HistoryListing:
        """List snapshot labels, oldest first.

        The listing is lazy: each iteration reads the stack as it is
        at that moment.
        """
        self._emit("listed", "Snapshots (oldest first):")
        return HistoryListing(self._snapshots)

    def clear(self) -> None:
        self._snapshots.clear()

    def _emit(self, action: str, message: str, **fields) -> None:
        fields.setdefault("depth", len(self._snapshots))
        self._sink(EditorEvent(source="history", action=action, message=message, fields=fields))
