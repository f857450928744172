"""Tests for the undo history (caretaker)."""

from datetime import datetime

import pytest

from retouch.core.editor import ImageEditor
from retouch.core.history import History, UndoResult
from retouch.core.snapshot import Snapshot


class ForeignSnapshot(Snapshot):
    kind = "foreign"
    timestamp = datetime(2024, 1, 1)
    label = "foreign"


def _state(editor: ImageEditor):
    return (
        editor.pixels,
        editor.width,
        editor.height,
        editor.brightness,
        editor.filter_name,
        editor.rotation,
    )


@pytest.fixture
def editor(fixed_clock):
    return ImageEditor(100, 100, clock=fixed_clock)


@pytest.fixture
def history(editor, events):
    return History(editor, sink=events.append)


class TestBackup:
    def test_backup_pushes_snapshot(self, history):
        snapshot = history.backup()

        assert len(history) == 1
        assert list(history.show_history()) == [snapshot.label]

    def test_backup_depth_is_unbounded(self, history):
        for _ in range(200):
            history.backup()

        assert len(history) == 200

    def test_push_accepts_any_snapshot(self, history):
        history.push(ForeignSnapshot())

        assert len(history) == 1
        assert list(history.show_history()) == ["foreign"]


class TestUndo:
    def test_undo_on_empty_history_is_noop(self, editor, history, events):
        """Undo with nothing saved is a reported no-op, not an error."""
        before = _state(editor)

        result = history.undo()
        result_again = history.undo()

        assert result == UndoResult(restored=False)
        assert result.noop
        assert result_again.noop
        assert len(history) == 0
        assert _state(editor) == before
        assert [e.message for e in events] == ["No state to undo.", "No state to undo."]

    def test_undo_restores_latest_backup(self, editor, history):
        history.backup()
        editor.apply_brightness(20)
        snapshot = history.backup()
        editor.apply_filter("Sepia")

        result = history.undo()

        assert result.restored
        assert result.label == snapshot.label
        assert result.skipped == 0
        assert editor.brightness == 20
        assert editor.filter_name == "None"
        assert len(history) == 1

    def test_undo_round_trip(self, editor, history):
        """Undoing k times lands on the (n-k)-th backup."""
        captured = []
        edits = [
            lambda: editor.apply_brightness(7),
            lambda: editor.set_pixel(3, 4, (1, 2, 3)),
            lambda: editor.apply_filter("Noir"),
            lambda: editor.crop(30, 20),
            lambda: editor.rotate(12.5),
            lambda: editor.crop(120, 90),
        ]
        for edit in edits:
            history.backup()
            captured.append(_state(editor))
            edit()

        for k in range(1, len(captured) + 1):
            history.undo()
            assert _state(editor) == captured[len(captured) - k]

        assert len(history) == 0

    def test_skips_foreign_snapshot_and_restores_next(self, editor, history, events):
        """An unrestorable snapshot is dropped and the one beneath it restored."""
        history.backup()
        editor.apply_brightness(20)
        history.push(ForeignSnapshot())
        editor.apply_filter("Sepia")

        result = history.undo()

        assert result.restored
        assert result.skipped == 1
        assert len(history) == 0
        assert editor.brightness == 0
        assert editor.filter_name == "None"
        assert "skipped" in [e.action for e in events]

    def test_foreign_between_valid_snapshots(self, editor, history):
        """With S0, foreign, S1 on the stack the second undo pops two entries."""
        history.backup()
        history.push(ForeignSnapshot())
        editor.apply_brightness(20)
        history.backup()
        editor.rotate(90)

        first = history.undo()
        assert first.restored
        assert len(history) == 2
        assert editor.brightness == 20
        assert editor.rotation == 0

        second = history.undo()
        assert second.restored
        assert second.skipped == 1
        assert len(history) == 0
        assert editor.brightness == 0

    def test_only_foreign_snapshots_ends_as_noop(self, editor, history):
        editor.apply_brightness(4)
        for _ in range(3):
            history.push(ForeignSnapshot())

        result = history.undo()

        assert result.noop
        assert result.skipped == 3
        assert len(history) == 0
        assert editor.brightness == 4

    def test_deep_run_of_foreign_snapshots(self, editor, history):
        """Skipping does not grow the call stack with history depth."""
        history.backup()
        for _ in range(5000):
            history.push(ForeignSnapshot())
        editor.apply_brightness(1)

        result = history.undo()

        assert result.restored
        assert result.skipped == 5000
        assert editor.brightness == 0


class TestShowHistory:
    def test_lists_oldest_first(self, editor, history):
        editor.apply_brightness(1)
        first = history.backup()
        editor.apply_brightness(1)
        second = history.backup()

        assert list(history.show_history()) == [first.label, second.label]

    def test_listing_is_restartable(self, history):
        history.backup()
        history.backup()
        listing = history.show_history()

        assert list(listing) == list(listing)
        assert len(listing) == 2

    def test_listing_is_lazy(self, history):
        """Iteration reflects the stack at the time it starts."""
        listing = history.show_history()
        history.backup()

        assert len(list(listing)) == 1

    def test_listing_does_not_change_stack(self, history):
        history.backup()
        list(history.show_history())

        assert len(history) == 1

    def test_clear(self, history):
        history.backup()
        history.clear()

        assert len(history) == 0
        assert history.undo().noop


class TestScenarios:
    def test_crop_reverted_then_initial_state(self, editor, history):
        """Two undos walk back past an unsaved crop to the initial image."""
        history.backup()
        editor.apply_brightness(20)
        history.backup()
        editor.apply_filter("Sepia")
        editor.crop(50, 50)

        history.undo()

        assert (editor.width, editor.height) == (100, 100)
        assert len(editor.pixels) == 100 * 100 * 3
        assert editor.brightness == 20
        assert editor.filter_name == "None"

        history.undo()

        assert (editor.width, editor.height) == (100, 100)
        assert editor.brightness == 0
        assert editor.filter_name == "None"
        assert editor.rotation == 0
        assert len(history) == 0

    def test_fresh_editor_undo(self, editor, history):
        result = history.undo()

        assert result.noop
        assert len(history) == 0

    def test_history_events(self, editor, history, events):
        history.backup()
        history.show_history()
        history.undo()

        assert [(e.source, e.action) for e in events] == [
            ("history", "backup"),
            ("history", "listed"),
        ]
