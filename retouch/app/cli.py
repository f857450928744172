"""Retouch CLI.

Replays the editing session the undo history was designed around:
a few edits with backups, an unsaved crop, then a run of undos.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import TextIO

from .. import __version__
from ..config import ConfigLoader, OutputStream, RetouchConfig
from ..core.editor import ImageEditor
from ..core.events import EventSink
from ..core.history import History
from ..utils.console import console_sink, debug_log


DEMO_UNDOS = 3


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="retouch",
        description="Retouch - snapshot based undo history for an image editor",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output",
    )

    subparsers = parser.add_subparsers(dest="command")

    demo = subparsers.add_parser("demo", help="Run the edit/backup/undo walkthrough")
    demo.add_argument("--width", type=_positive_int, help="Canvas width (default from config)")
    demo.add_argument("--height", type=_positive_int, help="Canvas height (default from config)")
    demo.add_argument("--quiet", "-q", action="store_true", help="Do not narrate each operation")

    return parser


def main(args: list[str] | None = None) -> int:
    parser = create_parser()
    parsed = parser.parse_args(args)

    if parsed.debug:
        os.environ["RETOUCH_DEBUG"] = "1"

    config = ConfigLoader(project_root=Path.cwd()).load()
    debug_log(f"config: {config}")

    if parsed.command == "demo":
        return cmd_demo(parsed, config)

    parser.print_help()
    return 1


def _build_sink(quiet: bool, config: RetouchConfig) -> EventSink | None:
    if quiet or not config.narration.enabled:
        return None
    stream = sys.stderr if config.narration.stream == OutputStream.STDERR else None
    return console_sink(stream)


def cmd_demo(args: argparse.Namespace, config: RetouchConfig, out: TextIO | None = None) -> int:
    out = out or sys.stdout
    width = args.width or config.editor.width
    height = args.height or config.editor.height
    sink = _build_sink(args.quiet, config)

    print("=== Retouch: snapshot undo walkthrough ===\n", file=out)

    editor = ImageEditor(width, height, sink=sink)
    history = History(editor, sink=sink)

    history.backup()
    _print_info(editor, out)

    print("--- Applying Changes ---", file=out)
    editor.apply_brightness(20)
    history.backup()

    editor.apply_filter("Sepia")
    history.backup()

    editor.rotate(90)
    history.backup()

    # Not backed up: the first undo reverts it.
    editor.crop(max(1, width * 2 // 3), max(1, height * 2 // 3))
    _print_info(editor, out)

    print("--- Performing Undos ---", file=out)
    for _ in range(DEMO_UNDOS):
        result = history.undo()
        debug_log(f"undo: {result}")
        _print_info(editor, out)

    listing = history.show_history()
    print(f"Remaining snapshots: {len(listing)}", file=out)
    for label in listing:
        print(f"  {label}", file=out)

    return 0


def _print_info(editor: ImageEditor, out: TextIO) -> None:
    print(f"\n{editor.display_info()}\n", file=out)
