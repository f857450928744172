"""Configuration schemas for Retouch.

Defines dataclasses for all configuration structures.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class OutputStream(str, Enum):
    """Where narration lines are written."""
    STDOUT = "stdout"
    STDERR = "stderr"


def _positive_int(val: Any, default: int) -> int:
    if isinstance(val, int) and not isinstance(val, bool) and val > 0:
        return val
    return default


@dataclass
class EditorDefaults:
    """Canvas used when no size is given on the command line."""
    width: int = 1920
    height: int = 1080

    @classmethod
    def from_dict(cls, data: dict) -> EditorDefaults:
        """Create EditorDefaults from dictionary."""
        defaults = cls()
        return cls(
            width=_positive_int(data.get("width"), defaults.width),
            height=_positive_int(data.get("height"), defaults.height),
        )


@dataclass
class NarrationConfig:
    """Console narration of editor and history events."""
    enabled: bool = True
    stream: OutputStream = OutputStream.STDOUT

    @classmethod
    def from_dict(cls, data: dict) -> NarrationConfig:
        """Create NarrationConfig from dictionary."""
        enabled = data.get("enabled", True)
        stream_str = data.get("stream", "stdout")
        return cls(
            enabled=enabled if isinstance(enabled, bool) else True,
            stream=OutputStream(stream_str) if stream_str in ("stdout", "stderr") else OutputStream.STDOUT,
        )


@dataclass
class RetouchConfig:
    """Main Retouch configuration."""
    editor: EditorDefaults = field(default_factory=EditorDefaults)
    narration: NarrationConfig = field(default_factory=NarrationConfig)

    @classmethod
    def from_dict(cls, data: dict) -> RetouchConfig:
        """Create RetouchConfig from dictionary."""
        editor_data = data.get("editor", {})
        narration_data = data.get("narration", {})
        return cls(
            editor=EditorDefaults.from_dict(editor_data if isinstance(editor_data, dict) else {}),
            narration=NarrationConfig.from_dict(narration_data if isinstance(narration_data, dict) else {}),
        )
