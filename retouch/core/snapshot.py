"""Snapshot types shared by the editor and the history.

Callers outside the editor only ever see ``Snapshot``: a kind tag, a
capture timestamp and a display label. The state itself lives on a
concrete variant that only the editor knows how to open.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from enum import Enum


class SnapshotKind(str, Enum):
    """Closed set of snapshot variants an originator can produce."""
    IMAGE = "image"


class RestoreReason(str, Enum):
    """Why a restore was rejected."""
    UNKNOWN_VARIANT = "unknown_variant"


class RestoreError(Exception):
    """Raised when an editor is handed a snapshot it did not produce."""

    def __init__(self, reason: RestoreReason, kind: object = None):
        self.reason = reason
        self.kind = kind
        super().__init__(f"Cannot restore snapshot ({reason.value}): kind={kind!r}")

    @classmethod
    def unknown_variant(cls, snapshot: object) -> RestoreError:
        return cls(RestoreReason.UNKNOWN_VARIANT, getattr(snapshot, "kind", None))


class Snapshot(ABC):
    """Opaque capture of an originator's state at one instant."""

    __slots__ = ()

    @property
    @abstractmethod
    def kind(self) -> SnapshotKind | str:
        """Variant tag checked by the originator on restore."""

    @property
    @abstractmethod
    def timestamp(self) -> datetime:
        """Wall-clock time the snapshot was captured."""

    @property
    @abstractmethod
    def label(self) -> str:
        """Human-readable one-line description."""

    def __str__(self) -> str:
        return self.label
