"""Image editor - the originator of snapshots.

Owns the live editor state. Only this module can open the concrete
snapshot variant, so ``save()`` and ``restore()`` are the sole way
state crosses the editor boundary.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable

from .events import EditorEvent, EventSink, null_sink
from .snapshot import RestoreError, Snapshot, SnapshotKind

DEFAULT_FILTER = "None"
CHANNELS = 3  # RGB

Clock = Callable[[], datetime]


@dataclass(slots=True)
class EditorState:
    """Mutable state of the editor."""
    pixels: bytearray
    width: int
    height: int
    brightness: int = 0
    filter_name: str = DEFAULT_FILTER
    rotation: float = 0.0


@dataclass(frozen=True, slots=True)
class _ImageSnapshot(Snapshot):
    """Concrete snapshot produced by ``ImageEditor.save()``."""
    pixels: bytes = field(repr=False)
    width: int
    height: int
    brightness: int
    filter_name: str
    rotation: float
    captured_at: datetime

    @property
    def kind(self) -> SnapshotKind:
        return SnapshotKind.IMAGE

    @property
    def timestamp(self) -> datetime:
        return self.captured_at

    @property
    def label(self) -> str:
        return (
            f"{self.captured_at:%H:%M:%S} / {self.width}x{self.height}"
            f" / Brightness: {self.brightness} / Filter: {self.filter_name}"
        )


def _require_dimension(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return value


class ImageEditor:
    """Editor holding an RGB pixel buffer plus adjustment settings."""

    def __init__(
        self,
        width: int,
        height: int,
        *,
        sink: EventSink | None = None,
        clock: Clock = datetime.now,
    ):
        """Create a blank (all-zero) image.

        Args:
            width: Image width in pixels
            height: Image height in pixels
            sink: Receives an event for every state change
            clock: Source of snapshot timestamps
        """
        width = _require_dimension("width", width)
        height = _require_dimension("height", height)
        self._state = EditorState(
            pixels=bytearray(width * height * CHANNELS),
            width=width,
            height=height,
        )
        self._sink = sink or null_sink
        self._clock = clock

        self._emit("created", f"Image created: {width}x{height}")

    @property
    def width(self) -> int:
        return self._state.width

    @property
    def height(self) -> int:
        return self._state.height

    @property
    def brightness(self) -> int:
        return self._state.brightness

    @property
    def filter_name(self) -> str:
        return self._state.filter_name

    @property
    def rotation(self) -> float:
        return self._state.rotation

    @property
    def pixels(self) -> bytes:
        """Copy of the pixel buffer."""
        return bytes(self._state.pixels)

    # Editing operations

    def apply_brightness(self, value: int) -> None:
        self._state.brightness += value
        self._emit("brightness", f"Brightness adjusted to {self._state.brightness}")

    def apply_filter(self, name: str) -> None:
        self._state.filter_name = name
        self._emit("filter", f"Filter applied: {name}")

    def rotate(self, degrees: float) -> None:
        self._state.rotation += degrees
        self._emit("rotate", f"Rotation: {self._state.rotation:g}°")

    def crop(self, new_width: int, new_height: int) -> None:
        """Resize the canvas to ``new_width`` x ``new_height``.

        The buffer is truncated or zero-extended by linear index; rows
        are not remapped.
        """
        new_width = _require_dimension("new_width", new_width)
        new_height = _require_dimension("new_height", new_height)

        pixels = self._state.pixels
        size = new_width * new_height * CHANNELS
        if size < len(pixels):
            del pixels[size:]
        elif size > len(pixels):
            pixels.extend(bytes(size - len(pixels)))

        self._state.width = new_width
        self._state.height = new_height
        self._emit("crop", f"Image cropped to {new_width}x{new_height}")

    def set_pixel(self, x: int, y: int, rgb: tuple[int, int, int]) -> None:
        offset = self._offset(x, y)
        if len(rgb) != CHANNELS or any(not 0 <= c <= 255 for c in rgb):
            raise ValueError(f"Expected {CHANNELS} channels in 0..255, got {rgb!r}")
        self._state.pixels[offset:offset + CHANNELS] = bytes(rgb)

    def get_pixel(self, x: int, y: int) -> tuple[int, int, int]:
        offset = self._offset(x, y)
        r, g, b = self._state.pixels[offset:offset + CHANNELS]
        return (r, g, b)

    def display_info(self) -> str:
        """Render the current state as a short multi-line block."""
        state = self._state
        return "\n".join([
            "--- Current State ---",
            f"Dimensions: {state.width}x{state.height}",
            f"Brightness: {state.brightness}",
            f"Filter: {state.filter_name}",
            f"Rotation: {state.rotation:g}°",
            "--------------------",
        ])

    # Snapshots

    def save(self) -> Snapshot:
        """Capture the current state.

        Returns:
            An opaque snapshot owning its own copy of the pixel buffer
        """
        state = self._state
        return _ImageSnapshot(
            pixels=bytes(state.pixels),
            width=state.width,
            height=state.height,
            brightness=state.brightness,
            filter_name=state.filter_name,
            rotation=state.rotation,
            captured_at=self._clock(),
        )

    def restore(self, snapshot: Snapshot) -> None:
        """Replace the current state with a snapshot produced by ``save()``.

        Args:
            snapshot: Snapshot to restore from

        Raises:
            RestoreError: If the snapshot is not an image editor snapshot.
                The editor state is left untouched.
        """
        image = self._open(snapshot)

        self._state = EditorState(
            pixels=bytearray(image.pixels),
            width=image.width,
            height=image.height,
            brightness=image.brightness,
            filter_name=image.filter_name,
            rotation=image.rotation,
        )
        self._emit("restored", f"State restored: {image.label}", label=image.label)

    @staticmethod
    def _open(snapshot: Snapshot) -> _ImageSnapshot:
        if getattr(snapshot, "kind", None) is not SnapshotKind.IMAGE:
            raise RestoreError.unknown_variant(snapshot)
        if not isinstance(snapshot, _ImageSnapshot):
            raise RestoreError.unknown_variant(snapshot)
        return snapshot

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self._state.width and 0 <= y < self._state.height):
            raise IndexError(
                f"Pixel ({x}, {y}) outside {self._state.width}x{self._state.height} image"
            )
        return (y * self._state.width + x) * CHANNELS

    def _emit(self, action: str, message: str, **extra: Any) -> None:
        state = self._state
        fields: dict[str, Any] = {
            "width": state.width,
            "height": state.height,
            "brightness": state.brightness,
            "filter": state.filter_name,
            "rotation": state.rotation,
        }
        fields.update(extra)
        self._sink(EditorEvent(source="editor", action=action, message=message, fields=fields))
