"""Configuration management for Retouch."""

from .types import EditorDefaults, NarrationConfig, OutputStream, RetouchConfig
from .loader import ConfigLoader

__all__ = [
    "EditorDefaults",
    "NarrationConfig",
    "OutputStream",
    "RetouchConfig",
    "ConfigLoader",
]
