"""Utility modules for Retouch."""

from .console import console_sink, debug_log, format_event
from .env import get_global_retouch_dir, get_home_dir, is_debug_mode
from .fs import safe_json_load

__all__ = [
    "console_sink",
    "debug_log",
    "format_event",
    "get_global_retouch_dir",
    "get_home_dir",
    "is_debug_mode",
    "safe_json_load",
]
