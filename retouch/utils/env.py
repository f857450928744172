"""Environment utilities for Retouch."""

from __future__ import annotations

import os
from pathlib import Path


def is_debug_mode() -> bool:
    """Check if debug mode is enabled.
    
    Returns:
        True if RETOUCH_DEBUG is set to a truthy value
    """
    val = os.environ.get("RETOUCH_DEBUG", "").lower()
    return val in ("1", "true", "yes", "on")


def get_home_dir() -> Path:
    """Get user home directory.
    
    Returns:
        Path to home directory
    """
    return Path.home()


def get_global_retouch_dir() -> Path:
    """Get global retouch directory (~/.retouch).
    
    Returns:
        Path to global retouch config directory
    """
    return get_home_dir() / ".retouch"
