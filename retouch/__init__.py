"""Retouch - undo history for an image editor.

Captures opaque point-in-time snapshots of the editor state and
rolls them back on undo.
"""

__version__ = "1.0.0"
