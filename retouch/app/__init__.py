"""Command-line entry points for Retouch."""
