"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.  A
supervised child's own status is passed through unchanged and is not
listed here.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — the launched command succeeded."""

GENERAL_ERROR: int = 1
"""A known EnvRunError was caught, or the child ended abnormally."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C before a child existed.  POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""
