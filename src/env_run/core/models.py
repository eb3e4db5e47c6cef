"""Domain models for env-run.

All models are immutable value objects with no behaviour beyond data
access and construction-time validation.  They carry zero I/O and must
remain pure across the entire lifecycle of an invocation.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Precedence policy
# ---------------------------------------------------------------------------

class Precedence(enum.Enum):
    """How environment files combine with the inherited environment."""

    NON_DESTRUCTIVE = "non-destructive"
    """Existing variables are never overridden; the first source to define
    a name wins."""

    OVERLAY_THEN_RESTORE = "overlay-then-restore"
    """Later files override earlier ones, then every original variable is
    restored so the invoking shell always wins."""


# ---------------------------------------------------------------------------
# Launch request
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class LaunchSpec:
    """Everything a launcher needs to start the target command."""

    command: str
    """Command name as typed by the user (``argv[0]``)."""

    argv: tuple[str, ...]
    """Full argument vector, command name included at index 0."""

    workdir: str | None
    """Directory the command starts in, or ``None`` to inherit ours."""

    environ: Mapping[str, str]
    """Composed environment handed to the command verbatim."""

    def __post_init__(self) -> None:
        if not self.argv:
            raise ValueError("LaunchSpec.argv must not be empty")
        if self.argv[0] != self.command:
            raise ValueError("LaunchSpec.argv[0] must equal LaunchSpec.command")

    @classmethod
    def from_command(
        cls,
        command: list[str] | tuple[str, ...],
        environ: Mapping[str, str],
        workdir: str | None = None,
    ) -> LaunchSpec:
        """Build a spec from a raw command vector."""
        argv = tuple(command)
        return cls(
            command=argv[0] if argv else "",
            argv=argv,
            workdir=workdir or None,
            environ=dict(environ),
        )
