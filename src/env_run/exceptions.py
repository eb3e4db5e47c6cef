"""Custom exception hierarchy for env-run.

All exceptions that cross layer boundaries must inherit from
:class:`EnvRunError`.  Raw ``OSError`` and friends raised by the
operating system must NEVER propagate beyond the infrastructure layer —
they are caught there and re-raised as a typed subclass defined here.

Hierarchy
---------
EnvRunError
├── UsageError
├── EnvFileError
│   ├── EnvFileNotFoundError
│   └── MalformedEnvFileError
├── LaunchError
│   ├── CommandNotFoundError
│   ├── ChdirError
│   ├── ChildWaitError
│   └── ReplacementError
└── EnvironmentError
"""

from __future__ import annotations


class EnvRunError(Exception):
    """Base exception for all env-run errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Argument resolution ---------------------------------------------------

class UsageError(EnvRunError):
    """Raised when no command was supplied after the flags."""


# --- Environment files -----------------------------------------------------

class EnvFileError(EnvRunError):
    """Raised for problems with an environment-definition file."""

    def __init__(self, message: str, *, path: str, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.path: str = path


class EnvFileNotFoundError(EnvFileError):
    """Raised when an env file does not exist.

    This is the only non-fatal error: the composition service skips the
    file and reports it as an informational diagnostic.
    """


class MalformedEnvFileError(EnvFileError):
    """Raised when an env file exists but cannot be read or parsed."""


# --- Process launch --------------------------------------------------------

class LaunchError(EnvRunError):
    """Raised when the target command cannot be launched or supervised."""


class CommandNotFoundError(LaunchError):
    """Raised when the target executable cannot be located or started."""


class ChdirError(LaunchError):
    """Raised when the requested working directory is unusable."""


class ChildWaitError(LaunchError):
    """Raised when the supervised child could not be waited on."""


class ReplacementError(LaunchError):
    """Raised when replacing the process image fails."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(EnvRunError):
    """Raised when a required runtime dependency is not available."""
