"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Protocol

from env_run.core.models import LaunchSpec


class EnvFileReader(Protocol):
    """Contract for environment-definition file readers.

    Any object that implements :meth:`read` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def read(self, path: str) -> dict[str, str]:
        """Return the ordered key/value pairs defined in *path*.

        Raises
        ------
        EnvFileNotFoundError
            When *path* does not exist.
        MalformedEnvFileError
            When *path* exists but cannot be read or parsed.
        """
        ...  # pragma: no cover


class ProcessLauncher(Protocol):
    """Contract for launch strategies.

    A supervising launcher returns the exit status to propagate.  A
    replacing launcher is annotated ``NoReturn`` and satisfies this
    protocol too, since it never hands control back.
    """

    def launch(self, spec: LaunchSpec) -> int:
        """Run the command described by *spec*.

        Raises
        ------
        LaunchError
            When the command cannot be started, supervised or exec'd.
        """
        ...  # pragma: no cover
