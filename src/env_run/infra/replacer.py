"""In-place replacement launch strategy.

The current process image is replaced by the target command via
``os.execve``.  On success nothing after the call ever runs: the
command inherits our PID, and its exit status reaches whoever started
us directly.  There is no child to supervise and no signal to relay.

Order of operations
-------------------
1. Resolve the command against the composed ``PATH``.
2. Make the resolved path absolute.
3. Change directory, if requested.
4. Flush our own buffered streams and exec.
"""

from __future__ import annotations

import os
import shutil
import sys
from collections.abc import Mapping
from typing import NoReturn

from env_run.core.models import LaunchSpec
from env_run.exceptions import ChdirError, CommandNotFoundError, ReplacementError


class ReplacingLauncher:
    """Concrete :class:`ProcessLauncher` that never returns on success.

    This class satisfies the :class:`~env_run.core.protocols.ProcessLauncher`
    protocol structurally — ``NoReturn`` is compatible with any return type.
    """

    def launch(self, spec: LaunchSpec) -> NoReturn:
        """Replace this process with *spec*'s command.

        Raises
        ------
        CommandNotFoundError
            When the command cannot be resolved to an executable.
        ChdirError
            When ``spec.workdir`` cannot be entered.
        ReplacementError
            When ``execve`` itself fails.
        """
        binary = self.resolve(spec.command, spec.environ)

        if spec.workdir is not None:
            self._chdir(spec.workdir)

        sys.stdout.flush()
        sys.stderr.flush()
        try:
            os.execve(binary, list(spec.argv), dict(spec.environ))
        except OSError as exc:
            raise ReplacementError(
                f"Failed to execute command {binary}: {exc.strerror or exc}",
            ) from exc
        # Only reachable when execve is stubbed out.
        raise ReplacementError(f"Failed to execute command {binary}: exec returned")

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    @staticmethod
    def resolve(command: str, environ: Mapping[str, str]) -> str:
        """Return the absolute path of *command* looked up on *environ*'s ``PATH``.

        A command containing a path separator is checked as given,
        relative to the current directory.
        """
        search_path = environ.get("PATH", os.defpath)
        found = shutil.which(command, path=search_path) if command else None
        if found is None:
            raise CommandNotFoundError(
                f"Command not found: {command}",
                hint="Check the spelling or the PATH defined for the command.",
            )
        return os.path.abspath(found)

    @staticmethod
    def _chdir(workdir: str) -> None:
        try:
            os.chdir(workdir)
        except OSError as exc:
            raise ChdirError(
                f"Unable to change directory to {workdir}: {exc.strerror or exc}",
            ) from exc
