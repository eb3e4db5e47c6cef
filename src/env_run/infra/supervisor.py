"""Supervised-child launch strategy.

The target command runs as a child of this process with the composed
environment and our own stdin/stdout/stderr.  Termination signals
received while the child runs are relayed to it, and the child's exit
status becomes ours.
"""

from __future__ import annotations

import subprocess

from env_run.core.models import LaunchSpec
from env_run.core.precedence import exit_status
from env_run.exceptions import ChdirError, ChildWaitError, CommandNotFoundError
from env_run.infra.signal_relay import SignalRelay


class SupervisedLauncher:
    """Concrete :class:`ProcessLauncher` that spawns and waits on a child.

    This class satisfies the :class:`~env_run.core.protocols.ProcessLauncher`
    protocol structurally — no explicit inheritance required.
    """

    def launch(self, spec: LaunchSpec) -> int:
        """Run *spec* to completion and return the status to exit with.

        The relay is installed before the spawn so that no signal arriving
        in between is lost to a default handler; until the child exists
        such a signal is dropped.

        Raises
        ------
        CommandNotFoundError
            When the executable cannot be found or started.
        ChdirError
            When ``spec.workdir`` cannot be entered.
        ChildWaitError
            When waiting on the child fails.
        """
        with SignalRelay() as relay:
            process = self._start(spec)
            relay.attach(process)
            returncode = self._wait(process)
        return exit_status(returncode)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _start(spec: LaunchSpec) -> subprocess.Popen[bytes]:
        try:
            return subprocess.Popen(
                list(spec.argv),
                env=dict(spec.environ),
                cwd=spec.workdir,
            )
        except OSError as exc:
            if spec.workdir is not None and exc.filename == spec.workdir:
                raise ChdirError(
                    f"Unable to change directory to {spec.workdir}: {exc.strerror}",
                ) from exc
            raise CommandNotFoundError(
                f"Unable to start program {spec.command}: {exc.strerror or exc}",
                hint="Check that the command exists on PATH and is executable.",
            ) from exc

    @staticmethod
    def _wait(process: subprocess.Popen[bytes]) -> int:
        try:
            return process.wait()
        except OSError as exc:
            raise ChildWaitError(
                f"Unable to wait for program (pid {process.pid}): {exc}",
            ) from exc
