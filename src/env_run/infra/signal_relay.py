"""Forward termination signals from the supervisor to its child.

Design
------
* :class:`SignalRelay` installs handlers for SIGINT, SIGTERM and SIGHUP
  and restores the previous handlers when it stops.
* The child handle is attached after the spawn; until then, and after
  the child has exited, a received signal is silently dropped.
* Handlers run on the main thread between bytecodes, so ``wait()`` on
  the child resumes transparently after each forward (PEP 475).
"""

from __future__ import annotations

import signal
from typing import Any, Protocol


FORWARDED_SIGNALS: tuple[signal.Signals, ...] = (
    signal.SIGINT,
    signal.SIGTERM,
    signal.SIGHUP,
)


class SignalTarget(Protocol):
    """Anything that accepts a signal — ``subprocess.Popen`` in practice."""

    def send_signal(self, sig: int) -> None:
        ...  # pragma: no cover


class SignalRelay:
    """Best-effort relay of received signals to an attached target.

    Usage::

        with SignalRelay() as relay:
            process = subprocess.Popen(argv)
            relay.attach(process)
            process.wait()
    """

    def __init__(self, signals: tuple[signal.Signals, ...] = FORWARDED_SIGNALS) -> None:
        self._signals: tuple[signal.Signals, ...] = signals
        self._previous: dict[signal.Signals, Any] = {}
        self._target: SignalTarget | None = None

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> SignalRelay:
        self.start()
        return self

    def __exit__(self, *_args: object) -> None:
        self.stop()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Install the forwarding handler for every relayed signal."""
        if self._previous:
            return
        for sig in self._signals:
            self._previous[sig] = signal.signal(sig, self._handle)

    def stop(self) -> None:
        """Restore the handlers that were active before :meth:`start` (idempotent)."""
        while self._previous:
            sig, handler = self._previous.popitem()
            # None: the old handler was not installed from Python.
            signal.signal(sig, signal.SIG_DFL if handler is None else handler)

    def attach(self, target: SignalTarget) -> None:
        """Start forwarding to *target*."""
        self._target = target

    # ------------------------------------------------------------------
    # Forwarding
    # ------------------------------------------------------------------

    def forward(self, signum: int) -> bool:
        """Send *signum* to the target.

        Returns ``False`` when there was nobody to deliver to: no target
        attached yet, or the target is already gone.
        """
        target = self._target
        if target is None:
            return False
        try:
            target.send_signal(signum)
        except ProcessLookupError:
            return False
        return True

    def _handle(self, signum: int, _frame: object) -> None:
        self.forward(signum)
