"""Infrastructure layer — filesystem and process integration.

This layer wraps all interaction with python-dotenv and the operating
system.  Every raw ``OSError`` must be caught here and re-raised as an
:class:`~env_run.exceptions.EnvRunError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from env_run.infra.dotenv_reader import DotenvFileReader
from env_run.infra.replacer import ReplacingLauncher
from env_run.infra.signal_relay import FORWARDED_SIGNALS, SignalRelay
from env_run.infra.supervisor import SupervisedLauncher

__all__: list[str] = [
    "FORWARDED_SIGNALS",
    "DotenvFileReader",
    "ReplacingLauncher",
    "SignalRelay",
    "SupervisedLauncher",
]
