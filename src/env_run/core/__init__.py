"""Core / service layer — pure environment composition.

Rules
-----
* No ``print()`` calls.
* No filesystem, process or ``os.environ`` access.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from env_run.core.environment_service import EnvironmentService
from env_run.core.models import LaunchSpec, Precedence
from env_run.core.precedence import compose, exit_status
from env_run.core.protocols import EnvFileReader, ProcessLauncher

__all__: list[str] = [
    "EnvFileReader",
    "EnvironmentService",
    "LaunchSpec",
    "Precedence",
    "ProcessLauncher",
    "compose",
    "exit_status",
]
