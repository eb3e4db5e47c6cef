"""Shared pytest fixtures and configuration for the env-run test suite.

Guidelines
----------
* Core tests must be pure — no ``os.environ`` writes, no filesystem.
* Process-level behaviour (exec, signals, exit codes) is exercised by
  running the console entry points in a fresh interpreter.
* Env files are written under ``tmp_path`` only.
"""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import Any

import pytest

SRC_DIR = Path(__file__).resolve().parents[1] / "src"

ENTRY_POINTS: dict[str, str] = {
    "env-run": "from env_run.cli.app import cli; cli()",
    "env-run-exec": "from env_run.cli.app import cli_exec; cli_exec()",
}


@pytest.fixture
def write_env(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory writing an env file under ``tmp_path``."""

    def _write(content: str, name: str = ".env") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


def script_env(extra: Mapping[str, str] | None = None, drop: Sequence[str] = ()) -> dict[str, str]:
    """Environment for a spawned entry point: ours, minus *drop*, plus *extra*."""
    env = {k: v for k, v in os.environ.items() if k not in drop}
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in (str(SRC_DIR), env.get("PYTHONPATH", "")) if p
    )
    env.update(extra or {})
    return env


def script_argv(script: str, *args: str) -> list[str]:
    """argv running console *script* under the current interpreter."""
    return [sys.executable, "-c", ENTRY_POINTS[script], *args]


def run_script(
    script: str,
    *args: str,
    env: Mapping[str, str] | None = None,
    **kwargs: Any,
) -> subprocess.CompletedProcess[str]:
    """Run console *script* to completion, capturing text output."""
    return subprocess.run(
        script_argv(script, *args),
        env=dict(env) if env is not None else script_env(),
        capture_output=True,
        text=True,
        timeout=30,
        check=False,
        **kwargs,
    )
