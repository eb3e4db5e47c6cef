"""CLI application entry points for env-run.

This module is the **sole error boundary** for the entire application.
It catches :class:`~env_run.exceptions.EnvRunError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages on
stderr and returning well-defined exit codes.

Two variants share one pipeline — argv, then composed environment, then
launch — and differ only in the :class:`Variant` record driving it:

* ``env-run``      — one ``-e`` file loaded non-destructively; the command
  runs as a supervised child that receives our signals.
* ``env-run-exec`` — repeatable ``-e`` files, later overriding earlier and
  the invoking shell overriding all; the command replaces this process.

Architecture notes
------------------
* No business logic lives here — composition is delegated to the core
  layer and launching to the infrastructure layer.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import NoReturn

from env_run.cli import exit_codes
from env_run.cli.console import console, escape
from env_run.core.environment_service import EnvironmentService
from env_run.core.models import LaunchSpec, Precedence
from env_run.core.protocols import ProcessLauncher
from env_run.exceptions import EnvRunError, UsageError
from env_run.infra.dotenv_reader import DotenvFileReader
from env_run.infra.replacer import ReplacingLauncher
from env_run.infra.supervisor import SupervisedLauncher
from env_run.version import __version__

DEFAULT_ENV_FILE: str = ".env"
USAGE: str = "%(prog)s [-e .env] [-d ./dir] -- <command> [args...]"


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Variant:
    """Static configuration of one console script."""

    prog: str
    description: str
    precedence: Precedence
    repeatable_env: bool
    launcher_factory: Callable[[], ProcessLauncher]


RUN = Variant(
    prog="env-run",
    description=(
        "Load a .env file without overriding existing variables, then run "
        "a command as a child process, forwarding signals and its exit code."
    ),
    precedence=Precedence.NON_DESTRUCTIVE,
    repeatable_env=False,
    launcher_factory=SupervisedLauncher,
)

EXEC = Variant(
    prog="env-run-exec",
    description=(
        "Load one or more .env files (later files override earlier ones, the "
        "shell overrides all), then replace this process with a command."
    ),
    precedence=Precedence.OVERLAY_THEN_RESTORE,
    repeatable_env=True,
    launcher_factory=ReplacingLauncher,
)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser(variant: Variant) -> argparse.ArgumentParser:
    """Construct the argument parser for *variant*."""
    parser = argparse.ArgumentParser(
        prog=variant.prog,
        usage=USAGE,
        description=variant.description,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    if variant.repeatable_env:
        parser.add_argument(
            "-e",
            dest="env_paths",
            action="append",
            default=None,
            metavar="PATH",
            help="Path to the .env file (can be repeated, later overrides earlier)",
        )
    else:
        parser.add_argument(
            "-e",
            dest="env_path",
            default=DEFAULT_ENV_FILE,
            metavar="PATH",
            help="Path to the .env file (default: %(default)s)",
        )
    parser.add_argument(
        "-d",
        dest="workdir",
        default=None,
        metavar="DIR",
        help="Working directory for the program execution (chdir)",
    )
    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        help="Command to run, with its arguments, after an optional '--'.",
    )
    return parser


def _command_vector(raw: Sequence[str]) -> list[str]:
    """Drop the ``--`` separator when argparse kept it."""
    command = list(raw)
    if command and command[0] == "--":
        command = command[1:]
    return command


def _env_paths(args: argparse.Namespace, variant: Variant) -> list[str]:
    if variant.repeatable_env:
        return list(args.env_paths or [DEFAULT_ENV_FILE])
    return [args.env_path]


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------

def _report_missing(path: str) -> None:
    console.print(f"[cyan]Info:[/cyan] Env file {escape(path)} not found, skipping loading")


def _report_error(exc: EnvRunError) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    if exc.hint is None:
        return
    if isinstance(exc, UsageError):
        console.print()
        console.print(escape(exc.hint.rstrip()))
    else:
        console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None, variant: Variant = RUN) -> int:
    """Run one env-run variant.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    variant:
        Which console script is running.

    Returns
    -------
    int
        OS process exit code.  :data:`EXEC` only returns when its launcher
        has been replaced by a stub.

    Raises
    ------
    UsageError
        When no command follows the flags.  No env file is read.
    """
    parser = _build_parser(variant)
    args = parser.parse_args(argv)

    command = _command_vector(args.command)
    if not command:
        raise UsageError("No command given", hint=parser.format_help())

    service = EnvironmentService(DotenvFileReader())
    environ = service.compose_environment(
        _env_paths(args, variant),
        variant.precedence,
        dict(os.environ),
        on_missing=_report_missing,
    )

    spec = LaunchSpec.from_command(command, environ, args.workdir)
    launcher = variant.launcher_factory()
    return launcher.launch(spec)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def run(variant: Variant, argv: list[str] | None = None) -> NoReturn:
    """Run *variant* and exit the interpreter with its status.

    Guarantees the process never exits with a raw stack trace during
    normal usage.
    """
    try:
        code = main(argv, variant)
        sys.exit(code)
    except EnvRunError as exc:
        _report_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)


def cli() -> None:
    """Console-script entry point for ``env-run``."""
    run(RUN)


def cli_exec() -> None:
    """Console-script entry point for ``env-run-exec``."""
    run(EXEC)
