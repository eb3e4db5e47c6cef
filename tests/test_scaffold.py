"""Smoke tests — verify scaffold wiring.

These tests prove that:
* The CLI entry points are importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
* ``LaunchSpec`` validates its argument vector.
"""

from __future__ import annotations

import pytest

from env_run import __version__
from env_run.cli import exit_codes
from env_run.cli.app import EXEC, RUN, cli, cli_exec, main
from env_run.core.models import LaunchSpec
from env_run.exceptions import (
    ChdirError,
    ChildWaitError,
    CommandNotFoundError,
    EnvFileError,
    EnvFileNotFoundError,
    EnvRunError,
    LaunchError,
    MalformedEnvFileError,
    ReplacementError,
    UsageError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)

    @pytest.mark.parametrize("variant", [RUN, EXEC])
    def test_version_flag(self, variant: object, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"], variant)  # type: ignore[arg-type]
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            UsageError,
            EnvFileError,
            EnvFileNotFoundError,
            MalformedEnvFileError,
            LaunchError,
            CommandNotFoundError,
            ChdirError,
            ChildWaitError,
            ReplacementError,
        ],
    )
    def test_all_exceptions_inherit_from_base(self, exc_class: type[EnvRunError]) -> None:
        assert issubclass(exc_class, EnvRunError)

    @pytest.mark.parametrize(
        "exc_class", [CommandNotFoundError, ChdirError, ChildWaitError, ReplacementError],
    )
    def test_launch_errors(self, exc_class: type[EnvRunError]) -> None:
        assert issubclass(exc_class, LaunchError)

    def test_env_file_error_carries_path(self) -> None:
        err = MalformedEnvFileError("bad", path="x.env", hint="fix it")
        assert err.path == "x.env"
        assert err.hint == "fix it"
        assert str(err) == "bad"

    def test_hint_defaults_to_none(self) -> None:
        assert EnvRunError("boom").hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_values(self) -> None:
        assert exit_codes.SUCCESS == 0
        assert exit_codes.GENERAL_ERROR == 1
        assert exit_codes.UNEXPECTED_ERROR == 2
        assert exit_codes.KEYBOARD_INTERRUPT == 130


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

class TestEntryPoints:
    @pytest.mark.parametrize("entry", [cli, cli_exec])
    def test_no_command_exits_one(
        self, entry: object, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr("sys.argv", ["env-run"])
        with pytest.raises(SystemExit) as exc_info:
            entry()  # type: ignore[operator]
        assert exc_info.value.code == exit_codes.GENERAL_ERROR


# ---------------------------------------------------------------------------
# LaunchSpec
# ---------------------------------------------------------------------------

class TestLaunchSpec:
    def test_from_command(self) -> None:
        spec = LaunchSpec.from_command(["ls", "-l"], {"A": "1"}, "/tmp")
        assert spec.command == "ls"
        assert spec.argv == ("ls", "-l")
        assert spec.workdir == "/tmp"
        assert spec.environ == {"A": "1"}

    def test_empty_workdir_means_none(self) -> None:
        assert LaunchSpec.from_command(["ls"], {}, "").workdir is None

    def test_empty_argv_rejected(self) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            LaunchSpec.from_command([], {})

    def test_argv0_must_match_command(self) -> None:
        with pytest.raises(ValueError, match="argv\\[0\\]"):
            LaunchSpec(command="ls", argv=("cat",), workdir=None, environ={})

    def test_frozen(self) -> None:
        spec = LaunchSpec.from_command(["ls"], {})
        with pytest.raises(AttributeError):
            spec.command = "cat"  # type: ignore[misc]

    def test_environ_is_a_copy(self) -> None:
        environ = {"A": "1"}
        spec = LaunchSpec.from_command(["ls"], environ)
        environ["A"] = "2"
        assert spec.environ == {"A": "1"}
