"""python-dotenv backed implementation of :class:`~env_run.core.protocols.EnvFileReader`.

This module is the **only** place in the codebase that imports
``dotenv``.  Statements are parsed with python-dotenv's own parser and
returned verbatim — no ``${VAR}`` interpolation is performed.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from env_run.exceptions import EnvFileNotFoundError, EnvironmentError, MalformedEnvFileError


class DotenvFileReader:
    """Concrete :class:`EnvFileReader` backed by python-dotenv.

    Usage::

        reader = DotenvFileReader()
        values = reader.read(".env")

    This class satisfies the :class:`~env_run.core.protocols.EnvFileReader`
    protocol structurally — no explicit inheritance required.
    """

    encoding: str = "utf-8"

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def read(self, path: str) -> dict[str, str]:
        """Parse *path* into ordered key/value pairs.

        Later assignments to the same key within one file win.

        Raises
        ------
        EnvFileNotFoundError
            When *path* does not exist.
        MalformedEnvFileError
            When *path* cannot be read, is not valid UTF-8, or contains a
            statement python-dotenv cannot parse.
        """
        if not Path(path).exists():
            raise EnvFileNotFoundError(
                f"Env file {path} not found",
                path=path,
            )

        parse_stream = _import_parse_stream()

        try:
            with open(path, encoding=self.encoding) as stream:
                bindings = list(parse_stream(stream))
        except (OSError, UnicodeDecodeError) as exc:
            raise MalformedEnvFileError(
                f"Unable to read env file {path}: {exc}",
                path=path,
            ) from exc

        values: dict[str, str] = {}
        for binding in bindings:
            if binding.error:
                raise self._malformed(path, binding.original.line, binding.original.string)
            if binding.key is None:
                continue  # blank line or comment
            if not binding.key or binding.value is None:
                raise self._malformed(path, binding.original.line, binding.original.string)
            values[binding.key] = binding.value
        return values

    # ------------------------------------------------------------------
    # Error mapping
    # ------------------------------------------------------------------

    @staticmethod
    def _malformed(path: str, line: int, statement: str) -> MalformedEnvFileError:
        snippet = statement.strip().splitlines()[0] if statement.strip() else statement
        return MalformedEnvFileError(
            f"Unable to parse env file {path}: line {line}: {snippet!r}",
            path=path,
            hint="Each line must be KEY=VALUE, a comment, or blank.",
        )


def _import_parse_stream() -> Any:
    """Import python-dotenv's statement parser lazily."""
    try:
        from dotenv.parser import parse_stream
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "python-dotenv is not installed. Install with: pip install python-dotenv",
        ) from exc
    return parse_stream
