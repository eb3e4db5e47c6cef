"""Core environment service — composes env files into one mapping.

This service depends on an :class:`~env_run.core.protocols.EnvFileReader`
injected at construction time (dependency inversion), keeping the core
free of any filesystem access.

Guarantees
----------
* Pure orchestration — no I/O, no ``print()``, no ``os.environ`` writes.
* Files are read strictly in the order given.
* A missing file is reported through ``on_missing`` and skipped; every
  other :class:`~env_run.exceptions.EnvRunError` propagates unchanged.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping

from env_run.core.models import Precedence
from env_run.core.precedence import compose
from env_run.core.protocols import EnvFileReader
from env_run.exceptions import EnvFileNotFoundError


class EnvironmentService:
    """Stateless service that turns env-file paths into an environment.

    Parameters
    ----------
    reader:
        Any object satisfying the :class:`EnvFileReader` protocol.
    """

    def __init__(self, reader: EnvFileReader) -> None:
        self._reader: EnvFileReader = reader

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compose_environment(
        self,
        paths: Iterable[str],
        policy: Precedence,
        original: Mapping[str, str],
        *,
        on_missing: Callable[[str], None] | None = None,
    ) -> dict[str, str]:
        """Read *paths* in order and compose them over *original*.

        Parameters
        ----------
        paths:
            Env-file paths in command-line order.
        policy:
            Precedence mode used to combine the layers.
        original:
            Snapshot of the inherited environment.  Never mutated.
        on_missing:
            Optional callable invoked with each path that does not exist.

        Raises
        ------
        MalformedEnvFileError
            When any existing file cannot be read or parsed.  No later
            file is read.
        """
        layers = self.read_layers(paths, on_missing=on_missing)
        return compose(original, layers, policy)

    def read_layers(
        self,
        paths: Iterable[str],
        *,
        on_missing: Callable[[str], None] | None = None,
    ) -> list[dict[str, str]]:
        """Return one mapping per existing file, in the order given."""
        layers: list[dict[str, str]] = []
        for path in paths:
            try:
                layers.append(self._reader.read(path))
            except EnvFileNotFoundError:
                if on_missing is not None:
                    on_missing(path)
        return layers
