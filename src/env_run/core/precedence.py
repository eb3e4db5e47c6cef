"""Pure precedence rules for composing environment layers.

Nothing in this module touches ``os.environ``: callers pass the original
environment in and get a brand-new mapping back, which is applied once
at launch time.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from env_run.core.models import Precedence


def compose(
    original: Mapping[str, str],
    layers: Iterable[Mapping[str, str]],
    policy: Precedence,
) -> dict[str, str]:
    """Combine *original* with ordered *layers* according to *policy*.

    ``NON_DESTRUCTIVE``
        A name is taken from the first source that defines it, the
        original environment counting as the first source.  Nothing
        already set is ever overwritten.

    ``OVERLAY_THEN_RESTORE``
        Each layer overwrites whatever came before it, then every
        original variable is put back.  Highest to lowest precedence:
        original, last layer, ..., first layer.
    """
    if policy is Precedence.NON_DESTRUCTIVE:
        return _compose_non_destructive(original, layers)
    if policy is Precedence.OVERLAY_THEN_RESTORE:
        return _compose_overlay_then_restore(original, layers)
    raise ValueError(f"Unknown precedence policy: {policy!r}")


def _compose_non_destructive(
    original: Mapping[str, str],
    layers: Iterable[Mapping[str, str]],
) -> dict[str, str]:
    result = dict(original)
    for layer in layers:
        for key, value in layer.items():
            if key not in result:
                result[key] = value
    return result


def _compose_overlay_then_restore(
    original: Mapping[str, str],
    layers: Iterable[Mapping[str, str]],
) -> dict[str, str]:
    result = dict(original)
    for layer in layers:
        result.update(layer)
    # Shell wins.
    result.update(original)
    return result


def exit_status(returncode: int) -> int:
    """Map a child's return code to the status the supervisor exits with.

    ``subprocess`` reports death-by-signal as a negative return code;
    anything that did not exit normally becomes ``1``.
    """
    if returncode < 0:
        return 1
    return returncode
