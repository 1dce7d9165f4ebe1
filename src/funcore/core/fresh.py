"""Fresh-name supply used when substitution has to rename a binder."""

from __future__ import annotations

import itertools

from loguru import logger


class NameSupply:
    """Hands out names that are distinct from every earlier output.

    Names are built as ``{base}_{n}`` from a monotonically increasing counter.
    The guarantee holds until :meth:`reset` restarts the counter.
    """

    def __init__(self) -> None:
        self._counter = itertools.count(0)

    def fresh(self, base: str) -> str:
        return f"{base}_{next(self._counter)}"

    def reset(self) -> None:
        logger.debug("fresh.reset")
        self._counter = itertools.count(0)


_default_supply = NameSupply()


def get_name_supply() -> NameSupply:
    """Return the process-wide name supply."""
    return _default_supply


def fresh(base: str) -> str:
    """Generate a fresh name from the process-wide supply."""
    return _default_supply.fresh(base)


def reset() -> None:
    """Restart the process-wide supply at zero."""
    _default_supply.reset()
