"""Match declared dependencies against the documentation catalog."""

from __future__ import annotations

from typing import Iterable, Mapping


def resolvable(names: Iterable[str], catalog: Mapping[str, object]) -> list[str]:
    """Return the names that have a catalog entry, in input order."""
    return [name for name in names if name in catalog]


def availability(names: Iterable[str], available: Iterable[str]) -> list[tuple[str, bool]]:
    """Pair each declared name with whether it is in the resolvable set.

    Args:
        names: Every declared dependency, in display order.
        available: The result of resolvable() for the same names.
    """
    available_set = set(available)
    return [(name, name in available_set) for name in names]
