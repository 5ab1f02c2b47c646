"""Deterministic ordering of changes.

Every ordering keeps the other change last.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Literal

from semdiffstat.diff.models import Change

SortKey = Literal["name", "magnitude", "kind"]

_KIND_RANK = {"inserted": 0, "deleted": 1, "modified": 2}


def _by_name(c: Change) -> Any:
    return c.name


def _by_magnitude(c: Change) -> Any:
    return (-c.total, c.name)


def _by_kind(c: Change) -> Any:
    return (_KIND_RANK[c.status], c.name)


_KEYS: dict[str, Callable[[Change], Any]] = {
    "name": _by_name,
    "magnitude": _by_magnitude,
    "kind": _by_kind,
}


def sort_changes(changes: Iterable[Change], key: SortKey = "name") -> list[Change]:
    """Sort changes by ``key`` with the other change (if any) last.

    ``name``: ascending identity.  ``magnitude``: largest total first.
    ``kind``: inserted, then deleted, then modified.
    """
    try:
        sort_key = _KEYS[key]
    except KeyError:
        raise ValueError(f"unknown sort key: {key!r}") from None
    changes = list(changes)
    named = sorted((c for c in changes if not c.is_other), key=sort_key)
    others = [c for c in changes if c.is_other]
    return named + others
