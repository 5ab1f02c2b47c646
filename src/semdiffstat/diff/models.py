"""Data models for semantic diffstats.

All models are plain frozen dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

OTHER_NAME = "other"


@dataclass(frozen=True, slots=True)
class Change:
    """A modification to one element of a source file.

    ``name`` is the declaration identity (``"func F"``, ``"def C.m"``) or
    ``"other"`` for the catch-all change.  For the other change,
    ``ins_lines``/``del_lines`` are estimates.
    """

    name: str
    ins_lines: int = 0
    del_lines: int = 0
    inserted: bool = False  # element exists only in the new version
    deleted: bool = False  # element exists only in the old version
    is_other: bool = False

    def __post_init__(self) -> None:
        if self.inserted and self.deleted:
            raise ValueError(f"change {self.name!r} cannot be both inserted and deleted")
        if self.ins_lines < 0 or self.del_lines < 0:
            raise ValueError(f"change {self.name!r} has negative line counts")

    @property
    def total(self) -> int:
        return self.ins_lines + self.del_lines

    @property
    def status(self) -> str:
        if self.is_other:
            return "other"
        if self.inserted:
            return "inserted"
        if self.deleted:
            return "deleted"
        return "modified"

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "status": self.status,
            "ins_lines": self.ins_lines,
            "del_lines": self.del_lines,
            "inserted": self.inserted,
            "deleted": self.deleted,
            "is_other": self.is_other,
        }


@dataclass(frozen=True, slots=True)
class MatchedPair:
    """A deleted (old) and inserted (new) declaration reported as one modification."""

    name: str
    a_index: int  # segment index in the old version
    b_index: int  # segment index in the new version
