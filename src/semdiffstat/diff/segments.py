"""Gap/declaration segment sequences for the top-level diff.

Each version is cut at every declaration boundary, giving
``gap, decl, gap, ..., decl, gap`` (``2 * len(decls) + 1`` segments).
The leading gap starts at offset 0 and the trailing gap ends at the end
of the file, so the segments tile the whole source.
"""

from __future__ import annotations

from semdiffstat.diff.sequence import DiffStat, line_diffstat
from semdiffstat.parsing.models import DeclUnit


def _splits(decls: list[DeclUnit], size: int) -> list[int]:
    splits = [0]
    for d in decls:
        if d.start < splits[-1] or d.end < d.start or d.end > size:
            raise ValueError(f"declaration [{d.start}, {d.end}) out of order or bounds")
        splits.append(d.start)
        splits.append(d.end)
    splits.append(size)
    return splits


def _slots(decls: list[DeclUnit]) -> list[DeclUnit | None]:
    slots: list[DeclUnit | None] = []
    for d in decls:
        slots.append(None)
        slots.append(d)
    slots.append(None)
    return slots


class SegmentPair:
    """Segments of two source versions; equal iff byte-identical."""

    def __init__(
        self,
        asrc: bytes,
        bsrc: bytes,
        adecls: list[DeclUnit],
        bdecls: list[DeclUnit],
    ) -> None:
        self.asrc = asrc
        self.bsrc = bsrc
        self.asplit = _splits(adecls, len(asrc))
        self.bsplit = _splits(bdecls, len(bsrc))
        # None marks a gap
        self.adecls = _slots(adecls)
        self.bdecls = _slots(bdecls)

    def len_a(self) -> int:
        return len(self.asplit) - 1

    def len_b(self) -> int:
        return len(self.bsplit) - 1

    def equal(self, ai: int, bi: int) -> bool:
        return self.a_bytes(ai) == self.b_bytes(bi)

    def a_bytes(self, ai: int) -> bytes:
        return self.asrc[self.asplit[ai] : self.asplit[ai + 1]]

    def b_bytes(self, bi: int) -> bytes:
        return self.bsrc[self.bsplit[bi] : self.bsplit[bi + 1]]

    def a_identity(self, ai: int) -> str | None:
        decl = self.adecls[ai]
        return decl.identity if decl is not None else None

    def b_identity(self, bi: int) -> str | None:
        decl = self.bdecls[bi]
        return decl.identity if decl is not None else None

    def diffstat(self, ai: int, bi: int) -> DiffStat:
        """Line-level diffstat between segment ``ai`` of A and ``bi`` of B."""
        return line_diffstat(self.a_bytes(ai), self.b_bytes(bi))
