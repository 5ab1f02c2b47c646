"""Generic sequence alignment (Myers O(ND) diff).

The algorithm is written once against the ``SequencePair`` protocol
(two length accessors and a cross-sequence equality predicate) and is
reused at every granularity: declaration segments and lines.

The returned ``EditScript`` is a list of maximal ``IndexRange`` runs that
partition ``[0, len_a)`` and ``[0, len_b)`` in order.  When two minimal
paths tie, the one further along A (a deletion) is taken.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Protocol

NEWLINE = b"\n"


class SequencePair(Protocol):
    """Two indexable sequences compared element-wise across each other."""

    def len_a(self) -> int: ...

    def len_b(self) -> int: ...

    def equal(self, ai: int, bi: int) -> bool: ...


@dataclass(frozen=True, slots=True)
class IndexRange:
    """A contiguous run in A and/or B.

    Equal ranges cover the same number of elements on both sides; insert
    ranges are empty in A; delete ranges are empty in B.
    """

    low_a: int
    high_a: int
    low_b: int
    high_b: int

    @property
    def is_equal(self) -> bool:
        return self.low_a < self.high_a and self.low_b < self.high_b

    @property
    def is_insert(self) -> bool:
        return self.low_a == self.high_a

    @property
    def is_delete(self) -> bool:
        return self.low_b == self.high_b

    @property
    def tag(self) -> str:
        if self.is_insert:
            return "insert"
        if self.is_delete:
            return "delete"
        return "equal"


class DiffStat(NamedTuple):
    ins: int
    dels: int


@dataclass(frozen=True, slots=True)
class EditScript:
    ranges: tuple[IndexRange, ...]

    def stat(self) -> DiffStat:
        """Total inserted and deleted elements across the script."""
        ins = dels = 0
        for r in self.ranges:
            if r.is_insert:
                ins += r.high_b - r.low_b
            elif r.is_delete:
                dels += r.high_a - r.low_a
        return DiffStat(ins, dels)

    def is_identity(self) -> bool:
        return all(r.is_equal for r in self.ranges)


class LinePair:
    """Line-granularity pair: elements are the ``\\n``-separated pieces."""

    def __init__(self, a: bytes, b: bytes) -> None:
        self.a = a.split(NEWLINE)
        self.b = b.split(NEWLINE)

    def len_a(self) -> int:
        return len(self.a)

    def len_b(self) -> int:
        return len(self.b)

    def equal(self, ai: int, bi: int) -> bool:
        return self.a[ai] == self.b[bi]


def count_lines(data: bytes) -> int:
    """Number of line elements ``data`` contributes to a line diff."""
    return data.count(NEWLINE) + 1


def line_diffstat(a: bytes, b: bytes) -> DiffStat:
    """Inserted/deleted line counts of a line-level diff from ``a`` to ``b``."""
    return myers(LinePair(a, b)).stat()


def myers(pair: SequencePair) -> EditScript:
    """Compute a minimal edit script between the two sides of ``pair``."""
    n, m = pair.len_a(), pair.len_b()

    # Strip the common prefix and suffix; the O(ND) search runs on the middle.
    prefix = 0
    while prefix < n and prefix < m and pair.equal(prefix, prefix):
        prefix += 1
    suffix = 0
    while (
        suffix < n - prefix
        and suffix < m - prefix
        and pair.equal(n - 1 - suffix, m - 1 - suffix)
    ):
        suffix += 1

    builder = _RangeBuilder()
    builder.add("equal", prefix, prefix)
    for op in _middle_ops(pair, prefix, n - suffix, prefix, m - suffix):
        builder.add(*op)
    builder.add("equal", suffix, suffix)
    return EditScript(tuple(builder.ranges))


def _middle_ops(
    pair: SequencePair, lo_a: int, hi_a: int, lo_b: int, hi_b: int
) -> list[tuple[str, int, int]]:
    """Edit operations (tag, count_a, count_b) for ``A[lo_a:hi_a]`` vs ``B[lo_b:hi_b]``."""
    n = hi_a - lo_a
    m = hi_b - lo_b
    if n == 0 or m == 0:
        return [("delete", n, 0), ("insert", 0, m)]

    trace = _forward(pair, lo_a, lo_b, n, m)

    # Walk the trace backwards from (n, m) collecting unit moves.
    moves: list[str] = []
    x, y = n, m
    for d in range(len(trace) - 1, -1, -1):
        v = trace[d]
        k = x - y
        if k == -d or (k != d and v[k - 1] < v[k + 1]):
            prev_k = k + 1
        else:
            prev_k = k - 1
        prev_x = v[prev_k]
        prev_y = prev_x - prev_k
        while x > prev_x and y > prev_y:
            moves.append("equal")
            x -= 1
            y -= 1
        if d > 0:
            moves.append("delete" if x > prev_x else "insert")
        x, y = prev_x, prev_y

    moves.reverse()
    return [
        (tag, 0 if tag == "insert" else 1, 0 if tag == "delete" else 1) for tag in moves
    ]


def _forward(pair: SequencePair, lo_a: int, lo_b: int, n: int, m: int) -> list[dict[int, int]]:
    """Forward greedy search; returns the furthest-reaching x per diagonal for each d."""
    v: dict[int, int] = {1: 0}
    trace: list[dict[int, int]] = []
    for d in range(n + m + 1):
        trace.append(dict(v))
        for k in range(-d, d + 1, 2):
            if k == -d or (k != d and v[k - 1] < v[k + 1]):
                x = v[k + 1]
            else:
                x = v[k - 1] + 1
            y = x - k
            while x < n and y < m and pair.equal(lo_a + x, lo_b + y):
                x += 1
                y += 1
            v[k] = x
            if x >= n and y >= m:
                return trace
    return trace


class _RangeBuilder:
    """Accumulates operations into maximal, tagged index ranges."""

    def __init__(self) -> None:
        self.ranges: list[IndexRange] = []
        self._tag: str | None = None
        self._a = 0
        self._b = 0

    def add(self, tag: str, count_a: int, count_b: int) -> None:
        if count_a == 0 and count_b == 0:
            return
        if tag == self._tag:
            last = self.ranges[-1]
            self.ranges[-1] = IndexRange(
                last.low_a, last.high_a + count_a, last.low_b, last.high_b + count_b
            )
        else:
            self.ranges.append(IndexRange(self._a, self._a + count_a, self._b, self._b + count_b))
            self._tag = tag
        self._a += count_a
        self._b += count_b
