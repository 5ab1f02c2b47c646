"""Unit tests for the Myers sequence diff (sequence.py).

Tests cover:
- Edit script shape (maximal, tagged, partitioning ranges)
- Insert/delete statistics
- Minimality on a classic example
- Line-granularity helpers
"""

from __future__ import annotations

from semdiffstat.diff.sequence import (
    EditScript,
    IndexRange,
    LinePair,
    count_lines,
    line_diffstat,
    myers,
)


class _ListPair:
    """SequencePair over two plain lists."""

    def __init__(self, a: list[str], b: list[str]) -> None:
        self.a = a
        self.b = b

    def len_a(self) -> int:
        return len(self.a)

    def len_b(self) -> int:
        return len(self.b)

    def equal(self, ai: int, bi: int) -> bool:
        return self.a[ai] == self.b[bi]


def _assert_partition(script: EditScript, pair: _ListPair) -> None:
    """Ranges tile both sequences in order and equal ranges really match."""
    a = b = 0
    previous_tag = None
    for r in script.ranges:
        assert r.low_a == a
        assert r.low_b == b
        assert r.tag != previous_tag
        if r.is_equal:
            assert r.high_a - r.low_a == r.high_b - r.low_b
            for i in range(r.high_a - r.low_a):
                assert pair.equal(r.low_a + i, r.low_b + i)
        a, b = r.high_a, r.high_b
        previous_tag = r.tag
    assert a == pair.len_a()
    assert b == pair.len_b()


# ============================================================================
# Tests: Edit Script Shape
# ============================================================================


class TestMyersScript:
    """Tests for myers()."""

    def test_identical_sequences_single_equal_range(self) -> None:
        pair = _ListPair(["a", "b", "c"], ["a", "b", "c"])
        script = myers(pair)
        assert script.ranges == (IndexRange(0, 3, 0, 3),)
        assert script.is_identity()
        assert script.stat() == (0, 0)

    def test_both_empty(self) -> None:
        script = myers(_ListPair([], []))
        assert script.ranges == ()
        assert script.stat() == (0, 0)

    def test_pure_insertion(self) -> None:
        pair = _ListPair(["a", "c"], ["a", "b", "c"])
        script = myers(pair)
        assert script.ranges == (
            IndexRange(0, 1, 0, 1),
            IndexRange(1, 1, 1, 2),
            IndexRange(1, 2, 2, 3),
        )
        assert script.ranges[1].is_insert
        assert script.stat() == (1, 0)

    def test_delete_everything(self) -> None:
        script = myers(_ListPair(["x", "y"], []))
        assert script.ranges == (IndexRange(0, 2, 0, 0),)
        assert script.ranges[0].is_delete
        assert script.stat() == (0, 2)

    def test_replacement_deletes_before_inserting(self) -> None:
        pair = _ListPair(["a", "b", "c"], ["a", "x", "c"])
        script = myers(pair)
        assert [r.tag for r in script.ranges] == ["equal", "delete", "insert", "equal"]
        assert script.ranges[1] == IndexRange(1, 2, 1, 1)
        assert script.ranges[2] == IndexRange(2, 2, 1, 2)
        assert script.stat() == (1, 1)

    def test_classic_example_is_minimal(self) -> None:
        pair = _ListPair(list("abcabba"), list("cbabac"))
        script = myers(pair)
        ins, dels = script.stat()
        assert ins + dels == 5
        _assert_partition(script, pair)

    def test_no_common_elements(self) -> None:
        pair = _ListPair(["a", "b"], ["c", "d", "e"])
        script = myers(pair)
        assert script.stat() == (3, 2)
        _assert_partition(script, pair)

    def test_deterministic(self) -> None:
        a = list("the quick brown fox jumps")
        b = list("the quack brown box jumped")
        first = myers(_ListPair(a, b))
        second = myers(_ListPair(a, b))
        assert first == second
        _assert_partition(first, _ListPair(a, b))


# ============================================================================
# Tests: Line Granularity
# ============================================================================


class TestLineHelpers:
    """Tests for LinePair, line_diffstat and count_lines."""

    def test_line_pair_splits_on_newline(self) -> None:
        pair = LinePair(b"a\nb\n", b"a")
        assert pair.len_a() == 3  # trailing empty piece
        assert pair.len_b() == 1
        assert pair.equal(0, 0)

    def test_line_diffstat_identical(self) -> None:
        assert line_diffstat(b"x\ny\n", b"x\ny\n") == (0, 0)

    def test_line_diffstat_changed_line(self) -> None:
        stat = line_diffstat(b"a\nb\nc\n", b"a\nB\nc\n")
        assert stat.ins == 1
        assert stat.dels == 1

    def test_line_diffstat_trailing_newline_counts(self) -> None:
        assert line_diffstat(b"x", b"x\n") == (1, 0)

    def test_count_lines(self) -> None:
        assert count_lines(b"") == 1
        assert count_lines(b"func G() {}") == 1
        assert count_lines(b"a\nb") == 2
        assert count_lines(b"a\nb\n") == 3
