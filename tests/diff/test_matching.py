"""Unit tests for declaration matchers (matching.py)."""

from __future__ import annotations

from semdiffstat.diff.matching import DEFAULT_MATCHER, ExactIdentityMatcher
from semdiffstat.diff.models import MatchedPair


class TestExactIdentityMatcher:
    """Tests for ExactIdentityMatcher."""

    def test_pairs_common_identities(self) -> None:
        pairs = ExactIdentityMatcher().match({"func F": 1, "func G": 3}, {"func F": 5})
        assert pairs == [MatchedPair(name="func F", a_index=1, b_index=5)]

    def test_no_overlap(self) -> None:
        assert ExactIdentityMatcher().match({"func F": 1}, {"func G": 1}) == []

    def test_pairs_sorted_by_name(self) -> None:
        pairs = ExactIdentityMatcher().match({"b": 1, "a": 3}, {"a": 1, "b": 3})
        assert [p.name for p in pairs] == ["a", "b"]

    def test_default_is_exact(self) -> None:
        assert isinstance(DEFAULT_MATCHER, ExactIdentityMatcher)
