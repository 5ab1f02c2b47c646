"""Pairing strategies for deleted and inserted declarations.

A matcher decides which deleted declaration and which inserted declaration
are two versions of the same element.  Paired declarations are reported as
one modification; everything left over is reported as deleted or inserted.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping

from semdiffstat.diff.models import MatchedPair


class DeclMatcher(ABC):
    """Pairs deleted and inserted declarations.

    Both maps go from identity string to segment index.  Each index may
    appear in at most one returned pair.
    """

    @abstractmethod
    def match(
        self,
        deleted: Mapping[str, int],
        inserted: Mapping[str, int],
    ) -> list[MatchedPair]: ...


class ExactIdentityMatcher(DeclMatcher):
    """Pairs declarations whose identity strings are equal.

    No content similarity is considered: ``func F`` in both versions is a
    modification of ``func F`` however different the bodies are.
    """

    def match(
        self,
        deleted: Mapping[str, int],
        inserted: Mapping[str, int],
    ) -> list[MatchedPair]:
        return [
            MatchedPair(name=name, a_index=deleted[name], b_index=inserted[name])
            for name in sorted(deleted.keys() & inserted.keys())
        ]


DEFAULT_MATCHER: DeclMatcher = ExactIdentityMatcher()
