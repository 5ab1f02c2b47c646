"""Semantic diff package: declaration-level diffstats.

Public API re-exports for the diff subpackage.
"""

from semdiffstat.diff.engine import compute_changes, compute_diff
from semdiffstat.diff.matching import DeclMatcher, ExactIdentityMatcher
from semdiffstat.diff.models import OTHER_NAME, Change, MatchedPair
from semdiffstat.diff.ordering import sort_changes
from semdiffstat.diff.reconcile import reconcile_other
from semdiffstat.diff.sequence import (
    DiffStat,
    EditScript,
    IndexRange,
    LinePair,
    SequencePair,
    line_diffstat,
    myers,
)

__all__ = [
    "OTHER_NAME",
    "Change",
    "DeclMatcher",
    "DiffStat",
    "EditScript",
    "ExactIdentityMatcher",
    "IndexRange",
    "LinePair",
    "MatchedPair",
    "SequencePair",
    "compute_changes",
    "compute_diff",
    "line_diffstat",
    "myers",
    "reconcile_other",
    "sort_changes",
]
