"""Catch-all "other" change estimation.

The other change covers every edit not attributed to a named declaration:
gaps, type/var/const declarations, class headers.  Its size is the
whole-file line diffstat minus what the named changes already account for,
clamped at zero.  Per-declaration diffs are computed independently of the
whole-file diff, so boundaries can be counted twice; the result is an
estimate, not an exact accounting.
"""

from __future__ import annotations

from collections.abc import Iterable

from semdiffstat.diff.models import OTHER_NAME, Change
from semdiffstat.diff.sequence import line_diffstat


def reconcile_other(a: bytes, b: bytes, changes: Iterable[Change]) -> Change | None:
    """Build the other change, or None when nothing is left to attribute."""
    ins, dels = line_diffstat(a, b)
    for c in changes:
        ins -= c.ins_lines
        dels -= c.del_lines
    ins = max(ins, 0)
    dels = max(dels, 0)
    if ins == 0 and dels == 0:
        return None
    return Change(name=OTHER_NAME, ins_lines=ins, del_lines=dels, is_other=True)
