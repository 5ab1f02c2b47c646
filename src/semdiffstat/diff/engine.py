"""Pure declaration-level diff engine.

Compares two versions of one source file and classifies changes by
declaration.  No I/O, no logging, no configuration: the result depends
only on the arguments.

Change types:
- modified: identity present in both versions, content differs
- inserted: identity only in the new version
- deleted: identity only in the old version
- other: edits in gaps or unidentified declarations (estimated)
"""

from __future__ import annotations

from semdiffstat.core.errors import InternalError, ParseError
from semdiffstat.diff.matching import DEFAULT_MATCHER, DeclMatcher
from semdiffstat.diff.models import Change
from semdiffstat.diff.ordering import sort_changes
from semdiffstat.diff.reconcile import reconcile_other
from semdiffstat.diff.segments import SegmentPair
from semdiffstat.diff.sequence import count_lines, myers
from semdiffstat.parsing.models import DeclUnit, Splitter


def compute_changes(
    a: bytes,
    b: bytes,
    decls_a: list[DeclUnit],
    decls_b: list[DeclUnit],
    *,
    matcher: DeclMatcher | None = None,
) -> list[Change]:
    """Diff two already-split versions.

    Args:
        a: old source
        b: new source
        decls_a: declarations of ``a`` in file order
        decls_b: declarations of ``b`` in file order
        matcher: pairing strategy; defaults to exact identity matching

    Returns:
        Changes sorted by name, the other change (if any) last.
    """
    matcher = matcher or DEFAULT_MATCHER
    x = SegmentPair(a, b, decls_a, decls_b)
    script = myers(x)

    deleted: dict[str, int] = {}
    inserted: dict[str, int] = {}
    has_other = False
    for r in script.ranges:
        if r.is_delete:
            for ai in range(r.low_a, r.high_a):
                identity = x.a_identity(ai)
                if identity is None or identity in deleted:
                    # Unidentified, or shadowed by a later same-named declaration
                    has_other = True
                if identity is not None:
                    deleted[identity] = ai
        elif r.is_insert:
            for bi in range(r.low_b, r.high_b):
                identity = x.b_identity(bi)
                if identity is None or identity in inserted:
                    # Unidentified, or shadowed by a later same-named declaration
                    has_other = True
                if identity is not None:
                    inserted[identity] = bi

    changes: list[Change] = []
    paired_a: set[int] = set()
    paired_b: set[int] = set()
    for pair in matcher.match(deleted, inserted):
        paired_a.add(pair.a_index)
        paired_b.add(pair.b_index)
        ins, dels = x.diffstat(pair.a_index, pair.b_index)
        changes.append(Change(name=pair.name, ins_lines=ins, del_lines=dels))

    for name, bi in inserted.items():
        if bi not in paired_b:
            changes.append(Change(name=name, ins_lines=count_lines(x.b_bytes(bi)), inserted=True))
    for name, ai in deleted.items():
        if ai not in paired_a:
            changes.append(Change(name=name, del_lines=count_lines(x.a_bytes(ai)), deleted=True))

    if has_other:
        other = reconcile_other(a, b, changes)
        if other is not None:
            changes.append(other)

    return sort_changes(changes)


def compute_diff(
    source_a: bytes,
    source_b: bytes,
    *,
    language: str = "go",
    matcher: DeclMatcher | None = None,
    splitter: Splitter | None = None,
) -> list[Change]:
    """Calculate a semantic diffstat between two versions of a source file.

    Args:
        source_a: old version
        source_b: new version
        language: language name used to pick a splitter (``go``, ``python``)
        matcher: pairing strategy; defaults to exact identity matching
        splitter: explicit splitter, overrides ``language``

    Returns:
        Changes sorted by name, the other change (if any) last.

    Raises:
        ParseError: if either version fails to split; ``err.side`` is
            ``"a"`` or ``"b"``.  No partial result is produced.
        UnsupportedLanguageError: if no splitter exists for ``language``.
        InternalError: if the splitter returns overlapping declarations.
    """
    if splitter is None:
        from semdiffstat.parsing.splitter import get_splitter

        splitter = get_splitter(language)

    try:
        decls_a = splitter.split(source_a)
    except ParseError as e:
        raise e.for_side("a") from e
    try:
        decls_b = splitter.split(source_b)
    except ParseError as e:
        raise e.for_side("b") from e

    try:
        return compute_changes(source_a, source_b, decls_a, decls_b, matcher=matcher)
    except ValueError as e:
        # Overlapping or out-of-bounds declarations from the splitter
        raise InternalError.unexpected(str(e)) from e
