"""semdiffstat: semantic diffstats.

Summarizes the difference between two versions of a source file by
declaration: which functions and methods were inserted, deleted or
modified, with per-declaration line counts, plus an estimated "other"
entry for everything else.

Usage::

    from semdiffstat import compute_diff

    for change in compute_diff(old_src, new_src, language="go"):
        print(change.name, change.ins_lines, change.del_lines)
"""

import logging

from semdiffstat.core.errors import ParseError, SemDiffError, UnsupportedLanguageError
from semdiffstat.diff import Change, compute_changes, compute_diff, sort_changes

__version__ = "0.1.0"

# Library use stays silent; the CLI installs real handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Change",
    "ParseError",
    "SemDiffError",
    "UnsupportedLanguageError",
    "compute_changes",
    "compute_diff",
    "sort_changes",
]
