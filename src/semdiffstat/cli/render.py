"""Terminal rendering of semantic diffstats.

One line per change, aligned like a classic ``diff --stat``::

    func (*T).Close | 3 ++-
    func Open       | 7 +++++++ (inserted)
    other           | 2 +-
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from rich.console import Console
from rich.text import Text

from semdiffstat.diff.models import Change

INS_STYLE = "bold green"
DEL_STYLE = "bold red"
HEADER_STYLE = "bright_yellow"


def make_console(color: bool | None) -> Console:
    """Stdout console; ``color=None`` lets rich detect a terminal."""
    if color is None:
        return Console(highlight=False)
    if color:
        return Console(force_terminal=True, highlight=False)
    return Console(no_color=True, highlight=False)


def format_change(change: Change, name_width: int, count_width: int) -> Text:
    line = Text()
    line.append(change.name.ljust(name_width))
    line.append(" | ")
    line.append(str(change.total).rjust(count_width))
    line.append(" ")
    line.append("+" * change.ins_lines, style=INS_STYLE)
    line.append("-" * change.del_lines, style=DEL_STYLE)
    if change.inserted:
        line.append(" (inserted)")
    elif change.deleted:
        line.append(" (deleted)")
    return line


def render_changes(changes: Sequence[Change], console: Console) -> None:
    """Print changes followed by a blank line."""
    if changes:
        name_width = max(len(c.name) for c in changes)
        count_width = max(len(str(c.total)) for c in changes)
        for c in changes:
            console.print(format_change(c, name_width, count_width), soft_wrap=True)
    console.print()


def render_header(path: str, console: Console) -> None:
    console.print(Text(path, style=HEADER_STYLE), soft_wrap=True)


def changes_to_json(changes: Sequence[Change], path: str | None = None) -> str:
    payload: dict[str, object] = {"changes": [c.to_dict() for c in changes]}
    if path is not None:
        payload["path"] = path
    return json.dumps(payload, indent=2)
