"""Data models for declaration splitting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class DeclUnit:
    """One declaration in a source file.

    ``identity`` is set only for functions and methods (e.g. ``"func F"``,
    ``"func (*T).M"``, ``"def C.m"``); other declarations are unidentified.
    """

    start: int
    end: int
    identity: str | None = None


class Splitter(Protocol):
    """Splits source bytes into ordered, non-overlapping declarations.

    Raises ``ParseError`` when the source is not syntactically valid.
    """

    def split(self, source: bytes) -> list[DeclUnit]: ...
