"""Tree-sitter declaration splitting.

Turns a source file into its ordered top-level declarations, each with a
byte range and, for functions and methods, an identity string:

- Go: ``func F``, ``func (T).M``, ``func (*T).M``
- Python: ``def f``, ``def C.m`` (class bodies are descended into)

Anything else a pack does not leave in a gap becomes an unidentified
declaration.
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog
import tree_sitter

from semdiffstat.core.errors import ParseError, UnsupportedLanguageError
from semdiffstat.parsing.models import DeclUnit
from semdiffstat.parsing.packs import LanguagePack, get_pack, get_pack_for_ext

# Stdlib-backed: silent until a handler is configured (see semdiffstat/__init__.py)
log = structlog.wrap_logger(logging.getLogger(__name__))

# Loaded grammars, keyed by pack name. Language objects are immutable.
_LANGUAGES: dict[str, tree_sitter.Language] = {}


def _load_language(pack: LanguagePack) -> tree_sitter.Language:
    lang = _LANGUAGES.get(pack.name)
    if lang is not None:
        return lang
    try:
        module = importlib.import_module(pack.grammar_module)
    except ImportError as err:
        raise UnsupportedLanguageError.grammar_missing(pack.name, pack.grammar_package) from err
    lang = tree_sitter.Language(module.language())
    _LANGUAGES[pack.name] = lang
    log.debug("grammar_loaded", language=pack.name, module=pack.grammar_module)
    return lang


def _text(node: Any) -> str:
    return node.text.decode("utf-8", errors="replace") if node is not None else ""


def _first_error_point(root: Any) -> tuple[int, int]:
    """(row, column) of the first ERROR or MISSING node, 0-based."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            point = node.start_point
            return point[0], point[1]
        # Children pushed in reverse so the leftmost is visited first
        stack.extend(reversed([c for c in node.children if c.has_error or c.is_missing]))
    point = root.start_point
    return point[0], point[1]


# =========================================================================
# Identity strings
# =========================================================================


def _go_receiver_type(receiver: Any) -> str:
    params = [c for c in receiver.named_children if c.type == "parameter_declaration"]
    typ = params[0].child_by_field_name("type") if params else None
    if typ is None:
        return _text(receiver).strip("()")
    ptr = ""
    if typ.type == "pointer_type":
        ptr = "*"
        typ = typ.named_children[0]
    if typ.type == "generic_type":
        typ = typ.child_by_field_name("type") or typ
    return ptr + _text(typ)


def _go_identity(node: Any, prefix: str) -> str:  # noqa: ARG001
    name = _text(node.child_by_field_name("name"))
    if node.type == "method_declaration":
        receiver = _go_receiver_type(node.child_by_field_name("receiver"))
        return f"func ({receiver}).{name}"
    return f"func {name}"


def _python_identity(node: Any, prefix: str) -> str:
    return f"def {prefix}{_text(node.child_by_field_name('name'))}"


_IDENTITY: dict[str, Callable[[Any, str], str]] = {
    "go": _go_identity,
    "python": _python_identity,
}


# =========================================================================
# Splitter
# =========================================================================


@dataclass
class TreeSitterSplitter:
    """Declaration splitter backed by a tree-sitter grammar.

    Usage::

        splitter = TreeSitterSplitter(GO_PACK)
        units = splitter.split(b"package p\\n\\nfunc F() {}\\n")
        # [DeclUnit(start=11, end=22, identity="func F")]
    """

    pack: LanguagePack
    _identity: Callable[[Any, str], str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        identity = _IDENTITY.get(self.pack.name)
        if identity is None:
            raise UnsupportedLanguageError.unknown(self.pack.name)
        self._identity = identity

    def split(self, source: bytes) -> list[DeclUnit]:
        """Split ``source`` into declarations.

        Raises:
            ParseError: if the tree contains syntax errors.
        """
        # One parser per call: parsers are stateful, grammars are shared.
        parser = tree_sitter.Parser(_load_language(self.pack))
        tree = parser.parse(source)
        root = tree.root_node
        if root.has_error:
            row, col = _first_error_point(root)
            raise ParseError.syntax(row + 1, col + 1)

        units: list[DeclUnit] = []
        self._collect(root, "", units, top_level=True)
        log.debug("split_complete", language=self.pack.name, decls=len(units))
        return units

    def _collect(self, node: Any, prefix: str, units: list[DeclUnit], *, top_level: bool) -> None:
        for child in node.named_children:
            target = child
            if child.type == "decorated_definition":
                target = child.child_by_field_name("definition") or child

            if target.type in self.pack.function_types:
                # Decorators belong to the declaration they decorate
                units.append(
                    DeclUnit(child.start_byte, child.end_byte, self._identity(target, prefix))
                )
            elif target.type in self.pack.container_types:
                body = target.child_by_field_name("body")
                if body is not None:
                    name = _text(target.child_by_field_name("name"))
                    self._collect(body, f"{prefix}{name}.", units, top_level=False)
            elif top_level and child.type not in self.pack.gap_types:
                units.append(DeclUnit(child.start_byte, child.end_byte))


_SPLITTERS: dict[str, TreeSitterSplitter] = {}


def get_splitter(language: str) -> TreeSitterSplitter:
    """Get the (cached) splitter for a language name."""
    pack = get_pack(language)
    if pack is None:
        raise UnsupportedLanguageError.unknown(language)
    splitter = _SPLITTERS.get(pack.name)
    if splitter is None:
        splitter = TreeSitterSplitter(pack)
        _SPLITTERS[pack.name] = splitter
    return splitter


def detect_language(path: str | Path) -> str | None:
    """Language name for a file path, from its extension."""
    ext = Path(path).suffix.lstrip(".")
    pack = get_pack_for_ext(ext) if ext else None
    return pack.name if pack is not None else None
