"""Language packs, one record per supported language.

Each pack holds:
- Grammar install metadata (package, module)
- File extension detection
- Top-level node types: which become declarations and which stay in gaps

The PACKS registry is the canonical lookup: ``PACKS["go"]``.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LanguagePack:
    """Tree-sitter configuration for a single language."""

    # -- Identity --
    name: str  # Canonical language name ("go", "python")

    # -- Grammar install --
    grammar_package: str  # PyPI package ("tree-sitter-go")
    grammar_module: str  # Python import ("tree_sitter_go")

    # -- File detection --
    extensions: frozenset[str] = field(default_factory=frozenset)

    # -- Declaration splitting --
    # Top-level node types that never form a declaration (left in gaps)
    gap_types: frozenset[str] = frozenset({"comment"})
    # Node types whose identity is computed (functions, methods)
    function_types: frozenset[str] = frozenset()
    # Node types descended into for nested functions (Python classes)
    container_types: frozenset[str] = frozenset()


GO_PACK = LanguagePack(
    name="go",
    grammar_package="tree-sitter-go",
    grammar_module="tree_sitter_go",
    extensions=frozenset({"go"}),
    # The package clause is not a declaration in Go's own AST either
    gap_types=frozenset({"comment", "package_clause"}),
    function_types=frozenset({"function_declaration", "method_declaration"}),
)

PYTHON_PACK = LanguagePack(
    name="python",
    grammar_package="tree-sitter-python",
    grammar_module="tree_sitter_python",
    extensions=frozenset({"py", "pyi"}),
    gap_types=frozenset({"comment"}),
    function_types=frozenset({"function_definition"}),
    container_types=frozenset({"class_definition"}),
)

_ALL_PACKS: tuple[LanguagePack, ...] = (GO_PACK, PYTHON_PACK)

# name -> Pack
PACKS: dict[str, LanguagePack] = {pack.name: pack for pack in _ALL_PACKS}
PACKS["golang"] = GO_PACK
PACKS["py"] = PYTHON_PACK

# Extension -> Pack
_EXT_TO_PACK: dict[str, LanguagePack] = {}
for _pack in _ALL_PACKS:
    for _ext in _pack.extensions:
        _EXT_TO_PACK[_ext] = _pack


def get_pack(name: str) -> LanguagePack | None:
    """Get a LanguagePack by language name."""
    return PACKS.get(name.lower())


def get_pack_for_ext(ext: str) -> LanguagePack | None:
    """Get a LanguagePack for a file extension (without leading dot)."""
    return _EXT_TO_PACK.get(ext.lower())
