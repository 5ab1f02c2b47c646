"""Declaration splitting front ends (tree-sitter)."""

from semdiffstat.parsing.models import DeclUnit, Splitter
from semdiffstat.parsing.packs import GO_PACK, PACKS, PYTHON_PACK, LanguagePack, get_pack
from semdiffstat.parsing.splitter import TreeSitterSplitter, detect_language, get_splitter

__all__ = [
    "DeclUnit",
    "GO_PACK",
    "LanguagePack",
    "PACKS",
    "PYTHON_PACK",
    "Splitter",
    "TreeSitterSplitter",
    "detect_language",
    "get_pack",
    "get_splitter",
]
