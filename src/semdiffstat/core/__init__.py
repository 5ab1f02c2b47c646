"""Core module exports."""

from semdiffstat.core.errors import (
    ConfigError,
    ErrorCode,
    InternalError,
    ParseError,
    SemDiffError,
    UnsupportedLanguageError,
)
from semdiffstat.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "InternalError",
    "ParseError",
    "SemDiffError",
    "UnsupportedLanguageError",
    # Logging
    "bind_context",
    "clear_context",
    "configure_logging",
    "get_logger",
]
