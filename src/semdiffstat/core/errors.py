"""semdiffstat error types with typed error codes.

Error code ranges:
- 1xxx: Parse
- 2xxx: Config
- 9xxx: Internal
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Parse (1xxx)
    PARSE_SYNTAX_ERROR = 1001
    PARSE_UNSUPPORTED_LANGUAGE = 1002
    PARSE_GRAMMAR_MISSING = 1003

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class SemDiffError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'PARSE_SYNTAX_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ParseError(SemDiffError):
    """A source version could not be split into declarations."""

    @property
    def side(self) -> str | None:
        """Which version failed: "a" (old) or "b" (new)."""
        return self.details.get("side")

    @classmethod
    def syntax(cls, line: int, column: int, side: str | None = None) -> "ParseError":
        where = f" in source {side}" if side else ""
        return cls(
            code=ErrorCode.PARSE_SYNTAX_ERROR,
            message=f"Syntax error{where} at line {line}, column {column}",
            details={"side": side, "line": line, "column": column},
        )

    def for_side(self, side: str) -> "ParseError":
        """Copy of this error attributed to ``side``."""
        if self.code == ErrorCode.PARSE_SYNTAX_ERROR:
            return ParseError.syntax(self.details["line"], self.details["column"], side=side)
        return ParseError(
            code=self.code,
            message=self.message,
            details={**self.details, "side": side},
        )


class UnsupportedLanguageError(SemDiffError):
    """No declaration splitter is available for a language."""

    @classmethod
    def unknown(cls, language: str) -> "UnsupportedLanguageError":
        return cls(
            code=ErrorCode.PARSE_UNSUPPORTED_LANGUAGE,
            message=f"Unsupported language: {language}",
            details={"language": language},
        )

    @classmethod
    def grammar_missing(cls, language: str, package: str) -> "UnsupportedLanguageError":
        return cls(
            code=ErrorCode.PARSE_GRAMMAR_MISSING,
            message=f"Grammar for {language} is not installed (pip install {package})",
            details={"language": language, "package": package},
        )


class ConfigError(SemDiffError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class InternalError(SemDiffError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
