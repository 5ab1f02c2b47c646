"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (SEMDIFFSTAT__SECTION__KEY)
3. Project YAML (.semdiffstat.yaml in the working directory)
4. Global YAML (~/.config/semdiffstat/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    SEMDIFFSTAT__<SECTION>__<KEY>=<VALUE>

Examples:
    SEMDIFFSTAT__LOGGING__LEVEL=DEBUG
    SEMDIFFSTAT__OUTPUT__COLOR=never
    SEMDIFFSTAT__DIFF__DEFAULT_LANGUAGE=python
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
ColorMode = Literal["auto", "always", "never"]
SortKey = Literal["name", "magnitude", "kind"]
Language = Literal["go", "python"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        SEMDIFFSTAT__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. The diffstat itself goes to stdout; logs go to stderr.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class OutputConfig(BaseModel):
    """Terminal output configuration.

    Env vars:
        SEMDIFFSTAT__OUTPUT__COLOR: auto, always or never
        SEMDIFFSTAT__OUTPUT__SORT: name, magnitude or kind
    """

    color: ColorMode = Field(
        default="auto",
        description="Colorize +/- bars. 'auto' colors only when stdout is a terminal.",
    )
    sort: SortKey = Field(
        default="name",
        description="Display order. The 'other' entry is always printed last.",
    )


class DiffConfig(BaseModel):
    """Diff behavior configuration.

    Env vars:
        SEMDIFFSTAT__DIFF__DEFAULT_LANGUAGE: Language used when detection fails
        SEMDIFFSTAT__DIFF__FALLBACK_ON_PARSE_ERROR: Print a plain line diffstat on parse errors
    """

    default_language: Language = Field(
        default="go",
        description="Language used when it cannot be detected from file extensions.",
    )
    fallback_on_parse_error: bool = Field(
        default=False,
        description="On a syntax error, report the whole-file line diffstat as 'other' "
        "instead of failing.",
    )


class SemDiffStatConfig(BaseModel):
    """Root configuration for semdiffstat.

    All settings can be configured via:
    1. Environment variables: SEMDIFFSTAT__SECTION__KEY
    2. YAML config files (project or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    diff: DiffConfig = Field(default_factory=DiffConfig)
