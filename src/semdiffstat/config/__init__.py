"""Config module exports."""

from semdiffstat.config.loader import load_config
from semdiffstat.config.models import (
    DiffConfig,
    LoggingConfig,
    LogOutputConfig,
    OutputConfig,
    SemDiffStatConfig,
)

__all__ = [
    "load_config",
    "DiffConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "OutputConfig",
    "SemDiffStatConfig",
]
