"""Structured logging for the semdiffstat command.

structlog renders through stdlib ``logging`` handlers, one per configured
output.  Each output picks its own level and format (``console`` or
``json``).  The diffstat itself is written to stdout by the CLI, so the
default output is stderr.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from semdiffstat.config.models import LoggingConfig, LogOutputConfig

# First file output of the current configuration, if any
_log_file_path: Path | None = None


def get_log_file_path() -> Path | None:
    """Path of the file log, for pointing users at details after an error."""
    return _log_file_path


def _resolve_level(name: str | None, default: int) -> int:
    if not name:
        return default
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else default


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
    ]


def _make_formatter(
    fmt: str, shared: list[structlog.types.Processor], *, tty: bool
) -> logging.Formatter:
    renderer: structlog.types.Processor
    if fmt == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=tty, pad_event_to=0, pad_level=False)
    return structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=shared)


def _make_handler(output: LogOutputConfig) -> logging.Handler:
    if output.destination == "stderr":
        return logging.StreamHandler(sys.stderr)
    if output.destination == "stdout":
        return logging.StreamHandler(sys.stdout)
    path = Path(output.destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode="a")


def configure_logging(
    *,
    config: LoggingConfig | None = None,
    json_format: bool = False,
    level: str = "WARNING",
    verbose: bool = False,
) -> None:
    """(Re)configure structlog and the root stdlib logger.

    Args:
        config: Logging configuration; built from ``json_format`` and
            ``level`` when omitted.
        json_format: Render JSON instead of console lines (no config only).
        level: Root level (no config only).
        verbose: Force DEBUG on the root level and every output.
    """
    global _log_file_path
    from semdiffstat.config.models import LoggingConfig, LogOutputConfig

    if config is None:
        config = LoggingConfig(
            level=level,  # type: ignore[arg-type]
            outputs=[LogOutputConfig(format="json" if json_format else "console")],
        )

    root_level = logging.DEBUG if verbose else _resolve_level(config.level, logging.WARNING)
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(root_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Reconfigured per CLI invocation
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(root_level)
    _log_file_path = None

    for output in config.outputs:
        is_stream = output.destination in ("stderr", "stdout")
        if not is_stream and _log_file_path is None:
            _log_file_path = Path(output.destination)

        handler = _make_handler(output)
        handler.setLevel(root_level if verbose else _resolve_level(output.level, root_level))
        handler.setFormatter(
            _make_formatter(output.format, shared, tty=is_stream and sys.stderr.isatty())
        )
        root.addHandler(handler)


def get_logger(name: str | None = None) -> Any:
    """Logger named ``name``; the name is rendered as the ``logger`` key."""
    return structlog.get_logger(name)


def bind_context(**values: Any) -> None:
    """Bind values (e.g. the file pair being diffed) to every later log line."""
    structlog.contextvars.bind_contextvars(**values)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
