"""Logging configuration and Typer callback for the runfiles-resolver CLI."""

from __future__ import annotations

import logging
import os
from enum import StrEnum
from logging.config import dictConfig
from pathlib import Path
from typing import Annotated

import structlog
import typer

ENV_LOG_OUTPUT = "RUNFILES_RESOLVER_LOG_OUTPUT"
ENV_LOG_LEVEL = "RUNFILES_RESOLVER_LOG_LEVEL"


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def _handlers_for(log_output: str, level: LogLevel) -> tuple[dict, list[str]]:
    if log_output == "none":
        return {"null": {"class": "logging.NullHandler"}}, ["null"]
    if log_output in ("stdout", "stderr"):
        handler = {
            "class": "logging.StreamHandler",
            "level": level,
            "formatter": "console",
            "stream": f"ext://sys.{log_output}",
        }
        return {"console": handler}, ["console"]
    handler = {
        "class": "logging.FileHandler",
        "level": level,
        "formatter": "file",
        "filename": str(Path(log_output).resolve()),
        "encoding": "utf-8",
    }
    return {"file": handler}, ["file"]


def configure_logging(log_output: str | None = None, log_level: str | LogLevel | None = None) -> None:
    """Route stdlib logging and structlog to one destination.

    If not specified, reads RUNFILES_RESOLVER_LOG_OUTPUT and
    RUNFILES_RESOLVER_LOG_LEVEL, defaulting to stderr/WARNING.
    """
    if log_output is None:
        log_output = os.environ.get(ENV_LOG_OUTPUT, "stderr")
    if log_level is None:
        log_level = os.environ.get(ENV_LOG_LEVEL, LogLevel.WARNING)

    try:
        level = LogLevel(log_level.upper())
    except ValueError:
        raise ValueError(f"Invalid log level: {log_level}. Must be one of {', '.join(LogLevel)}") from None

    handlers, root_handlers = _handlers_for(log_output, level)
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {"format": "%(levelname)s %(name)s: %(message)s"},
                "file": {"format": "%(asctime)s %(levelname)s %(name)s %(message)s"},
            },
            "handlers": handlers,
            "root": {"level": level, "handlers": root_handlers},
        }
    )

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level.value)),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def logging_callback(
    log_output: Annotated[
        str,
        typer.Option(
            "--log-output",
            envvar=ENV_LOG_OUTPUT,
            help="Where to send logs: 'stderr', 'stdout', 'none', or a file path",
        ),
    ] = "stderr",
    log_level: Annotated[str, typer.Option("--log-level", envvar=ENV_LOG_LEVEL, help="Log level")] = LogLevel.WARNING,
) -> None:
    """Configure logging for all subcommands."""
    configure_logging(log_output=log_output, log_level=log_level)
