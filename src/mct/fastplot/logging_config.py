# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2026 mct-fastplot contributors
"""Structured logging configuration for mct-fastplot."""

import logging
import sys
from logging.handlers import RotatingFileHandler

import structlog

from .config.environment import is_production


def default_level() -> int:
    """Debug output in development, info in production."""
    return logging.INFO if is_production() else logging.DEBUG


def configure_logging(
    *,
    level: int | str | None = None,
    json_file: str | None = None,
    disable_stdout: bool = False,
) -> None:
    """
    Configure structured logging for plot views.

    Parameters
    ----------
    level:
        Minimum log level, as a number or a name such as ``"DEBUG"``. If None,
        the level depends on the environment (see :func:`default_level`).
    json_file:
        Path of a rotating JSON log file (10MB max, 5 backups). No file logging
        if None.
    disable_stdout:
        If True, do not log to stdout.
    """
    if level is None:
        level = default_level()
    elif isinstance(level, str):
        level = logging.getLevelName(level.upper())

    shared_processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    if not disable_stdout:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                foreign_pre_chain=shared_processors,
                processors=[
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()),
                ],
            )
        )
        root_logger.addHandler(console_handler)

    if json_file is not None:
        file_handler = RotatingFileHandler(
            json_file,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
        )
        file_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                foreign_pre_chain=shared_processors,
                processors=[
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    structlog.processors.format_exc_info,
                    structlog.processors.JSONRenderer(),
                ],
            )
        )
        root_logger.addHandler(file_handler)

    root_logger.setLevel(level)


def bind_plot_view(view_name: str) -> None:
    """Attach the plot view name to all log records of the current context."""
    structlog.contextvars.bind_contextvars(plot_view=view_name)


def clear_plot_view() -> None:
    structlog.contextvars.unbind_contextvars('plot_view')
