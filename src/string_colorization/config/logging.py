# topmark:header:start
#
#   project      : String Colorization
#   file         : logging.py
#   file_relpath : src/string_colorization/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 String Colorization contributors
#
# topmark:header:end

"""Custom logging with a TRACE level for String Colorization.

This module extends the standard logging module with a TRACE level below
DEBUG, a logger class exposing `trace()`, and a formatter that colors records
by severity using yachalk.

The colorization engine only ever logs at TRACE level: dropped rules and
segment counts are internal details and are never surfaced to callers.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from string_colorization.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class ColorizationLogger(logging.Logger):
    """Logger class with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"


class ChalkFormatter(logging.Formatter):
    """Formatter that outputs log records with chalk-colored formatting based on severity level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record with colors based on log level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized formatted log message as a string.
        """
        level = record.levelno
        message = super().format(record)

        if level >= logging.CRITICAL:
            return chalk.red_bright(message)
        if level >= logging.ERROR:
            return chalk.red(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return chalk.green(message)
        if level >= logging.DEBUG:
            return chalk.gray(message)
        if level >= TRACE_LEVEL:
            return chalk.blue(message)
        return chalk.dim.red(message)


_NAME_TO_LEVEL: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


def resolve_env_log_level() -> int | None:
    """Return a logging level from the environment or None if unset.

    Honors ``STRING_COLORIZATION_LOG_LEVEL`` (e.g., "TRACE", "DEBUG", "INFO", numeric "10").

    Returns:
        int | None: The resolved level, or ``None`` when the variable is unset or unknown.
    """
    val: str | None = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not val:
        return None
    v: str = val.strip().upper()
    if v.isdigit():
        return int(v)
    return _NAME_TO_LEVEL.get(v)


def setup_logging(level: int | None = None) -> None:
    """Configure the package logger with a specified log level and colored output.

    If ``level`` is None, the environment is consulted via `resolve_env_log_level`.
    Default is CRITICAL when unspecified. Only the ``string_colorization`` logger
    hierarchy is touched; applications keep control of the root logger.

    Args:
        level (int | None): Explicit log level, or ``None`` to use the environment.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    package_logger: logging.Logger = logging.getLogger("string_colorization")
    package_logger.setLevel(level)

    # Iterate over a copy since we're modifying the list
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    formatter = ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    handler.setFormatter(formatter)
    package_logger.addHandler(handler)

    package_logger.propagate = False


def get_logger(name: str) -> ColorizationLogger:
    """Retrieve a ColorizationLogger instance with the specified name.

    The logger class is installed only for the duration of the lookup so that
    importing this package does not change the logger class of the host
    application.

    Args:
        name (str): The name of the logger.

    Returns:
        ColorizationLogger: A ColorizationLogger instance.
    """
    previous: type[logging.Logger] = logging.getLoggerClass()
    logging.setLoggerClass(ColorizationLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        logging.setLoggerClass(previous)
    return cast("ColorizationLogger", logger)
