"""
Logging utilities for sqlhelper.

The library only emits records through module loggers under the
``sqlhelper`` namespace. ``setup_logging`` is an opt-in helper for
applications that want those records written somewhere.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

LOGGER_NAME = 'sqlhelper'


class SafeFormatter(logging.Formatter):
    """
    Formatter that provides default values for missing fields.

    ``database_context`` carries the dialect name passed by ``log_query`` and
    ``log_connection_event``; other records show ``-``.
    """

    def format(self, record):
        if not hasattr(record, 'database_context'):
            record.database_context = '-'
        return super().format(record)


def setup_logging(config: Dict[str, Any]) -> logging.Logger:
    """
    Configure the ``sqlhelper`` logger from a configuration dictionary.

    Args:
        config: Configuration with an optional ``logging`` section
            (``level``, ``log_file``)

    Returns:
        The configured package logger
    """
    logging_config = config.get('logging', {})
    log_level = str(logging_config.get('level', 'INFO')).upper()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, log_level))

    # Remove any existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    formatter = SafeFormatter(
        '%(asctime)s.%(msecs)03d - [%(database_context)s] - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    log_file = logging_config.get('log_file')
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file)
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    logger.propagate = False
    return logger


def _context_extra(context: Optional[str]) -> Dict[str, str]:
    return {'database_context': context} if context else {}


def log_query(logger: logging.Logger, sql: str, parameters: Optional[Mapping[str, Any]] = None,
              duration: Optional[float] = None, context: Optional[str] = None) -> None:
    """
    Log an executed statement at DEBUG level.

    Only parameter names are logged, never their values.

    Args:
        logger: Logger to write to
        sql: SQL text that was executed
        parameters: Parameter mapping bound to the statement
        duration: Execution time in seconds
        context: Dialect name shown as ``database_context``
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return

    message = f"Executed: {sql}"
    if parameters:
        message += f" | params: {', '.join(parameters)}"
    if duration is not None:
        message += f" | {duration:.3f}s"
    logger.debug(message, extra=_context_extra(context))


def log_connection_event(logger: logging.Logger, event: str, details: Optional[str] = None,
                         context: Optional[str] = None) -> None:
    """
    Log a connection lifecycle event at DEBUG level.

    Args:
        logger: Logger to write to
        event: Event type ('opened', 'closed', 'disposed')
        details: Additional event details
        context: Dialect name shown as ``database_context``
    """
    if logger.isEnabledFor(logging.DEBUG):
        message = f"Connection {event}"
        if details:
            message += f": {details}"
        logger.debug(message, extra=_context_extra(context))
