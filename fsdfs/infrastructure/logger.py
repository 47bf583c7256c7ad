#!/usr/bin/env python3
"""Structured logging for fsdfs.

This module wraps the standard logging module with:
- Log levels as an IntEnum (DEBUG, INFO, WARNING, ERROR, CRITICAL)
- Structured context (key-value pairs appended to messages)
- Thread-local context stack
- Rotating file handlers, attached only on request

The library logs at DEBUG level only; resolution and classification results
never depend on logging. Handlers and propagation of the stdlib logger are
left to the host application unless passed to Logger explicitly.

Example:
    >>> logger = Logger(level=LogLevel.DEBUG)
    >>> logger.debug("Resolved import", specifier="~/shared/ui")
    >>> with logger.add_context(project="web"):
    ...     logger.info("Classified tree", layers=4)
"""

import logging
import logging.handlers
import os
import threading
from contextlib import contextmanager
from enum import IntEnum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union


class LogLevel(IntEnum):
    """Log levels matching Python's logging module."""

    DEBUG = logging.DEBUG  # 10
    INFO = logging.INFO  # 20
    WARNING = logging.WARNING  # 30
    ERROR = logging.ERROR  # 40
    CRITICAL = logging.CRITICAL  # 50


class Logger:
    """Structured logger with context support.

    Context passed as keyword arguments, or pushed with add_context(), is
    rendered as `key=value` pairs after the message and attached to the
    record as `record.context`.
    """

    # Thread-local storage for context
    _context_stack = threading.local()

    def __init__(
        self,
        name: str = "fsdfs",
        level: Optional[Union[LogLevel, str]] = None,
        handlers: Optional[List[logging.Handler]] = None,
    ):
        """Initialize logger.

        The underlying stdlib logger is left as configured by the host
        application unless a level or handlers are passed explicitly.

        Args:
            name: Logger name for identification
            level: Minimum log level to output; None keeps the current level
            handlers: Handlers replacing the current ones; disables propagation
        """
        self.name = name
        self.logger = logging.getLogger(name)

        if level is not None:
            self.set_level(level)

        if handlers is not None:
            self.logger.handlers.clear()
            for handler in handlers:
                self.logger.addHandler(handler)
            self.logger.propagate = False

    def create_file_handler(
        self,
        filename: Union[str, Path],
        max_bytes: int = 10 * 1024 * 1024,  # 10MB
        backup_count: int = 5,
    ) -> logging.handlers.RotatingFileHandler:
        """Create rotating file handler.

        Args:
            filename: Path to log file
            max_bytes: Maximum size before rotation
            backup_count: Number of backup files to keep

        Returns:
            Configured rotating file handler
        """
        handler = logging.handlers.RotatingFileHandler(
            filename, maxBytes=max_bytes, backupCount=backup_count
        )
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        return handler

    def add_handler(self, handler: logging.Handler) -> None:
        self.logger.addHandler(handler)

    def remove_handler(self, handler: logging.Handler) -> None:
        self.logger.removeHandler(handler)

    def use_file_handler(self, filename: Union[str, Path]) -> logging.handlers.RotatingFileHandler:
        """Attach a rotating file handler for `filename` unless one is attached already.

        Args:
            filename: Path to log file

        Returns:
            The attached handler
        """
        path = os.path.abspath(os.fspath(filename))
        for handler in self.logger.handlers:
            if isinstance(handler, logging.handlers.RotatingFileHandler) and handler.baseFilename == path:
                return handler

        handler = self.create_file_handler(path)
        self.add_handler(handler)
        return handler

    def set_level(self, level: Union[LogLevel, str]) -> None:
        """Set the minimum log level.

        Args:
            level: New log level (LogLevel or string)
        """
        if isinstance(level, str):
            level = LogLevel[level.upper()]
        self.logger.setLevel(level)

    def get_level(self) -> LogLevel:
        return LogLevel(self.logger.getEffectiveLevel())

    def _get_context(self) -> Dict[str, Any]:
        if not hasattr(self._context_stack, "stack"):
            self._context_stack.stack = [{}]

        context = {}
        for ctx in self._context_stack.stack:
            context.update(ctx)
        return context

    def _format_message(self, msg: str, context: Dict[str, Any]) -> str:
        if context:
            ctx_str = " ".join(f"{k}={v}" for k, v in context.items())
            return f"{msg} | {ctx_str}"
        return msg

    @contextmanager
    def add_context(self, **kwargs):
        """Context manager to add temporary context.

        Args:
            **kwargs: Key-value pairs to add to context

        Example:
            >>> with logger.add_context(root="src"):
            ...     logger.info("Classifying tree")
        """
        if not hasattr(self._context_stack, "stack"):
            self._context_stack.stack = [{}]

        self._context_stack.stack.append(kwargs)
        try:
            yield
        finally:
            self._context_stack.stack.pop()

    def _log(self, level: LogLevel, msg: str, context: Dict[str, Any]) -> None:
        if self.logger.isEnabledFor(level):
            combined_context = self._get_context()
            combined_context.update(context)
            formatted_msg = self._format_message(msg, combined_context)
            self.logger.log(level, formatted_msg, extra={"context": combined_context})

    def debug(self, msg: str, **context) -> None:
        self._log(LogLevel.DEBUG, msg, context)

    def info(self, msg: str, **context) -> None:
        self._log(LogLevel.INFO, msg, context)

    def warning(self, msg: str, **context) -> None:
        self._log(LogLevel.WARNING, msg, context)

    def error(self, msg: str, **context) -> None:
        self._log(LogLevel.ERROR, msg, context)

    def exception(self, msg: str, exc: Exception, **context) -> None:
        """Log exception with traceback.

        Args:
            msg: Log message
            exc: Exception to log
            **context: Additional context key-value pairs
        """
        combined_context = self._get_context()
        combined_context.update(context)
        combined_context["exception_type"] = type(exc).__name__
        combined_context["exception_message"] = str(exc)
        formatted_msg = self._format_message(msg, combined_context)
        self.logger.error(formatted_msg, exc_info=exc, extra={"context": combined_context})

    def is_enabled_for(self, level: Union[LogLevel, str]) -> bool:
        if isinstance(level, str):
            level = LogLevel[level.upper()]
        return self.logger.isEnabledFor(level)


# Global logger instance
_global_logger: Optional[Logger] = None


def get_logger(name: Optional[str] = None) -> Logger:
    """Get or create a logger instance.

    Args:
        name: Logger name; None returns the global logger

    Returns:
        Logger instance
    """
    global _global_logger
    if name is None:
        if _global_logger is None:
            _global_logger = Logger()
        return _global_logger

    if _global_logger is not None and _global_logger.name == name:
        return _global_logger
    return Logger(name=name)


def set_global_logger(logger: Optional[Logger]) -> None:
    """Set the global logger instance.

    Args:
        logger: Logger to use globally, or None to reset
    """
    global _global_logger
    _global_logger = logger
