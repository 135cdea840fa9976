"""
Logging Configuration for do_collections.

Provides the debug trace logger used by the library modules. The logger is
silent (NullHandler) unless DO_COLLECTIONS_DEBUG_LOG is set; then it writes
to stderr and, when DO_COLLECTIONS_LOG_DIR is set, to debug_trace.log in
that directory.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from .config import DoConfig, get_config

DEBUG_TRACE_LOGGER_NAME = "do_collections.debug_trace"

_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _create_file_handler(log_path: Path) -> Optional[logging.FileHandler]:
    """
    Create a file handler for the given log file.

    Args:
        log_path: Full path of the log file (e.g., '<dir>/debug_trace.log')

    Returns:
        Configured FileHandler, or None if the file cannot be opened
    """
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
    except OSError as e:
        print(f"do_collections: cannot open {log_path}: {e}", file=sys.stderr)
        return None
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    return handler


class FlushingStreamHandler(logging.StreamHandler):
    """StreamHandler that flushes after every emit.

    ::: This is-in-layer Infrastructure-Layer.
    ::: This is a handler.
    ::: This is stateless.
    """
    def emit(self, record):
        super().emit(record)
        self.flush()


def _create_stderr_handler() -> logging.StreamHandler:
    """Create a stderr handler for console output with auto-flush."""
    handler = FlushingStreamHandler(sys.stderr)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    return handler


def _config_key(config: DoConfig) -> Tuple[bool, Optional[Path]]:
    return (config.debug_log, config.log_file)


# Config the debug trace handlers were built from
_configured_key: Optional[Tuple[bool, Optional[Path]]] = None

# Handlers installed on the trace logger; others (e.g. pytest capture) are left alone
_installed_handlers: List[logging.Handler] = []

# Module loggers sharing the debug trace handlers
_traced_loggers: List[str] = []


def _install_handlers(logger: logging.Logger, config: DoConfig) -> List[logging.Handler]:
    """Replace the handlers of the trace logger; returns the old ones."""
    global _configured_key

    old_handlers = _installed_handlers[:]
    for handler in old_handlers:
        handler.close()
        logger.removeHandler(handler)
    _installed_handlers.clear()

    logger.setLevel(logging.DEBUG)
    logger.propagate = False  # Don't propagate to root logger

    if not config.debug_log:
        _installed_handlers.append(logging.NullHandler())
    else:
        if config.log_file is not None:
            file_handler = _create_file_handler(config.log_file)
            if file_handler:
                _installed_handlers.append(file_handler)
        _installed_handlers.append(_create_stderr_handler())
    for handler in _installed_handlers:
        logger.addHandler(handler)

    _configured_key = _config_key(config)
    return old_handlers


def get_debug_trace_logger() -> logging.Logger:
    """
    Get the debug trace logger for chain operations.

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(DEBUG_TRACE_LOGGER_NAME)

    # Only configure once
    if not _installed_handlers:
        _install_handlers(logger, get_config())

    return logger


def ensure_debug_trace_configured() -> logging.Logger:
    """
    Ensure the debug trace logger matches the current config.

    Call this after changing DO_COLLECTIONS_* variables and reset_config();
    module loggers set up by configure_logger_for_debug_trace are re-attached.

    Returns:
        Configured logger instance
    """
    config = get_config()
    logger = logging.getLogger(DEBUG_TRACE_LOGGER_NAME)

    if _configured_key != _config_key(config) or not _installed_handlers:
        old_handlers = _install_handlers(logger, config)
        for name in _traced_loggers:
            module_logger = logging.getLogger(name)
            for handler in old_handlers:
                module_logger.removeHandler(handler)
            _attach(module_logger, config)

    return logger


def _attach(module_logger: logging.Logger, config: DoConfig) -> None:
    for handler in _installed_handlers:
        if handler not in module_logger.handlers:
            module_logger.addHandler(handler)
    if config.debug_log:
        module_logger.setLevel(logging.DEBUG)  # Enable all log levels
    else:
        module_logger.setLevel(logging.NOTSET)


def configure_logger_for_debug_trace(logger_name: str) -> logging.Logger:
    """
    Configure a logger to also write to the debug trace handlers.

    Args:
        logger_name: Name of the logger to configure (e.g., __name__)

    Returns:
        Configured logger instance
    """
    get_debug_trace_logger()
    logger = logging.getLogger(logger_name)
    _attach(logger, get_config())
    if logger_name not in _traced_loggers:
        _traced_loggers.append(logger_name)
    return logger


def suppress_stderr_logging():
    """
    Suppress stderr output of the debug trace logger.

    File logging continues to work normally.
    """
    get_debug_trace_logger()
    for handler in _installed_handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            handler.setLevel(logging.CRITICAL + 1)  # Effectively disable


def restore_stderr_logging():
    """Restore stderr output of the debug trace logger."""
    get_debug_trace_logger()
    for handler in _installed_handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            handler.setLevel(logging.DEBUG)
