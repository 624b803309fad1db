"""
explodeview.log - logging facade with proper Python exception handling.

Usage:
    from explodeview import log

    log.info("Hello")
    log.warn("Something wrong")

    try:
        do_something()
    except Exception as e:
        log.error(e, "Failed to do something")  # includes traceback
"""

import logging
import sys
import traceback

_logger = logging.getLogger("explodeview")


def debug(msg_or_exc, context: str = ""):
    """Log debug message or exception with context."""
    _dispatch(logging.DEBUG, msg_or_exc, context)


def info(msg_or_exc, context: str = ""):
    """Log info message or exception with context."""
    _dispatch(logging.INFO, msg_or_exc, context)


def warn(msg_or_exc, context: str = ""):
    """Log warning message or exception with context."""
    _dispatch(logging.WARNING, msg_or_exc, context)


def warning(msg_or_exc, context: str = ""):
    """Alias for warn()."""
    warn(msg_or_exc, context)


def error(msg_or_exc, context: str = ""):
    """Log error message or exception with context."""
    _dispatch(logging.ERROR, msg_or_exc, context)


def exception(msg: str = ""):
    """Log error with current exception traceback."""
    _logger.exception(msg)


def set_level(level: int) -> None:
    _logger.setLevel(level)


def set_callback(callback) -> logging.Handler:
    """
    Route records to callback(level, message), e.g. a viewer's status bar.

    Returns the installed handler so it can be removed later.
    """
    handler = _CallbackHandler(callback)
    _logger.addHandler(handler)
    return handler


def setup_console(level: int = logging.INFO) -> None:
    """Attach a stdout handler to the package logger (idempotent)."""
    _logger.setLevel(level)
    for handler in _logger.handlers:
        if getattr(handler, "_explodeview_console", False):
            handler.setLevel(level)
            return

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    ))
    handler._explodeview_console = True
    _logger.addHandler(handler)


def _dispatch(level: int, msg_or_exc, context: str) -> None:
    if isinstance(msg_or_exc, BaseException):
        _log_exception(level, msg_or_exc, context)
    elif context:
        _logger.log(level, "%s: %s", context, msg_or_exc)
    else:
        _logger.log(level, "%s", msg_or_exc)


def _log_exception(level: int, exc: BaseException, context: str):
    """Format and log exception with traceback."""
    exc_type = type(exc).__name__
    exc_msg = str(exc)

    tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))

    if context:
        full_msg = f"{context}: {exc_type}: {exc_msg}\n{tb}"
    else:
        full_msg = f"{exc_type}: {exc_msg}\n{tb}"

    _logger.log(level, full_msg)


class _CallbackHandler(logging.Handler):
    def __init__(self, callback):
        super().__init__()
        self._callback = callback

    def emit(self, record: logging.LogRecord) -> None:
        self._callback(record.levelno, self.format(record))
