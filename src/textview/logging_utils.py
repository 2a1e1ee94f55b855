"""Logging setup for applications that embed textview.

The library itself only creates module loggers under the ``textview``
namespace and never installs handlers beyond a ``NullHandler``. Hosts that
want to see the DEBUG diagnostics (unknown nodes, parse timings) call
:func:`configure_logging`, and :func:`reset_logging` to undo it.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "textview"

# Attribute set on handlers installed here; other handlers are left alone
_OWNED_HANDLER_FLAG = "_textview_owned"


def _owned(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _OWNED_HANDLER_FLAG, True)
    return handler


def _remove_owned_handlers(package_logger: logging.Logger) -> None:
    for handler in list(package_logger.handlers):
        if getattr(handler, _OWNED_HANDLER_FLAG, False):
            package_logger.removeHandler(handler)
            handler.close()


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Send ``textview`` diagnostics to stderr and optionally a file.

    Calling it again replaces the handlers of the previous call. Handlers
    the host attached to the ``textview`` logger itself are kept, and
    records still propagate to the root logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "DEBUG").
    log_file : str, optional
        Path of a log file to append to as well.
    trace_mode : bool, default False
        Include timestamps and logger names, so parse timings can be
        attributed to the parser that produced them.

    Returns
    -------
    logging.Logger
        The ``textview`` package logger.

    """
    resolved_level = log_level if isinstance(log_level, int) else getattr(logging, str(log_level).upper(), logging.INFO)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    _remove_owned_handlers(package_logger)
    package_logger.setLevel(resolved_level)

    if trace_mode:
        formatter = logging.Formatter("[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s", "%Y-%m-%d %H:%M:%S")
    else:
        formatter = logging.Formatter("textview %(levelname)s: %(message)s")

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            package_logger.warning("Could not open log file %s: %s", log_file, exc)

    for handler in handlers:
        handler.setLevel(resolved_level)
        handler.setFormatter(formatter)
        package_logger.addHandler(_owned(handler))

    return package_logger


def reset_logging() -> None:
    """Remove the handlers installed by :func:`configure_logging` and restore the default level."""
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    _remove_owned_handlers(package_logger)
    package_logger.setLevel(logging.NOTSET)
