#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textview/utils/decorators.py
"""Utility decorators for textview parsers and renderers.

Parsers and the terminal renderer depend on third-party packages (mistune,
BeautifulSoup, rich). The decorators here centralize the dependency check so
that a missing package surfaces as a :class:`DependencyError` with install
instructions instead of a bare ``ImportError`` deep inside a parse.

"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, List

from textview.exceptions import DependencyError
from textview.utils.packages import PackageRequirement, check_dependencies


def requires_dependencies(converter_name: str, packages: List[PackageRequirement]) -> Callable:
    """Check required dependencies and versions before method execution.

    Parameters
    ----------
    converter_name : str
        Name of the component (e.g., "markdown", "html"), used in error messages.
    packages : list of tuple
        Required packages as (install_name, import_name, version_spec) tuples.

    Returns
    -------
    Callable
        Decorated method that checks dependencies before execution

    Raises
    ------
    DependencyError
        If any required package is missing or has an incompatible version.

    Examples
    --------
        >>> @requires_dependencies("markdown", [("mistune", "mistune", ">=3.0.0")])
        ... def parse(self, raw):
        ...     import mistune

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            report = check_dependencies(packages)
            if not report.ok:
                raise DependencyError(
                    converter_name=converter_name,
                    missing_packages=report.missing,
                    version_mismatches=report.mismatches,
                    original_import_error=report.import_error,
                ) from report.import_error

            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Time the enclosed block and log the duration at DEBUG level.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "Parsing (markdown)")

    Notes
    -----
    Nothing is measured when the logger is not enabled for DEBUG.

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.4f}s")
    else:
        yield
