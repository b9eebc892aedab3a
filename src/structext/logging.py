"""Logging support for the STRUCTEXT helpers.

The helpers log recovered failures (unparseable numbers and booleans,
rejected loose-map reads) at DEBUG under the ``structext`` logger hierarchy.
The package attaches a `NullHandler` to that logger, so nothing is printed
unless an application opts in.

`attach_console_handler` is that opt-in: it renders the package's records
with Rich, tagged with the helper module that emitted them, e.g.
``[text] Could not parse 'n/a' as an integer; using 0``.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from structext.config import PROJECT_PREFIX

# pylint: disable=too-few-public-methods


def is_package_logger(name: str) -> bool:
    """Return True for ``structext`` and its child loggers only."""
    return name == PROJECT_PREFIX or name.startswith(f"{PROJECT_PREFIX}.")


def helper_name(logger_name: str) -> str:
    """Return the short helper name for a package logger.

    ``"structext.extensions.text"`` becomes ``"text"``. The package root
    logger and loggers outside the package keep their full name.
    """
    if logger_name == PROJECT_PREFIX or not is_package_logger(logger_name):
        return logger_name
    return logger_name.rsplit(".", 1)[-1]


class HelperNameFilter(logging.Filter):
    """Set `record.helper` to the short name of the emitting helper module.

    The filter always returns True; it only annotates records.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.helper = helper_name(record.name)
        return True


def attach_console_handler(
    level: int = logging.DEBUG,
    color: bool = True,
    console: Console | None = None,
) -> RichHandler:
    """Show the helpers' log records on the console.

    Attaches a RichHandler to the ``structext`` logger and lowers that
    logger's level to `level` so DEBUG records from the helpers reach it.
    Records from other libraries are not affected.

    Args:
        level: Minimum level to show. Defaults to DEBUG, where the helpers
            report recovered failures.
        color: Enable color output when True. Ignored if `console` is given.
        console: Console to render to. Defaults to a new stderr console.

    Returns:
        RichHandler: The attached handler, for `detach_console_handler`.
    """
    if console is None:
        console = Console(color_system="auto" if color else None, stderr=True)

    handler = RichHandler(
        level=level,
        console=console,
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("[%(helper)s] %(message)s"))
    handler.addFilter(HelperNameFilter())

    logger = logging.getLogger(PROJECT_PREFIX)
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler


def detach_console_handler(handler: logging.Handler) -> None:
    """Remove and close a handler added by `attach_console_handler`.

    The ``structext`` logger's level is reset to NOTSET, so it follows its
    ancestors again.
    """
    logger = logging.getLogger(PROJECT_PREFIX)
    logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    handler.close()
