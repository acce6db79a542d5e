"""Opt-in log output for graphx.

The library only emits records through ``logging.getLogger(__name__)`` and
never installs handlers on import. Applications that want to see the debug
trace of the algorithms call ``configure_logging``.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "graphx"


def configure_logging(*, verbose: bool = False, console: Console | None = None) -> logging.Logger:
    """Route graphx log records to a rich handler on stderr.

    Any rich handler already attached to the package logger is replaced, so
    calling this again reconfigures the output instead of duplicating it.

    Args:
        verbose: Log at DEBUG level (search statistics, relaxation counts)
            instead of INFO, and show source paths.
        console: Console to write to. Defaults to a new stderr console.

    Returns:
        The configured package logger.

    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in [h for h in logger.handlers if isinstance(h, RichHandler)]:
        logger.removeHandler(existing)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=verbose,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger
