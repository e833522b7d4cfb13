"""Logging configuration for lsinfo.

Only the CLI entry point calls :func:`configure_logging`; library
modules just use ``logging.getLogger(__name__)``.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_TAG_ATTR = "_lsinfo_handler"


def _is_our_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def configure_logging(verbose: bool = False, console: Console | None = None) -> logging.Handler:
    """Install the lsinfo log handler on the root logger.

    Calling this again replaces the previously installed handler, so
    repeated CLI invocations in one process never stack handlers.

    Args:
        verbose: Log at DEBUG level instead of WARNING.
        console: Console to write to. Defaults to the shared stderr console.

    Returns:
        The installed handler.
    """
    if console is None:
        from lsinfo.utils.formatting import err_console

        console = err_console

    root = logging.getLogger()
    for handler in list(root.handlers):
        if _is_our_handler(handler):
            root.removeHandler(handler)
            handler.close()

    level = logging.DEBUG if verbose else logging.WARNING
    handler = RichHandler(console=console, show_time=False, show_path=verbose)
    handler.setLevel(level)
    setattr(handler, _HANDLER_TAG_ATTR, True)

    root.addHandler(handler)
    root.setLevel(level)
    return handler
