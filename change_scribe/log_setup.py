"""Logging setup for the change-scribe CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(is_verbose: bool = False) -> None:
    """
    Configure the root logger with a rich handler on stderr.

    Args:
        is_verbose: Log DEBUG and above instead of WARNING and above
    """
    log_level = logging.DEBUG if is_verbose else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Replace the handler from an earlier call instead of stacking duplicates
    for handler in root_logger.handlers[:]:
        if isinstance(handler, RichHandler):
            root_logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        level=log_level,
        show_time=False,
        show_path=is_verbose,
    )
    root_logger.addHandler(handler)
