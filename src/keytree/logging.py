"""
Logger bootstrap for keytree.

Library modules only create module loggers
(``logging.getLogger(__name__)``) and never configure handlers. The CLI
calls setup_logging() once to attach a rich handler to the package
logger.
"""

import logging as _logging

import rich.console as _rich_console
import rich.logging as _rich_logging

import keytree.constants as constants


def setup_logging(
    level: int | str = constants.DEFAULT_LOG_LEVEL,
    *,
    rich_tracebacks: bool = False,
    console: _rich_console.Console | None = None,
) -> _logging.Logger:
    """
    Configure the keytree logger.

    Existing handlers on the logger are closed and replaced, so calling
    this again reconfigures rather than duplicates output.

    Args:
        level: Level name or number.
        rich_tracebacks: Render exception tracebacks with rich.
        console: Console to write to. Defaults to a stderr console.

    Returns:
        The configured ``keytree`` logger.
    """
    if isinstance(level, str):
        level = level.upper()

    logger = _logging.getLogger(constants.LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    handler = _rich_logging.RichHandler(
        console=console or _rich_console.Console(stderr=True),
        rich_tracebacks=rich_tracebacks,
        show_path=False,
    )
    handler.setLevel(level)
    logger.addHandler(handler)
    return logger


__all__ = ["setup_logging"]
