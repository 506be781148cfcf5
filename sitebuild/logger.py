"""
    Logging utilities.
"""

import logging
from functools import wraps

from rich.console import Console
from rich.logging import RichHandler


_TIME_FORMAT = lambda time: f"[{time:%H:%M:%S}.{time.microsecond//1000:03}]"

_sitebuild_logger = logging.getLogger("sitebuild")

console = Console()


def get_verbosity(verbose):
    """Logging level for the `--verbose` flag value.

    Args:
        verbose (bool): Whether the logging should be verbose or not

    Returns:
        int: Logging level
    """
    return logging.DEBUG if verbose else logging.INFO


def configure_logger(level=logging.DEBUG):
    """Send the sitebuild records to the shared console through a single rich handler.
    Calling it again replaces the handler, so the level can be changed once the command line is parsed.

    Args:
        level (int, optional): Logging level. Defaults to DEBUG.

    Returns:
        logging.Logger: The configured logger.
    """
    _sitebuild_logger.setLevel(level)
    _sitebuild_logger.propagate = False

    handler = RichHandler(
        level=level,
        console=console,
        show_path=False,
        enable_link_path=False,
        markup=True,
        rich_tracebacks=True,
        log_time_format=_TIME_FORMAT,
    )
    _sitebuild_logger.handlers = [handler]

    return _sitebuild_logger


def _ensure_configured(log_func):
    # Library use (build scripts, tests) logs before any command configured the level
    @wraps(log_func)
    def wrapper(message):
        if not _sitebuild_logger.handlers:
            configure_logger()
        log_func(message)

    return wrapper


@_ensure_configured
def debug(message):  # pragma: no cover
    _sitebuild_logger.debug(message)


@_ensure_configured
def info(message):  # pragma: no cover
    _sitebuild_logger.info(message)


@_ensure_configured
def warning(message):  # pragma: no cover
    _sitebuild_logger.warning(message)


@_ensure_configured
def error(message):  # pragma: no cover
    _sitebuild_logger.error(message)
