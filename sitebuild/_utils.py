"""
    General use utilities.
"""

import shutil
from pathlib import Path

from click.exceptions import Exit
from rich.markup import escape

from sitebuild import logger


def purge(path):
    """Remove the given file or directory tree. Missing paths are ignored.

    Args:
        path (str): Path to remove.

    Returns:
        bool: Whether something was removed.
    """
    path = Path(path)

    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    elif path.exists() or path.is_symlink():
        path.unlink()
    else:
        logger.debug(f"Nothing to remove at [bold]{escape(path.as_posix())}[/bold]")
        return False

    logger.debug(f"Removed [bold]{escape(path.as_posix())}[/bold]")
    return True


class ExitError(Exit):
    """
    Raise an Exit exception but also print an error description.
    """

    def __init__(self, exit_code: int, error_description: str):
        logger.error(error_description)
        super(ExitError, self).__init__(exit_code)
