"""
    Utilities to obtain relevant files' and directories' locations
"""

import os
from pathlib import Path
from subprocess import CalledProcessError
from subprocess import PIPE
from subprocess import run


class NotARepositoryError(RuntimeError):
    """When you are not running inside a git repository directory"""


def resolve(path, base_dir):
    """Make the given path absolute by joining it to the base directory, unless it already is.
    The join is purely lexical, the resulting path is not required to exist.

    Args:
        path (str): Path to resolve.
        base_dir (str): Directory relative paths are anchored to.

    Returns:
        str: Absolute path.
    """
    path = os.fspath(path)
    if path.startswith(os.sep):
        return path

    return os.path.join(os.fspath(base_dir), path)


def is_strictly_inside(path, root):
    """Whether the path, once symlinks and `..` are resolved, lies below the root directory.
    The root itself does not count as inside.

    Args:
        path (str): Path to check.
        root (str): Directory to check against.

    Returns:
        bool: True when the path is a descendant of the root.
    """
    return Path(root).resolve() in Path(path).resolve().parents


def get_working_path():
    """Get the interpreters current directory.

    Returns:
        str: Current working directory.
    """
    return Path.cwd().as_posix()


def get_root_path():
    """Get the path to the root of the Git repository.

    Raises:
        NotARepositoryError: If the current directory is not within a git repository.

    Returns:
        str: Root of the repository.
    """
    try:
        root = run(
            ["git", "rev-parse", "--show-toplevel"], stdout=PIPE, stderr=PIPE, check=True, encoding="utf-8"
        ).stdout

    except (CalledProcessError, FileNotFoundError):
        raise NotARepositoryError("Not running in a git repository.")
    else:
        return root.strip()


def get_project_root():
    """Get the directory all project relative paths are anchored to: the repository's root
    or, when not within a git repository, the current directory.

    Returns:
        str: Project root directory.
    """
    try:
        return get_root_path()
    except NotARepositoryError:
        return get_working_path()
