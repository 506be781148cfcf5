"""
    External commands execution.
"""
import re
import shlex
import subprocess

from rich.markup import escape

from sitebuild import logger
from sitebuild.errors import SpawnError


# Optional whitespace, an optional single file descriptor digit and a pipe or redirection character.
# `2>` is a shell token, `10>` is not.
_RAW_TOKEN_PATTERN = re.compile(r"^\s*\d?[|<>]")


class Literal(str):
    """ Argument always passed to the command as a single escaped value. """


class ShellToken(str):
    """ Argument always passed to the shell as is, e.g. a redirection or a pipe. """


def is_raw_token(argument):
    """ Whether the argument is shell syntax (a pipe or redirection) rather than a literal value.

    Args:
        argument (str): Argument to classify.

    Returns:
        bool: True when the argument must reach the shell unescaped.
    """
    if isinstance(argument, ShellToken):
        return True
    if isinstance(argument, Literal):
        return False

    return _RAW_TOKEN_PATTERN.match(argument) is not None


def quote_argument(argument):
    """ Escape the argument so the shell sees it as a single word, unless it is a raw shell token. """
    if not isinstance(argument, str):
        argument = str(argument)
    if is_raw_token(argument):
        return argument

    return shlex.quote(argument)


def build_command_line(command, arguments=None, env=None):
    """ Assemble the line handed to the shell.

    Environment assignments go first and verbatim, it is up to the caller to make sure their
    values need no escaping. The command name is not escaped either.

    Args:
        command (str): Command to run.
        arguments (list, optional): Command arguments.
        env (list(str), optional): `KEY=VALUE` environment assignments.

    Returns:
        str: Command line.
    """
    parts = list(env or [])
    parts.append(command)
    parts.extend(quote_argument(argument) for argument in arguments or [])

    return " ".join(parts)


def execute(command, arguments=None, env=None):
    """ Run a command through the shell and wait for it to finish.
    The command shares the standard streams of the current process so its output shows up live.

    Args:
        command (str): Command to run.
        arguments (list, optional): Command arguments. Pipes and redirections are kept as shell syntax.
        env (list(str), optional): `KEY=VALUE` environment assignments for the command.

    Raises:
        SpawnError: When the shell process could not be started.

    Returns:
        int: Exit code of the command.
    """
    command_line = build_command_line(command, arguments, env)
    logger.debug(f"Running [bold]{escape(command_line)}[/bold]")

    try:
        exit_code = subprocess.call(command_line, shell=True)
    except OSError as exc:
        raise SpawnError(command, exc) from exc

    logger.debug(f"[bold]{escape(command)}[/bold] exited with code {exit_code}")
    return exit_code
