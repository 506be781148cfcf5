"""
    Development server, test suite and documentation commands.
"""
import re

import click
from rich.markup import escape

from sitebuild import logger
from sitebuild import conf
from sitebuild.errors import BuildError
from sitebuild.path import resolve
from sitebuild.shell import execute
from sitebuild._internals import pass_state
from sitebuild._utils import ExitError


# Assignments reach the shell verbatim, so values are limited to characters needing no quoting
_ASSIGNMENT_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*=[\w@%+=:,./-]*$")


def _check_status(status, description):
    """ Fail the command if any of its sub-commands failed, `status` being the sum of their exit codes. """
    if status:
        raise ExitError(1, f"[red]✘[/red] {description} failed")

    logger.info(f"[green]✔[/green] {description} succeeded")


def _run_setting(state, setting, extra_args=(), env=None):
    """ Run the command defined by the given setting with some extra arguments.

    Returns:
        int: Exit code of the command.
    """
    try:
        command, arguments = conf.get_command_setting(state.config, setting)
        return execute(command, arguments + list(extra_args), env)
    except BuildError as exc:
        raise ExitError(1, escape(str(exc)))


def _validate_assignments(context, param, values):
    for value in values:
        if not _ASSIGNMENT_PATTERN.match(value):
            raise click.BadParameter(f"`{value}` is not a KEY=VALUE assignment with a plain value "
                                     "(no whitespace, quotes or shell metacharacters).")

    return list(values)


@click.command(context_settings={"ignore_unknown_options": True})
@click.option("-e", "--env", multiple=True, callback=_validate_assignments,
              help="KEY=VALUE environment variable for the server. Can be given multiple times.")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@pass_state
def serve(state, env, args):
    """ Launch the development server.

    The command comes from the SERVER_COMMAND setting (`python app.py` by default), ARGS are appended to it.
    """
    _check_status(_run_setting(state, "SERVER_COMMAND", args, env), "Development server")


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@pass_state
def test(state, args):
    """ Run the test suite.

    The command comes from the TEST_COMMAND setting (`pytest` by default), ARGS are appended to it.
    """
    _check_status(_run_setting(state, "TEST_COMMAND", args), "Test suite")


@click.command()
@pass_state
def docs(state):
    """ Generate the API reference and the HTML documentation with Sphinx.

    Sources and output directories come from the DOCS_SOURCE and DOCS_BUILD settings.
    """
    source = resolve(conf.get_setting(state.config, "DOCS_SOURCE"), state.root)
    build = resolve(conf.get_setting(state.config, "DOCS_BUILD"), state.root)

    try:
        status = execute("sphinx-apidoc", ["-f", "-o", source, state.root])
        status += execute("sphinx-build", ["-b", "html", source, build])
    except BuildError as exc:
        raise ExitError(1, escape(str(exc)))

    _check_status(status, "Documentation")
