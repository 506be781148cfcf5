"""
    Sitebuild command-line tool.
"""

import click

from sitebuild import __version__
from sitebuild import conf
from sitebuild.logger import configure_logger
from sitebuild.logger import get_verbosity
from sitebuild.path import get_project_root
from sitebuild._internals import pass_state
from sitebuild.modules import clean, bundle, serve, test, docs


@click.group(invoke_without_command=True)
@click.option("-v", "--verbose", is_flag=True, help="Increase output verbosity.")
@click.version_option(version=__version__)
@pass_state
@click.pass_context
def sitebuild(context, state, verbose):
    """Web application build tasks: assets bundling, development server, tests and documentation."""
    if context.invoked_subcommand is None:
        click.echo(context.get_help())
        return

    state.verbosity = get_verbosity(verbose)
    configure_logger(state.verbosity)

    # Settings are read once and shared by the subcommand through the state
    state.root = get_project_root()
    state.config = conf.load()


sitebuild.add_command(clean)
sitebuild.add_command(bundle)
sitebuild.add_command(serve)
sitebuild.add_command(test)
sitebuild.add_command(docs)
