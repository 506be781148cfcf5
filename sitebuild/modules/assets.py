"""
    Static assets related commands.
"""
import click
from rich.markup import escape

from sitebuild import logger
from sitebuild import conf
from sitebuild.bundle import build_bundles
from sitebuild.errors import BuildError
from sitebuild.path import is_strictly_inside
from sitebuild.path import resolve
from sitebuild._internals import pass_state
from sitebuild._utils import ExitError
from sitebuild._utils import purge


@click.command()
@click.argument("paths", nargs=-1)
@pass_state
def clean(state, paths):
    """ Remove generated artifacts.

    PATHS default to the CLEAN_PATHS setting (`dist` unless set in `build.env`). Only paths strictly
    inside the project can be removed.
    """
    if not paths:
        paths = conf.get_list_setting(state.config, "CLEAN_PATHS")

    resolved = [resolve(path, state.root) for path in paths]
    outside = [path for path, full_path in zip(paths, resolved) if not is_strictly_inside(full_path, state.root)]
    if outside:
        raise ExitError(1, f"[red]✘[/red] Refusing to remove paths outside the project: {escape(', '.join(repr(path) for path in outside))}")

    removed = [full_path for full_path in resolved if purge(full_path)]
    logger.info(f"Removed {len(removed)} of {len(paths)} path(s)")


@click.command()
@click.option("-c", "--config", "config_file", default=None,
              help="Bundles configuration file. Defaults to the ASSETS_CONFIG setting (`assets.yml`).")
@pass_state
def bundle(state, config_file):
    """ Bundle and minify static assets. """
    if config_file is None:
        config_file = conf.get_setting(state.config, "ASSETS_CONFIG")

    try:
        bundles = conf.load_bundles(resolve(config_file, state.root))
        build_bundles(bundles, state.root, registry=state.registry)
    except BuildError as exc:
        raise ExitError(1, f"[red]✘[/red] {escape(str(exc))}")

    logger.info(f"[green]✔[/green] {len(bundles)} bundle(s) built")
