"""
	Definitions for internal use of the cli.
"""

import click

from sitebuild.minify import default_registry


class State:
    """Everything a command needs, handed over through the click context.

    Attributes:
        verbosity (int): Logging level chosen on the command line.
        root (str): Project root, relative paths are anchored to it.
        config (dict): Settings loaded from the `build.env` files.
        registry (MinifierRegistry): Minifiers used when bundling.
    """

    def __init__(self, root=None, config=None, registry=None):
        self.verbosity = None
        self.root = root
        self.config = {} if config is None else config
        self.registry = default_registry() if registry is None else registry


pass_state = click.make_pass_decorator(State, ensure=True)
