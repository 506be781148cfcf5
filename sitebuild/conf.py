"""
    Configuration loading utilities: `build.env` settings and the assets bundles document.
"""
import shlex
from pathlib import Path

import yaml
from yaenv.core import Env

from sitebuild import logger
from sitebuild.errors import ConfigurationError
from sitebuild.path import get_project_root
from sitebuild.path import get_working_path


ENV_CONFIG_FILE = "build.env"

DEFAULTS = {
    "ASSETS_CONFIG": "assets.yml",
    "CLEAN_PATHS": "dist",
    "SERVER_COMMAND": "python app.py",
    "TEST_COMMAND": "pytest",
    "DOCS_SOURCE": "docs",
    "DOCS_BUILD": "docs/_build",
}


def load(config_filename=ENV_CONFIG_FILE):
    """ Load all .env files with the given name in the current directory an all of its parents up to
    the project root directory and store them in a dictionary.
    Files are traversed from parent to child as to allow values in deeper directories to override possible
    previously existing values.

    Args:
        config_filename (str, optional): .env filenames to load. All must bear the same name. Defaults to "build.env".

    Returns:
        dict: All variables defined in the loaded .env files.
    """
    root_path = Path(get_project_root())
    cur_path = Path(get_working_path())

    config_files_paths = []
    config_dict = {}

    while True:
        env_file = list(cur_path.glob(config_filename))

        if env_file:
            env_file = env_file[0].as_posix()
            logger.debug(f"Found config file {env_file}")

            config_files_paths.append(env_file)

        if cur_path == root_path or cur_path == cur_path.parent:
            break

        cur_path = cur_path.parent

    # Traverse config files from parent to child
    for config_file_path in reversed(config_files_paths):
        config_file = Env(config_file_path)

        for key, val in config_file:
            config_dict[key] = val

    return config_dict


def get_setting(config, key):
    """ Value of the setting in the loaded config, or its default.

    Args:
        config (dict): Loaded config.
        key (str): Setting name.

    Returns:
        str: Setting value.
    """
    value = config.get(key)
    return DEFAULTS.get(key) if value is None else str(value)


def get_list_setting(config, key):
    """ Comma separated setting as a list, blank items dropped. """
    return [item.strip() for item in get_setting(config, key).split(",") if item.strip()]


def get_command_setting(config, key):
    """ Command setting split into the command name and its arguments.

    Returns:
        str, list(str): Command and arguments.
    """
    words = shlex.split(get_setting(config, key))
    if not words:
        raise ConfigurationError(f"Setting `{key}` does not define a command.")

    return words[0], words[1:]


def load_bundles(config_file):
    """ Load and validate the assets bundles document.

    The document maps each target path to the list of its source paths, any other shape is rejected.

    Args:
        config_file (str): Path to the YAML document.

    Raises:
        ConfigurationError: When the file is missing, is not valid YAML or is not a mapping of
            target paths to lists of source paths.

    Returns:
        dict: Target paths mapped to their source paths, in document order.
    """
    config_file = Path(config_file)

    try:
        document = yaml.safe_load(config_file.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ConfigurationError(f"Bundles configuration file `{config_file.as_posix()}` not found.")
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in `{config_file.as_posix()}`: {exc}")

    return validate_bundles(document, source=config_file.as_posix())


def validate_bundles(document, source="bundles configuration"):
    """ Check the loaded document is a mapping of target paths to lists of source paths.

    Args:
        document (Any): Loaded document. None stands for an empty document.
        source (str, optional): Where the document comes from, used in error messages.

    Raises:
        ConfigurationError: On any unexpected structure.

    Returns:
        dict: The validated bundles.
    """
    if document is None:
        return {}

    if not isinstance(document, dict):
        raise ConfigurationError(f"`{source}` must be a mapping of target paths to lists of source paths.")

    bundles = {}
    for target, sources in document.items():
        if not isinstance(target, str):
            raise ConfigurationError(f"Target `{target}` in `{source}` is not a path.")

        if not isinstance(sources, list):
            raise ConfigurationError(f"Sources of target `{target}` in `{source}` must be a list of paths.")

        not_paths = [str(item) for item in sources if not isinstance(item, str)]
        if not_paths:
            raise ConfigurationError(f"Sources {', '.join(not_paths)} of target `{target}` in `{source}` are not paths.")

        bundles[target] = list(sources)

    return bundles
