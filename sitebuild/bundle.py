"""
    Static assets bundling.
"""
from pathlib import Path

from rich.markup import escape

from sitebuild import logger
from sitebuild.errors import MissingSourceError
from sitebuild.errors import TransformError
from sitebuild.minify import content_key
from sitebuild.minify import default_registry
from sitebuild.path import resolve


def build_bundles(bundles, base_dir, registry=None):
    """ Build every bundle in the given mapping.
    Targets are built one after the other and the first failure aborts the whole build, leaving
    any target not yet reached untouched.

    Args:
        bundles (dict): Target paths mapped to the ordered list of their source paths.
        base_dir (str): Directory relative paths are anchored to.
        registry (MinifierRegistry, optional): Minifiers to use. Defaults to the default registry.

    Raises:
        MissingSourceError: When a source does not exist or is not a regular file.
        UnsupportedTypeError: When there is no minifier for a source's extension.
        TransformError: When minifying a source fails.
    """
    registry = default_registry() if registry is None else registry

    for target, sources in bundles.items():
        build_bundle(target, sources, base_dir, registry)


def build_bundle(target, sources, base_dir, registry):
    """ Concatenate the minified sources, in order and with no separator, into the target.

    The target is emptied before any source is looked at, so a failure midway leaves it
    truncated or partially written.

    Args:
        target (str): Target path.
        sources (list(str)): Source paths, in concatenation order.
        base_dir (str): Directory relative paths are anchored to.
        registry (MinifierRegistry): Minifiers to use.

    Returns:
        str: Resolved target path.
    """
    target_path = Path(resolve(target, base_dir))
    target_path.parent.mkdir(parents=True, exist_ok=True)

    logger.debug(f"Truncating [bold]{escape(target_path.as_posix())}[/bold]")
    target_path.write_bytes(b"")

    for source in sources:
        source_path = Path(resolve(source, base_dir))
        if not source_path.is_file():
            raise MissingSourceError(source_path.as_posix())

        # Decoding the raw bytes keeps line endings untouched
        try:
            content = source_path.read_bytes().decode("utf-8")
        except UnicodeDecodeError as exc:
            raise TransformError(source_path.as_posix(), exc) from exc

        minified = registry.minify(content_key(source_path), content, source=source_path.as_posix())

        # newline="" keeps line endings exactly as the minifier produced them
        with open(target_path, "a", encoding="utf-8", newline="") as target_file:
            target_file.write(minified)

        logger.debug(f"Appended [bold]{escape(source_path.as_posix())}[/bold] to [bold]{escape(target_path.as_posix())}[/bold]")

    logger.info(f"Built [bold]{escape(target_path.as_posix())}[/bold] from {len(sources)} source(s)")
    return target_path.as_posix()
