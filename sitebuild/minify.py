"""
    Minifiers registry, keyed by file extension.
"""
from pathlib import PurePath

from jsmin import jsmin
from rcssmin import cssmin

from sitebuild.errors import TransformError
from sitebuild.errors import UnsupportedTypeError


def content_key(path):
    """ Content key of a file: its extension, lower-cased and without the leading dot.

    Args:
        path (str): File path.

    Returns:
        str: Content key, empty when the file has no extension.
    """
    return PurePath(path).suffix.lower().lstrip(".")


class MinifierRegistry:
    """ Table of minification transforms, one per content key.
    Supporting a new kind of asset means registering a transform for its extension.
    """
    def __init__(self, transforms=None):
        self._transforms = {}
        for key, transform in (transforms or {}).items():
            self.register(key, transform)

    def register(self, key, transform):
        """ Register the transform for the given content key, replacing any previous one.

        Args:
            key (str): Content key, case insensitive.
            transform (callable): Function taking the file content and returning it minified.
        """
        self._transforms[key.lower()] = transform

    def __contains__(self, key):
        return key.lower() in self._transforms

    @property
    def keys(self):
        return sorted(self._transforms)

    def minify(self, key, content, source=None):
        """ Minify the content with the transform registered for the given key.

        Args:
            key (str): Content key, case insensitive.
            content (str): Content to minify.
            source (str, optional): Path the content was read from, used in error messages.

        Raises:
            UnsupportedTypeError: When no transform is registered for the key.
            TransformError: When the transform itself fails.

        Returns:
            str: Minified content.
        """
        try:
            transform = self._transforms[key.lower()]
        except KeyError:
            raise UnsupportedTypeError(key, source) from None

        try:
            return transform(content)
        except Exception as exc:
            raise TransformError(source, exc) from exc


def default_registry():
    """ Registry with the stylesheets and scripts minifiers. """
    return MinifierRegistry({
        "css": cssmin,
        "js": jsmin,
    })
