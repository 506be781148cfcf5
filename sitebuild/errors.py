"""
    Errors raised while building assets or running external commands.
"""


class BuildError(RuntimeError):
    """Base class for every failure that aborts a build."""


class ConfigurationError(BuildError):
    """The bundle configuration document is malformed."""


class MissingSourceError(BuildError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"Source file `{path}` does not exist or is not a regular file.")


class UnsupportedTypeError(BuildError):
    def __init__(self, extension, path=None):
        self.extension = extension
        self.path = path
        message = f"No minifier registered for extension `{extension}`"
        if path is not None:
            message += f" (file `{path}`)"
        super().__init__(f"{message}.")


class TransformError(BuildError):
    def __init__(self, path, cause):
        self.path = path
        self.cause = cause
        super().__init__(f"Minification of `{path}` failed: {cause}")


class SpawnError(BuildError):
    def __init__(self, command, cause):
        self.command = command
        self.cause = cause
        super().__init__(f"Could not start command `{command}`: {cause}")
