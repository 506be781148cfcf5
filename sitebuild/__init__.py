"""
    Sitebuild web application task runner.
"""

# pylint: disable=wrong-import-position

__version__ = "0.1.0"

from sitebuild import logger
from sitebuild.shell import execute
from sitebuild.shell import Literal
from sitebuild.shell import ShellToken
from sitebuild.bundle import build_bundles
from sitebuild.sitebuild import sitebuild
