import pytest

from sitebuild.logger import configure_logger
from sitebuild.logger import _sitebuild_logger


@pytest.fixture
def project(monkeypatch, tmp_path):
    """ Use a temporary directory as both project root and working directory. """
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sitebuild.path.get_root_path", lambda: tmp_path.as_posix())
    monkeypatch.setattr("sitebuild.conf.get_project_root", lambda: tmp_path.as_posix())
    monkeypatch.setattr("sitebuild.conf.get_working_path", lambda: tmp_path.as_posix())

    return tmp_path


@pytest.fixture
def propagate_logs():
    """ Let the records reach the root logger, so `caplog` sees them. """
    configure_logger()
    _sitebuild_logger.propagate = True
    yield
    _sitebuild_logger.propagate = False
