"""Shared test fixtures for the ikilog test suite."""

import io
import os
from unittest.mock import patch

import pytest

from ikilog import logger as _logger_mod
from ikilog.config import LoggerConfig
from ikilog.logger import TaggedLogger
from ikilog.sinks import ConsoleSink


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def buf():
    """A StringIO buffer for capturing output."""
    return io.StringIO()


@pytest.fixture
def logger(buf):
    """A TaggedLogger writing to a buffer with a 2016-Jan-01 cutoff."""
    config = LoggerConfig(suppress_before_date="2016-Jan-01")
    return TaggedLogger(config, sinks=[ConsoleSink(buf)])


@pytest.fixture
def lines(buf):
    """Return the records written to `buf` so far."""
    return lambda: buf.getvalue().splitlines()


# ---------------------------------------------------------------------------
# Singleton / environment isolation
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_logger():
    """Reset the module-level TaggedLogger between tests."""
    old = _logger_mod._logger
    _logger_mod._logger = None
    yield
    _logger_mod._logger = old


@pytest.fixture
def tmp_config_home(tmp_path):
    """Provide a temporary home directory for ~/.ikilog/config.json."""
    home = tmp_path / "home"
    home.mkdir()
    with patch.dict(os.environ, {"HOME": str(home), "USERPROFILE": str(home)}):
        with patch("pathlib.Path.home", return_value=home):
            yield home


@pytest.fixture
def tmp_project(tmp_path):
    """Provide an empty project directory."""
    project = tmp_path / "project"
    project.mkdir()
    return project
