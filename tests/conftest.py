"""Shared test fixtures for the helpreg test suite."""

import io
import os
from unittest.mock import patch

import pytest

from helpreg.lib.help_lib import ExtensionChain, Help, Registry
from helpreg.lib.log_lib import channels as _channels_mod
from helpreg.lib.log_lib import manager as _manager_mod


# ---------------------------------------------------------------------------
# Global state isolation
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_output_state():
    """Restore the OutputManager singleton and log_lib channel globals.

    The CLI calls configure_helpreg_channels() and init_output(), both of
    which mutate module-level state.
    """
    saved_manager = _manager_mod._manager
    saved_channels = (
        _channels_mod.KNOWN_CHANNELS,
        _channels_mod.CHANNEL_DESCRIPTIONS,
        _channels_mod.OPT_IN_CHANNELS,
    )
    yield
    _manager_mod._manager = saved_manager
    (_channels_mod.KNOWN_CHANNELS,
     _channels_mod.CHANNEL_DESCRIPTIONS,
     _channels_mod.OPT_IN_CHANNELS) = saved_channels


# ---------------------------------------------------------------------------
# Registry fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def registry():
    """A fresh registry with an empty extension chain."""
    return Registry(ExtensionChain())


@pytest.fixture
def help_buf():
    """Buffer that captures printed help."""
    return io.StringIO()


@pytest.fixture
def helper(registry, help_buf):
    """A Help facade over a fresh registry, printing into help_buf."""
    return Help(registry, file=help_buf)


# ---------------------------------------------------------------------------
# Sample subjects
# ---------------------------------------------------------------------------
class Widget:
    """Plain weak-referenceable class used as a documentation subject."""

    def spin(self):
        return "spinning"


@pytest.fixture
def widget():
    return Widget()


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def tmp_config_home(tmp_path):
    """Provide a temporary home directory for ~/.helpreg/config.json."""
    home = tmp_path / "home"
    home.mkdir()
    with patch.dict(os.environ, {"HOME": str(home), "USERPROFILE": str(home)}):
        with patch("pathlib.Path.home", return_value=home):
            yield home


@pytest.fixture
def tmp_project(tmp_path, monkeypatch):
    """A temporary project directory used as the working directory."""
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return project
