"""Shared fixtures: isolated process environment and fresh singletons."""

import os
from unittest import mock

import pytest

from config import reset_config_loader, reset_settings


@pytest.fixture(autouse=True)
def isolated_environ():
    """Run each test against its own copy of os.environ."""
    with mock.patch.dict(os.environ, clear=False):
        for name in ("ENV", "APP_ROOT", "LOG_LEVEL"):
            os.environ.pop(name, None)
        yield os.environ


@pytest.fixture(autouse=True)
def fresh_singletons():
    reset_settings()
    reset_config_loader()
    yield
    reset_settings()
    reset_config_loader()


class RecordingDotenvLoader:
    """Stand-in for dotenv.load_dotenv that records what it was asked to load."""

    def __init__(self, values=None):
        self.calls = []
        self.values = values or {}

    def __call__(self, dotenv_path=None, override=False):
        self.calls.append({"dotenv_path": dotenv_path, "override": override})
        for key, value in self.values.items():
            if override or key not in os.environ:
                os.environ[key] = value
        return bool(self.values)


@pytest.fixture
def recording_loader():
    return RecordingDotenvLoader()
