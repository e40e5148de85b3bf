"""Tests for ConfigLoader and the process-wide bootstrap functions."""

import os
from pathlib import Path

import pytest

from config import (
    ConfigLoader,
    Mode,
    Settings,
    get_config_loader,
    get_mode_prefix,
    get_runtime_config,
    init_config_loader,
)
from config import loader as loader_module


def _write_settings_file(directory: Path, lines):
    path = directory / ".puienv"
    path.write_text("\n".join(lines) + "\n")
    return path


class TestConfigLoader:

    def test_develop_end_to_end(self, tmp_path, recording_loader):
        settings = Settings(ENV="develop", HOME="/home/alice", APP_ROOT=str(tmp_path))

        config = ConfigLoader(settings, recording_loader).load()

        assert config.mode_prefix == "DEV_"
        assert config.settings_path == tmp_path / ".puienv"
        assert recording_loader.calls == [
            {"dotenv_path": tmp_path / ".puienv", "override": False}
        ]

    def test_test_profile_reads_from_home(self, tmp_path, recording_loader):
        settings = Settings(ENV="staging", HOME=str(tmp_path), APP_ROOT="/srv/app")

        config = ConfigLoader(settings, recording_loader).load()

        assert config.mode is Mode.TEST
        assert recording_loader.calls[0]["dotenv_path"] == tmp_path / ".puienv"

    def test_loads_settings_file_once(self, tmp_path, recording_loader):
        loader = ConfigLoader(Settings(ENV="develop", APP_ROOT=str(tmp_path)), recording_loader)

        first = loader.load()
        second = loader.load()

        assert first is second
        assert len(recording_loader.calls) == 1

    def test_profile_is_fixed_after_first_resolution(self, recording_loader):
        settings = Settings(ENV="production", APP_ROOT="/srv/app")
        loader = ConfigLoader(settings, recording_loader)

        assert loader.profile is loader.profile
        assert loader.profile.mode_prefix == ""

    def test_reads_values_through_python_dotenv(self, tmp_path):
        _write_settings_file(tmp_path, ["DEV_GREETING=hello", "GREETING=prod"])
        settings = Settings(ENV="develop", APP_ROOT=str(tmp_path))

        config = ConfigLoader(settings).load()

        assert config.get("GREETING") == "hello"
        assert os.environ["DEV_GREETING"] == "hello"

    def test_existing_variables_are_not_overridden(self, tmp_path, isolated_environ):
        _write_settings_file(tmp_path, ["DEV_GREETING=from-file"])
        isolated_environ["DEV_GREETING"] = "from-process"
        settings = Settings(ENV="develop", APP_ROOT=str(tmp_path))

        config = ConfigLoader(settings).load()

        assert config.get("GREETING") == "from-process"

    def test_missing_settings_file_is_not_an_error(self, tmp_path):
        settings = Settings(ENV="develop", APP_ROOT=str(tmp_path / "absent"))

        config = ConfigLoader(settings).load()

        assert config.get("GREETING") is None

    def test_snapshot_ignores_later_environment_changes(self, tmp_path, isolated_environ):
        settings = Settings(ENV="develop", APP_ROOT=str(tmp_path))
        config = ConfigLoader(settings).load()

        isolated_environ["DEV_LATE"] = "late"

        assert config.get("LATE") is None

    def test_custom_environ(self, tmp_path, recording_loader):
        settings = Settings(ENV="production", APP_ROOT=str(tmp_path))

        config = ConfigLoader(settings, recording_loader, environ={"GREETING": "hi"}).load()

        assert config.as_dict() == {"GREETING": "hi"}


class TestGlobalLoader:

    def test_init_and_get(self, tmp_path, recording_loader):
        settings = Settings(ENV="develop", APP_ROOT=str(tmp_path))

        assert init_config_loader(settings, recording_loader) is True
        assert get_mode_prefix() == "DEV_"
        assert get_runtime_config() is get_config_loader().load()

    def test_second_init_keeps_first_profile(self, tmp_path, recording_loader):
        init_config_loader(Settings(ENV="develop", APP_ROOT=str(tmp_path)), recording_loader)
        init_config_loader(Settings(ENV="production", APP_ROOT=str(tmp_path)), recording_loader)

        assert get_mode_prefix() == "DEV_"
        assert len(recording_loader.calls) == 1

    def test_auto_initializes_from_environment(self, tmp_path, isolated_environ):
        isolated_environ["ENV"] = "production"
        isolated_environ["APP_ROOT"] = str(tmp_path)

        assert get_mode_prefix() == ""
        assert get_runtime_config().settings_path == tmp_path / ".puienv"

    def test_failed_loader_reports_false(self, tmp_path):
        def broken_loader(dotenv_path=None, override=False):
            raise OSError("disk on fire")

        settings = Settings(ENV="develop", APP_ROOT=str(tmp_path))

        assert init_config_loader(settings, broken_loader) is False
        assert loader_module._loader_instance is None

    def test_get_config_loader_raises_when_init_fails(self, monkeypatch):
        monkeypatch.setattr(loader_module, "init_config_loader", lambda: False)

        with pytest.raises(RuntimeError):
            get_config_loader()

    @pytest.mark.parametrize("log_level", ["debug", "CRITICAL", "loud"])
    def test_log_level_never_blocks_bootstrap(self, tmp_path, isolated_environ, log_level):
        isolated_environ["ENV"] = "develop"
        isolated_environ["APP_ROOT"] = str(tmp_path)
        isolated_environ["LOG_LEVEL"] = log_level

        assert init_config_loader() is True
        assert get_mode_prefix() == "DEV_"
        assert get_runtime_config().settings_path == tmp_path / ".puienv"
