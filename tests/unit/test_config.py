"""Tests for podplayer configuration."""

from pathlib import Path

import pytest

import podplayer.config
from podplayer.config import (
    Config,
    LoggingConfig,
    NetworkConfig,
    PlayerConfig,
    UIConfig,
    _parse_config,
    get_config,
    get_config_path,
    get_data_path,
    get_default_config_toml,
    load_config,
    reload_config,
)


class TestPlayerConfig:
    """Tests for PlayerConfig."""

    def test_default_values(self):
        """Test default player config values."""
        config = PlayerConfig()
        assert config.backend == "vlc"
        assert config.default_volume == 1.0
        assert config.seek_step == 5.0
        assert config.volume_step == 0.1
        assert config.resume_rewind == 0.0

    def test_custom_values(self):
        """Test custom player config values."""
        config = PlayerConfig(backend="null", default_volume=0.5, resume_rewind=3)
        assert config.backend == "null"
        assert config.default_volume == 0.5
        assert config.resume_rewind == 3.0

    def test_unknown_backend_rejected(self):
        """Test that only known backends are accepted."""
        with pytest.raises(ValueError):
            PlayerConfig(backend="gstreamer")

    def test_volume_validation(self):
        """Test volume is a fraction."""
        with pytest.raises(ValueError):
            PlayerConfig(default_volume=1.5)
        with pytest.raises(ValueError):
            PlayerConfig(default_volume=-0.1)

    def test_seek_step_validation(self):
        """Test the seek step is a positive percentage."""
        with pytest.raises(ValueError):
            PlayerConfig(seek_step=0)
        with pytest.raises(ValueError):
            PlayerConfig(seek_step=101)


class TestUIConfig:
    """Tests for UIConfig."""

    def test_default_values(self):
        """Test default UI config values."""
        config = UIConfig()
        assert config.theme == "light"
        assert config.refresh_interval == 0.5
        assert config.recommended_count == 10

    def test_theme_validation(self):
        """Test that only light and dark themes are accepted."""
        with pytest.raises(ValueError):
            UIConfig(theme="solarized")


class TestNetworkConfig:
    """Tests for NetworkConfig."""

    def test_default_values(self):
        """Test default network config values."""
        config = NetworkConfig()
        assert config.catalog_url == "https://podcast-api.netlify.app"
        assert config.timeout == 30.0
        assert config.max_concurrent == 8

    def test_concurrency_validation(self):
        """Test concurrency bounds."""
        with pytest.raises(ValueError):
            NetworkConfig(max_concurrent=0)
        with pytest.raises(ValueError):
            NetworkConfig(max_concurrent=33)


class TestLoggingConfig:
    """Tests for LoggingConfig."""

    def test_default_values(self):
        """Test default logging config values."""
        config = LoggingConfig()
        assert config.level == "info"
        assert config.file
        assert not config.console

    def test_level_validation(self):
        """Test unknown levels are rejected."""
        with pytest.raises(ValueError):
            LoggingConfig(level="verbose")


class TestConfig:
    """Tests for the complete Config."""

    def test_default_config(self):
        """Test default complete config."""
        config = Config()
        assert isinstance(config.player, PlayerConfig)
        assert isinstance(config.ui, UIConfig)
        assert isinstance(config.network, NetworkConfig)
        assert isinstance(config.logging, LoggingConfig)


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_missing_file_creates_default(self, temp_config_path: Path):
        """Test that loading missing file creates default config."""
        config = load_config(temp_config_path)
        assert isinstance(config, Config)
        assert temp_config_path.exists()

    def test_load_existing_file(self, temp_config_path: Path):
        """Test loading an existing config file."""
        temp_config_path.write_text("""
[player]
backend = "mpv"
default_volume = 0.75

[ui]
theme = "dark"
""")
        config = load_config(temp_config_path)
        assert config.player.backend == "mpv"
        assert config.player.default_volume == 0.75
        assert config.ui.theme == "dark"

    def test_load_partial_config(self, temp_config_path: Path):
        """Test loading a partial config file with defaults for missing."""
        temp_config_path.write_text('[player]\nbackend = "mpv"\n')
        config = load_config(temp_config_path)
        assert config.player.backend == "mpv"
        assert config.player.default_volume == 1.0
        assert config.ui.theme == "light"

    def test_load_invalid_toml(self, temp_config_path: Path):
        """Test loading an invalid TOML file returns defaults."""
        temp_config_path.write_text("this is not valid toml [[[")
        config = load_config(temp_config_path)
        assert config.player.backend == "vlc"

    def test_load_invalid_values(self, temp_config_path: Path):
        """Test out of range values fall back to defaults."""
        temp_config_path.write_text("[player]\ndefault_volume = 7\n")
        config = load_config(temp_config_path)
        assert config.player.default_volume == 1.0


class TestParseConfig:
    """Tests for _parse_config function."""

    def test_parse_empty_dict(self):
        """Test parsing an empty dictionary."""
        config = _parse_config({})
        assert isinstance(config, Config)

    def test_parse_full_dict(self):
        """Test parsing a full dictionary."""
        data = {
            "player": {"backend": "null", "seek_step": 10},
            "ui": {"theme": "dark", "recommended_count": 3},
            "network": {"catalog_url": "http://localhost:8000", "timeout": 60.0},
            "logging": {"level": "debug", "console": True},
        }
        config = _parse_config(data)
        assert config.player.backend == "null"
        assert config.player.seek_step == 10
        assert config.ui.theme == "dark"
        assert config.ui.recommended_count == 3
        assert config.network.catalog_url == "http://localhost:8000"
        assert config.network.timeout == 60.0
        assert config.logging.level == "debug"
        assert config.logging.console


class TestGetDefaultConfigToml:
    """Tests for get_default_config_toml function."""

    def test_generates_valid_toml(self, temp_config_path: Path):
        """Test that the default config TOML parses to the defaults."""
        temp_config_path.write_text(get_default_config_toml())
        assert load_config(temp_config_path) == Config()

    def test_contains_expected_sections(self):
        """Test that the default config contains expected sections."""
        content = get_default_config_toml()
        assert "[player]" in content
        assert "[ui]" in content
        assert "[network]" in content
        assert "[logging]" in content


class TestPaths:
    """Tests for config and data paths."""

    def test_config_path(self):
        """Test that get_config_path names the podplayer config file."""
        path = get_config_path()
        assert isinstance(path, Path)
        assert path.name == "config.toml"
        assert "podplayer" in str(path)

    def test_data_path(self):
        """Test that get_data_path is the podplayer data directory."""
        path = get_data_path()
        assert isinstance(path, Path)
        assert path.name == "podplayer"


class TestGetConfig:
    """Tests for get_config and reload_config."""

    def test_caches_config(self, monkeypatch: pytest.MonkeyPatch):
        """Test that get_config caches the result."""
        monkeypatch.setattr(podplayer.config, "_config", Config())
        assert get_config() is get_config()

    def test_reload_replaces_cached(
        self, temp_config_path: Path, monkeypatch: pytest.MonkeyPatch
    ):
        """Test that reload_config replaces the cached config."""
        monkeypatch.setattr(podplayer.config, "_config", Config())
        temp_config_path.write_text('[player]\nbackend = "mpv"')

        config = reload_config(temp_config_path)
        assert config.player.backend == "mpv"
        assert get_config() is config
