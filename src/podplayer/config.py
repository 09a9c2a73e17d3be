"""Configuration system for podplayer."""

import tomllib
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field


class PlayerConfig(BaseModel):
    """Player configuration."""

    backend: Literal["vlc", "mpv", "null"] = Field(
        default="vlc", description="Player backend (vlc, mpv or null)"
    )
    default_volume: float = Field(
        default=1.0, ge=0.0, le=1.0, description="Volume at startup (0.0-1.0)"
    )
    seek_step: float = Field(
        default=5.0,
        gt=0.0,
        le=100.0,
        description="Percent of the episode skipped by one seek keypress",
    )
    volume_step: float = Field(
        default=0.1, gt=0.0, le=1.0, description="Volume change per keypress"
    )
    resume_rewind: float = Field(
        default=0.0, ge=0.0, description="Seconds to rewind when resuming"
    )


class UIConfig(BaseModel):
    """UI configuration."""

    theme: Literal["light", "dark"] = Field(
        default="light", description="Theme used until one is saved"
    )
    refresh_interval: float = Field(
        default=0.5, ge=0.1, description="Player bar refresh interval in seconds"
    )
    recommended_count: int = Field(
        default=10, ge=0, description="Number of recommended shows"
    )


class NetworkConfig(BaseModel):
    """Network configuration."""

    catalog_url: str = Field(
        default="https://podcast-api.netlify.app",
        description="Base URL of the show catalog service",
    )
    timeout: float = Field(
        default=30.0, ge=1.0, description="Request timeout in seconds"
    )
    max_concurrent: int = Field(
        default=8, ge=1, le=32, description="Concurrent show detail requests"
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["debug", "info", "warning", "error"] = Field(
        default="info", description="Level of the podplayer logger"
    )
    file: bool = Field(default=True, description="Write podplayer.log")
    console: bool = Field(default=False, description="Also log to stderr")


class Config(BaseModel):
    """Complete application configuration."""

    player: PlayerConfig = Field(default_factory=PlayerConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
    network: NetworkConfig = Field(default_factory=NetworkConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_config_path() -> Path:
    """Get the configuration file path."""
    return Path.home() / ".config" / "podplayer" / "config.toml"


def get_data_path() -> Path:
    """Get the data directory path."""
    xdg_data = Path.home() / ".local" / "share"
    return xdg_data / "podplayer"


def get_default_config_toml() -> str:
    """Generate the default configuration as TOML."""
    return """# podplayer configuration
# This file is auto-generated with default values.

[player]
backend = "vlc"  # or "mpv", or "null" for silent playback
default_volume = 1.0
seek_step = 5.0  # percent of the episode
volume_step = 0.1
resume_rewind = 0.0

[ui]
theme = "light"  # or "dark"
refresh_interval = 0.5
recommended_count = 10

[network]
catalog_url = "https://podcast-api.netlify.app"
timeout = 30.0
max_concurrent = 8

[logging]
level = "info"  # debug, info, warning or error
file = true
console = false
"""


def load_config(path: Path | None = None) -> Config:
    """Load configuration from file.

    Args:
        path: Path to config file. If None, uses default location.

    Returns:
        Loaded configuration, with defaults for missing values.
    """
    if path is None:
        path = get_config_path()

    if not path.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(get_default_config_toml())
        return Config()

    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
        return _parse_config(data)
    except (tomllib.TOMLDecodeError, ValueError):
        # Return defaults on parse error
        return Config()


def _parse_config(data: dict[str, Any]) -> Config:
    """Parse configuration from dictionary.

    Args:
        data: Dictionary of configuration data from TOML.

    Returns:
        Parsed Config object with all sections populated.
    """
    return Config(
        player=PlayerConfig(**data.get("player", {})),
        ui=UIConfig(**data.get("ui", {})),
        network=NetworkConfig(**data.get("network", {})),
        logging=LoggingConfig(**data.get("logging", {})),
    )


# Global configuration instance (lazy loaded)
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(path: Path | None = None) -> Config:
    """Reload the global configuration."""
    global _config
    _config = load_config(path)
    return _config
