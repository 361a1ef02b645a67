"""Dataclass schema objects used by runtime configuration loading."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_CONFIG_FILE = "config.toml"


class AppConfigurationError(Exception):
    """Raised when application configuration fails."""


@dataclass(frozen=True)
class LoggingSettings:
    """Root log level from `[logging]`."""
    level: str = "INFO"


@dataclass(frozen=True)
class ClockSettings:
    """Tick source cadence from `[clock]`.

    Only the wall-clock spacing between ticks is tunable; each tick still
    advances the countdown by one second.
    """
    tick_interval_seconds: float = 1.0


@dataclass(frozen=True)
class UIServerSettings:
    """Built-in UI server settings from `[ui_server]`."""
    enabled: bool = True
    host: str = "127.0.0.1"
    port: int = 8765
    index_file: str = ""


@dataclass(frozen=True)
class AppConfig:
    """Complete typed runtime configuration loaded from `config.toml`."""
    logging: LoggingSettings
    clock: ClockSettings
    ui_server: UIServerSettings
    source_file: str
