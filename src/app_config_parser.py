"""Typed parser for config.toml sections into immutable app settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from app_config_schema import (
    AppConfig,
    AppConfigurationError,
    ClockSettings,
    LoggingSettings,
    UIServerSettings,
)

_ALLOWED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_DURATION_FIELDS = ("focus_seconds", "break_seconds")


def parse_app_config(
    raw: Mapping[str, Any],
    *,
    base_dir: Path,
    source_file: str,
) -> AppConfig:
    """Parse raw TOML mappings into strongly typed application settings."""
    logging_settings = _parse_logging_settings(_section(raw, "logging"))
    clock = _parse_clock_settings(_section(raw, "clock"))
    ui_server = _parse_ui_server_settings(_section(raw, "ui_server"), base_dir=base_dir)

    return AppConfig(
        logging=logging_settings,
        clock=clock,
        ui_server=ui_server,
        source_file=source_file,
    )


def _parse_logging_settings(section: Mapping[str, Any]) -> LoggingSettings:
    level = _as_str(section.get("level", "INFO"), "logging.level").upper()
    if level not in _ALLOWED_LOG_LEVELS:
        allowed = ", ".join(_ALLOWED_LOG_LEVELS)
        raise AppConfigurationError(f"logging.level must be one of: {allowed}.")
    return LoggingSettings(level=level)


def _parse_clock_settings(section: Mapping[str, Any]) -> ClockSettings:
    present = [field for field in _DURATION_FIELDS if field in section]
    if present:
        joined = ", ".join(f"clock.{field}" for field in present)
        raise AppConfigurationError(
            f"Focus and break durations are fixed and cannot be configured: {joined}."
        )

    interval = _as_float(
        section.get("tick_interval_seconds", 1.0),
        "clock.tick_interval_seconds",
    )
    if interval <= 0:
        raise AppConfigurationError("clock.tick_interval_seconds must be greater than zero.")
    return ClockSettings(tick_interval_seconds=interval)


def _parse_ui_server_settings(
    section: Mapping[str, Any],
    *,
    base_dir: Path,
) -> UIServerSettings:
    index_file = _as_str(section.get("index_file", ""), "ui_server.index_file")
    return UIServerSettings(
        enabled=_as_bool(section.get("enabled", True), "ui_server.enabled"),
        host=_as_str(section.get("host", "127.0.0.1"), "ui_server.host"),
        port=_as_int(section.get("port", 8765), "ui_server.port"),
        index_file=_resolve_path(base_dir, index_file) if index_file else "",
    )


def _section(root: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    raw = root.get(name, {})
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise AppConfigurationError(f"[{name}] must be a table.")
    return raw


def _as_str(value: Any, field: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    raise AppConfigurationError(f"{field} must be a string.")


def _as_bool(value: Any, field: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes", "on"):
            return True
        if lowered in ("false", "0", "no", "off"):
            return False
    raise AppConfigurationError(f"{field} must be a boolean.")


def _as_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise AppConfigurationError(f"{field} must be an integer.")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as error:
            raise AppConfigurationError(f"{field} must be an integer.") from error
    raise AppConfigurationError(f"{field} must be an integer.")


def _as_float(value: Any, field: str) -> float:
    if isinstance(value, bool):
        raise AppConfigurationError(f"{field} must be a float.")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError as error:
            raise AppConfigurationError(f"{field} must be a float.") from error
    raise AppConfigurationError(f"{field} must be a float.")


def _resolve_path(base_dir: Path, raw: str) -> str:
    if not raw:
        return ""
    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = (base_dir / path).resolve()
    return str(path)
