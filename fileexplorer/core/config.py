"""Persistent config loader/saver for File Explorer."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

LOGGER = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class AppConfig:
    """Persistent user-facing configuration."""

    start_path: str | None = None
    show_hidden: bool = True
    sidebar_expanded: bool = True
    sync_system_clipboard: bool = False
    log_level: str = "WARNING"
    log_file: str | None = None


def default_config_path() -> Path:
    """Return default config path (~/.config/fileexplorer/config.toml)."""
    return Path.home() / ".config" / "fileexplorer" / "config.toml"


def _coerce_bool(value, default=False):
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lower = value.strip().lower()
        if lower in ("1", "true", "yes", "on"):
            return True
        if lower in ("0", "false", "no", "off"):
            return False
    return default


def _optional_str(value):
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _normalize_config(raw: dict) -> AppConfig:
    browser = raw.get("browser", {})
    if not isinstance(browser, dict):
        browser = {}
    log = raw.get("logging", {})
    if not isinstance(log, dict):
        log = {}

    level = str(log.get("level", "WARNING")).strip().upper()
    if level not in LOG_LEVELS:
        level = "WARNING"

    return AppConfig(
        start_path=_optional_str(browser.get("start_path")),
        show_hidden=_coerce_bool(browser.get("show_hidden"), default=True),
        sidebar_expanded=_coerce_bool(browser.get("sidebar_expanded"), default=True),
        sync_system_clipboard=_coerce_bool(browser.get("sync_system_clipboard"), default=False),
        log_level=level,
        log_file=_optional_str(log.get("file")),
    )


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from TOML file; return defaults when missing/invalid."""
    cfg_path = Path(path) if path is not None else default_config_path()
    try:
        text = cfg_path.read_text(encoding="utf-8")
    except OSError:
        return AppConfig()
    try:
        raw = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        LOGGER.warning("Ignoring invalid config %s: %s", cfg_path, exc)
        return AppConfig()
    return _normalize_config(raw)


def _toml_str(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def serialize_config(config: AppConfig) -> str:
    """Serialize AppConfig as TOML text."""
    lines = ["# File Explorer user configuration", "[browser]"]
    if config.start_path:
        lines.append(f"start_path = {_toml_str(config.start_path)}")
    lines.append(f"show_hidden = {'true' if config.show_hidden else 'false'}")
    lines.append(f"sidebar_expanded = {'true' if config.sidebar_expanded else 'false'}")
    lines.append(
        f"sync_system_clipboard = {'true' if config.sync_system_clipboard else 'false'}"
    )
    lines.append("")
    lines.append("[logging]")
    lines.append(f"level = {_toml_str(config.log_level)}")
    if config.log_file:
        lines.append(f"file = {_toml_str(config.log_file)}")
    return "\n".join(lines) + "\n"


def save_config(config: AppConfig, path: str | Path | None = None) -> Path:
    """Persist config and return written path."""
    cfg_path = Path(path) if path is not None else default_config_path()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    cfg_path.write_text(serialize_config(config), encoding="utf-8", newline="\n")
    return cfg_path
