"""
core/config.py — Typed configuration loader for the Tibetan syllable composer.

Loads config/tibetan.yaml and validates all values into typed dataclasses.
All downstream modules import from this module; never read YAML directly.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

#: Environment variable naming an explicit config file.
CONFIG_ENV_VAR = "TIBETAN_CONFIG"

_LOG_LEVELS = {"DEBUG", "INFO", "WARN", "WARNING", "ERROR"}


# ──────────────────────────────────────────────
# Dataclass hierarchy — mirrors tibetan.yaml
# ──────────────────────────────────────────────


@dataclass(frozen=True)
class ServerConfig:
    """Bind address for the web surface."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass(frozen=True)
class DisplayConfig:
    """What the displays show before a root is chosen."""

    placeholder: str = "ཨ"


@dataclass(frozen=True)
class LoggingConfig:
    """Structured logging configuration."""

    level: str = "INFO"
    log_dir: str = "logs"
    jsonl: bool = True

    @property
    def resolved_log_dir(self) -> Path:
        """Return the log directory as a Path, expanding ~ if needed."""
        return Path(os.path.expanduser(self.log_dir))


@dataclass(frozen=True)
class AppConfig:
    """Root configuration object — single source of truth for all settings."""

    server: ServerConfig = field(default_factory=ServerConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# ──────────────────────────────────────────────
# Loader
# ──────────────────────────────────────────────


def _section(raw: dict, name: str) -> dict:
    value = raw.get(name) or {}
    if not isinstance(value, dict):
        raise ValueError(f"Config section '{name}' must be a mapping, got: {type(value).__name__}")
    return value


def load_config(config_path: Path | str | None = None) -> AppConfig:
    """
    Load, validate, and return an AppConfig from a YAML file.

    The search order for the config file is:
    1. *config_path* argument (if provided)
    2. TIBETAN_CONFIG environment variable
    3. ``config/tibetan.yaml`` relative to the project root
    4. Built-in defaults (no file required)

    Args:
        config_path: Optional path to a ``tibetan.yaml`` file.

    Returns:
        A fully populated and frozen :class:`AppConfig` instance.

    Raises:
        ValueError: If a YAML field has an invalid type or value.
        FileNotFoundError: If *config_path* is explicitly given but does not exist.
    """
    resolved_path: Path | None = None

    if config_path is not None:
        resolved_path = Path(config_path)
        if not resolved_path.exists():
            raise FileNotFoundError(f"Config file not found: {resolved_path}")
    elif CONFIG_ENV_VAR in os.environ:
        resolved_path = Path(os.environ[CONFIG_ENV_VAR])
        if not resolved_path.exists():
            raise FileNotFoundError(
                f"{CONFIG_ENV_VAR} points to missing file: {resolved_path}"
            )
    else:
        candidate = Path(__file__).resolve().parent.parent / "config" / "tibetan.yaml"
        if candidate.exists():
            resolved_path = candidate

    raw: dict = {}
    if resolved_path is not None:
        logger.info("Loading config from: %s", resolved_path)
        with resolved_path.open("r", encoding="utf-8") as fh:
            loaded = yaml.safe_load(fh) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Config file must be a YAML mapping, got: {type(loaded)}")
        raw = loaded
    else:
        logger.info("No config file found — using built-in defaults")

    try:
        server_cfg = ServerConfig(**_section(raw, "server"))
        display_cfg = DisplayConfig(**_section(raw, "display"))
        log_cfg = LoggingConfig(**_section(raw, "logging"))
    except TypeError as exc:
        raise ValueError(f"Invalid config value: {exc}") from exc

    _validate_config(server_cfg, display_cfg, log_cfg)

    config = AppConfig(server=server_cfg, display=display_cfg, logging=log_cfg)
    logger.debug("Config loaded: %s", config)
    return config


def _validate_config(
    server: ServerConfig,
    display: DisplayConfig,
    log: LoggingConfig,
) -> None:
    """
    Validate field constraints on the loaded configuration.

    Raises:
        ValueError: If any configured value violates a constraint.
    """
    if not isinstance(server.port, int) or not (0 < server.port < 65536):
        raise ValueError(f"server.port must be an integer in (0, 65536), got {server.port!r}")
    if not isinstance(server.host, str) or not server.host:
        raise ValueError(f"server.host must be a non-empty string, got {server.host!r}")
    if not isinstance(display.placeholder, str):
        raise ValueError(
            f"display.placeholder must be a string, got {type(display.placeholder).__name__}"
        )
    if str(log.level).upper() not in _LOG_LEVELS:
        raise ValueError(
            f"logging.level must be one of {sorted(_LOG_LEVELS)}, got '{log.level}'"
        )
    if not isinstance(log.jsonl, bool):
        raise ValueError(f"logging.jsonl must be a boolean, got {log.jsonl!r}")
