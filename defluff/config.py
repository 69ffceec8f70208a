"""Configuration loading from YAML file, env vars, and CLI args."""

import logging
import os
from dataclasses import dataclass

import yaml

from defluff.models import RenderMode

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes", "on")


@dataclass(frozen=True)
class Config:
    singleline: bool = False
    emit_original: bool = False
    log_level: str = "WARNING"

    @property
    def mode(self) -> RenderMode:
        return RenderMode.COMPACT if self.singleline else RenderMode.EXPANDED


def load_yaml_config(path: str | None) -> dict:
    """Load settings from a YAML file. Returns empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    except yaml.YAMLError as e:
        logger.warning("Invalid YAML in %s (%s), using defaults", path, e)
        return {}

    if not isinstance(data, dict):
        logger.warning("Config file %s is not a mapping, using defaults", path)
        return {}
    logger.debug("Loaded YAML config from %s", path)
    return data


def _normalize_level(value: str) -> str:
    level = str(value).strip().upper()
    if level not in LOG_LEVELS:
        logger.warning("Unknown log level %r, using WARNING", value)
        return Config.log_level
    return level


def load_config(cli_args=None, yaml_data: dict | None = None) -> Config:
    """Build Config from defaults <- YAML <- env vars <- CLI args (highest priority)."""
    yaml_data = yaml_data or {}

    singleline = _parse_bool(yaml_data.get("singleline", Config.singleline))
    emit_original = _parse_bool(yaml_data.get("emit_original", Config.emit_original))
    log_level = yaml_data.get("log_level", Config.log_level)

    if "DEFLUFF_SINGLELINE" in os.environ:
        singleline = _parse_bool(os.environ["DEFLUFF_SINGLELINE"])
    if "DEFLUFF_EMIT_ORIGINAL" in os.environ:
        emit_original = _parse_bool(os.environ["DEFLUFF_EMIT_ORIGINAL"])
    log_level = os.environ.get("DEFLUFF_LOG_LEVEL", log_level)

    if cli_args is not None:
        if getattr(cli_args, "singleline", None):
            singleline = True
        if getattr(cli_args, "original", None):
            emit_original = True
        if getattr(cli_args, "verbose", None):
            log_level = "DEBUG"

    return Config(
        singleline=singleline,
        emit_original=emit_original,
        log_level=_normalize_level(log_level),
    )
