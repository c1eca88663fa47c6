"""Configuration — frozen dataclass from defaults, YAML, env vars, and CLI."""

import logging
import os
from dataclasses import dataclass, fields

import yaml

logger = logging.getLogger(__name__)

_ENV_VARS = {
    "log_file": "CALLFLOW_LOG_FILE",
    "host": "CALLFLOW_HOST",
    "port": "CALLFLOW_PORT",
    "log_level": "CALLFLOW_LOG_LEVEL",
}


@dataclass(frozen=True)
class Config:
    log_file: str = "/var/log/freeswitch/freeswitch.log"
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"


def load_yaml_config(path: str | None) -> dict:
    """Return the ``callflow`` section of a YAML file, or {} if absent."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    logger.info("Loaded YAML config from %s", path)
    section = data.get("callflow", {}) if isinstance(data, dict) else {}
    return section or {}


def _coerce(key: str, value) -> object:
    if key == "port":
        return int(value)
    if key == "log_level":
        return str(value).upper()
    return str(value)


def load_config(path: str | None = None, overrides: dict | None = None) -> Config:
    """Build Config from defaults <- YAML <- env vars <- overrides (highest).

    The YAML path falls back to the ``CONFIG_PATH`` environment variable.
    ``None`` values in *overrides* are ignored so argparse namespaces can be
    passed straight through.
    """
    known = {f.name for f in fields(Config)}
    kwargs: dict = {}

    yaml_data = load_yaml_config(path or os.environ.get("CONFIG_PATH"))
    for key, value in yaml_data.items():
        if key in known and value is not None:
            kwargs[key] = _coerce(key, value)

    for key, env_name in _ENV_VARS.items():
        value = os.environ.get(env_name)
        if value:
            kwargs[key] = _coerce(key, value)

    for key, value in (overrides or {}).items():
        if key in known and value is not None:
            kwargs[key] = _coerce(key, value)

    return Config(**kwargs)
