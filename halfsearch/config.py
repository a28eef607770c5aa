"""Settings for the search layer, loaded from YAML with environment overrides."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigError

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

ENV_CONFIG_PATH_KEY = "HALFSEARCH_CONFIG"
ENV_PREFIX = "HALFSEARCH_"
ENV_SEPARATOR = "__"


class SearchConfig(BaseModel):
    strict: bool = False
    recursive: bool = False
    default_algorithm: str = "bounded_binary_search"


class LoggingConfig(BaseModel):
    level: str = "WARNING"
    json_format: bool = False
    app_name: str = "halfsearch"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}; expected one of {', '.join(LOG_LEVELS)}")
        return level


class Settings(BaseModel):
    search: SearchConfig = Field(default_factory=SearchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_settings(
    path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """Build :class:`Settings` from an optional YAML file plus env overrides.

    The file is taken from ``path`` or, failing that, ``$HALFSEARCH_CONFIG``.
    Variables such as ``HALFSEARCH_SEARCH__STRICT=true`` override file values.
    """

    environ = os.environ if environ is None else environ
    if path is None:
        path = environ.get(ENV_CONFIG_PATH_KEY)

    payload: Dict[str, Any] = {}
    if path:
        payload = _load_yaml(Path(path))
    payload = _deep_merge(payload, _env_overrides(environ))

    try:
        return Settings.model_validate(payload)
    except ValidationError as err:
        raise ConfigError(f"Invalid configuration: {err}") from err


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle) or {}
    except (OSError, yaml.YAMLError) as err:
        raise ConfigError(f"Cannot read config file {path}: {err}") from err
    if not isinstance(loaded, dict):
        raise ConfigError(f"YAML config at {path} must produce a dictionary")
    return loaded


def _env_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    payload: Dict[str, Any] = {}
    for key, raw_value in environ.items():
        if not key.startswith(ENV_PREFIX) or key == ENV_CONFIG_PATH_KEY:
            continue
        parts = key[len(ENV_PREFIX):].lower().split(ENV_SEPARATOR)
        cursor = payload
        for part in parts[:-1]:
            cursor = cursor.setdefault(part, {})
            if not isinstance(cursor, dict):
                raise ConfigError(f"{key} nests under a key that already holds a value")
        if isinstance(cursor.get(parts[-1]), dict):
            raise ConfigError(f"{key} conflicts with nested overrides of the same key")
        cursor[parts[-1]] = _coerce_env_value(raw_value)
    return payload


def _deep_merge(base: Dict[str, Any], incoming: Mapping[str, Any]) -> Dict[str, Any]:
    result = dict(base)
    for key, value in incoming.items():
        if isinstance(result.get(key), dict) and isinstance(value, Mapping):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _coerce_env_value(value: str) -> Any:
    try:
        return json.loads(value)
    except json.JSONDecodeError:
        return value
