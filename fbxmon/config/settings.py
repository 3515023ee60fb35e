"""YAML config loader with environment variable expansion."""

from __future__ import annotations

import codecs
import os
import re
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from fbxmon.device.fetcher import DEFAULT_ENCODING, build_url
from fbxmon.errors import ConfigError

CONFIG_ENV_VAR = "FBXMON_CONFIG"


def _expand_env_vars(value: str) -> str:
    """Replace ${VAR_NAME} with environment variable values."""
    pattern = re.compile(r"\$\{([^}]+)\}")
    def replacer(match: re.Match) -> str:
        var = match.group(1)
        return os.environ.get(var, match.group(0))
    return pattern.sub(replacer, value)


def _walk_and_expand(obj: object) -> object:
    """Recursively expand environment variables in strings."""
    if isinstance(obj, str):
        return _expand_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _walk_and_expand(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_walk_and_expand(item) for item in obj]
    return obj


class FreeboxConfig(BaseModel):
    host: str = "mafreebox.freebox.fr"
    path: str = "/pub/fbx_info.txt"
    encoding: str = DEFAULT_ENCODING

    @field_validator("encoding")
    @classmethod
    def check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"unknown encoding: {value}") from None
        return value

    @property
    def url(self) -> str:
        return build_url(self.host, self.path)


class LoggingConfig(BaseModel):
    level: str = "WARNING"


class Settings(BaseModel):
    freebox: FreeboxConfig = Field(default_factory=FreeboxConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _candidate_paths() -> list[Path]:
    return [
        Path("fbxmon.yaml"),
        Path("fbxmon.yml"),
        Path.home() / ".config" / "fbxmon.yaml",
    ]


def load_config(path: str | Path | None = None) -> Settings:
    """Load configuration from a YAML file, falling back to defaults.

    Lookup order: explicit *path*, ``$FBXMON_CONFIG``, then the
    candidate files.  No file at all means built-in defaults.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or None
    if path is None:
        for candidate in _candidate_paths():
            if candidate.exists():
                path = candidate
                break

    if path is None:
        return Settings()

    path = Path(path).expanduser()
    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    raw = _walk_and_expand(raw)

    try:
        return Settings.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {path}: {exc}") from exc
