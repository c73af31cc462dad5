"""Load runtime configuration for textcore."""

from __future__ import annotations

import hashlib
import os
import re
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from ..clients.logging import get_logger, log_config_load
from ..utils.errors import ConfigError
from ..utils.timing import timed
from .settings import RuntimeConfig

logger = get_logger(__name__)

CONFIG_PATH = Path(__file__).with_name("rules.yaml")
CONFIG_ENV = "TEXTCORE_CONFIG"

# Pattern to match env("VAR_NAME") placeholders
ENV_PATTERN = re.compile(r'env\("([^"]+)"\)')

load_dotenv(Path(__file__).resolve().parent.parent / ".env")


def _resolve_env_placeholders(value: Any) -> Any:
    """Recursively resolve env("VAR") placeholders in YAML values."""
    if isinstance(value, str):
        match = ENV_PATTERN.search(value)
        if match:
            var_name = match.group(1)
            env_value = os.getenv(var_name)
            if env_value is None:
                raise ConfigError(var_name, f"Environment variable {var_name} not set (required by config)")
            return env_value
        return value
    elif isinstance(value, dict):
        return {k: _resolve_env_placeholders(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_resolve_env_placeholders(item) for item in value]
    else:
        return value


def _compute_config_version(yaml_content: str) -> str:
    """SHA256 of the YAML text, truncated, for version tracking."""
    return hashlib.sha256(yaml_content.encode("utf-8")).hexdigest()[:16]


def _config_path(path: Optional[Path]) -> Path:
    if path is not None:
        return path
    override = os.getenv(CONFIG_ENV)
    return Path(override) if override else CONFIG_PATH


def load_runtime_config(path: Optional[Path] = None) -> RuntimeConfig:
    """Load runtime configuration from a YAML file.

    Args:
        path: Optional path to a rules.yaml file. Defaults to $TEXTCORE_CONFIG,
            then the bundled CONFIG_PATH.

    Returns:
        RuntimeConfig instance with resolved env placeholders.
    """
    target = _config_path(path)

    with timed() as watch:
        try:
            with target.open("r", encoding="utf-8") as handle:
                yaml_content = handle.read()
            data = yaml.safe_load(yaml_content) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(str(target), str(exc)) from exc

        if not isinstance(data, dict):
            raise ConfigError(str(target), "top-level YAML value must be a mapping")

        data = _resolve_env_placeholders(data)

        config_version = _compute_config_version(yaml_content)
        data.setdefault("metadata", {})
        data["metadata"]["config_version"] = config_version

        try:
            config = RuntimeConfig.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(str(target), str(exc)) from exc

    log_config_load(logger, str(target), watch.elapsed_ms, config_version)
    return config


@lru_cache(maxsize=1)
def get_runtime_config() -> RuntimeConfig:
    """Return the process-wide config, loading it on first use."""
    return load_runtime_config()
