"""YAML configuration loader with multi-level priority merging.

Priority (highest wins):
  1. Environment variables (VALIDATE_PARAMS_* prefix)
  2. Project-level .validate_params/settings.yaml
  3. User-level ~/.validate_params/settings.yaml
  4. Built-in defaults
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import ValidationError

from validate_params.config.settings import ValidatorSettings

if TYPE_CHECKING:
    from pathlib import Path

SETTINGS_DIR = ".validate_params"
SETTINGS_FILE = "settings.yaml"

# Environment variable mappings: env_var -> (dotted.path, type_converter)
_ENV_OVERRIDES: dict[str, tuple[str, type]] = {
    "VALIDATE_PARAMS_FORMAT": ("options.format", str),
    "VALIDATE_PARAMS_FULL_MESSAGES": ("options.full_messages", bool),
    "VALIDATE_PARAMS_FATAL": ("options.fatal", bool),
    "VALIDATE_PARAMS_CHECK_FORMATS": ("options.check_formats", bool),
    "VALIDATE_PARAMS_DRAFT": ("draft", str),
}


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into base, returning a new dict."""
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _set_nested(data: dict[str, Any], dotted_path: str, value: Any) -> None:
    """Set a value at a dotted path in a nested dict, creating intermediaries."""
    parts = dotted_path.split(".")
    current = data
    for part in parts[:-1]:
        if part not in current or not isinstance(current[part], dict):
            current[part] = {}
        current = current[part]
    current[parts[-1]] = value


def _parse_bool(value: str) -> bool:
    return value.lower() in ("true", "1", "yes")


def _load_yaml_file(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping in {path}, got {type(data).__name__}")
    return data


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    result = dict(data)
    for env_var, (dotted_path, type_conv) in _ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value is not None:
            converted: Any = _parse_bool(value) if type_conv is bool else value
            _set_nested(result, dotted_path, converted)
    return result


def load_settings(
    project_dir: Path | None = None,
    user_dir: Path | None = None,
) -> ValidatorSettings:
    """Load settings from YAML files with priority merging.

    Priority: env vars > project settings.yaml > user settings.yaml > defaults.
    """
    merged: dict[str, Any] = {}

    for base_dir in (user_dir, project_dir):
        if base_dir is None:
            continue
        settings_file = base_dir / SETTINGS_DIR / SETTINGS_FILE
        if settings_file.exists():
            merged = _deep_merge(merged, _load_yaml_file(settings_file))

    merged = _apply_env_overrides(merged)

    try:
        return ValidatorSettings.model_validate(merged)
    except ValidationError as e:
        raise ValueError(f"Invalid settings: {e}") from e
