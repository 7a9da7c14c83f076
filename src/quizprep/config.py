# src/quizprep/config.py
"""Configuration loading utilities for quizprep.

It handles:
- Finding and loading quizprep.yaml config files
- Reading QUIZPREP_* environment overrides
- Building Settings objects from multiple sources
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from quizprep.settings import Settings

logger = logging.getLogger(__name__)

CONFIG_FILES = ["quizprep.yaml", "quizprep.yml", ".quizpreprc"]

VALID_ROOT_KEYS = {
    "profile",
    "llm_model",
    "settings",
}

VALID_SETTINGS_KEYS = set(Settings.model_fields)

# Integer settings that can be overridden from the environment
_ENV_SETTINGS: dict[str, str] = {
    "QUIZPREP_MAX_CHARS": "max_chars",
    "QUIZPREP_MIN_CHARS": "min_chars",
    "QUIZPREP_OVERLAP": "overlap",
    "QUIZPREP_EXCERPT_LENGTH": "excerpt_length",
    "QUIZPREP_FALLBACK_SUMMARY_CHARS": "fallback_summary_chars",
    "QUIZPREP_MIN_SUMMARY_WORDS": "min_summary_words",
    "QUIZPREP_PREVIEW_CHARS": "preview_chars",
}


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find a configuration file in the current directory or its parents.

    Args:
        start_dir: Directory to start searching from (default: cwd)

    Returns:
        Path to config file if found, None otherwise
    """
    current = start_dir or Path.cwd()
    for _ in range(10):  # Limit search depth
        for config_name in CONFIG_FILES:
            config_path = current / config_name
            if config_path.exists():
                return config_path
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def validate_config(config: dict[str, Any], config_path: Path | None = None) -> list[str]:
    """Validate config and return warnings about unknown keys."""
    warnings = []

    unknown_root = set(config.keys()) - VALID_ROOT_KEYS
    if unknown_root:
        path_str = str(config_path) if config_path else "config"
        warnings.append(f"Unknown config keys in {path_str}: {', '.join(sorted(unknown_root))}")

    settings = config.get("settings", {})
    if isinstance(settings, dict):
        unknown_settings = set(settings.keys()) - VALID_SETTINGS_KEYS
        if unknown_settings:
            warnings.append(f"Unknown settings keys: {', '.join(sorted(unknown_settings))}")

    return warnings


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file.

    Args:
        config_path: Explicit path to config file, or None to search

    Returns:
        Configuration dictionary (empty if no config found)
    """
    config_path = Path(config_path) if config_path is not None else find_config_file()

    if config_path is None:
        return {}

    with open(config_path, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")

    for warning in validate_config(config, config_path):
        logger.warning(warning)

    return config


def _safe_int(value: str | None) -> int | None:
    """Parse int from string, returning None on invalid value."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def get_settings_from_env() -> dict[str, Any]:
    """Read settings from QUIZPREP_* environment variables.

    Only explicitly set, parseable variables are returned so they can take
    precedence over YAML values.
    """
    result: dict[str, Any] = {}
    for env_name, key in _ENV_SETTINGS.items():
        if (val := _safe_int(os.environ.get(env_name))) is not None:
            result[key] = val
        elif env_name in os.environ:
            logger.warning("Ignoring %s: not an integer", env_name)
    return result


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Build Settings with precedence defaults < YAML < environment.

    A ``profile`` root key selects a chunking profile before the ``settings``
    section is applied.
    """
    config = load_config(config_path)

    yaml_settings = config.get("settings") or {}
    if not isinstance(yaml_settings, dict):
        raise ValueError("'settings' section must be a mapping")

    overrides = {k: v for k, v in yaml_settings.items() if k in VALID_SETTINGS_KEYS}
    overrides.update(get_settings_from_env())

    profile = config.get("profile")
    if profile:
        return Settings.with_profile(profile, **overrides)
    return Settings(**overrides)


def load_llm_model(config_path: Path | str | None = None) -> str | None:
    """Default LiteLLM model: ``llm_model`` from YAML, else QUIZPREP_LLM_MODEL."""
    model = load_config(config_path).get("llm_model") or os.environ.get("QUIZPREP_LLM_MODEL")
    return str(model) if model else None
