from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from verbose_slack.usecases.config_models import AppConfig


# ConfigError is raised for invalid configuration (fail fast).
class ConfigError(ValueError):
    pass


def load_config(path: Path) -> AppConfig:
    # YAML loader; the raw mapping is validated into typed config models.
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")

    try:
        return AppConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
