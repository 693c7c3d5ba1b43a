from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Dict, Mapping, Optional

import yaml

logger = logging.getLogger(__name__)

ENV_PREFIX = "KEYDRILL_"


@dataclass(frozen=True)
class Settings:
    """Session tuning: countdown length, reaction hit target, paragraph size."""

    game_duration: int = 60
    reaction_target: int = 20
    paragraph_words: int = 30


def default_settings_path() -> Path:
    return Path.home() / ".keydrill" / "settings.yaml"


def _coerce(name: str, value: object, source: str) -> Optional[int]:
    try:
        number = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        logger.warning("Ignoring %s=%r from %s: not an integer", name, value, source)
        return None
    if number <= 0:
        logger.warning("Ignoring %s=%r from %s: must be positive", name, value, source)
        return None
    return number


def _read_file(path: Path) -> Dict[str, object]:
    if not path.exists():
        return {}
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, OSError) as e:
        logger.warning("Could not load settings from %s: %s", path, e)
        return {}
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        logger.warning("Could not load settings from %s: expected a mapping", path)
        return {}
    return raw


def load_settings(path: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from the YAML file, then apply ``KEYDRILL_*`` env overrides."""
    path = path or default_settings_path()
    environ = os.environ if environ is None else environ

    overrides: Dict[str, int] = {}
    file_values = _read_file(path)
    for f in fields(Settings):
        if f.name in file_values:
            number = _coerce(f.name, file_values[f.name], str(path))
            if number is not None:
                overrides[f.name] = number
        env_name = ENV_PREFIX + f.name.upper()
        if env_name in environ:
            number = _coerce(f.name, environ[env_name], env_name)
            if number is not None:
                overrides[f.name] = number

    unknown = set(file_values) - {f.name for f in fields(Settings)}
    if unknown:
        logger.warning("Unknown settings in %s: %s", path, ", ".join(sorted(map(str, unknown))))

    return replace(Settings(), **overrides)
