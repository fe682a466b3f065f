"""Locate and parse pdfsweep.yaml."""

import os
import re
from collections.abc import Iterator
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import PdfSweepConfig

CONFIG_ENV_VAR = "PDFSWEEP_CONFIG"
PROJECT_CONFIG = "pdfsweep.yaml"

_ENV_REF = re.compile(r"\$\{(\w+)\}")


def load_config(explicit_path: str | None = None) -> PdfSweepConfig:
    """Return the first non-empty config found, or defaults.

    Lookup order: ``explicit_path``, ``./pdfsweep.yaml``,
    ``~/.pdfsweep/config.yaml``. Raises ValueError naming the file when
    it is malformed.
    """
    for path in _config_candidates(explicit_path):
        raw = _read_config_file(path)
        if raw is None:
            continue
        try:
            return PdfSweepConfig.model_validate(_expand_env_vars(raw))
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e
    return PdfSweepConfig()


def _config_candidates(explicit_path: str | None) -> Iterator[Path]:
    if explicit_path:
        yield Path(explicit_path)
    yield Path.cwd() / PROJECT_CONFIG
    yield Path.home() / ".pdfsweep" / "config.yaml"


def _read_config_file(path: Path) -> dict | None:
    """Parsed mapping from path; None when the file is absent or empty."""
    if not path.is_file():
        return None
    try:
        raw = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid config in {path}: expected a mapping")
    return raw


def _expand_env_vars(value: object) -> object:
    """Substitute ${VAR} in every string of a parsed YAML tree; unset vars become ''."""
    if isinstance(value, str):
        return _ENV_REF.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {key: _expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    return value
