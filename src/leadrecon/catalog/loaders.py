from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml

from .models import FieldCatalog


def load_yaml(path: Path) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"YAML file not found: {p}")
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML at {p}: {e}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Top-level YAML must be a mapping: {p}")
    return data


def load_field_catalog(path: Path) -> FieldCatalog:
    data = load_yaml(path)
    try:
        return FieldCatalog.model_validate(data.get("fields") or data)
    except Exception as e:
        raise ValueError(f"Invalid field catalog at {path}: {e}") from e
