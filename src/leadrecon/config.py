from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .catalog.models import FieldCatalog
from .session import COMBINED_FILENAME, MISSING_FILENAME


class ConfigError(Exception):
    """Raised when configuration is missing or invalid."""


class IOSettings(BaseModel):
    out_dir: str


class ExportSettings(BaseModel):
    missing_filename: str = MISSING_FILENAME
    combined_filename: str = COMBINED_FILENAME


class AppConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    io: IOSettings = Field(default_factory=lambda: IOSettings(out_dir="runs"))
    catalog: FieldCatalog = Field(default_factory=FieldCatalog, alias="fields")
    export: ExportSettings = Field(default_factory=ExportSettings)


def default_config() -> AppConfig:
    return AppConfig()


def load_config(path: str | Path) -> AppConfig:
    """
    Load YAML config.

    Required:
      - io.out_dir
    Optional:
      - fields (source/reference alias lists, origin_tag)
      - export.missing_filename, export.combined_filename
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found at: {config_path}")
    try:
        with config_path.open("r", encoding="utf-8") as f:
            data: Dict[str, Any] = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {config_path}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Top-level YAML must be a mapping: {config_path}")
    io_section = data.get("io")
    if not isinstance(io_section, dict):
        raise ConfigError("Missing required section: io")
    out_dir = io_section.get("out_dir")
    if not out_dir or not isinstance(out_dir, str):
        raise ConfigError("Missing required key: io.out_dir")

    try:
        return AppConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config at {config_path}: {e}") from e
