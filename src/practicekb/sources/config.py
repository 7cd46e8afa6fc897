"""Configuration models and loading for practice sources."""

import json
import logging
import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PRACTICES_CONFIG"
SOURCES_ENV_VAR = "PRACTICES_SOURCES"
PATH_ENV_VAR = "PRACTICES_PATH"
DEFAULT_PRACTICES_PATH = "./practices"


class SourceConfig(BaseModel):
    """A registered source of practice documents."""

    name: str = Field(..., min_length=1, description="Source name, prefixes document ids")
    type: Literal["local", "git", "url"] = Field(default="local")
    path: str = Field(..., description="Root directory of the source")
    format: Literal["markdown", "json", "yaml"] = Field(default="markdown")
    language: str | None = Field(default=None, description="Default language for practices")
    framework: str | None = Field(default=None, description="Default framework for practices")


class ProviderConfig(BaseModel):
    """Settings for the best practices provider."""

    model_config = ConfigDict(populate_by_name=True)

    sources: list[SourceConfig] = Field(default_factory=list)
    max_results: int = Field(default=10, ge=1, alias="maxResults")
    min_score: float = Field(default=0.3, ge=0.0, le=1.0, alias="minScore")
    workers: int = Field(default=4, ge=1, description="Parallel file readers per source")


def default_config() -> ProviderConfig:
    """One local markdown source at $PRACTICES_PATH (or ./practices)."""
    return ProviderConfig(sources=[
        SourceConfig(
            name="local-practices",
            type="local",
            path=os.environ.get(PATH_ENV_VAR, DEFAULT_PRACTICES_PATH),
            format="markdown",
        )
    ])


def _read_config_file(path: Path) -> ProviderConfig:
    with open(path, encoding="utf-8") as f:
        # YAML is a superset of JSON, so one loader reads both
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")

    config = ProviderConfig.model_validate(data)
    if "sources" not in data:
        config.sources = default_config().sources
    return config


def load_config(config_path: Path | None = None) -> ProviderConfig:
    """Load provider configuration.

    The config file comes from ``config_path`` or $PRACTICES_CONFIG. Values in
    the file override the defaults. Extra sources may be appended as a JSON
    list in $PRACTICES_SOURCES. A broken file or variable is logged and
    skipped rather than raised.

    Args:
        config_path: Optional path to a YAML or JSON config file

    Returns:
        ProviderConfig
    """
    path = config_path or (Path(os.environ[CONFIG_ENV_VAR]) if os.environ.get(CONFIG_ENV_VAR) else None)

    config = default_config()
    if path is not None:
        try:
            config = _read_config_file(path)
            logger.info(f"Loaded configuration from {path}")
        except (OSError, yaml.YAMLError, ValueError, ValidationError) as e:
            logger.warning(f"Failed to load config {path}, using defaults: {e}")

    extra = os.environ.get(SOURCES_ENV_VAR)
    if extra:
        try:
            sources = [SourceConfig.model_validate(s) for s in json.loads(extra)]
            config.sources.extend(sources)
        except (json.JSONDecodeError, TypeError, ValidationError) as e:
            logger.warning(f"Failed to parse {SOURCES_ENV_VAR}: {e}")

    return config
