"""
Configuration loader for catalog analysis
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_URL = "https://fakestoreapi.com/products"
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "catalog_config.yml"


class SourceConfig(BaseModel):
    """Remote catalog source configuration"""

    url: str = DEFAULT_CATALOG_URL
    timeout_seconds: Optional[float] = Field(default=10.0, gt=0.0, allow_inf_nan=False)
    user_agent: str = "catalog-insights/0.1"


class AnalysisConfig(BaseModel):
    """Session driver configuration"""

    sample_size: int = Field(default=5, ge=0)
    default_category: str = "electronics"


class CatalogConfig(BaseModel):
    source: SourceConfig = Field(default_factory=SourceConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)


def load_catalog_config(config_path: Optional[Path] = None) -> CatalogConfig:
    """
    Load and validate catalog configuration from YAML file

    Args:
        config_path: Path to config file. Defaults to config/catalog_config.yml

    Returns:
        Validated CatalogConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        raise FileNotFoundError(f"Catalog config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    try:
        cfg = CatalogConfig(**data)
        logger.info("Successfully loaded catalog config from %s", config_path)
        return cfg
    except ValidationError as e:
        logger.error("Catalog config validation failed: %s", e)
        raise


def apply_env_overrides(cfg: CatalogConfig) -> CatalogConfig:
    """Override source settings from CATALOG_API_URL / CATALOG_TIMEOUT_SECONDS."""
    url = os.getenv("CATALOG_API_URL", "").strip()
    if url:
        cfg.source = _validated_source(cfg.source, url=url)

    timeout = os.getenv("CATALOG_TIMEOUT_SECONDS", "").strip()
    if timeout:
        try:
            cfg.source = _validated_source(cfg.source, timeout_seconds=float(timeout))
        except (ValueError, ValidationError):
            logger.warning("Ignoring invalid CATALOG_TIMEOUT_SECONDS=%r", timeout)
    return cfg


def _validated_source(source: SourceConfig, **updates) -> SourceConfig:
    # Rebuild through validation; plain attribute assignment skips field constraints.
    return SourceConfig.model_validate({**source.model_dump(), **updates})
