"""
Utility modules for catalog analysis
"""
from .config_loader import CatalogConfig, apply_env_overrides, load_catalog_config

__all__ = [
    'CatalogConfig',
    'apply_env_overrides',
    'load_catalog_config',
]
