"""
Mock catalog clients.

Return fixed product data without calling any external API. They follow the
SAME interface as the real HTTP clients.
"""

from .local_catalog import LocalCatalogClient

__all__ = ["LocalCatalogClient"]
