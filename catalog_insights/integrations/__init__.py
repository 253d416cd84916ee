"""
Integrations layer.

Everything that talks to (or stands in for) the remote product catalog lives here.

Key rule:
- The analyzer MUST NOT call external APIs directly; it goes through a CatalogClient.
- The real HTTP client and the local mock share the same interface, and the
  choice between them happens in one place (catalog_insights/cli.py).
"""

from .contracts.catalog import CatalogClient, FilterHistoryEntry, Product, Rating
from .contracts.outcomes import OperationResult
from .response_wrappers import normalize_catalog_response, normalize_product

__all__ = [
    "CatalogClient", "FilterHistoryEntry", "Product", "Rating",
    "OperationResult",
    "normalize_catalog_response", "normalize_product",
]
