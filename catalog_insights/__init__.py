"""
Product catalog insights.

Fetches a product catalog from a REST endpoint and runs in-memory
aggregations over it while keeping a log of the filters applied.
"""

from .analyzer import ProductCatalogAnalyzer

__all__ = ["ProductCatalogAnalyzer"]

__version__ = "0.1.0"
