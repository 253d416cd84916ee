"""
Real HTTP catalog clients.

Must implement the CatalogClient interface and raise FetchError on any
failure to retrieve the catalog.
"""

from .fake_store_catalog import FakeStoreCatalogClient

__all__ = ["FakeStoreCatalogClient"]
