"""
Local Catalog Client (Mock/Local).

Serves a fixed list of raw product records without any network call. Used by
tests and for offline development; `fail_with_status` simulates an HTTP error
from the real endpoint.
"""

import copy
import logging
from typing import Any, Dict, Iterable, List, Optional

from catalog_insights.error_handler import FetchError
from catalog_insights.integrations.contracts.catalog import CatalogClient, Product

logger = logging.getLogger(__name__)


class LocalCatalogClient(CatalogClient):
    def __init__(
        self,
        products: Optional[Iterable[Any]] = None,
        fail_with_status: Optional[int] = None,
    ):
        self._products: List[Dict[str, Any]] = [
            p.to_dict() if isinstance(p, Product) else dict(p) for p in (products or [])
        ]
        self._fail_with_status = fail_with_status
        self.calls = 0

    def fetch_products(self) -> List[Dict[str, Any]]:
        self.calls += 1
        if self._fail_with_status is not None:
            logger.info("[LOCAL CATALOG] Simulating HTTP %s", self._fail_with_status)
            raise FetchError(status_code=self._fail_with_status)
        return copy.deepcopy(self._products)
