"""
Product catalog analyzer.

Loads a catalog through a CatalogClient and runs the session's aggregations:
category listing, category and price filters, most expensive product and
average price. Every public operation catches its own failures, logs them,
returns a safe fallback and records an OperationResult in ``outcomes``.
"""

from __future__ import annotations

import logging
from collections import abc
from operator import attrgetter
from typing import Any, Dict, Iterable, List, Optional

from catalog_insights.error_handler import CatalogError, EmptyCatalogError, ErrorHandler, InvalidFilterError
from catalog_insights.integrations.contracts.catalog import CatalogClient, FilterHistoryEntry, Product
from catalog_insights.integrations.contracts.outcomes import OperationResult
from catalog_insights.integrations.response_wrappers import normalize_catalog_response
from catalog_insights.reporting import ConsoleReporter, Reporter

logger = logging.getLogger(__name__)


def format_price(price: float) -> str:
    """Render a price the way the catalog reports it: 10 -> "10", 22.3 -> "22.3"."""
    value = float(price)
    if value.is_integer():
        return str(int(value))
    return repr(value)


class ProductCatalogAnalyzer:
    def __init__(
        self,
        client: Optional[CatalogClient] = None,
        reporter: Optional[Reporter] = None,
        sample_size: int = 5,
        error_handler: Optional[ErrorHandler] = None,
    ):
        if client is None:
            from catalog_insights.integrations.clients.real_http import FakeStoreCatalogClient

            client = FakeStoreCatalogClient()
        self.client = client
        self.reporter = reporter or ConsoleReporter()
        self.sample_size = sample_size
        self.error_handler = error_handler or ErrorHandler()

        self.catalog: List[Product] = []
        self.history: List[FilterHistoryEntry] = []
        self.outcomes: Dict[str, OperationResult] = {}

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def initialize(self) -> OperationResult:
        """Fetch the catalog and report a sample of it.

        On failure the error is logged, the catalog keeps its previous content
        (empty for a fresh analyzer) and a failed OperationResult is returned.
        """
        try:
            raw = self.client.fetch_products()
            self.load_catalog(raw)
            self.display_initial_products()
        except Exception as exc:
            return self._fail("initialize", exc, "Error initializing product data", fallback=[])
        return self._succeed("initialize", list(self.catalog))

    def load_catalog(self, data: Iterable[Any]) -> List[Product]:
        """Replace the catalog with ``data`` (raw dicts or Product instances)."""
        if isinstance(data, abc.Iterable) and not isinstance(data, (list, dict, str, bytes)):
            data = list(data)
        products = normalize_catalog_response(data)
        self.catalog = products
        logger.info("Loaded %d products into catalog", len(products))
        return products

    def display_initial_products(self) -> None:
        self.reporter.section(f"First {self.sample_size} Products Overview")
        for product in self.catalog[: self.sample_size]:
            self.reporter.line(self._product_line(product))

    # ------------------------------------------------------------------
    # Aggregations
    # ------------------------------------------------------------------

    def list_categories(self) -> List[str]:
        try:
            categories = list(dict.fromkeys(product.category for product in self.catalog))
            self.reporter.section("Available Categories")
            for category in categories:
                self.reporter.line(f"- {category}")
        except Exception as exc:
            self._fail("list_categories", exc, "Error listing categories", fallback=[])
            return []
        self._succeed("list_categories", categories)
        return categories

    def filter_by_category(self, category: str) -> List[Product]:
        try:
            wanted = category.lower()
            matches = [p for p in self.catalog if p.category.lower() == wanted]
            self.record_history("category", category, len(matches))

            self.reporter.section(f"Products in {category} category")
            for product in matches:
                self.reporter.line(self._product_line(product))
        except Exception as exc:
            self._fail("filter_by_category", exc, "Error filtering products", fallback=[])
            return []
        self._succeed("filter_by_category", matches)
        return matches

    def filter_by_price_range(
        self,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
    ) -> List[Product]:
        """Products whose price lies within the inclusive bounds; ``None`` leaves a bound open."""
        try:
            if min_price is not None and max_price is not None and min_price > max_price:
                raise InvalidFilterError(f"min_price {min_price} is greater than max_price {max_price}")

            matches = [
                p for p in self.catalog
                if (min_price is None or p.price >= min_price)
                and (max_price is None or p.price <= max_price)
            ]
            criteria = "{}-{}".format(
                "*" if min_price is None else format_price(min_price),
                "*" if max_price is None else format_price(max_price),
            )
            self.record_history("price", criteria, len(matches))

            self.reporter.section(f"Products priced {criteria}")
            for product in matches:
                self.reporter.line(self._product_line(product))
        except Exception as exc:
            self._fail("filter_by_price_range", exc, "Error filtering products", fallback=[])
            return []
        self._succeed("filter_by_price_range", matches)
        return matches

    def find_most_expensive_product(self) -> Optional[Product]:
        """Earliest product with the highest price, or None for an empty catalog."""
        if not self.catalog:
            logger.warning("Cannot find most expensive product: catalog is empty")
            self.outcomes["find_most_expensive_product"] = OperationResult.failure(
                "find_most_expensive_product",
                EmptyCatalogError("Catalog is empty; no most expensive product"),
            )
            return None

        try:
            # max() keeps the first maximal element on ties.
            most_expensive = max(self.catalog, key=attrgetter("price"))
            self.reporter.section("Most Expensive Product")
            self.reporter.line(f"Title: {most_expensive.title}")
            self.reporter.line(f"Price: ${format_price(most_expensive.price)}")
            self.reporter.line(f"Category: {most_expensive.category}")
        except Exception as exc:
            self._fail("find_most_expensive_product", exc, "Error finding most expensive product")
            return None
        self._succeed("find_most_expensive_product", most_expensive)
        return most_expensive

    def calculate_average_price(self) -> float:
        """Mean catalog price at full precision; 0.0 when it cannot be computed."""
        if not self.catalog:
            logger.warning("Cannot calculate average price: catalog is empty, returning 0")
            self.outcomes["calculate_average_price"] = OperationResult.failure(
                "calculate_average_price",
                EmptyCatalogError("Catalog is empty; average price is undefined"),
                fallback=0.0,
            )
            return 0.0

        try:
            average = sum(p.price for p in self.catalog) / len(self.catalog)
            self.reporter.section("Price Analysis")
            self.reporter.line(f"Average Price: ${average:.2f}")
        except Exception as exc:
            self._fail("calculate_average_price", exc, "Error calculating average price", fallback=0.0)
            return 0.0
        self._succeed("calculate_average_price", average)
        return average

    # ------------------------------------------------------------------
    # Filter history
    # ------------------------------------------------------------------

    def record_history(self, filter_type: str, criteria: str, result_count: int) -> FilterHistoryEntry:
        entry = FilterHistoryEntry(
            filter_type=filter_type,
            criteria=criteria,
            result_count=result_count,
        )
        self.history.append(entry)
        logger.debug("Recorded filter: %s", entry)
        return entry

    def print_history(self) -> None:
        self.reporter.section("Filter History")
        for entry in self.history:
            self.reporter.line(entry.describe())

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _product_line(product: Product) -> str:
        return f"- {product.title} (${format_price(product.price)})"

    def _succeed(self, operation: str, value: Any) -> OperationResult:
        result = OperationResult.success(operation, value)
        self.outcomes[operation] = result
        return result

    def _fail(self, operation: str, exc: Exception, message: str, fallback: Any = None) -> OperationResult:
        payload = self.error_handler.handle_exception(exc, context={"operation": operation}, message=message)
        if isinstance(exc, CatalogError):
            error = exc
        else:
            error = CatalogError(str(exc), payload=payload["metadata"])
            error.__cause__ = exc
        result = OperationResult.failure(operation, error, fallback=fallback)
        self.outcomes[operation] = result
        return result
