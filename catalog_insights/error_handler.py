"""Error taxonomy and handling helpers for catalog analysis."""
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    def __init__(self, message: str, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.payload = payload or {}


class FetchError(CatalogError):
    """Catalog could not be loaded (HTTP status, transport or body failure)."""

    def __init__(
        self,
        message: str = "Failed to fetch product data",
        *,
        status_code: Optional[int] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, payload=payload)
        self.status_code = status_code


class CatalogResponseError(FetchError):
    """Response body arrived but does not have the product catalog shape."""


class EmptyCatalogError(CatalogError):
    """A derived statistic was requested on an empty catalog."""


class InvalidFilterError(CatalogError):
    """Filter arguments are inconsistent (e.g. inverted price bounds)."""


class ErrorHandler:
    def handle_exception(
        self,
        exc: Exception,
        context: Dict[str, Any] = None,
        message: str = "Unhandled exception in catalog analysis",
    ) -> Dict[str, Any]:
        # Expected failures get a single line; anything else keeps its traceback.
        if isinstance(exc, CatalogError):
            logger.error("%s: %s", message, exc)
        else:
            logger.error("%s: %s", message, exc, exc_info=True)
        return {
            "message": str(exc) or "An internal error occurred while analysing the catalog.",
            "fallback": True,
            "metadata": {
                "error": str(exc),
                "error_type": type(exc).__name__,
                "context": context or {},
            },
        }
