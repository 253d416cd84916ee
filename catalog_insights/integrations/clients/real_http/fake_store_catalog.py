"""
Fake Store Catalog HTTP Client.

Purpose:
- Fetches the product catalog from the public Fake Store API (or any endpoint
  returning the same JSON array shape)
- Turns every failure mode into a FetchError so the analyzer can log and continue

Important:
- One GET per call, no retries and no pagination.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from catalog_insights.error_handler import CatalogResponseError, FetchError
from catalog_insights.integrations.contracts.catalog import CatalogClient
from catalog_insights.utils.config_loader import DEFAULT_CATALOG_URL

logger = logging.getLogger(__name__)


class FakeStoreCatalogClient(CatalogClient):
    def __init__(
        self,
        url: Optional[str] = None,
        timeout_seconds: Optional[float] = 10.0,
        user_agent: str = "catalog-insights/0.1",
        session: Optional[requests.Session] = None,
    ) -> None:
        self.url = url or DEFAULT_CATALOG_URL
        self.timeout_seconds = timeout_seconds
        self.session = session or self._create_session(user_agent)

    @staticmethod
    def _create_session(user_agent: str) -> requests.Session:
        session = requests.Session()
        session.headers.update({
            "User-Agent": user_agent,
            "Accept": "application/json",
        })
        return session

    def fetch_products(self) -> List[Dict[str, Any]]:
        try:
            response = self.session.get(self.url, timeout=self.timeout_seconds)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.error("HTTP error fetching %s: %s", self.url, status)
            raise FetchError(status_code=status) from e
        except requests.exceptions.Timeout as e:
            logger.error("Timeout fetching %s: %s", self.url, e)
            raise FetchError() from e
        except requests.exceptions.RequestException as e:
            logger.error("Error fetching %s: %s - %s", self.url, type(e).__name__, e)
            raise FetchError() from e
        except ValueError as e:
            # urllib3 rejects invalid timeouts before any request is sent.
            logger.error("Invalid request settings for %s: %s", self.url, e)
            raise FetchError() from e

        try:
            data = response.json()
        except ValueError as e:
            raise CatalogResponseError(
                "Catalog response is not valid JSON",
                status_code=response.status_code,
            ) from e

        if not isinstance(data, list):
            raise CatalogResponseError(
                f"Catalog response must be a JSON array; got {type(data).__name__}",
                status_code=response.status_code,
            )

        logger.info("Fetched %d products from %s", len(data), self.url)
        return data

    def close(self) -> None:
        self.session.close()
