"""
Run one catalog analysis session and print each stage to the terminal.

Usage:
  catalog-insights
  catalog-insights --category jewelery --verbose
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from catalog_insights.analyzer import ProductCatalogAnalyzer
from catalog_insights.integrations.clients.real_http import FakeStoreCatalogClient
from catalog_insights.integrations.contracts.catalog import CatalogClient
from catalog_insights.reporting import Reporter
from catalog_insights.utils.config_loader import CatalogConfig, apply_env_overrides, load_catalog_config

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Log diagnostics to stderr; results go to the reporter on stdout."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def resolve_config(config_path: Optional[Path] = None) -> CatalogConfig:
    try:
        cfg = load_catalog_config(config_path)
    except Exception as e:
        logger.warning("Failed to load config: %s. Using defaults.", e)
        cfg = CatalogConfig()
    return apply_env_overrides(cfg)


def run_analysis(
    client: CatalogClient,
    category: str = "electronics",
    reporter: Optional[Reporter] = None,
    sample_size: int = 5,
) -> Optional[ProductCatalogAnalyzer]:
    """Drive one session: load, list, filter, max, average, history."""
    try:
        analyzer = ProductCatalogAnalyzer(client=client, reporter=reporter, sample_size=sample_size)
        analyzer.initialize()
        analyzer.list_categories()
        analyzer.filter_by_category(category)
        analyzer.find_most_expensive_product()
        analyzer.calculate_average_price()
        analyzer.print_history()
        return analyzer
    except Exception as e:
        logger.error("Error in product analysis: %s", e, exc_info=True)
        return None


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Fetch a product catalog and print simple price insights")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to catalog config YAML file (default: config/catalog_config.yml)",
    )
    parser.add_argument(
        "--category",
        type=str,
        default=None,
        help="Category to filter by (overrides config)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    load_dotenv()
    setup_logging(args.verbose)
    cfg = resolve_config(args.config)

    with FakeStoreCatalogClient(
        url=cfg.source.url,
        timeout_seconds=cfg.source.timeout_seconds,
        user_agent=cfg.source.user_agent,
    ) as client:
        run_analysis(
            client,
            category=args.category or cfg.analysis.default_category,
            sample_size=cfg.analysis.sample_size,
        )

    # Failures are logged by the session; the exit code stays 0.
    return 0


if __name__ == "__main__":
    sys.exit(main())
