"""Pytest fixtures for catalog analysis tests."""

import pytest

from catalog_insights.analyzer import ProductCatalogAnalyzer
from catalog_insights.integrations.clients.mocks import LocalCatalogClient
from catalog_insights.reporting import RecordingReporter


SAMPLE_PRODUCTS = [
    {
        "id": 1,
        "title": "Fjallraven Backpack",
        "price": 109.95,
        "category": "men's clothing",
        "description": "Your perfect pack for everyday use.",
        "image": "https://fakestoreapi.com/img/81fPKd-2AYL._AC_SL1500_.jpg",
        "rating": {"rate": 3.9, "count": 120},
    },
    {
        "id": 9,
        "title": "WD 2TB Elements Portable External Hard Drive",
        "price": 64,
        "category": "electronics",
        "description": "USB 3.0 and USB 2.0 compatibility.",
        "image": "https://fakestoreapi.com/img/61IBBVJvSDL._AC_SY879_.jpg",
        "rating": {"rate": 3.3, "count": 203},
    },
    {
        "id": 5,
        "title": "John Hardy Women's Bracelet",
        "price": 695,
        "category": "jewelery",
        "description": "From our Legends Collection.",
        "image": "https://fakestoreapi.com/img/71pWzhdJNwL._AC_UL640_QL65_ML3_.jpg",
        "rating": {"rate": 4.6, "count": 400},
    },
    {
        "id": 14,
        "title": "Samsung 49-Inch Gaming Monitor",
        "price": 999.99,
        "category": "Electronics",
        "description": "49 inch super ultrawide 32:9 curved gaming monitor.",
        "image": "https://fakestoreapi.com/img/81Zt42ioCgL._AC_SX679_.jpg",
        "rating": {"rate": 2.2, "count": 140},
    },
    {
        "id": 18,
        "title": "MBJ Women's Solid Short Sleeve Boat Neck V",
        "price": 9.85,
        "category": "women's clothing",
        "description": "95% rayon, 5% spandex.",
        "image": "https://fakestoreapi.com/img/71z3kpMAYsL._AC_UY879_.jpg",
        "rating": {"rate": 4.7, "count": 130},
    },
    {
        "id": 10,
        "title": "SanDisk SSD PLUS 1TB",
        "price": 109,
        "category": "electronics",
        "description": "Easy upgrade for faster boot up.",
        "image": "https://fakestoreapi.com/img/61U7T1koQqL._AC_SX679_.jpg",
        "rating": {"rate": 2.9, "count": 470},
    },
]

TIE_PRODUCTS = [
    {"id": 1, "title": "A", "price": 10, "category": "x"},
    {"id": 2, "title": "B", "price": 20, "category": "Y"},
    {"id": 3, "title": "C", "price": 20, "category": "x"},
]


@pytest.fixture
def reporter():
    """In-memory output sink."""
    return RecordingReporter()


@pytest.fixture
def sample_client():
    return LocalCatalogClient(SAMPLE_PRODUCTS)


@pytest.fixture
def analyzer(sample_client, reporter):
    """Analyzer wired to the local catalog, already initialized."""
    a = ProductCatalogAnalyzer(client=sample_client, reporter=reporter)
    a.initialize()
    return a


@pytest.fixture
def tie_analyzer(reporter):
    a = ProductCatalogAnalyzer(client=LocalCatalogClient(TIE_PRODUCTS), reporter=reporter)
    a.initialize()
    return a


@pytest.fixture
def empty_analyzer(reporter):
    a = ProductCatalogAnalyzer(client=LocalCatalogClient([]), reporter=reporter)
    a.initialize()
    return a
