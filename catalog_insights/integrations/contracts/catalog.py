from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List


# ---------------------------------------------------------------------------
# Shared data models
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Rating:
    rate: float = 0.0
    count: int = 0


@dataclass(frozen=True)
class Product:
    id: int
    title: str
    price: float
    category: str
    description: str = ""
    image: str = ""
    rating: Rating = field(default_factory=Rating)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "price": self.price,
            "category": self.category,
            "description": self.description,
            "image": self.image,
            "rating": {"rate": self.rating.rate, "count": self.rating.count},
        }


@dataclass(frozen=True)
class FilterHistoryEntry:
    filter_type: str
    criteria: str
    result_count: int
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    )

    def describe(self) -> str:
        return (
            f'{self.timestamp}: Filtered by {self.filter_type} "{self.criteria}" '
            f"- Found {self.result_count} items"
        )


# ---------------------------------------------------------------------------
# Abstract catalog source interface
# ---------------------------------------------------------------------------

class CatalogClient(ABC):
    """Every catalog source (HTTP or local) must implement this interface."""

    @abstractmethod
    def fetch_products(self) -> List[Dict[str, Any]]:
        """Return the raw product records in server order.

        Raises FetchError when the catalog cannot be retrieved.
        """

    def close(self) -> None:
        """Release any held resources."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
