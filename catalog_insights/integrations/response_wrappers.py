from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field, ValidationError

from catalog_insights.error_handler import CatalogResponseError
from catalog_insights.integrations.contracts.catalog import Product, Rating


class RatingModel(BaseModel):
    rate: float = 0.0
    count: int = Field(default=0, ge=0)


class ProductResponseModel(BaseModel):
    id: int
    title: str
    price: float = Field(ge=0)
    category: str
    description: str = ""
    image: str = ""
    rating: RatingModel = Field(default_factory=RatingModel)


def normalize_catalog_response(raw: Any) -> List[Product]:
    if not isinstance(raw, list):
        raise CatalogResponseError(
            f"Catalog response must be a JSON array; got {type(raw).__name__}.",
            payload={"raw": raw},
        )
    return [normalize_product(item) for item in raw]


def normalize_product(raw: Any) -> Product:
    if isinstance(raw, Product):
        return raw
    if not isinstance(raw, dict):
        raise CatalogResponseError(f"Catalog entry must be an object; got {raw!r}.")

    # Null optional fields fall back to model defaults.
    payload = {key: value for key, value in raw.items() if value is not None}
    model = _build_model(ProductResponseModel, payload)
    return Product(
        id=model.id,
        title=model.title,
        price=model.price,
        category=model.category,
        description=model.description,
        image=model.image,
        rating=Rating(rate=model.rating.rate, count=model.rating.count),
    )


def _build_model(model_type, raw: Dict[str, Any]):
    try:
        return model_type(**raw)
    except TypeError as exc:
        raise CatalogResponseError(f"Catalog entry has invalid keys: {exc}", payload=raw) from exc
    except ValidationError as exc:
        raise CatalogResponseError(f"Catalog entry validation failed: {exc}", payload=raw) from exc
