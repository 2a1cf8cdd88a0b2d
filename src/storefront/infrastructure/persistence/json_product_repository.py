"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from decimal import Decimal, InvalidOperation
from pathlib import Path

from storefront.domain.exceptions import CatalogUnavailableError
from storefront.domain.model.product import Product, ProductVariant
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path, seed: list[dict] | None = None) -> None:
        self._file_path = file_path
        self._ensure_file(seed or [])

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.id] = product
        self._persist(products)

    def delete(self, product_id: str) -> None:
        products = self._load()
        if products.pop(product_id, None) is not None:
            self._persist(products)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "title": product.title,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "description": product.description,
            "image": product.image,
            "featured": product.featured,
            "categories": list(product.categories),
            "variants": [
                {
                    "id": v.id,
                    "name": v.name,
                    "price": str(v.price.amount) if v.price is not None else None,
                    "description": v.description,
                }
                for v in product.variants
            ],
            "features": list(product.features),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        currency = raw.get("currency", "USD")
        return Product(
            id=raw["id"],
            title=raw["title"],
            price=Money(Decimal(raw["price"]), currency),
            description=raw.get("description", ""),
            image=raw.get("image"),
            featured=bool(raw.get("featured", False)),
            categories=tuple(raw.get("categories", [])),
            variants=tuple(
                ProductVariant(
                    id=v["id"],
                    name=v["name"],
                    price=(
                        Money(Decimal(v["price"]), currency)
                        if v.get("price") is not None
                        else None
                    ),
                    description=v.get("description"),
                )
                for v in raw.get("variants", [])
            ),
            features=tuple(raw.get("features", [])),
        )

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict[str, Product]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            return {item["id"]: self._to_domain(item) for item in raw}
        except (OSError, ValueError, KeyError, TypeError, InvalidOperation) as exc:
            raise CatalogUnavailableError(
                f"Cannot read catalog from {self._file_path}: {exc}"
            ) from exc

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [self._to_raw(p) for p in products.values()]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self, seed: list[dict]) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps(seed, indent=2) + "\n", encoding="utf-8"
            )
