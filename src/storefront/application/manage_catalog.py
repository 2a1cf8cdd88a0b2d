"""Application services: admin catalog edits.

Edits go to the catalog source first; the store then reloads the whole
catalog rather than patching its cached copy.
"""

from __future__ import annotations

from storefront.application.dto import ProductSpec
from storefront.application.load_catalog import LoadCatalogHandler
from storefront.application.store import Store
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.product import Product, ProductVariant
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository


class SaveProductHandler:

    def __init__(self, product_repo: ProductRepository, loader: LoadCatalogHandler) -> None:
        self._product_repo = product_repo
        self._loader = loader

    def handle(self, store: Store, spec: ProductSpec) -> Product:
        """Create or replace a product, then refresh the store's catalog."""
        product = build_product(spec)
        self._product_repo.save(product)
        self._loader.handle(store)
        return product


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository, loader: LoadCatalogHandler) -> None:
        self._product_repo = product_repo
        self._loader = loader

    def handle(self, store: Store, product_id: str) -> None:
        if self._product_repo.get_by_id(product_id) is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        self._product_repo.delete(product_id)
        self._loader.handle(store)


def build_product(spec: ProductSpec) -> Product:
    """Validate an admin form submission and turn it into a Product."""
    if not spec.id or not spec.id.strip():
        raise ValidationError("Product ID is required")
    if not spec.title or not spec.title.strip():
        raise ValidationError("Product title is required")

    price = Money.of(spec.price)
    if price.amount <= 0:
        raise ValidationError("Product price must be greater than zero")

    if not spec.variants:
        raise ValidationError("Product must have at least one variant")
    seen: set[str] = set()
    variants: list[ProductVariant] = []
    for v in spec.variants:
        variant_id = (v.id or "").strip()
        if not variant_id:
            raise ValidationError("Variant ID is required")
        if variant_id in seen:
            raise ValidationError(f"Duplicate variant ID '{variant_id}'")
        seen.add(variant_id)
        variant_price = Money.of(v.price) if v.price is not None else None
        if variant_price is not None and variant_price.amount <= 0:
            raise ValidationError(f"Variant '{variant_id}' price must be greater than zero")
        variants.append(
            ProductVariant(
                id=variant_id,
                name=v.name.strip() or "Standard",
                price=variant_price,
                description=v.description,
            )
        )

    return Product(
        id=spec.id.strip(),
        title=spec.title.strip(),
        price=price,
        description=spec.description,
        image=spec.image,
        featured=spec.featured,
        categories=tuple(spec.categories),
        variants=tuple(variants),
        features=tuple(spec.features),
    )
