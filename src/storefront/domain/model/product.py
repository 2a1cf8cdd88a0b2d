"""Product aggregate.

Products live independently of carts and orders. The catalog is loaded
wholesale and replaced wholesale; individual records are never mutated
in place, so both classes here are frozen.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class ProductVariant:
    """A purchasable edition of a product.

    ``id`` is unique only within its parent product. When ``price`` is
    set it overrides the parent's base price.
    """

    id: str
    name: str
    price: Money | None = None
    description: str | None = None


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    A product with no variants is still listed but can never be added
    to the cart: the reducer ignores an add whose variant it cannot find.
    """

    id: str
    title: str
    price: Money
    description: str = ""
    image: str | None = None
    featured: bool = False
    categories: tuple[str, ...] = ()
    variants: tuple[ProductVariant, ...] = ()
    features: tuple[str, ...] = ()

    def find_variant(self, variant_id: str) -> ProductVariant | None:
        for variant in self.variants:
            if variant.id == variant_id:
                return variant
        return None

    def price_for(self, variant: ProductVariant) -> Money:
        """Effective unit price: the variant's own price wins."""
        return variant.price if variant.price is not None else self.price
