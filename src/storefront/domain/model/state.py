"""Root state held by the Store."""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.model.cart import Cart
from storefront.domain.model.product import Product


@dataclass(frozen=True)
class StoreState:
    """Immutable snapshot of everything the store owns.

    The reducer never mutates an instance; every change produces a new
    one via ``dataclasses.replace``.
    """

    products: tuple[Product, ...] = ()
    cart: Cart = field(default_factory=Cart)
    favorites: tuple[str, ...] = ()
    loading: bool = False
    error: str | None = None

    def find_product(self, product_id: str) -> Product | None:
        for product in self.products:
            if product.id == product_id:
                return product
        return None
