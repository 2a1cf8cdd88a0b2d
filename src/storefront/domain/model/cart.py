"""Cart model: line items keyed by (product_id, variant_id).

A line item carries snapshot copies of the product and variant it was
added from so it can be displayed and priced without a catalog lookup.
Snapshots are taken at add-time and do not follow later catalog edits.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from storefront.domain.model.product import Product, ProductVariant
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class CartLineItem:

    product_id: str
    variant_id: str
    quantity: int
    product: Product
    variant: ProductVariant

    @property
    def key(self) -> tuple[str, str]:
        return (self.product_id, self.variant_id)

    @property
    def unit_price(self) -> Money:
        return self.product.price_for(self.variant)

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class Cart:
    """Ordered line items; position reflects first-add time.

    Invariants (maintained by the reducer, not re-checked here):
    - every ``quantity`` is >= 1
    - at most one item per ``(product_id, variant_id)``
    """

    items: tuple[CartLineItem, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[CartLineItem]:
        return iter(self.items)

    def index_of(self, product_id: str, variant_id: str) -> int | None:
        for i, item in enumerate(self.items):
            if item.key == (product_id, variant_id):
                return i
        return None

    def get(self, product_id: str, variant_id: str) -> CartLineItem | None:
        i = self.index_of(product_id, variant_id)
        return None if i is None else self.items[i]

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.items)
