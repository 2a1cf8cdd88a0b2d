"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CheckoutForm:
    """Input: the mocked payment form as the customer filled it in."""

    name: str
    email: str
    card_number: str
    exp_month: str
    exp_year: str
    cvc: str


@dataclass(frozen=True)
class VariantSpec:
    """Input: one variant of a product being saved by an admin."""

    id: str
    name: str
    price: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class ProductSpec:
    """Input: a product as submitted from the admin catalog form."""

    id: str
    title: str
    price: str
    description: str = ""
    image: str | None = None
    featured: bool = False
    categories: tuple[str, ...] = ()
    variants: tuple[VariantSpec, ...] = ()
    features: tuple[str, ...] = ()


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the user."""

    product_id: str
    variant_id: str
    title: str
    variant_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$79.99"
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    lines: list[CartLineDTO]
    item_count: int
    subtotal: str
    taxes: str
    total: str


@dataclass(frozen=True)
class OrderLineItemDTO:
    product_title: str
    variant_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    customer_name: str
    email: str
    payment_method: str
    status: str
    items: list[OrderLineItemDTO]
    subtotal: str
    taxes: str
    total: str
    created_at: str
