"""Derived totals: pure functions over a cart, plus currency formatting."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from storefront.domain.model.cart import Cart
from storefront.domain.model.value_objects import CENTS, Money


def subtotal(cart: Cart) -> Money:
    """Sum of unit price x quantity across all line items (unrounded)."""
    result = Money.zero()
    for item in cart:
        result = result + item.line_total
    return result


def taxes(amount: Money, rate: Decimal) -> Money:
    return Money(
        (amount.amount * rate).quantize(CENTS, rounding=ROUND_HALF_UP),
        amount.currency,
    )


def order_total(amount: Money, rate: Decimal) -> Money:
    return amount.rounded() + taxes(amount, rate)


def format_currency(amount: Money | Decimal | int | str) -> str:
    """Format an amount as dollars to two places, e.g. ``"$1,234.50"``."""
    if not isinstance(amount, Money):
        amount = Money.of(amount)
    return str(amount)
