"""Application service: Checkout use case.

Payment is mocked: the form is validated for shape only and never sent
anywhere. The cart is snapshotted into an Order, the order is persisted,
and only then is the cart cleared. If persisting fails the cart stays
as it was.
"""

from __future__ import annotations

import logging
import re
from decimal import Decimal

from storefront.application.dto import CheckoutForm, OrderDTO
from storefront.application.mapping import order_to_dto
from storefront.application.store import Store
from storefront.domain.actions import ClearCart
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import Order, OrderLineItem
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.totals import order_total, subtotal, taxes

logger = logging.getLogger(__name__)

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+$")


class CheckoutHandler:

    def __init__(self, order_repo: OrderRepository, tax_rate: Decimal) -> None:
        self._order_repo = order_repo
        self._tax_rate = tax_rate

    def handle(self, store: Store, form: CheckoutForm) -> OrderDTO:
        """Place an order for everything in the cart.

        Steps:
        1. Reject an empty cart and a malformed payment form.
        2. Snapshot each cart line (title, variant, unit price).
        3. Let the Order aggregate validate and mask the card.
        4. Persist, mark completed, clear the cart, return a DTO.
        """
        cart = store.state.cart
        if not cart.items:
            raise ValidationError("Cart is empty")

        card_number = validate_form(form)

        line_items = [
            OrderLineItem(
                product_id=item.product_id,
                variant_id=item.variant_id,
                product_title=item.product.title,
                variant_name=item.variant.name,
                quantity=item.quantity,
                unit_price=item.unit_price,  # <-- price snapshot
            )
            for item in cart
        ]

        sub = subtotal(cart)
        order = Order.create(
            customer_name=form.name,
            email=form.email,
            card_number=card_number,
            items=line_items,
            subtotal=sub.rounded(),
            taxes=taxes(sub, self._tax_rate),
            total=order_total(sub, self._tax_rate),
        )
        order.complete()
        self._order_repo.save(order)
        logger.info("Order #%s placed for %s (%s)", order.id, order.email, order.total)

        store.dispatch(ClearCart())
        return order_to_dto(order)


def validate_form(form: CheckoutForm) -> str:
    """Check the payment form; returns the card number as bare digits."""
    if not form.name or not form.name.strip():
        raise ValidationError("Name is required")
    if not form.email or not _EMAIL_RE.match(form.email.strip()):
        raise ValidationError(f"Invalid email address: {form.email!r}")

    digits = re.sub(r"[\s-]", "", form.card_number or "")
    if not re.fullmatch(r"[0-9]{13,19}", digits):
        raise ValidationError("Card number must be 13 to 19 digits")

    month = (form.exp_month or "").strip()
    if not re.fullmatch(r"[0-9]{1,2}", month) or not 1 <= int(month) <= 12:
        raise ValidationError(f"Invalid expiry month: {form.exp_month!r}")

    year = (form.exp_year or "").strip()
    if not re.fullmatch(r"[0-9]{2}|[0-9]{4}", year):
        raise ValidationError(f"Invalid expiry year: {form.exp_year!r}")

    cvc = (form.cvc or "").strip()
    if not re.fullmatch(r"[0-9]{3,4}", cvc):
        raise ValidationError("CVC must be 3 or 4 digits")

    return digits
