"""Order aggregate: the record a completed checkout leaves behind.

An order owns snapshot copies of what was in the cart. Later catalog
edits never touch an existing order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


class OrderStatus(Enum):
    PROCESSING = "processing"
    COMPLETED = "completed"


@dataclass(frozen=True)
class OrderLineItem:
    """Captures product, variant and price at checkout time."""

    product_id: str
    variant_id: str
    product_title: str
    variant_name: str
    quantity: int
    unit_price: Money  # locked at checkout time

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity


@dataclass
class Order:
    """Aggregate root for purchases.

    Use ``Order.create()`` for new orders; it enforces the business
    rules. ``__init__`` stays plain so the repository can reconstitute
    persisted orders without re-validating.
    """

    id: int | None
    customer_name: str
    email: str
    payment_method: str
    items: list[OrderLineItem]
    subtotal: Money
    taxes: Money
    total: Money
    status: OrderStatus = OrderStatus.PROCESSING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        customer_name: str,
        email: str,
        card_number: str,
        items: list[OrderLineItem],
        subtotal: Money,
        taxes: Money,
        total: Money,
    ) -> Order:
        """Create a new order, keeping only the last four card digits."""
        if not customer_name or not customer_name.strip():
            raise ValidationError("Customer name is required")
        if not items:
            raise ValidationError("Order must contain at least one item")

        return Order(
            id=None,
            customer_name=customer_name.strip(),
            email=email.strip().lower(),
            payment_method=f"Card ending in {card_number[-4:]}",
            items=list(items),
            subtotal=subtotal,
            taxes=taxes,
            total=total,
        )

    def complete(self) -> None:
        """Transition PROCESSING -> COMPLETED once payment is accepted."""
        if self.status != OrderStatus.PROCESSING:
            raise ValidationError(
                f"Cannot complete order, current status is {self.status.value}"
            )
        self.status = OrderStatus.COMPLETED
