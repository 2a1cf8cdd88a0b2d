"""Domain -> DTO mapping shared by the query and command handlers."""

from __future__ import annotations

from decimal import Decimal

from storefront.application.dto import CartDTO, CartLineDTO, OrderDTO, OrderLineItemDTO
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import Order
from storefront.domain.service.totals import format_currency, order_total, subtotal, taxes


def cart_to_dto(cart: Cart, tax_rate: Decimal) -> CartDTO:
    sub = subtotal(cart)
    return CartDTO(
        lines=[
            CartLineDTO(
                product_id=item.product_id,
                variant_id=item.variant_id,
                title=item.product.title,
                variant_name=item.variant.name,
                quantity=item.quantity,
                unit_price=format_currency(item.unit_price),
                line_total=format_currency(item.line_total),
            )
            for item in cart
        ],
        item_count=cart.total_quantity,
        subtotal=format_currency(sub),
        taxes=format_currency(taxes(sub, tax_rate)),
        total=format_currency(order_total(sub, tax_rate)),
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        customer_name=order.customer_name,
        email=order.email,
        payment_method=order.payment_method,
        status=order.status.value,
        items=[
            OrderLineItemDTO(
                product_title=item.product_title,
                variant_name=item.variant_name,
                quantity=item.quantity,
                unit_price=format_currency(item.unit_price),
                line_total=format_currency(item.line_total),
            )
            for item in order.items
        ],
        subtotal=format_currency(order.subtotal),
        taxes=format_currency(order.taxes),
        total=format_currency(order.total),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
