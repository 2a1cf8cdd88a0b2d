"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from decimal import Decimal

from storefront.application.dto import CartDTO
from storefront.application.mapping import cart_to_dto
from storefront.application.store import Store


class ShowCartHandler:

    def __init__(self, tax_rate: Decimal) -> None:
        self._tax_rate = tax_rate

    def handle(self, store: Store) -> CartDTO:
        return cart_to_dto(store.state.cart, self._tax_rate)
