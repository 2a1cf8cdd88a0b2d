"""Application service: Show Order use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO
from storefront.application.mapping import order_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, email: str) -> OrderDTO:
        """Return one purchase, only to the customer who placed it."""
        order = self._order_repo.get_by_id(order_id)
        if order is None or order.email != email.strip().lower():
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return order_to_dto(order)
