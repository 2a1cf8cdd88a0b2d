"""Application service: List Purchases use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO
from storefront.application.mapping import order_to_dto
from storefront.domain.exceptions import ValidationError
from storefront.domain.repository.order_repository import OrderRepository


class ListPurchasesHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, email: str) -> list[OrderDTO]:
        """Every order placed with ``email``, newest first."""
        if not email or not email.strip():
            raise ValidationError("Email is required")
        orders = self._order_repo.list_by_email(email.strip().lower())
        orders.sort(key=lambda o: (o.created_at, o.id or 0), reverse=True)
        return [order_to_dto(order) for order in orders]
