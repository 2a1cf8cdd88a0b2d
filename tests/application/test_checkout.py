"""Tests for the Checkout, ShowCart and ListPurchases use cases.

Uses in-memory fakes, no file I/O.
"""

from decimal import Decimal

import pytest

from storefront.application.checkout import CheckoutHandler
from storefront.application.dto import CheckoutForm
from storefront.application.list_purchases import ListPurchasesHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.store import Store
from storefront.domain.actions import AddToCart
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.order import OrderStatus
from storefront.domain.model.state import StoreState
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeOrderRepository, make_product

TAX = Decimal("0.10")
P4 = make_product("4", price="49.99", title="Supply and Demand Mastery")
P6 = make_product("6", price="19.99", title="Trading Plan Template")


def _form(**overrides) -> CheckoutForm:
    fields = dict(
        name="Alice",
        email="Alice@Example.com",
        card_number="4242 4242 4242 4242",
        exp_month="12",
        exp_year="2030",
        cvc="123",
    )
    fields.update(overrides)
    return CheckoutForm(**fields)


def _setup(fail_on_save: bool = False) -> tuple[Store, FakeOrderRepository, CheckoutHandler]:
    store = Store(initial_state=StoreState(products=(P4, P6)))
    store.dispatch(AddToCart(P4, "4-standard", 1))
    store.dispatch(AddToCart(P6, "6-standard", 3))
    repo = FakeOrderRepository(fail_on_save=fail_on_save)
    return store, repo, CheckoutHandler(repo, TAX)


class TestCheckoutHappyPath:

    def test_places_order_with_totals(self):
        store, _, handler = _setup()
        dto = handler.handle(store, _form())
        assert dto.subtotal == "$109.96"
        assert dto.taxes == "$11.00"
        assert dto.total == "$120.96"
        assert dto.status == "completed"
        assert dto.id == 1

    def test_clears_cart(self):
        store, _, handler = _setup()
        handler.handle(store, _form())
        assert len(store.state.cart) == 0

    def test_masks_card_number(self):
        store, repo, handler = _setup()
        dto = handler.handle(store, _form())
        saved = repo.get_by_id(dto.id)
        assert saved.payment_method == "Card ending in 4242"
        assert dto.payment_method == "Card ending in 4242"

    def test_snapshots_line_items(self):
        store, repo, handler = _setup()
        dto = handler.handle(store, _form())
        saved = repo.get_by_id(dto.id)
        assert [(i.product_id, i.variant_id, i.quantity) for i in saved.items] == [
            ("4", "4-standard", 1),
            ("6", "6-standard", 3),
        ]
        assert saved.items[1].unit_price == Money.of("19.99")
        assert saved.items[1].product_title == "Trading Plan Template"
        assert saved.status == OrderStatus.COMPLETED

    def test_email_needs_only_an_at_sign(self):
        store, _, handler = _setup()
        dto = handler.handle(store, _form(email="ops@localhost"))
        assert dto.email == "ops@localhost"

    def test_normalizes_email(self):
        store, repo, handler = _setup()
        dto = handler.handle(store, _form())
        assert dto.email == "alice@example.com"


class TestCheckoutValidation:

    def test_empty_cart_rejected(self):
        repo = FakeOrderRepository()
        with pytest.raises(ValidationError, match="Cart is empty"):
            CheckoutHandler(repo, TAX).handle(Store(), _form())

    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"name": " "}, "Name is required"),
            ({"email": "not-an-email"}, "Invalid email"),
            ({"card_number": "1234"}, "Card number"),
            ({"card_number": "4242-4242-4242-abcd"}, "Card number"),
            ({"exp_month": "13"}, "expiry month"),
            ({"exp_year": "203"}, "expiry year"),
            ({"cvc": "12"}, "CVC"),
            ({"exp_month": "\u00b2"}, "expiry month"),
            ({"card_number": "\u0664" * 16}, "Card number"),
            ({"cvc": "\u0661\u0662\u0663"}, "CVC"),
            ({"exp_year": "\u0662\u0660\u0663\u0660"}, "expiry year"),
        ],
    )
    def test_bad_form_rejected_and_cart_kept(self, overrides, message):
        store, repo, handler = _setup()
        with pytest.raises(ValidationError, match=message):
            handler.handle(store, _form(**overrides))
        assert len(store.state.cart) == 2
        assert repo.get_by_id(1) is None

    def test_repository_failure_keeps_cart(self):
        store, _, handler = _setup(fail_on_save=True)
        with pytest.raises(OSError):
            handler.handle(store, _form())
        assert len(store.state.cart) == 2


class TestShowCart:

    def test_formats_lines_and_totals(self):
        store, _, _ = _setup()
        dto = ShowCartHandler(TAX).handle(store)
        assert [(l.product_id, l.quantity, l.line_total) for l in dto.lines] == [
            ("4", 1, "$49.99"),
            ("6", 3, "$59.97"),
        ]
        assert dto.item_count == 4
        assert dto.subtotal == "$109.96"
        assert dto.total == "$120.96"

    def test_empty_cart(self):
        dto = ShowCartHandler(TAX).handle(Store())
        assert dto.lines == []
        assert dto.subtotal == "$0.00"


class TestListPurchases:

    def test_lists_orders_newest_first(self):
        store, repo, handler = _setup()
        first = handler.handle(store, _form())
        store.dispatch(AddToCart(P4, "4-standard", 2))
        second = handler.handle(store, _form())

        orders = ListPurchasesHandler(repo).handle("ALICE@example.com")
        assert [o.id for o in orders] == [second.id, first.id]
        assert orders[0].total == "$109.98"

    def test_other_customers_not_listed(self):
        store, repo, handler = _setup()
        handler.handle(store, _form())
        assert ListPurchasesHandler(repo).handle("bob@example.com") == []

    def test_email_required(self):
        with pytest.raises(ValidationError, match="Email is required"):
            ListPurchasesHandler(FakeOrderRepository()).handle("")


class TestShowOrder:

    def test_returns_order_for_its_customer(self):
        store, repo, handler = _setup()
        placed = handler.handle(store, _form())
        dto = ShowOrderHandler(repo).handle(placed.id, "ALICE@example.com")
        assert dto.total == "$120.96"
        assert [i.quantity for i in dto.items] == [1, 3]

    def test_other_customer_cannot_see_order(self):
        store, repo, handler = _setup()
        placed = handler.handle(store, _form())
        with pytest.raises(EntityNotFoundError, match="not found"):
            ShowOrderHandler(repo).handle(placed.id, "bob@example.com")

    def test_unknown_order(self):
        with pytest.raises(EntityNotFoundError, match="Order #7 not found"):
            ShowOrderHandler(FakeOrderRepository()).handle(7, "alice@example.com")
