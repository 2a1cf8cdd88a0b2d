"""Tests for the admin catalog use cases."""

import pytest

from storefront.application.dto import ProductSpec, VariantSpec
from storefront.application.load_catalog import LoadCatalogHandler
from storefront.application.manage_catalog import (
    DeleteProductHandler,
    SaveProductHandler,
    build_product,
)
from storefront.application.store import Store
from storefront.domain.actions import AddToCart
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository, make_product


def _spec(**overrides) -> ProductSpec:
    fields = dict(
        id="7",
        title="Order Flow Handbook",
        price="24.99",
        variants=(VariantSpec("7-pdf", "PDF"), VariantSpec("7-bundle", "Bundle", "34.99")),
        categories=("Order Flow",),
    )
    fields.update(overrides)
    return ProductSpec(**fields)


def _setup(products=None):
    repo = FakeProductRepository(products if products is not None else [make_product("1")])
    store = Store()
    loader = LoadCatalogHandler(repo)
    loader.handle(store)
    return repo, store, loader


class TestBuildProduct:

    def test_maps_fields(self):
        product = build_product(_spec())
        assert product.id == "7"
        assert product.price == Money.of("24.99")
        assert product.categories == ("Order Flow",)
        assert product.find_variant("7-bundle").price == Money.of("34.99")
        assert product.find_variant("7-pdf").price is None

    def test_title_required(self):
        with pytest.raises(ValidationError, match="title is required"):
            build_product(_spec(title="  "))

    def test_price_must_be_positive(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            build_product(_spec(price="0"))

    def test_needs_a_variant(self):
        with pytest.raises(ValidationError, match="at least one variant"):
            build_product(_spec(variants=()))

    def test_duplicate_variant_ids_rejected(self):
        variants = (VariantSpec("a", "A"), VariantSpec("a", "Again"))
        with pytest.raises(ValidationError, match="Duplicate variant"):
            build_product(_spec(variants=variants))


class TestSaveProduct:

    def test_new_product_appears_in_store(self):
        repo, store, loader = _setup()
        SaveProductHandler(repo, loader).handle(store, _spec())
        assert [p.id for p in store.state.products] == ["1", "7"]
        assert repo.get_by_id("7") is not None

    def test_edit_does_not_touch_cart_snapshot(self):
        repo, store, loader = _setup()
        original = store.state.find_product("1")
        store.dispatch(AddToCart(original, "1-standard"))

        SaveProductHandler(repo, loader).handle(
            store, _spec(id="1", price="1.00", variants=(VariantSpec("1-standard", "Standard"),))
        )

        assert store.state.find_product("1").price == Money.of("1.00")
        assert store.state.cart.get("1", "1-standard").unit_price == Money.of("79.99")


class TestDeleteProduct:

    def test_removes_from_store(self):
        repo, store, loader = _setup([make_product("1"), make_product("2")])
        DeleteProductHandler(repo, loader).handle(store, "1")
        assert [p.id for p in store.state.products] == ["2"]

    def test_unknown_product(self):
        repo, store, loader = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            DeleteProductHandler(repo, loader).handle(store, "42")
