"""End-to-end tests for the command-line front end.

Each invocation is a fresh process-like run: the cart only survives
between commands through the storage file.
"""

import json

import pytest
from click.testing import CliRunner

from storefront.infrastructure.cli.main import cli


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("STOREFRONT_TAX_RATE", "0.10")
    return tmp_path


def _run(*args):
    result = CliRunner().invoke(cli, list(args))
    return result


def _stored_cart(data_dir):
    slots = json.loads((data_dir / "storage.json").read_text(encoding="utf-8"))
    return json.loads(slots.get("cart", "[]"))


class TestProductCommands:

    def test_list_seeds_catalog(self, data_dir):
        result = _run("product", "list")
        assert result.exit_code == 0, result.output
        assert "SMC Trading Fundamentals" in result.output
        assert (data_dir / "products.json").exists()

    def test_show_unknown_product(self, data_dir):
        result = _run("product", "show", "--id", "42")
        assert result.exit_code != 0
        assert "not found" in result.output

    def test_save_then_show(self, data_dir):
        result = _run(
            "product", "save", "--id", "7", "--title", "Order Flow Handbook",
            "--price", "24.99", "--variant", "7-pdf:PDF", "--variant", "7-bundle:Bundle:34.99",
        )
        assert result.exit_code == 0, result.output

        shown = _run("product", "show", "--id", "7")
        assert "Order Flow Handbook" in shown.output
        assert "$34.99" in shown.output

    def test_save_rejects_bad_price(self, data_dir):
        result = _run("product", "save", "--id", "7", "--title", "X", "--price", "0", "--variant", "a:A")
        assert result.exit_code != 0
        assert "greater than zero" in result.output


class TestCartCommands:

    def test_add_update_remove_scenario(self, data_dir):
        assert _run("cart", "add", "--product", "1", "--variant", "v1").exit_code == 0
        assert _stored_cart(data_dir) == [{"productId": "1", "variantId": "v1", "quantity": 1}]

        assert _run("cart", "update", "--product", "1", "--variant", "v1", "--quantity", "3").exit_code == 0
        shown = _run("cart", "show")
        assert "$239.97" in shown.output

        assert _run("cart", "remove", "--product", "1", "--variant", "v1").exit_code == 0
        assert _stored_cart(data_dir) == []
        assert "Your cart is empty." in _run("cart", "show").output

    def test_repeated_add_merges(self, data_dir):
        _run("cart", "add", "--product", "1", "--variant", "v2", "--quantity", "2")
        _run("cart", "add", "--product", "1", "--variant", "v2", "--quantity", "3")
        assert _stored_cart(data_dir) == [{"productId": "1", "variantId": "v2", "quantity": 5}]

    def test_unknown_variant_fails_and_leaves_cart(self, data_dir):
        result = _run("cart", "add", "--product", "1", "--variant", "nope")
        assert result.exit_code != 0
        assert "Variant 'nope' not found" in result.output
        assert _stored_cart(data_dir) == []

    def test_zero_quantity_rejected_on_add(self, data_dir):
        result = _run("cart", "add", "--product", "1", "--variant", "v1", "--quantity", "0")
        assert result.exit_code != 0

    def test_update_to_zero_removes(self, data_dir):
        _run("cart", "add", "--product", "2", "--variant", "2-standard")
        result = _run("cart", "update", "--product", "2", "--variant", "2-standard", "--quantity", "0")
        assert "removed" in result.output
        assert _stored_cart(data_dir) == []

    def test_deleted_product_is_dropped_on_next_start(self, data_dir):
        _run("cart", "add", "--product", "3", "--variant", "3-standard")
        _run("cart", "add", "--product", "2", "--variant", "2-standard")
        assert _run("product", "delete", "--id", "3").exit_code == 0

        shown = _run("cart", "show")
        assert "Advanced Market Structure" not in shown.output
        assert "ICT Trader's Guide" in shown.output

    def test_undecodable_storage_starts_with_empty_cart(self, data_dir):
        (data_dir / "storage.json").write_bytes(b'{"cart": "\xff\xfe"}')
        result = _run("cart", "show")
        assert result.exit_code == 0, result.output
        assert "Your cart is empty." in result.output

    def test_corrupt_storage_starts_with_empty_cart(self, data_dir):
        (data_dir / "storage.json").write_text(json.dumps({"cart": "{oops"}), encoding="utf-8")
        result = _run("cart", "show")
        assert result.exit_code == 0
        assert "Your cart is empty." in result.output


class TestFavoriteCommands:

    def test_add_list_remove(self, data_dir):
        assert _run("favorite", "add", "--product", "5").exit_code == 0
        assert _run("favorite", "add", "--product", "5").exit_code == 0
        listed = _run("favorite", "list")
        assert listed.output.count("Trader Psychology Blueprint") == 1

        _run("favorite", "remove", "--product", "5")
        assert "No favorites yet." in _run("favorite", "list").output


class TestOrderCommands:

    def _checkout(self, *extra):
        return _run(
            "order", "checkout", "--name", "Alice", "--email", "alice@example.com",
            "--card", "4242424242424242", "--exp-month", "12", "--exp-year", "30",
            "--cvc", "123", *extra,
        )

    def test_checkout_clears_cart_and_records_purchase(self, data_dir):
        _run("cart", "add", "--product", "4", "--variant", "4-standard")
        _run("cart", "add", "--product", "6", "--variant", "6-standard", "--quantity", "3")

        result = self._checkout()
        assert result.exit_code == 0, result.output
        assert "Card ending in 4242" in result.output
        assert "$109.96" in result.output
        assert _stored_cart(data_dir) == []

        purchases = _run("order", "purchases", "--email", "alice@example.com")
        assert "Order #1" in purchases.output

        shown = _run("order", "show", "--id", "1", "--email", "alice@example.com")
        assert shown.exit_code == 0, shown.output
        assert "Card ending in 4242" in shown.output

    def test_checkout_empty_cart(self, data_dir):
        result = self._checkout()
        assert result.exit_code != 0
        assert "Cart is empty" in result.output

    def test_no_purchases(self, data_dir):
        assert "No purchases found." in _run("order", "purchases", "--email", "x@y.z").output
