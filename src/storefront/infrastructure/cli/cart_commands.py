"""CLI commands for the shopping cart.

Every command starts a store (catalog load + hydration), dispatches one
action, and relies on the persistence bridge to write the cart back.
"""

from __future__ import annotations

import click

from storefront.application.dto import CartDTO
from storefront.application.show_cart import ShowCartHandler
from storefront.application.store import Store
from storefront.domain.actions import AddToCart, ClearCart, RemoveFromCart, UpdateCartItem
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import start_store
from storefront.infrastructure.config import Settings


def _open_store(settings: Settings) -> Store:
    try:
        return start_store(settings)
    except DomainException as exc:
        raise click.ClickException(str(exc))


def _display_cart(dto: CartDTO) -> None:
    """Shared formatting for displaying the cart."""
    if not dto.lines:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'Product':<36} {'Variant':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*85}")
    for line in dto.lines:
        click.echo(
            f"  {line.title:<36} {line.variant_name:<20} {line.quantity:>5} "
            f"{line.unit_price:>10} {line.line_total:>10}"
        )
    click.echo(f"  {'-'*85}")
    click.echo(f"  {'Subtotal':<63} {dto.subtotal:>22}")
    click.echo(f"  {'Taxes':<63} {dto.taxes:>22}")
    click.echo(f"  {'Total':<63} {dto.total:>22}")


@click.command("show")
@click.pass_obj
def cart_show(settings: Settings) -> None:
    """Show the cart with totals."""
    store = _open_store(settings)
    _display_cart(ShowCartHandler(settings.tax_rate).handle(store))


@click.command("add")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--variant", "variant_id", required=True, help="Variant ID.")
@click.option("--quantity", default=1, type=click.IntRange(min=1), help="Quantity to add.")
@click.pass_obj
def cart_add(settings: Settings, product_id: str, variant_id: str, quantity: int) -> None:
    """Add a product variant to the cart."""
    store = _open_store(settings)
    product = store.state.find_product(product_id)
    if product is None:
        raise click.ClickException(f"Product with ID '{product_id}' not found")

    before = store.state
    store.dispatch(AddToCart(product, variant_id, quantity))
    if store.state is before:
        raise click.ClickException(
            f"Variant '{variant_id}' not found for product '{product.title}'"
        )

    line = store.state.cart.get(product_id, variant_id)
    click.echo(f"'{product.title}' ({line.variant.name}) in cart, quantity {line.quantity}")


@click.command("update")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--variant", "variant_id", required=True, help="Variant ID.")
@click.option("--quantity", required=True, type=int, help="New quantity; below 1 removes the item.")
@click.pass_obj
def cart_update(settings: Settings, product_id: str, variant_id: str, quantity: int) -> None:
    """Set the quantity of a cart line."""
    store = _open_store(settings)
    if store.state.cart.get(product_id, variant_id) is None:
        raise click.ClickException(f"Item {product_id}/{variant_id} is not in the cart")

    store.dispatch(UpdateCartItem(product_id, variant_id, quantity))
    if quantity < 1:
        click.echo(f"Item {product_id}/{variant_id} removed from cart.")
    else:
        click.echo(f"Item {product_id}/{variant_id} quantity set to {quantity}.")


@click.command("remove")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--variant", "variant_id", required=True, help="Variant ID.")
@click.pass_obj
def cart_remove(settings: Settings, product_id: str, variant_id: str) -> None:
    """Remove a line from the cart."""
    store = _open_store(settings)
    store.dispatch(RemoveFromCart(product_id, variant_id))
    click.echo(f"Item {product_id}/{variant_id} removed from cart.")


@click.command("clear")
@click.pass_obj
def cart_clear(settings: Settings) -> None:
    """Empty the cart."""
    store = _open_store(settings)
    store.dispatch(ClearCart())
    click.echo("Cart cleared.")
