"""CLI commands for favorites."""

from __future__ import annotations

import click

from storefront.domain.actions import AddToFavorites, RemoveFromFavorites
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import start_store
from storefront.infrastructure.config import Settings


@click.command("list")
@click.pass_obj
def favorite_list(settings: Settings) -> None:
    """List favorite products."""
    try:
        store = start_store(settings)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not store.state.favorites:
        click.echo("No favorites yet.")
        return
    for product_id in store.state.favorites:
        product = store.state.find_product(product_id)
        click.echo(f"{product_id:<6} {product.title if product else '(unavailable)'}")


@click.command("add")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.pass_obj
def favorite_add(settings: Settings, product_id: str) -> None:
    """Add a product to favorites."""
    try:
        store = start_store(settings)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    product = store.state.find_product(product_id)
    if product is None:
        raise click.ClickException(f"Product with ID '{product_id}' not found")
    store.dispatch(AddToFavorites(product_id))
    click.echo(f"'{product.title}' added to favorites.")


@click.command("remove")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.pass_obj
def favorite_remove(settings: Settings, product_id: str) -> None:
    """Remove a product from favorites."""
    try:
        store = start_store(settings)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    store.dispatch(RemoveFromFavorites(product_id))
    click.echo(f"Product #{product_id} removed from favorites.")
