"""CLI commands for the catalog."""

from __future__ import annotations

import click

from storefront.application.dto import ProductSpec, VariantSpec
from storefront.application.manage_catalog import DeleteProductHandler, SaveProductHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.service.totals import format_currency
from storefront.infrastructure.bootstrap import (
    catalog_loader,
    product_repository,
    start_store,
)
from storefront.infrastructure.config import Settings


def _parse_variant(raw: str) -> VariantSpec:
    """Parse 'id:name' or 'id:name:price' into a VariantSpec."""
    parts = [p.strip() for p in raw.split(":")]
    if len(parts) == 2:
        return VariantSpec(id=parts[0], name=parts[1])
    if len(parts) == 3:
        return VariantSpec(id=parts[0], name=parts[1], price=parts[2])
    raise click.BadParameter(
        f"Invalid variant format '{raw}'. Expected 'id:name' or 'id:name:price'."
    )


@click.command("list")
@click.option("--featured", is_flag=True, default=False, help="Only featured products.")
@click.pass_obj
def product_list(settings: Settings, featured: bool) -> None:
    """List all products in the catalog."""
    try:
        store = start_store(settings)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    products = [p for p in store.state.products if p.featured or not featured]
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Title':<36} {'Price':>10}  Variants")
    click.echo("-" * 70)
    for p in products:
        variants = ", ".join(v.id for v in p.variants) or "-"
        marker = "*" if p.id in store.state.favorites else " "
        click.echo(f"{p.id:<6} {p.title:<36} {format_currency(p.price):>10} {marker}{variants}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_show(settings: Settings, product_id: str) -> None:
    """Show one product with its variants."""
    try:
        store = start_store(settings)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    p = store.state.find_product(product_id)
    if p is None:
        raise click.ClickException(f"Product with ID '{product_id}' not found")

    click.echo(f"#{p.id}  {p.title}  {format_currency(p.price)}")
    if p.categories:
        click.echo(f"Categories: {', '.join(p.categories)}")
    if p.description:
        click.echo(p.description)
    for feature in p.features:
        click.echo(f"  - {feature}")
    click.echo()
    click.echo(f"  {'Variant':<16} {'Name':<24} {'Price':>10}")
    for v in p.variants:
        click.echo(f"  {v.id:<16} {v.name:<24} {format_currency(p.price_for(v)):>10}")


@click.command("save")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--title", required=True, help="Product title.")
@click.option("--price", required=True, help="Base price (e.g. 29.99).")
@click.option("--description", default="", help="Description.")
@click.option("--image", default=None, help="Image reference.")
@click.option("--featured", is_flag=True, default=False, help="Mark as featured.")
@click.option("--category", "categories", multiple=True, help="Category label (repeatable).")
@click.option("--feature", "features", multiple=True, help="Feature bullet (repeatable).")
@click.option(
    "--variant", "variants", multiple=True, required=True,
    help="Variant as 'id:name' or 'id:name:price' (repeatable).",
)
@click.pass_obj
def product_save(
    settings: Settings,
    product_id: str,
    title: str,
    price: str,
    description: str,
    image: str | None,
    featured: bool,
    categories: tuple[str, ...],
    features: tuple[str, ...],
    variants: tuple[str, ...],
) -> None:
    """Add a product or replace an existing one."""
    spec = ProductSpec(
        id=product_id,
        title=title,
        price=price,
        description=description,
        image=image,
        featured=featured,
        categories=categories,
        variants=tuple(_parse_variant(v) for v in variants),
        features=features,
    )
    handler = SaveProductHandler(product_repository(settings), catalog_loader(settings))

    try:
        store = start_store(settings)
        saved = handler.handle(store, spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{saved.id} '{saved.title}' saved at {format_currency(saved.price)}")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_delete(settings: Settings, product_id: str) -> None:
    """Remove a product from the catalog."""
    handler = DeleteProductHandler(product_repository(settings), catalog_loader(settings))

    try:
        store = start_store(settings)
        handler.handle(store, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")
