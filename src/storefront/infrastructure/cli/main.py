import logging

import click

from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_show,
    cart_update,
)
from storefront.infrastructure.cli.favorite_commands import (
    favorite_add,
    favorite_list,
    favorite_remove,
)
from storefront.infrastructure.cli.order_commands import (
    order_checkout,
    order_purchases,
    order_show,
)
from storefront.infrastructure.cli.product_commands import (
    product_delete,
    product_list,
    product_save,
    product_show,
)
from storefront.infrastructure.config import get_settings


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Storefront: digital goods catalog, cart and checkout"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = get_settings()


@cli.group()
def product() -> None:
    """Browse and edit the catalog."""


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


@cli.group()
def favorite() -> None:
    """Manage favorite products."""


@cli.group()
def order() -> None:
    """Check out and review purchases."""


# Register subcommands
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_save)
product.add_command(product_show)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
favorite.add_command(favorite_add)
favorite.add_command(favorite_list)
favorite.add_command(favorite_remove)
order.add_command(order_checkout)
order.add_command(order_purchases)
order.add_command(order_show)
