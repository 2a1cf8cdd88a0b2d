"""CLI commands for checkout and purchase history."""

from __future__ import annotations

import click

from storefront.application.checkout import CheckoutHandler
from storefront.application.dto import CheckoutForm, OrderDTO
from storefront.application.list_purchases import ListPurchasesHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import order_repository, start_store
from storefront.infrastructure.config import Settings


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name} <{dto.email}>")
    click.echo(f"Payment:  {dto.payment_method}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<36} {'Variant':<20} {'Qty':>5} {'Total':>10}")
    click.echo(f"  {'-'*74}")
    for item in dto.items:
        click.echo(
            f"  {item.product_title:<36} {item.variant_name:<20} "
            f"{item.quantity:>5} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*74}")
    click.echo(f"  {'Subtotal':<52} {dto.subtotal:>21}")
    click.echo(f"  {'Taxes':<52} {dto.taxes:>21}")
    click.echo(f"  {'Order Total':<52} {dto.total:>21}")


@click.command("checkout")
@click.option("--name", required=True, help="Customer name.")
@click.option("--email", required=True, help="Customer email.")
@click.option("--card", "card_number", required=True, help="Card number.")
@click.option("--exp-month", required=True, help="Card expiry month (1-12).")
@click.option("--exp-year", required=True, help="Card expiry year.")
@click.option("--cvc", required=True, help="Card security code.")
@click.pass_obj
def order_checkout(
    settings: Settings,
    name: str,
    email: str,
    card_number: str,
    exp_month: str,
    exp_year: str,
    cvc: str,
) -> None:
    """Pay for the cart (mocked) and place an order."""
    form = CheckoutForm(
        name=name,
        email=email,
        card_number=card_number,
        exp_month=exp_month,
        exp_year=exp_year,
        cvc=cvc,
    )
    handler = CheckoutHandler(order_repository(settings), settings.tax_rate)

    try:
        store = start_store(settings)
        dto = handler.handle(store, form)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Thank you for your purchase!")
    _display_order(dto)


@click.command("purchases")
@click.option("--email", required=True, help="Customer email.")
@click.pass_obj
def order_purchases(settings: Settings, email: str) -> None:
    """List past orders for an email address."""
    handler = ListPurchasesHandler(order_repository(settings))

    try:
        orders = handler.handle(email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No purchases found.")
        return
    for dto in orders:
        _display_order(dto)
        click.echo()


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.option("--email", required=True, help="Email the order was placed with.")
@click.pass_obj
def order_show(settings: Settings, order_id: int, email: str) -> None:
    """Show details of a past order."""
    handler = ShowOrderHandler(order_repository(settings))

    try:
        dto = handler.handle(order_id, email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)
