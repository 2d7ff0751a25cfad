"""CLI commands for shipping and payment selection and checkout."""

from __future__ import annotations

import click

from storefront.application.checkout import CheckoutHandler
from storefront.application.list_payment_methods import ListPaymentMethodsHandler
from storefront.application.list_shipping_methods import ListShippingMethodsHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    cart_repository,
    order_total_calculator,
    payment_method_repository,
    shipping_method_repository,
)
from storefront.infrastructure.cli.cart_commands import (
    cart_option,
    display_lines,
    display_totals,
)


@click.command("list")
def shipping_list() -> None:
    """List available shipping methods."""
    methods = ListShippingMethodsHandler(shipping_method_repository()).handle()

    click.echo(f"{'ID':<10} {'Name':<20} {'Cost':>8} {'Free from':>10} {'Days':>9}")
    click.echo("-" * 61)
    for m in methods:
        click.echo(
            f"{m.id:<10} {m.name:<20} {m.cost:>8} {m.free_above or '':>10} {m.estimated_days:>9}"
        )


@click.command("list")
def payment_list() -> None:
    """List accepted payment methods."""
    methods = ListPaymentMethodsHandler(payment_method_repository()).handle()

    click.echo(f"{'ID':<14} {'Name':<20} Description")
    click.echo("-" * 70)
    for m in methods:
        click.echo(f"{m.id:<14} {m.name:<20} {m.description}")


@click.command("checkout")
@cart_option
@click.option("--shipping", "shipping_method", required=True, help="Shipping method ID.")
@click.option("--payment", "payment_method", required=True, help="Payment method ID.")
def checkout(cart_id: str, shipping_method: str, payment_method: str) -> None:
    """Check out the cart with the chosen shipping and payment methods."""
    handler = CheckoutHandler(
        cart_repo=cart_repository(),
        calculator=order_total_calculator(),
        payment_repo=payment_method_repository(),
    )

    try:
        summary = handler.handle(cart_id, shipping_method, payment_method)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Order placed  ({summary.item_count} items, "
        f"shipping={summary.shipping_method}, payment={summary.payment_method})"
    )
    if summary.applied_coupon:
        click.echo(f"Coupon: {summary.applied_coupon}")
    click.echo()
    display_lines(summary.items)
    display_totals(summary.totals)
