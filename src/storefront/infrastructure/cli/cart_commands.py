"""CLI commands for the Cart aggregate and coupons."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.apply_coupon import ApplyCouponHandler
from storefront.application.clear_cart import ClearCartHandler
from storefront.application.remove_coupon import RemoveCouponHandler
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.show_cart import DEFAULT_SHIPPING_METHOD, ShowCartHandler
from storefront.application.update_cart_item import UpdateCartItemHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    cart_repository,
    coupon_repository,
    order_total_calculator,
    product_repository,
)

DEFAULT_CART = "guest"

cart_option = click.option(
    "--cart", "cart_id", default=DEFAULT_CART, show_default=True, help="Cart ID."
)


def display_totals(totals) -> None:
    """Shared formatting for the money breakdown of a cart or order."""
    click.echo(f"  {'Subtotal':<27} {totals.subtotal:>20}")
    click.echo(f"  {'Item discount':<27} {'-' + totals.item_discount:>20}")
    click.echo(f"  {'Coupon discount':<27} {'-' + totals.coupon_discount:>20}")
    click.echo(f"  {'Total savings':<27} {'-' + totals.total_discount:>20}")
    click.echo(f"  {'VAT (18%)':<27} {totals.tax:>20}")
    click.echo(f"  {'Shipping':<27} {totals.shipping:>20}")
    click.echo(f"  {'-'*48}")
    click.echo(f"  {'Total':<27} {totals.grand_total:>20}")


def display_lines(items) -> None:
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*48}")
    for item in items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*48}")


@click.command("add")
@cart_option
@click.option("--product", required=True, help="Product name.")
@click.option("--quantity", default=1, type=int, show_default=True, help="Units to add.")
def cart_add(cart_id: str, product: str, quantity: int) -> None:
    """Add a product to the cart."""
    handler = AddToCartHandler(
        cart_repo=cart_repository(),
        product_repo=product_repository(),
    )

    try:
        line = handler.handle(cart_id=cart_id, product_name=product, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Added {quantity} x {line.product_name} (now {line.quantity} in cart)")


@click.command("update")
@cart_option
@click.option("--product", required=True, help="Product name.")
@click.option("--quantity", required=True, type=int, help="New quantity.")
def cart_update(cart_id: str, product: str, quantity: int) -> None:
    """Change the quantity of a cart line."""
    handler = UpdateCartItemHandler(cart_repo=cart_repository())

    try:
        line = handler.handle(cart_id=cart_id, product_name=product, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{line.product_name} quantity set to {line.quantity}")


@click.command("remove")
@cart_option
@click.option("--product", required=True, help="Product name.")
def cart_remove(cart_id: str, product: str) -> None:
    """Remove a product from the cart."""
    handler = RemoveFromCartHandler(cart_repo=cart_repository())

    try:
        handler.handle(cart_id=cart_id, product_name=product)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Removed '{product}' from cart.")


@click.command("clear")
@cart_option
def cart_clear(cart_id: str) -> None:
    """Empty the cart."""
    ClearCartHandler(cart_repo=cart_repository()).handle(cart_id)
    click.echo("Cart cleared.")


@click.command("show")
@cart_option
@click.option(
    "--shipping",
    "shipping_method",
    default=DEFAULT_SHIPPING_METHOD,
    show_default=True,
    help="Shipping method ID used for the totals.",
)
def cart_show(cart_id: str, shipping_method: str) -> None:
    """Show cart contents and totals."""
    handler = ShowCartHandler(
        cart_repo=cart_repository(),
        calculator=order_total_calculator(),
    )

    try:
        dto = handler.handle(cart_id, shipping_method)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dto.items:
        click.echo("Your cart is empty.")
        return

    click.echo(f"Cart '{dto.id}'  ({dto.item_count} items, shipping={dto.shipping_method})")
    if dto.applied_coupon:
        click.echo(f"Coupon: {dto.applied_coupon}")
    click.echo()
    display_lines(dto.items)
    display_totals(dto.totals)


@click.command("apply")
@cart_option
@click.argument("code")
def coupon_apply(cart_id: str, code: str) -> None:
    """Apply a coupon code to the cart."""
    handler = ApplyCouponHandler(
        cart_repo=cart_repository(),
        coupon_repo=coupon_repository(),
    )

    try:
        result = handler.handle(cart_id, code)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not result.applied:
        raise click.ClickException(result.message)
    click.echo(f"{result.code}: {result.message}")


@click.command("remove")
@cart_option
def coupon_remove(cart_id: str) -> None:
    """Remove the applied coupon."""
    removed = RemoveCouponHandler(cart_repo=cart_repository()).handle(cart_id)
    if removed is None:
        click.echo("No coupon applied.")
    else:
        click.echo(f"Coupon {removed} removed.")
