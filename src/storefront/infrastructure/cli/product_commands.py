"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Selling price (e.g. 15.00).")
@click.option("--original-price", default=None, help="Compare-at price when on sale.")
@click.option("--stock", default=0, type=int, show_default=True, help="Units in stock.")
def product_add(name: str, price: str, original_price: str | None, stock: int) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            name=name, price=price, original_price=original_price, stock=stock
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = product_repository().list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Was':>10} {'Stock':>6}")
    click.echo("-" * 56)
    for p in products:
        was = str(p.original_price) if p.is_on_sale else ""
        click.echo(
            f"{p.id:<6} {p.name:<20} {str(p.price):>10} {was:>10} {p.stock_quantity:>6}"
        )


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", default=None, help="New selling price (e.g. 29.99).")
@click.option("--original-price", default=None, help="New compare-at price.")
@click.option("--stock", default=None, type=int, help="New stock level.")
def product_update(
    product_id: str,
    price: str | None,
    original_price: str | None,
    stock: int | None,
) -> None:
    """Update a product's price or stock."""
    if price is None and stock is None:
        raise click.ClickException("Nothing to update: pass --price and/or --stock")
    if original_price is not None and price is None:
        raise click.ClickException("--original-price requires --price")

    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        handler.handle(
            product_id=product_id,
            new_price=price,
            original_price=original_price,
            stock=stock,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} updated.")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Remove a product from the catalog."""
    handler = DeleteProductHandler(product_repo=product_repository())

    try:
        name = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} '{name}' deleted.")
