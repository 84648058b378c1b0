"""CLI commands for the Product entity."""

from __future__ import annotations

import click

from catalog.application.add_product import AddProductHandler
from catalog.application.dto import UpdateProductPricesCommand
from catalog.application.show_product_prices import ShowProductPricesHandler
from catalog.application.update_product_prices import UpdateProductPricesHandler
from catalog.domain.exceptions import DataStoreError, DomainException
from catalog.infrastructure.bootstrap import (
    product_repository,
    tax_rules_group_repository,
)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
def product_add(name: str, price: str) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(name=name, price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    try:
        products = product_repository().list_all()
    except DataStoreError as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>12} {'On sale':>8}")
    click.echo("-" * 49)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name:<20} {str(p.price):>12} {'yes' if p.on_sale else 'no':>8}"
        )


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_show(product_id: int) -> None:
    """Show the pricing of one product."""
    handler = ShowProductPricesHandler(product_repo=product_repository())

    try:
        dto = handler.handle(product_id)
    except (DomainException, DataStoreError) as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id}  {dto.name}")
    click.echo(f"  Price:            {dto.price}")
    unity = f" per {dto.unity}" if dto.unity else ""
    click.echo(f"  Unit price:       {dto.unit_price}{unity}")
    click.echo(f"  Unit price ratio: {dto.unit_price_ratio}")
    click.echo(f"  Ecotax:           {dto.ecotax}")
    click.echo(f"  Tax rules group:  {dto.tax_rules_group_id or 'none'}")
    click.echo(f"  Wholesale price:  {dto.wholesale_price}")
    click.echo(f"  On sale:          {'yes' if dto.on_sale else 'no'}")


@click.command("update-prices")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--price", default=None, help="Retail price, tax excluded.")
@click.option("--unit-price", default=None, help="Price per unit (0 leaves it unchanged).")
@click.option("--unity", default=None, help="Unit label, e.g. 'per kg'.")
@click.option("--ecotax", default=None, help="Ecotax amount.")
@click.option("--tax-rules-group", "tax_rules_group_id", default=None, type=int,
              help="Tax rules group ID (0 for none).")
@click.option("--on-sale/--not-on-sale", default=None, help="Flag the product as on sale.")
@click.option("--wholesale-price", default=None, help="Cost price.")
def product_update_prices(
    product_id: int,
    price: str | None,
    unit_price: str | None,
    unity: str | None,
    ecotax: str | None,
    tax_rules_group_id: int | None,
    on_sale: bool | None,
    wholesale_price: str | None,
) -> None:
    """Update some or all pricing fields of a product.

    Options that are not given leave the field unchanged.
    """
    handler = UpdateProductPricesHandler(
        product_repo=product_repository(),
        tax_rules_group_repo=tax_rules_group_repository(),
    )

    try:
        command = UpdateProductPricesCommand.of(
            product_id,
            price=price,
            unit_price=unit_price,
            unity=unity,
            ecotax=ecotax,
            tax_rules_group_id=tax_rules_group_id,
            on_sale=on_sale,
            wholesale_price=wholesale_price,
        )
        handler.handle(command)
    except (DomainException, DataStoreError) as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} prices updated.")
