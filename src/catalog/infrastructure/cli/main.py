import click

from catalog.infrastructure.bootstrap import configure_logging
from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_show,
    product_update_prices,
)
from catalog.infrastructure.cli.tax_rules_group_commands import (
    tax_group_add,
    tax_group_list,
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Debug logging.")
def cli(verbose: bool) -> None:
    """Catalog: product pricing management"""
    configure_logging(verbose)


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group("tax-group")
def tax_group() -> None:
    """Manage tax rules groups."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update_prices)
tax_group.add_command(tax_group_add)
tax_group.add_command(tax_group_list)
