"""CLI commands for tax rules groups."""

from __future__ import annotations

import click

from catalog.application.add_tax_rules_group import AddTaxRulesGroupHandler
from catalog.domain.exceptions import DataStoreError, DomainException
from catalog.infrastructure.bootstrap import tax_rules_group_repository


@click.command("add")
@click.option("--name", required=True, help="Group name, e.g. 'FR Standard Rate (20%)'.")
def tax_group_add(name: str) -> None:
    """Register a tax rules group."""
    handler = AddTaxRulesGroupHandler(tax_rules_group_repo=tax_rules_group_repository())

    try:
        group = handler.handle(name=name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Tax rules group #{group.id} '{group.name}' added")


@click.command("list")
def tax_group_list() -> None:
    """List tax rules groups."""
    try:
        groups = tax_rules_group_repository().list_all()
    except DataStoreError as exc:
        raise click.ClickException(str(exc))

    if not groups:
        click.echo("No tax rules groups found.")
        return

    click.echo(f"{'ID':<6} {'Name':<30} {'Active':>6}")
    click.echo("-" * 44)
    for g in groups:
        click.echo(f"{g.id:<6} {g.name:<30} {'yes' if g.active else 'no':>6}")
