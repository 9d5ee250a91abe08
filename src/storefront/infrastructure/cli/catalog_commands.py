"""CLI commands for reading the catalog and the discount policy table."""

from __future__ import annotations

import click

from storefront.infrastructure.bootstrap import (
    discount_policy_repository,
    product_repository,
)


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = product_repository().list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Code':<10} {'Name':<28} {'Group':<12} {'Price':>12}")
    click.echo("-" * 72)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.code:<10} {p.name:<28} {p.group:<12} {str(p.price):>12}"
        )


@click.command("list")
def policy_list() -> None:
    """List discount bands per product group."""
    policies = discount_policy_repository().list_all()

    if not policies:
        click.echo("No discount policies found.")
        return

    click.echo(f"{'Group':<16} {'Band':>10} {'Discount':>10}")
    click.echo("-" * 38)
    for p in policies:
        click.echo(f"{p.group:<16} {p.band_label:>10} {str(p.rate):>10}")
