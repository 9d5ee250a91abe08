"""CLI commands for the Cart aggregate."""

from __future__ import annotations

import click

from storefront.application.add_item import AddItemHandler
from storefront.application.clear_cart import ClearCartHandler
from storefront.application.dto import CartDTO
from storefront.application.remove_item import RemoveItemHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.update_quantity import UpdateQuantityHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    discount_policy_repository,
    product_repository,
    session_repository,
)


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID.")
def cart_add(product_id: str) -> None:
    """Add one unit of a product to the cart."""
    handler = AddItemHandler(
        session_repo=session_repository(),
        product_repo=product_repository(),
    )

    try:
        quantity = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} in cart: {quantity}")


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
def cart_remove(product_id: str) -> None:
    """Remove one unit of a product from the cart."""
    handler = RemoveItemHandler(session_repo=session_repository())

    try:
        quantity = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} in cart: {quantity}")


@click.command("set")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New quantity (0 removes).")
def cart_set(product_id: str, quantity: int) -> None:
    """Set the quantity of a product already in the cart."""
    handler = UpdateQuantityHandler(
        session_repo=session_repository(),
        product_repo=product_repository(),
    )

    try:
        new_quantity = handler.handle(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} in cart: {new_quantity}")


@click.command("clear")
def cart_clear() -> None:
    """Empty the cart and discard customer data."""
    try:
        ClearCartHandler(session_repo=session_repository()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Cart cleared.")


@click.command("show")
def cart_show() -> None:
    """Show the cart with group discounts and totals."""
    handler = ShowCartHandler(
        session_repo=session_repository(),
        policy_repo=discount_policy_repository(),
    )

    try:
        dto = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


def _display_cart(dto: CartDTO) -> None:
    if not dto.lines:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'Product':<28} {'Qty':>4} {'Price':>12} {'Disc.':>6} {'Total':>12}")
    click.echo(f"  {'-'*66}")
    for line in dto.lines:
        click.echo(
            f"  {line.name:<28} {line.quantity:>4} {line.unit_price:>12} "
            f"{line.discount_rate:>6} {line.net_total:>12}"
        )
    click.echo(f"  {'-'*66}")

    if dto.has_discount:
        click.echo("  Discounts by group:")
        for group in dto.groups:
            if group.has_discount:
                click.echo(
                    f"    {group.group} ({group.quantity} items) "
                    f"{group.rate}  -{group.discount}"
                )

    click.echo(f"  {'Items':<20} {dto.item_count:>47}")
    click.echo(f"  {'Subtotal':<20} {dto.subtotal:>47}")
    if dto.has_discount:
        click.echo(f"  {'Discounts':<20} {'-' + dto.total_discount:>47}")
    click.echo(f"  {'Total':<20} {dto.total:>47}")
