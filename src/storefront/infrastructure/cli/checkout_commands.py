"""CLI commands for the checkout flow."""

from __future__ import annotations

from pathlib import Path

import click

from storefront.application.dto import CustomerDataSpec
from storefront.application.finish_order import FinishOrderHandler
from storefront.application.render_order import RenderOrderHandler
from storefront.application.return_to_form import ReturnToFormHandler
from storefront.application.submit_customer_data import SubmitCustomerDataHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.customer import DeliveryWindow, PaymentMethod
from storefront.infrastructure.bootstrap import (
    discount_policy_repository,
    session_repository,
    settings,
)


@click.command("customer")
@click.option("--name", "full_name", default="", help="Full name.")
@click.option("--tax-id", default="", help="CPF or CNPJ.")
@click.option("--address", default="", help="Delivery address.")
@click.option("--phone", default="", help="WhatsApp number.")
@click.option(
    "--payment",
    default="",
    type=click.Choice([""] + [m.value for m in PaymentMethod]),
    help="Payment method.",
)
@click.option(
    "--delivery",
    default="",
    type=click.Choice([""] + [w.value for w in DeliveryWindow]),
    help="Preferred delivery window.",
)
def checkout_customer(
    full_name: str,
    tax_id: str,
    address: str,
    phone: str,
    payment: str,
    delivery: str,
) -> None:
    """Submit customer data and move on to the order summary."""
    handler = SubmitCustomerDataHandler(session_repo=session_repository())
    spec = CustomerDataSpec(
        full_name=full_name,
        tax_id=tax_id,
        address=address,
        phone=phone,
        payment=payment,
        delivery=delivery,
    )

    try:
        handler.handle(spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Customer data accepted — review the order with 'checkout summary'.")


def _render_handler() -> RenderOrderHandler:
    return RenderOrderHandler(
        session_repo=session_repository(),
        policy_repo=discount_policy_repository(),
        store_name=settings().store_name,
    )


@click.command("summary")
def checkout_summary() -> None:
    """Print the order document."""
    try:
        dto = _render_handler().handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(dto.text, nl=False)


@click.command("export")
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for the order file (defaults to STOREFRONT_EXPORT_DIR).",
)
def checkout_export(output_dir: Path | None) -> None:
    """Save the order document as pedido-<timestamp>.txt."""
    try:
        dto = _render_handler().handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    target_dir = output_dir or settings().export_dir
    target_dir.mkdir(parents=True, exist_ok=True)
    target = target_dir / dto.filename
    target.write_text(dto.text, encoding="utf-8")
    click.echo(f"Order saved to {target}")


@click.command("back")
def checkout_back() -> None:
    """Return from the summary to the customer form."""
    try:
        ReturnToFormHandler(session_repo=session_repository()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Back to customer data — previous answers kept.")


@click.command("finish")
def checkout_finish() -> None:
    """Finalize the order and empty the cart."""
    try:
        FinishOrderHandler(session_repo=session_repository()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Order finished. Thank you!")
