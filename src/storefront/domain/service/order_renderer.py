"""Domain service: Order Rendering.

Turns a priced cart and the customer's data into the canonical plain-text
order record.  The text is handed verbatim to whatever shares or saves it;
nothing here performs I/O.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timezone

from storefront.domain.model.cart import CartEntry
from storefront.domain.model.customer import CustomerData
from storefront.domain.service.group_discount_calculator import CartPricing

DEFAULT_STORE_NAME = "Storefront"

_RULE = "=" * 32
_THIN_RULE = "-" * 32


@dataclass(frozen=True)
class SharePayload:
    """What the share dialog and the file download receive."""

    title: str
    text: str
    filename: str


def render_order(
    entries: Iterable[CartEntry],
    customer: CustomerData,
    pricing: CartPricing,
    store_name: str = DEFAULT_STORE_NAME,
) -> str:
    """Render the order document.

    *customer* is expected to be complete; it is not validated again.
    """
    lines: list[str] = [
        _RULE,
        f"PEDIDO {store_name.upper()}",
        _RULE,
        "",
        "DADOS DO CLIENTE",
        _THIN_RULE,
        f"Nome: {customer.full_name}",
        f"CPF/CNPJ: {customer.tax_id}",
        f"Endereço: {customer.address}",
        f"WhatsApp: {customer.phone}",
        f"Pagamento: {customer.payment.label if customer.payment else ''}",
        f"Entrega: {customer.delivery.label if customer.delivery else ''}",
        "",
        "ITENS DO PEDIDO",
        _THIN_RULE,
    ]

    for entry in entries:
        rate = pricing.rate_for(entry.product.group)
        discount = pricing.discount_for(entry.product_id)
        lines.append("")
        lines.append(entry.product.name)
        lines.append(f"  Cód: {entry.product.code}")
        lines.append(f"  Qtd: {entry.quantity} x {entry.product.price}")
        if not rate.is_zero:
            lines.append(f"  Desconto aplicado: {rate} (-{discount})")
        lines.append(f"  Subtotal: {entry.line_total - discount}")

    discounted = pricing.discounted_groups
    if discounted:
        lines.append("")
        lines.append("DESCONTOS POR GRUPO")
        lines.append(_THIN_RULE)
        for group in discounted:
            lines.append(
                f"  {group.group} ({group.quantity} itens): "
                f"{group.rate} (-{group.discount})"
            )

    lines.extend(
        [
            "",
            _THIN_RULE,
            f"Subtotal: {pricing.subtotal}",
            f"Total Descontos: -{pricing.total_discount}",
            f"TOTAL FINAL: {pricing.grand_total}",
            _RULE,
        ]
    )
    return "\n".join(lines) + "\n"


def order_filename(now: datetime | None = None) -> str:
    """``pedido-<epoch milliseconds>.txt`` for the given instant."""
    moment = now or datetime.now(timezone.utc)
    return f"pedido-{round(moment.timestamp() * 1000)}.txt"


def share_payload(
    entries: Iterable[CartEntry],
    customer: CustomerData,
    pricing: CartPricing,
    store_name: str = DEFAULT_STORE_NAME,
    now: datetime | None = None,
) -> SharePayload:
    return SharePayload(
        title=f"Pedido {store_name}",
        text=render_order(entries, customer, pricing, store_name),
        filename=order_filename(now),
    )
