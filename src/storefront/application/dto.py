"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CustomerDataSpec:
    """Input: the checkout form as typed by the shopper.

    ``payment`` and ``delivery`` carry enum values (e.g. ``"pix"``,
    ``"manha"``); empty strings mean "not chosen yet".
    """

    full_name: str = ""
    tax_id: str = ""
    address: str = ""
    phone: str = ""
    payment: str = ""
    delivery: str = ""


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart entry as displayed to the user."""

    product_id: str
    code: str
    name: str
    group: str
    quantity: int
    unit_price: str  # formatted, e.g. "R$ 15,00"
    line_total: str
    discount_rate: str  # e.g. "10%", "0%" when no tier applies
    discount: str
    net_total: str


@dataclass(frozen=True)
class GroupDiscountDTO:
    """Output: the discount tier reached by one product group."""

    group: str
    quantity: int
    rate: str
    subtotal: str
    discount: str
    total: str
    has_discount: bool


@dataclass(frozen=True)
class CartDTO:
    """Output: the whole cart with its derived figures."""

    lines: list[CartLineDTO]
    groups: list[GroupDiscountDTO]
    item_count: int
    subtotal: str
    total_discount: str
    total: str
    stage: str
    has_discount: bool


@dataclass(frozen=True)
class OrderDocumentDTO:
    """Output: the rendered order, ready to be shared or saved."""

    title: str
    text: str
    filename: str
