"""Domain service: Group Discount Calculation.

Discount tiers are driven by the total number of units bought within a
product group, not by the quantity of any single product.  This module
partitions the cart by group, resolves each group's rate and produces
the figures that every view of the cart (summary, order document) is
built from.

All arithmetic is done in Decimal, so for every cart::

    grand_total == subtotal - total_discount

holds exactly.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from storefront.domain.model.cart import CartEntry
from storefront.domain.model.value_objects import CENTS, DiscountRate, Money
from storefront.domain.service.discount_resolver import DiscountPolicyResolver


@dataclass(frozen=True)
class GroupDiscountResult:
    """Aggregated figures for one product group."""

    group: str
    quantity: int
    rate: DiscountRate
    subtotal: Money
    discount: Money

    @property
    def total(self) -> Money:
        return self.subtotal - self.discount

    @property
    def has_discount(self) -> bool:
        return not self.rate.is_zero


@dataclass(frozen=True)
class CartPricing:
    """Everything derived from a cart at one instant.

    ``groups`` keeps the order in which each group first appears in the
    cart.  ``line_discounts`` splits every group discount over the
    group's entries; the lines of a group always add up to the group's
    discount.
    """

    groups: dict[str, GroupDiscountResult]
    line_discounts: dict[str, Money]

    @property
    def subtotal(self) -> Money:
        return _sum(g.subtotal for g in self.groups.values())

    @property
    def total_discount(self) -> Money:
        return _sum(g.discount for g in self.groups.values())

    @property
    def grand_total(self) -> Money:
        return _sum(g.total for g in self.groups.values())

    @property
    def discounted_groups(self) -> list[GroupDiscountResult]:
        return [g for g in self.groups.values() if g.has_discount]

    def rate_for(self, group: str) -> DiscountRate:
        result = self.groups.get(group)
        return result.rate if result is not None else DiscountRate.none()

    def discount_for(self, product_id: str) -> Money:
        return self.line_discounts.get(product_id, Money.zero())


def compute_group_discounts(
    entries: Iterable[CartEntry],
    resolver: DiscountPolicyResolver,
) -> CartPricing:
    """Price *entries* against the current policy table.

    Recomputes everything from scratch; calling it twice on an unchanged
    cart and policy table yields equal results.
    """
    partitions: dict[str, list[CartEntry]] = {}
    for entry in entries:
        partitions.setdefault(entry.product.group, []).append(entry)

    groups: dict[str, GroupDiscountResult] = {}
    line_discounts: dict[str, Money] = {}

    for group, members in partitions.items():
        quantity = sum(entry.quantity.value for entry in members)
        subtotal = _sum(entry.line_total for entry in members)
        rate = resolver.resolve(group, quantity)
        groups[group] = GroupDiscountResult(
            group=group,
            quantity=quantity,
            rate=rate,
            subtotal=subtotal,
            discount=subtotal.apply_rate(rate),
        )
        line_discounts.update(_allocate(members, rate))

    return CartPricing(groups=groups, line_discounts=line_discounts)


# --- Internal helpers ---------------------------------------------------------


def _sum(amounts: Iterable[Money]) -> Money:
    result = Money.zero()
    for amount in amounts:
        result = result + amount
    return result


def _allocate(members: list[CartEntry], rate: DiscountRate) -> dict[str, Money]:
    """Split a group's discount over its entries.

    Rounds the running total rather than each line, so the shares always
    sum to ``subtotal.apply_rate(rate)``.  No share exceeds its own line
    total; whatever a line cannot absorb goes to the first lines that can.
    """
    shares: dict[str, Decimal] = {}
    running_subtotal = Decimal("0")
    running_raw = Decimal("0")
    target = Decimal("0")
    allocated = Decimal("0")
    for entry in members:
        line = entry.line_total.amount
        running_subtotal += line
        running_raw += line * rate.value
        target = min(
            running_raw.quantize(CENTS, rounding=ROUND_HALF_UP), running_subtotal
        )
        share = min(target - allocated, line)
        shares[entry.product_id] = share
        allocated += share

    leftover = target - allocated
    for entry in members:
        if leftover <= 0:
            break
        extra = min(entry.line_total.amount - shares[entry.product_id], leftover)
        shares[entry.product_id] += extra
        leftover -= extra

    return {
        entry.product_id: Money(shares[entry.product_id], entry.line_total.currency)
        for entry in members
    }
