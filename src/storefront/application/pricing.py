"""Shared query helpers: price a session's cart and map it to DTOs."""

from __future__ import annotations

from storefront.application.dto import CartDTO, CartLineDTO, GroupDiscountDTO
from storefront.domain.model.checkout import CheckoutSession
from storefront.domain.repository.discount_policy_repository import (
    DiscountPolicyRepository,
)
from storefront.domain.service.discount_resolver import DiscountPolicyResolver
from storefront.domain.service.group_discount_calculator import (
    CartPricing,
    compute_group_discounts,
)


def price_cart(
    session: CheckoutSession, policy_repo: DiscountPolicyRepository
) -> CartPricing:
    return compute_group_discounts(
        session.cart.entries, DiscountPolicyResolver(policy_repo)
    )


def to_cart_dto(session: CheckoutSession, pricing: CartPricing) -> CartDTO:
    cart = session.cart
    lines: list[CartLineDTO] = []
    for entry in cart.entries:
        discount = pricing.discount_for(entry.product_id)
        lines.append(
            CartLineDTO(
                product_id=entry.product_id,
                code=entry.product.code,
                name=entry.product.name,
                group=entry.product.group,
                quantity=entry.quantity.value,
                unit_price=str(entry.product.price),
                line_total=str(entry.line_total),
                discount_rate=str(pricing.rate_for(entry.product.group)),
                discount=str(discount),
                net_total=str(entry.line_total - discount),
            )
        )

    return CartDTO(
        lines=lines,
        groups=[
            GroupDiscountDTO(
                group=g.group,
                quantity=g.quantity,
                rate=str(g.rate),
                subtotal=str(g.subtotal),
                discount=str(g.discount),
                total=str(g.total),
                has_discount=g.has_discount,
            )
            for g in pricing.groups.values()
        ],
        item_count=cart.total_item_count(),
        subtotal=str(pricing.subtotal),
        total_discount=str(pricing.total_discount),
        total=str(pricing.grand_total),
        stage=session.stage.value,
        has_discount=not pricing.total_discount.is_zero,
    )
