"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.infrastructure.config import StorefrontSettings
from storefront.infrastructure.persistence.json_discount_policy_repository import (
    JsonDiscountPolicyRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_session_repository import (
    JsonSessionRepository,
)


def settings() -> StorefrontSettings:
    return StorefrontSettings()


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().data_dir / "products.json")


def discount_policy_repository() -> JsonDiscountPolicyRepository:
    return JsonDiscountPolicyRepository(settings().data_dir / "discount_policies.json")


def session_repository() -> JsonSessionRepository:
    return JsonSessionRepository(
        settings().data_dir / "session.json", product_repository()
    )
