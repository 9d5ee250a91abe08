"""Domain service: Discount Policy Resolution.

Given a product group and the number of units bought in it, find the
discount band that applies.  The lookup is a deterministic priority
search so the answer never depends on the order policies are stored in.
"""

from __future__ import annotations

from collections.abc import Iterable

from storefront.domain.model.discount_policy import DiscountPolicy
from storefront.domain.model.value_objects import DiscountRate
from storefront.domain.repository.discount_policy_repository import (
    DiscountPolicyRepository,
)


def _priority(policy: DiscountPolicy) -> tuple:
    # Highest qualifying minimum first, then the better rate, then smallest id.
    return (-policy.min_quantity, -policy.rate.value, policy.id)


def select_policy(
    policies: Iterable[DiscountPolicy],
    group: str,
    quantity: int,
) -> DiscountPolicy | None:
    """Return the band of *group* that covers *quantity*, or None.

    When overlapping bands both cover the quantity, the one with the
    highest minimum wins.
    """
    candidates = [p for p in policies if p.group == group and p.covers(quantity)]
    if not candidates:
        return None
    return min(candidates, key=_priority)


def resolve_discount_rate(
    policies: Iterable[DiscountPolicy],
    group: str,
    quantity: int,
) -> DiscountRate:
    policy = select_policy(policies, group, quantity)
    return policy.rate if policy is not None else DiscountRate.none()


class DiscountPolicyResolver:
    """Resolves rates against the live policy table.

    The repository is queried on every call, so edits to the policy
    table are picked up by the next resolution.
    """

    def __init__(self, policy_repo: DiscountPolicyRepository) -> None:
        self._policy_repo = policy_repo

    def resolve(self, group: str, quantity: int) -> DiscountRate:
        return resolve_discount_rate(
            self._policy_repo.list_by_group(group), group, quantity
        )
