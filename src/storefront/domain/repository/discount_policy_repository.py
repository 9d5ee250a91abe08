"""Abstract repository for discount policies."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.discount_policy import DiscountPolicy


class DiscountPolicyRepository(ABC):

    @abstractmethod
    def list_by_group(self, group: str) -> list[DiscountPolicy]:
        """Return every policy band defined for *group*."""

    @abstractmethod
    def list_all(self) -> list[DiscountPolicy]:
        """Return every policy, ordered by group then minimum quantity."""
