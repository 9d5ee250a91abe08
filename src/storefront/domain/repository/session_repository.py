"""Abstract repository for the shopper's CheckoutSession."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.checkout import CheckoutSession


class SessionRepository(ABC):

    @abstractmethod
    def load(self) -> CheckoutSession:
        """Return the current session, or a fresh empty one."""

    @abstractmethod
    def save(self, session: CheckoutSession) -> None:
        """Persist the session."""
