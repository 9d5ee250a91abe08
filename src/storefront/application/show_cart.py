"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from storefront.application.dto import CartDTO
from storefront.application.pricing import price_cart, to_cart_dto
from storefront.domain.repository.discount_policy_repository import (
    DiscountPolicyRepository,
)
from storefront.domain.repository.session_repository import SessionRepository


class ShowCartHandler:

    def __init__(
        self,
        session_repo: SessionRepository,
        policy_repo: DiscountPolicyRepository,
    ) -> None:
        self._session_repo = session_repo
        self._policy_repo = policy_repo

    def handle(self) -> CartDTO:
        session = self._session_repo.load()
        return to_cart_dto(session, price_cart(session, self._policy_repo))
