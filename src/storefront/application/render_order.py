"""Application service: Render Order use case (query).

Only available while the checkout is reviewing the summary, i.e. once
complete customer data has been accepted.
"""

from __future__ import annotations

from datetime import datetime

from storefront.application.dto import OrderDocumentDTO
from storefront.application.pricing import price_cart
from storefront.domain.exceptions import ValidationError
from storefront.domain.repository.discount_policy_repository import (
    DiscountPolicyRepository,
)
from storefront.domain.repository.session_repository import SessionRepository
from storefront.domain.service.order_renderer import DEFAULT_STORE_NAME, share_payload


class RenderOrderHandler:

    def __init__(
        self,
        session_repo: SessionRepository,
        policy_repo: DiscountPolicyRepository,
        store_name: str = DEFAULT_STORE_NAME,
    ) -> None:
        self._session_repo = session_repo
        self._policy_repo = policy_repo
        self._store_name = store_name

    def handle(self, now: datetime | None = None) -> OrderDocumentDTO:
        session = self._session_repo.load()
        customer = session.cart.customer_data
        if not session.is_reviewing or customer is None:
            raise ValidationError(
                "Order summary unavailable — submit the customer data first"
            )

        payload = share_payload(
            session.cart.entries,
            customer,
            price_cart(session, self._policy_repo),
            store_name=self._store_name,
            now=now,
        )
        return OrderDocumentDTO(
            title=payload.title, text=payload.text, filename=payload.filename
        )
