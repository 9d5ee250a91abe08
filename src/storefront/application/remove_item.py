"""Application service: Remove Item use case.

Removing a product that is not in the cart is not an error.
"""

from __future__ import annotations

import structlog

from storefront.domain.repository.session_repository import SessionRepository

logger = structlog.get_logger(__name__)


class RemoveItemHandler:

    def __init__(self, session_repo: SessionRepository) -> None:
        self._session_repo = session_repo

    def handle(self, product_id: str) -> int:
        session = self._session_repo.load()
        session.cart.remove_item(product_id)
        self._session_repo.save(session)

        quantity = session.cart.quantity_of(product_id)
        logger.info("cart_item_removed", product_id=product_id, quantity=quantity)
        return quantity
