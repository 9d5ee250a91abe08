"""Application service: Add Item use case."""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.session_repository import SessionRepository

logger = structlog.get_logger(__name__)


class AddItemHandler:

    def __init__(
        self,
        session_repo: SessionRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._session_repo = session_repo
        self._product_repo = product_repo

    def handle(self, product_id: str) -> int:
        """Put one more unit of a catalog product in the cart.

        Returns the product's new quantity in the cart.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{product_id}'")

        session = self._session_repo.load()
        session.cart.add_item(product)
        self._session_repo.save(session)

        quantity = session.cart.quantity_of(product_id)
        logger.info("cart_item_added", product_id=product_id, quantity=quantity)
        return quantity
