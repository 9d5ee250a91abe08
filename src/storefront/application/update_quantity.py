"""Application service: Update Quantity use case."""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.session_repository import SessionRepository

logger = structlog.get_logger(__name__)


class UpdateQuantityHandler:

    def __init__(
        self,
        session_repo: SessionRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._session_repo = session_repo
        self._product_repo = product_repo

    def handle(self, product_id: str, quantity: int) -> int:
        """Set the absolute quantity of a product already in the cart.

        A quantity of zero or less removes the product.  Products that are
        not in the cart are left out; use ``AddItemHandler`` first.
        """
        if self._product_repo.get_by_id(product_id) is None:
            raise EntityNotFoundError(f"Product not found: '{product_id}'")

        session = self._session_repo.load()
        if quantity > 0 and session.cart.quantity_of(product_id) == 0:
            logger.warning("cart_quantity_ignored", product_id=product_id, quantity=quantity)
            return 0

        session.cart.update_quantity(product_id, quantity)
        self._session_repo.save(session)

        new_quantity = session.cart.quantity_of(product_id)
        logger.info("cart_quantity_updated", product_id=product_id, quantity=new_quantity)
        return new_quantity
