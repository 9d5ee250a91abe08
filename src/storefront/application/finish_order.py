"""Application service: Finish Order use case.

Finalizing is the end of the checkout: the cart and the customer data
are cleared and the session goes back to an empty form.
"""

from __future__ import annotations

import structlog

from storefront.domain.repository.session_repository import SessionRepository

logger = structlog.get_logger(__name__)


class FinishOrderHandler:

    def __init__(self, session_repo: SessionRepository) -> None:
        self._session_repo = session_repo

    def handle(self) -> None:
        session = self._session_repo.load()
        item_count = session.cart.total_item_count()
        session.finalize()
        self._session_repo.save(session)
        logger.info("order_finished", item_count=item_count)
