"""Application service: Clear Cart use case."""

from __future__ import annotations

import structlog

from storefront.domain.repository.session_repository import SessionRepository

logger = structlog.get_logger(__name__)


class ClearCartHandler:

    def __init__(self, session_repo: SessionRepository) -> None:
        self._session_repo = session_repo

    def handle(self) -> None:
        """Empty the cart, drop customer data and restart checkout."""
        session = self._session_repo.load()
        session.reset()
        self._session_repo.save(session)
        logger.info("cart_cleared")
