"""Application service: Return To Form use case."""

from __future__ import annotations

import structlog

from storefront.domain.repository.session_repository import SessionRepository

logger = structlog.get_logger(__name__)


class ReturnToFormHandler:

    def __init__(self, session_repo: SessionRepository) -> None:
        self._session_repo = session_repo

    def handle(self) -> None:
        """Go back from the summary to the customer form, keeping the data."""
        session = self._session_repo.load()
        session.return_to_form()
        self._session_repo.save(session)
        logger.info("checkout_stage_changed", stage=session.stage.value)
