"""Application service: Submit Customer Data use case.

Moves the checkout from the customer form to the order summary.  An
incomplete form is rejected, but what was typed is kept so the shopper
only has to fill in the blanks.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import CustomerDataSpec
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.customer import CustomerData, DeliveryWindow, PaymentMethod
from storefront.domain.repository.session_repository import SessionRepository

logger = structlog.get_logger(__name__)


class SubmitCustomerDataHandler:

    def __init__(self, session_repo: SessionRepository) -> None:
        self._session_repo = session_repo

    def handle(self, spec: CustomerDataSpec) -> None:
        data = self._to_domain(spec)
        session = self._session_repo.load()

        try:
            session.submit_customer_data(data)
        except ValidationError:
            self._session_repo.save(session)
            logger.info("customer_data_incomplete", missing=data.missing_fields())
            raise

        self._session_repo.save(session)
        logger.info("checkout_stage_changed", stage=session.stage.value)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_domain(spec: CustomerDataSpec) -> CustomerData:
        try:
            payment = PaymentMethod(spec.payment) if spec.payment else None
        except ValueError as exc:
            raise ValidationError(f"Unknown payment method: '{spec.payment}'") from exc
        try:
            delivery = DeliveryWindow(spec.delivery) if spec.delivery else None
        except ValueError as exc:
            raise ValidationError(f"Unknown delivery window: '{spec.delivery}'") from exc

        return CustomerData(
            full_name=spec.full_name.strip(),
            tax_id=spec.tax_id.strip(),
            address=spec.address.strip(),
            phone=spec.phone.strip(),
            payment=payment,
            delivery=delivery,
        )
