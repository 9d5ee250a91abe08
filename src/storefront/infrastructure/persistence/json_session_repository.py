"""JSON-file-backed implementation of SessionRepository.

Only product ids and quantities are stored; products are looked up in
the catalog again on load so the cart always prices at catalog prices.
"""

from __future__ import annotations

import json
from pathlib import Path

import structlog

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.model.checkout import CheckoutSession, CheckoutStage
from storefront.domain.model.customer import CustomerData, DeliveryWindow, PaymentMethod
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.session_repository import SessionRepository

logger = structlog.get_logger(__name__)


class JsonSessionRepository(SessionRepository):

    def __init__(self, file_path: Path, product_repo: ProductRepository) -> None:
        self._file_path = file_path
        self._product_repo = product_repo

    # --- SessionRepository interface ------------------------------------------

    def load(self) -> CheckoutSession:
        if not self._file_path.exists():
            return CheckoutSession()
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            return self._to_domain(raw)
        except (ValueError, KeyError, TypeError, AttributeError) as exc:
            raise ValidationError(
                f"Corrupt session file {self._file_path}: {exc}"
            ) from exc

    def save(self, session: CheckoutSession) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            json.dumps(self._to_raw(session), indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(session: CheckoutSession) -> dict:
        customer = session.cart.customer_data
        return {
            "stage": session.stage.value,
            "items": [
                {"product_id": entry.product_id, "quantity": entry.quantity.value}
                for entry in session.cart.entries
            ],
            "customer_form": _customer_to_raw(session.customer_form),
            "customer_data": _customer_to_raw(customer) if customer else None,
        }

    def _to_domain(self, raw: dict) -> CheckoutSession:
        entries: list[tuple[Product, int]] = []
        for item in raw.get("items", []):
            product = self._product_repo.get_by_id(item["product_id"])
            if product is None:
                logger.warning("cart_product_dropped", product_id=item["product_id"])
                continue
            entries.append((product, int(item["quantity"])))

        customer_raw = raw.get("customer_data")
        customer = _customer_to_domain(customer_raw) if customer_raw else None
        stage = CheckoutStage(raw.get("stage", CheckoutStage.COLLECTING_CUSTOMER_DATA.value))
        if customer is None:
            stage = CheckoutStage.COLLECTING_CUSTOMER_DATA

        return CheckoutSession(
            cart=Cart.restore(entries, customer_data=customer),
            stage=stage,
            customer_form=_customer_to_domain(raw.get("customer_form") or {}),
        )


def _customer_to_raw(data: CustomerData) -> dict:
    return {
        "full_name": data.full_name,
        "tax_id": data.tax_id,
        "address": data.address,
        "phone": data.phone,
        "payment": data.payment.value if data.payment else None,
        "delivery": data.delivery.value if data.delivery else None,
    }


def _customer_to_domain(raw: dict) -> CustomerData:
    return CustomerData(
        full_name=raw.get("full_name", ""),
        tax_id=raw.get("tax_id", ""),
        address=raw.get("address", ""),
        phone=raw.get("phone", ""),
        payment=PaymentMethod(raw["payment"]) if raw.get("payment") else None,
        delivery=DeliveryWindow(raw["delivery"]) if raw.get("delivery") else None,
    )
