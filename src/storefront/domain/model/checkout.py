"""CheckoutSession aggregate — a cart plus the checkout step it is in.

Checkout is a two-step flow: the customer fills in their data, then
reviews the order summary.  From the summary they can go back to edit
the data or finalize, which empties the cart.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.model.customer import CustomerData


class CheckoutStage(Enum):
    COLLECTING_CUSTOMER_DATA = "COLLECTING_CUSTOMER_DATA"
    REVIEWING_SUMMARY = "REVIEWING_SUMMARY"


@dataclass
class CheckoutSession:
    """Aggregate root for one shopper's session.

    ``customer_form`` holds whatever the shopper last typed, complete or
    not, so returning from the summary never loses data.
    """

    cart: Cart = field(default_factory=Cart)
    stage: CheckoutStage = CheckoutStage.COLLECTING_CUSTOMER_DATA
    customer_form: CustomerData = field(default_factory=CustomerData)

    @property
    def is_reviewing(self) -> bool:
        return self.stage == CheckoutStage.REVIEWING_SUMMARY

    # --- State transitions ----------------------------------------------------

    def submit_customer_data(self, data: CustomerData) -> None:
        """Transition COLLECTING_CUSTOMER_DATA -> REVIEWING_SUMMARY.

        The form is kept even when rejected so the shopper can finish it.
        """
        if self.stage != CheckoutStage.COLLECTING_CUSTOMER_DATA:
            raise ValidationError(
                f"Cannot submit customer data — current stage is {self.stage.value}, "
                f"expected {CheckoutStage.COLLECTING_CUSTOMER_DATA.value}"
            )
        self.customer_form = data
        missing = data.missing_fields()
        if missing:
            raise ValidationError(
                f"Missing customer data: {', '.join(missing)}"
            )
        self.cart.attach_customer_data(data)
        self.stage = CheckoutStage.REVIEWING_SUMMARY

    def return_to_form(self) -> None:
        """Transition REVIEWING_SUMMARY -> COLLECTING_CUSTOMER_DATA."""
        self._require_review("return to the customer form")
        self.stage = CheckoutStage.COLLECTING_CUSTOMER_DATA

    def finalize(self) -> None:
        """Complete the order: clear the cart and start over."""
        self._require_review("finalize the order")
        self.cart.clear()
        self.customer_form = CustomerData()
        self.stage = CheckoutStage.COLLECTING_CUSTOMER_DATA

    def reset(self) -> None:
        """Abandon the checkout together with the cart contents."""
        self.cart.clear()
        self.customer_form = CustomerData()
        self.stage = CheckoutStage.COLLECTING_CUSTOMER_DATA

    # --- Internal helpers -----------------------------------------------------

    def _require_review(self, action: str) -> None:
        if self.stage != CheckoutStage.REVIEWING_SUMMARY:
            raise ValidationError(
                f"Cannot {action} — current stage is {self.stage.value}, "
                f"expected {CheckoutStage.REVIEWING_SUMMARY.value}"
            )
