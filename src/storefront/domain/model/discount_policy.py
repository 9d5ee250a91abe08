"""DiscountPolicy — one quantity band of a group's tiered discount table.

Policies are maintained by the admin side of the store.  Several bands
may exist per group; the resolver picks the one that applies to a given
aggregate quantity.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import DiscountRate


@dataclass(frozen=True)
class DiscountPolicy:
    """A ``[min_quantity, max_quantity]`` band mapped to a discount rate.

    ``max_quantity`` of ``None`` means the band is unbounded above.
    """

    id: str
    group: str
    min_quantity: int
    max_quantity: int | None
    rate: DiscountRate

    def __post_init__(self) -> None:
        if not self.group or not self.group.strip():
            raise ValidationError("Discount policy group is required")
        if self.min_quantity < 0:
            raise ValidationError("Minimum quantity cannot be negative")
        if self.max_quantity is not None and self.max_quantity < self.min_quantity:
            raise ValidationError(
                f"Maximum quantity {self.max_quantity} is below "
                f"minimum quantity {self.min_quantity}"
            )

    def covers(self, quantity: int) -> bool:
        if quantity < self.min_quantity:
            return False
        return self.max_quantity is None or quantity <= self.max_quantity

    @property
    def band_label(self) -> str:
        if self.max_quantity is None:
            return f"{self.min_quantity}+"
        return f"{self.min_quantity}-{self.max_quantity}"
