"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from storefront.domain.exceptions import ValidationError

CENTS = Decimal("0.01")

_CURRENCY_SYMBOLS = {"BRL": "R$"}


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal so that subtotals, discounts and totals reconcile to the
    cent without floating-point drift.
    """

    amount: Decimal
    currency: str = "BRL"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        result = self.amount - other.amount
        if result < Decimal("0"):
            raise ValidationError("Money subtraction would result in a negative amount")
        return Money(result, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount >= other.amount

    def apply_rate(self, rate: DiscountRate) -> Money:
        """Return ``self * rate`` rounded half-up to cents.

        Never exceeds ``self``, even when the amount carries sub-cent digits.
        """
        portion = (self.amount * rate.value).quantize(CENTS, rounding=ROUND_HALF_UP)
        return Money(min(portion, self.amount), self.currency)

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        # pt-BR convention: "R$ 1.234,56"
        quantized = self.amount.quantize(CENTS, rounding=ROUND_HALF_UP)
        digits = f"{quantized:,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
        symbol = _CURRENCY_SYMBOLS.get(self.currency, self.currency)
        return f"{symbol} {digits}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: str = "BRL") -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)), currency)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero(currency: str = "BRL") -> Money:
        return Money(Decimal("0.00"), currency)


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    A cart entry can never hold zero or negative units.
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True)
class DiscountRate:
    """A discount expressed as a fraction in ``[0, 1]``.

    ``DiscountRate.of("0.1")`` and ``DiscountRate.from_percent(10)`` are
    the same 10% rate.
    """

    value: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.value, Decimal):
            raise ValidationError(
                f"Discount rate must be a Decimal, got {type(self.value).__name__}"
            )
        if not Decimal("0") <= self.value <= Decimal("1"):
            raise ValidationError(
                f"Discount rate must be between 0 and 1, got {self.value}"
            )

    @property
    def is_zero(self) -> bool:
        return self.value == 0

    @property
    def percent(self) -> Decimal:
        return self.value * 100

    def __str__(self) -> str:
        pct = self.percent.normalize()
        if pct == pct.to_integral_value():
            return f"{int(pct)}%"
        return f"{pct:f}".replace(".", ",") + "%"

    @staticmethod
    def of(value: str | float | int | Decimal) -> DiscountRate:
        try:
            return DiscountRate(Decimal(str(value)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid discount rate: {value!r}") from exc

    @staticmethod
    def from_percent(value: str | float | int | Decimal) -> DiscountRate:
        try:
            return DiscountRate(Decimal(str(value)) / 100)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid discount percentage: {value!r}") from exc

    @staticmethod
    def none() -> DiscountRate:
        return DiscountRate(Decimal("0"))
