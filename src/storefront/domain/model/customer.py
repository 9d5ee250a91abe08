"""Customer data collected once per checkout."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum


class PaymentMethod(Enum):
    CARD = "cartao"
    BOLETO = "boleto"
    PIX = "pix"
    CASH = "dinheiro"

    @property
    def label(self) -> str:
        return _PAYMENT_LABELS[self]


class DeliveryWindow(Enum):
    MORNING = "manha"
    AFTERNOON = "tarde"
    END_OF_DAY = "fim-dia"

    @property
    def label(self) -> str:
        return _DELIVERY_LABELS[self]


_PAYMENT_LABELS = {
    PaymentMethod.CARD: "Cartão de Crédito/Débito",
    PaymentMethod.BOLETO: "Boleto Bancário",
    PaymentMethod.PIX: "PIX",
    PaymentMethod.CASH: "Dinheiro",
}

_DELIVERY_LABELS = {
    DeliveryWindow.MORNING: "Manhã (08h - 12h)",
    DeliveryWindow.AFTERNOON: "Meio da Tarde (12h - 16h)",
    DeliveryWindow.END_OF_DAY: "Final do Dia (16h - 19h)",
}


@dataclass(frozen=True)
class CustomerData:
    """Contact and delivery preferences for an order.

    Every field is required before an order can be reviewed.  Instances
    may be built incomplete (a form draft); ``missing_fields()`` reports
    what is still blank.
    """

    full_name: str = ""
    tax_id: str = ""
    address: str = ""
    phone: str = ""
    payment: PaymentMethod | None = None
    delivery: DeliveryWindow | None = None

    def missing_fields(self) -> list[str]:
        missing: list[str] = []
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(f.name)
        return missing

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()
