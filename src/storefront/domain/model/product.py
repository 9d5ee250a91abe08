"""Product — a catalog entry as seen by the cart.

The catalog is owned by an external collaborator; the cart only ever
reads products, so they are immutable here.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    ``group`` is the pricing bucket that discount policies are keyed by;
    ``category`` is a navigation label and plays no part in pricing.
    """

    id: str
    code: str
    name: str
    price: Money
    group: str
    category: str = ""
