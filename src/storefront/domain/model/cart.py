"""Cart aggregate — the single mutable object of a shopping session.

The Cart owns its entries and the customer data attached at checkout.
Prices, discounts and totals are never stored here; they are derived
from the current entries every time they are asked for.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.model.customer import CustomerData
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity


@dataclass
class CartEntry:
    """A product and how many units of it are in the cart."""

    product: Product
    quantity: Quantity

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value


@dataclass
class Cart:
    """Aggregate root for the shopping cart.

    Invariants:
    - at most one entry per product id
    - every entry holds a quantity >= 1; an entry that would drop to zero
      is removed instead
    """

    _entries: dict[str, CartEntry] = field(default_factory=dict)
    customer_data: CustomerData | None = None

    # --- Mutations ------------------------------------------------------------

    def add_item(self, product: Product) -> None:
        """Add one unit of *product*, creating the entry if needed."""
        existing = self._entries.get(product.id)
        if existing is None:
            self._entries[product.id] = CartEntry(product, Quantity(1))
        else:
            existing.quantity = Quantity(existing.quantity.value + 1)

    def remove_item(self, product_id: str) -> None:
        """Remove one unit; the entry disappears when its last unit goes.

        Unknown product ids are ignored.
        """
        existing = self._entries.get(product_id)
        if existing is None:
            return
        if existing.quantity.value > 1:
            existing.quantity = Quantity(existing.quantity.value - 1)
        else:
            del self._entries[product_id]

    def update_quantity(self, product_id: str, quantity: int) -> None:
        """Set the absolute quantity of an entry (``<= 0`` removes it)."""
        if quantity <= 0:
            self._entries.pop(product_id, None)
            return
        existing = self._entries.get(product_id)
        if existing is not None:
            existing.quantity = Quantity(quantity)

    def clear(self) -> None:
        """Empty the cart and forget the customer data."""
        self._entries.clear()
        self.customer_data = None

    def attach_customer_data(self, data: CustomerData) -> None:
        self.customer_data = data

    # --- Queries --------------------------------------------------------------

    @property
    def entries(self) -> list[CartEntry]:
        """Entries in the order their products were first added."""
        return list(self._entries.values())

    @property
    def is_empty(self) -> bool:
        return not self._entries

    def quantity_of(self, product_id: str) -> int:
        existing = self._entries.get(product_id)
        return existing.quantity.value if existing is not None else 0

    def total_item_count(self) -> int:
        return sum(entry.quantity.value for entry in self._entries.values())

    def subtotal(self) -> Money:
        result = Money.zero()
        for entry in self._entries.values():
            result = result + entry.line_total
        return result

    # --- Reconstitution -------------------------------------------------------

    @staticmethod
    def restore(
        entries: list[tuple[Product, int]],
        customer_data: CustomerData | None = None,
    ) -> Cart:
        """Rebuild a cart from persisted (product, quantity) pairs.

        Pairs with a non-positive quantity are skipped; repeated products
        are merged.
        """
        cart = Cart(customer_data=customer_data)
        for product, quantity in entries:
            if quantity <= 0:
                continue
            total = cart.quantity_of(product.id) + quantity
            cart._entries[product.id] = CartEntry(product, Quantity(total))
        return cart
