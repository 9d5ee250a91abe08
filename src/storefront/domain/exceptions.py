"""Domain-level exceptions.

Cart, discount and checkout rule violations all derive from
DomainException, so the CLI can turn any of them into a plain error
message.  Removing a product that is not in the cart is deliberately
not one of them.
"""


class DomainException(Exception):
    """Base class for all storefront domain errors."""


class ValidationError(DomainException):
    """A value, band or checkout step broke a business rule."""


class EntityNotFoundError(DomainException):
    """A product id does not exist in the catalog."""
