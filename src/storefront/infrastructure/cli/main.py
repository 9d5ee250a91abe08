import click

from storefront.infrastructure.bootstrap import settings
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_set,
    cart_show,
)
from storefront.infrastructure.cli.catalog_commands import policy_list, product_list
from storefront.infrastructure.cli.checkout_commands import (
    checkout_back,
    checkout_customer,
    checkout_export,
    checkout_finish,
    checkout_summary,
)
from storefront.infrastructure.observability.log_setup import configure_logging


@click.group()
def cli() -> None:
    """Storefront — cart, tiered discounts and order summary"""
    config = settings()
    configure_logging(log_format=config.log_format, log_level=config.log_level)


@cli.group()
def product() -> None:
    """Browse the catalog."""


@cli.group()
def policy() -> None:
    """Inspect discount policies."""


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


@cli.group()
def checkout() -> None:
    """Check out the current cart."""


# Register subcommands
product.add_command(product_list)
policy.add_command(policy_list)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_set)
cart.add_command(cart_show)
checkout.add_command(checkout_back)
checkout.add_command(checkout_customer)
checkout.add_command(checkout_export)
checkout.add_command(checkout_finish)
checkout.add_command(checkout_summary)
