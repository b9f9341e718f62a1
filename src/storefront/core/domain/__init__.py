"""
Domain models and value objects.

Contains the storefront entities: Product, CartLine, CartSnapshot, NavigationState
and the quantity/money units.
"""

from storefront.core.domain.cart_line import CartLine, CartSnapshot
from storefront.core.domain.navigation_state import NavigationState, View
from storefront.core.domain.product import Product
from storefront.core.domain.units import (
    MAX_LINE_QUANTITY,
    MIN_LINE_QUANTITY,
    PRICE_DISPLAY_QUANTUM,
    ZERO,
    clamp_quantity,
    discount_percentage,
    format_price,
    is_quantity_int,
    round_for_display,
    step_quantity,
    validate_quantity,
)

__all__ = [
    # Units module
    "MIN_LINE_QUANTITY",
    "MAX_LINE_QUANTITY",
    "PRICE_DISPLAY_QUANTUM",
    "ZERO",
    "is_quantity_int",
    "validate_quantity",
    "clamp_quantity",
    "step_quantity",
    "round_for_display",
    "format_price",
    "discount_percentage",
    # Product model
    "Product",
    # Cart models
    "CartLine",
    "CartSnapshot",
    # Navigation model
    "View",
    "NavigationState",
]
