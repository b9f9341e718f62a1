"""Checkout Flow: локальное подтверждение заказа.

Оплаты нет: checkout фиксирует корзину сессии.
Порядок:
1. total_price() для сообщения подтверждения
2. clear(): пустая корзина записывается в хранилище
3. go_to(CATALOG)
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from storefront.cart.store import CartStore
from storefront.config import StorefrontConfig
from storefront.core.domain.navigation_state import View
from storefront.core.domain.units import format_price
from storefront.core.errors import EmptyCartError
from storefront.navigation.state_machine import ViewNavigator

logger = logging.getLogger(__name__)


CONFIRMATION_TEMPLATE = (
    "Order Confirmed!\n"
    "\n"
    "Thank you for your purchase.\n"
    "Your total amount of {total} has been successfully processed.\n"
    "We will now prepare your items for shipment.\n"
    "\n"
    "Happy shopping!"
)


@dataclass(frozen=True)
class CheckoutResult:
    """Результат checkout."""

    total_price: Decimal
    item_count: int
    confirmation_message: str


class CheckoutFlow:
    """Оркестрация checkout поверх CartStore и ViewNavigator."""

    def __init__(
        self,
        cart: CartStore,
        navigator: ViewNavigator,
        config: Optional[StorefrontConfig] = None,
    ):
        self.cart = cart
        self.navigator = navigator
        self.config = config or StorefrontConfig()

    def checkout(self) -> CheckoutResult:
        """
        Raises:
            EmptyCartError: корзина пуста (состояние не меняется)
        """
        if self.cart.is_empty():
            raise EmptyCartError()

        total = self.cart.total_price()
        item_count = self.cart.total_item_count()
        message = CONFIRMATION_TEMPLATE.format(
            total=format_price(total, self.config.currency_symbol)
        )

        self.cart.clear()
        self.navigator.go_to(View.CATALOG)

        logger.info("Checkout completed: %d items, total %s", item_count, total)
        return CheckoutResult(
            total_price=total,
            item_count=item_count,
            confirmation_message=message,
        )
