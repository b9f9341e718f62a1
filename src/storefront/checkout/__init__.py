"""Checkout: локальное подтверждение заказа и очистка корзины."""

from .flow import CONFIRMATION_TEMPLATE, CheckoutFlow, CheckoutResult

__all__ = [
    "CheckoutFlow",
    "CheckoutResult",
    "CONFIRMATION_TEMPLATE",
]
