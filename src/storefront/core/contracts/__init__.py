"""
Contract Validation Module

Модуль для валидации JSON контрактов витрины (сохранённое состояние корзины).
"""

from .validators import (
    CART_STATE_VALIDATOR,
    CartStateValidator,
    ContractValidator,
    SchemaLoader,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CartStateValidator",
    # Shared instance
    "CART_STATE_VALIDATOR",
]
