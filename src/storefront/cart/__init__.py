"""Cart: корзина покупателя и её мутации с write-through в хранилище."""

from .store import CartStore

__all__ = [
    "CartStore",
]
