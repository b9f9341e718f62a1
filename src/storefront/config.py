"""Конфигурация витрины.

Границы количества (1..99): инварианты домена и живут в
storefront.core.domain.units, а не здесь.
"""

from dataclasses import dataclass
from enum import Enum


class MergePolicy(str, Enum):
    """Политика при слиянии add_item, если сумма превышает MAX_LINE_QUANTITY.

    CLAMP: количество обрезается до 99
    REJECT: add_item падает с InvalidQuantityError, корзина не меняется
    """
    CLAMP = "CLAMP"
    REJECT = "REJECT"


@dataclass(frozen=True)
class StorefrontConfig:
    """Конфигурация витрины.

    - currency_symbol: символ валюты при форматировании (формат всегда 2 знака)
    - storage_key: единственный ключ хранилища для корзины
    - merge_policy: поведение при переполнении количества на add_item
    """
    currency_symbol: str = "₹"
    storage_key: str = "ecommerceCart"
    merge_policy: MergePolicy = MergePolicy.CLAMP
