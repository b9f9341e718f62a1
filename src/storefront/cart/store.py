"""Cart Store: авторитетное состояние корзины в памяти.

Правила:
- не более одной CartLine на product_id (merge-on-add)
- 1 <= quantity <= 99 для каждой строки
- каждая мутация записывается в StorageAdapter (write-through) до возврата
- ошибки валидации (NotFoundError, InvalidQuantityError) не меняют состояние
- каждая мутация возвращает новый CartSnapshot

Сбой записи в хранилище не фатален: корзина продолжает работать в памяти,
persistence_healthy становится False до следующей успешной записи.
"""

import logging
from decimal import Decimal
from typing import List, Optional, Tuple

from storefront.catalog.provider import CatalogProvider
from storefront.config import MergePolicy, StorefrontConfig
from storefront.core.domain.cart_line import CartLine, CartSnapshot
from storefront.core.domain.units import (
    MAX_LINE_QUANTITY,
    ZERO,
    is_quantity_int,
    validate_quantity,
)
from storefront.core.errors import InvalidQuantityError
from storefront.storage.adapter import StorageAdapter

logger = logging.getLogger(__name__)


class CartStore:
    """Корзина с операциями add/set/increase/decrease/remove/clear.

    Экземпляр принадлежит composition root (Storefront); глобального
    состояния нет, несколько независимых корзин могут сосуществовать.
    """

    def __init__(
        self,
        catalog: CatalogProvider,
        storage: StorageAdapter,
        config: Optional[StorefrontConfig] = None,
    ):
        """
        Args:
            catalog: каталог для разрешения product_id
            storage: адаптер хранилища (корзина восстанавливается из него)
            config: конфигурация (merge_policy)
        """
        self.catalog = catalog
        self.storage = storage
        self.config = config or StorefrontConfig()

        self._lines: List[CartLine] = storage.load()
        self._persistence_healthy = True

    # -------------------------------------------------------------------------
    # Мутации
    # -------------------------------------------------------------------------

    def add_item(self, product_id: int, quantity: int) -> CartSnapshot:
        """Добавление товара или слияние с существующей строкой.

        Args:
            product_id: id товара каталога
            quantity: количество в [1, 99]

        Returns:
            CartSnapshot после записи

        Raises:
            NotFoundError: товара нет в каталоге
            InvalidQuantityError: quantity вне [1, 99], либо переполнение при REJECT
        """
        product = self.catalog.get(product_id)
        validate_quantity(quantity)

        index = self._index_of(product_id)
        if index is None:
            self._lines.append(CartLine.from_product(product, quantity))
            logger.debug("Added %d x %s to cart", quantity, product.name)
        else:
            existing = self._lines[index]
            merged = existing.quantity + quantity

            if merged > MAX_LINE_QUANTITY:
                if self.config.merge_policy == MergePolicy.REJECT:
                    raise InvalidQuantityError(
                        quantity,
                        f"line would hold {merged} items, maximum is {MAX_LINE_QUANTITY}",
                    )
                merged = MAX_LINE_QUANTITY

            self._lines[index] = existing.with_quantity(merged)
            logger.debug("Merged %d x %s, line quantity now %d", quantity, product.name, merged)

        return self._commit()

    def set_quantity(self, product_id: int, new_quantity: int) -> CartSnapshot:
        """Установка количества строки.

        - строки нет → no-op (без записи)
        - new_quantity <= 0 → как remove_item
        - иначе quantity = min(new_quantity, 99)

        Raises:
            InvalidQuantityError: new_quantity не int
        """
        if not is_quantity_int(new_quantity):
            raise InvalidQuantityError(new_quantity, "quantity must be an integer")

        index = self._index_of(product_id)
        if index is None:
            return self.snapshot()

        if new_quantity <= 0:
            return self.remove_item(product_id)

        self._lines[index] = self._lines[index].with_quantity(min(new_quantity, MAX_LINE_QUANTITY))
        return self._commit()

    def increase_quantity(self, product_id: int) -> CartSnapshot:
        """Кнопка "+" в корзине."""
        line = self.get_line(product_id)
        if line is None:
            return self.snapshot()
        return self.set_quantity(product_id, line.quantity + 1)

    def decrease_quantity(self, product_id: int) -> CartSnapshot:
        """Кнопка "-" в корзине; с 1 строка удаляется."""
        line = self.get_line(product_id)
        if line is None:
            return self.snapshot()
        return self.set_quantity(product_id, line.quantity - 1)

    def remove_item(self, product_id: int) -> CartSnapshot:
        """Удаление строки (no-op без записи, если строки нет)."""
        index = self._index_of(product_id)
        if index is None:
            return self.snapshot()

        removed = self._lines.pop(index)
        logger.debug("Removed %s from cart", removed.display_name)
        return self._commit()

    def clear(self) -> CartSnapshot:
        """Безусловная очистка корзины (используется checkout)."""
        self._lines = []
        return self._commit()

    # -------------------------------------------------------------------------
    # Запросы
    # -------------------------------------------------------------------------

    def lines(self) -> Tuple[CartLine, ...]:
        """Строки в порядке добавления (read-only)."""
        return tuple(self._lines)

    def get_line(self, product_id: int) -> Optional[CartLine]:
        index = self._index_of(product_id)
        return None if index is None else self._lines[index]

    def total_item_count(self) -> int:
        return sum(line.quantity for line in self._lines)

    def total_price(self) -> Decimal:
        """Точная сумма unit_price * quantity (без округления)."""
        return sum((line.subtotal() for line in self._lines), ZERO)

    def is_empty(self) -> bool:
        return not self._lines

    def snapshot(self) -> CartSnapshot:
        return CartSnapshot.of(self.lines())

    @property
    def persistence_healthy(self) -> bool:
        """False если последняя запись в хранилище не удалась."""
        return self._persistence_healthy

    # -------------------------------------------------------------------------
    # Внутреннее
    # -------------------------------------------------------------------------

    def _index_of(self, product_id: int) -> Optional[int]:
        for index, line in enumerate(self._lines):
            if line.product_id == product_id:
                return index
        return None

    def _commit(self) -> CartSnapshot:
        self._persistence_healthy = self.storage.save(self._lines)
        return self.snapshot()
