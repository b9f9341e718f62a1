"""
Storefront Errors: таксономия ошибок витрины

Все ошибки наследуются от StorefrontError и несут машинно-читаемый `code`
и человеко-читаемое `message`.

Политика распространения:
- NotFoundError, InvalidQuantityError, InvalidTransitionError: ошибки вызывающего,
  пробрасываются наверх, состояние корзины не меняется
- EmptyCartError: показывается пользователю (message)
- CorruptStateError, StorageWriteError: никогда не пробрасываются из StorageAdapter,
  только репортятся (logger + reporter)
"""

from typing import Optional


class StorefrontError(Exception):
    """Базовая ошибка витрины."""

    code: str = "storefront_error"

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class NotFoundError(StorefrontError):
    """Товар с указанным id отсутствует в каталоге."""

    code = "not_found"

    def __init__(self, product_id: object) -> None:
        super().__init__(f"Product {product_id!r} not found in catalog")
        self.product_id = product_id


class InvalidQuantityError(StorefrontError):
    """Количество вне диапазона [1, 99] или не целое."""

    code = "invalid_quantity"

    def __init__(self, quantity: object, reason: str = "") -> None:
        message = f"Invalid quantity {quantity!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.quantity = quantity


class EmptyCartError(StorefrontError):
    """Попытка checkout с пустой корзиной."""

    code = "empty_cart"

    def __init__(
        self,
        message: str = "Your cart is empty. Please add items before checking out.",
    ) -> None:
        super().__init__(message)


class InvalidTransitionError(StorefrontError):
    """Недопустимый переход навигации."""

    code = "invalid_transition"


class CorruptStateError(StorefrontError):
    """Сохранённое состояние корзины не разбирается в каноническую форму."""

    code = "corrupt_state"


class StorageWriteError(StorefrontError):
    """Запись в key-value хранилище не удалась."""

    code = "storage_write_failed"


class QuotaExceededError(StorageWriteError):
    """Превышена квота key-value хранилища."""

    code = "quota_exceeded"
