"""
Units: количества и денежные величины

Единственный допустимый способ:
- проверять и ограничивать количество в строке корзины
- округлять цену для отображения (только на уровне представления)
- считать процент скидки

В хранимом состоянии цены НЕ округляются: round_for_display вызывается
только при форматировании.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Final

from storefront.core.errors import InvalidQuantityError


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Границы количества одной строки корзины
MIN_LINE_QUANTITY: Final[int] = 1
MAX_LINE_QUANTITY: Final[int] = 99

# Квант отображения цены (2 знака после запятой)
PRICE_DISPLAY_QUANTUM: Final[Decimal] = Decimal("0.01")

ZERO: Final[Decimal] = Decimal("0")


# =============================================================================
# КОЛИЧЕСТВА
# =============================================================================


def is_quantity_int(value: object) -> bool:
    """True если value: int (bool не считается количеством)."""
    return isinstance(value, int) and not isinstance(value, bool)


def validate_quantity(quantity: object) -> int:
    """
    Проверка количества для добавления в корзину.

    Args:
        quantity: Запрошенное количество

    Returns:
        quantity без изменений

    Raises:
        InvalidQuantityError: Если не int или вне [MIN_LINE_QUANTITY, MAX_LINE_QUANTITY]
    """
    if not is_quantity_int(quantity):
        raise InvalidQuantityError(quantity, "quantity must be an integer")

    if quantity < MIN_LINE_QUANTITY or quantity > MAX_LINE_QUANTITY:
        raise InvalidQuantityError(
            quantity,
            f"quantity must be between {MIN_LINE_QUANTITY} and {MAX_LINE_QUANTITY}",
        )

    return quantity


def clamp_quantity(quantity: int) -> int:
    """clip(quantity, MIN_LINE_QUANTITY, MAX_LINE_QUANTITY)"""
    return max(MIN_LINE_QUANTITY, min(quantity, MAX_LINE_QUANTITY))


def step_quantity(current: int, delta: int) -> int:
    """
    Шаг степпера количества в карточке товара.

    Кнопки "+"/"-" никогда не выводят значение за [1, 99].
    """
    return clamp_quantity(current + delta)


# =============================================================================
# ДЕНЬГИ
# =============================================================================


def round_for_display(amount: Decimal) -> Decimal:
    """Округление до 2 знаков (ROUND_HALF_UP) для отображения."""
    return amount.quantize(PRICE_DISPLAY_QUANTUM, rounding=ROUND_HALF_UP)


def format_price(amount: Decimal, currency_symbol: str) -> str:
    """
    Форматирование цены: символ валюты + ровно 2 знака.

    Example:
        format_price(Decimal("2599"), "₹") → "₹2599.00"
    """
    return f"{currency_symbol}{round_for_display(amount)}"


def discount_percentage(list_price: Decimal, sale_price: Decimal) -> int:
    """
    Процент скидки, округлённый до целого (half up).

    Returns:
        0 если list_price == 0
    """
    if list_price <= ZERO:
        return 0

    pct = (list_price - sale_price) / list_price * 100
    return int(pct.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
