"""
CartLine: Строка корзины

Immutable Pydantic модель. Имя, цена и изображение снапшотятся из Product
в момент добавления: последующие изменения каталога не влияют на уже
существующие строки корзины.

Все изменения количества создают новый экземпляр (with_quantity).
"""

from decimal import Decimal
from typing import Tuple

from pydantic import BaseModel, Field

from storefront.core.domain.product import Product
from storefront.core.domain.units import MAX_LINE_QUANTITY, MIN_LINE_QUANTITY, ZERO


# =============================================================================
# CART LINE MODEL
# =============================================================================


class CartLine(BaseModel):
    """
    Модель строки корзины.

    Инвариант: MIN_LINE_QUANTITY <= quantity <= MAX_LINE_QUANTITY.
    """

    product_id: int = Field(..., gt=0, description="id товара в каталоге")
    display_name: str = Field(..., description="Снапшот названия товара")
    unit_price: Decimal = Field(
        ..., ge=0, allow_inf_nan=False, description="Снапшот sale_price на момент добавления"
    )
    image_ref: str = Field(..., description="Снапшот ссылки на изображение")
    quantity: int = Field(
        ..., ge=MIN_LINE_QUANTITY, le=MAX_LINE_QUANTITY, description="Количество"
    )

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def from_product(cls, product: Product, quantity: int) -> "CartLine":
        """
        Создание строки со снапшотом полей товара.

        Args:
            product: Товар каталога
            quantity: Количество (уже проверенное)

        Returns:
            Новая CartLine с unit_price = product.sale_price
        """
        return cls(
            product_id=product.id,
            display_name=product.name,
            unit_price=product.sale_price,
            image_ref=product.image_ref,
            quantity=quantity,
        )

    def with_quantity(self, quantity: int) -> "CartLine":
        """Копия строки с новым количеством (с повторной валидацией)."""
        return CartLine(
            product_id=self.product_id,
            display_name=self.display_name,
            unit_price=self.unit_price,
            image_ref=self.image_ref,
            quantity=quantity,
        )

    def subtotal(self) -> Decimal:
        """unit_price * quantity, без округления"""
        return self.unit_price * self.quantity


# =============================================================================
# CART SNAPSHOT
# =============================================================================


class CartSnapshot(BaseModel):
    """
    Снапшот корзины после мутации.

    Возвращается каждой мутирующей операцией CartStore, чтобы слой
    представления мог перерисоваться без обращения к внутреннему состоянию.
    """

    lines: Tuple[CartLine, ...] = Field(default=(), description="Строки в порядке добавления")
    total_item_count: int = Field(default=0, ge=0, description="Сумма количеств")
    total_price: Decimal = Field(default=ZERO, ge=0, description="Точная сумма unit_price * quantity")

    model_config = {"frozen": True}

    @classmethod
    def of(cls, lines: Tuple[CartLine, ...]) -> "CartSnapshot":
        """Построение снапшота с вычисленными итогами."""
        return cls(
            lines=lines,
            total_item_count=sum(line.quantity for line in lines),
            total_price=sum((line.subtotal() for line in lines), ZERO),
        )

    @property
    def is_empty(self) -> bool:
        return not self.lines
