"""
Product: Модель товара каталога

Immutable Pydantic модель. Создаётся при старте из статической конфигурации
каталога и не меняется в течение сессии.
"""

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from storefront.core.domain.units import discount_percentage


# =============================================================================
# PRODUCT MODEL
# =============================================================================


class Product(BaseModel):
    """
    Модель товара.

    Immutable модель (frozen=True). Цены хранятся как Decimal без округления.
    Инвариант: 0 <= sale_price <= list_price, обе цены конечны.
    """

    id: int = Field(..., gt=0, description="Уникальный положительный id товара")
    name: str = Field(..., min_length=1, description="Название товара")
    list_price: Decimal = Field(..., ge=0, allow_inf_nan=False, description="Цена без скидки")
    sale_price: Decimal = Field(..., ge=0, allow_inf_nan=False, description="Цена со скидкой (цена продажи)")
    image_ref: str = Field(..., description="Ссылка на изображение")
    description: str = Field("", description="Описание товара")

    model_config = {"frozen": True}  # Immutable

    @field_validator("sale_price")
    @classmethod
    def validate_sale_not_above_list(cls, v: Decimal, info) -> Decimal:
        """Проверка, что цена продажи не выше цены без скидки"""
        if "list_price" in info.data:
            list_price = info.data["list_price"]
            if v > list_price:
                raise ValueError(f"sale_price {v} exceeds list_price {list_price}")
        return v

    def discount_amount(self) -> Decimal:
        """Абсолютная скидка: list_price - sale_price"""
        return self.list_price - self.sale_price

    def discount_percentage(self) -> int:
        """Скидка в процентах, округлённая до целого."""
        return discount_percentage(self.list_price, self.sale_price)
