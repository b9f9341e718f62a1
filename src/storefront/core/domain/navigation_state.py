"""
NavigationState: Модель состояния навигации

Транзиентное состояние (не сохраняется): какой из трёх экранов виден
и, для экрана товара, какой товар открыт.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ENUMS
# =============================================================================


class View(str, Enum):
    """Экран витрины"""

    CATALOG = "CATALOG"
    PRODUCT_DETAIL = "PRODUCT_DETAIL"
    CART = "CART"


# =============================================================================
# NAVIGATION STATE MODEL
# =============================================================================


class NavigationState(BaseModel):
    """
    Состояние навигации.

    Инвариант: product_id задан тогда и только тогда, когда view == PRODUCT_DETAIL.
    """

    view: View = Field(View.CATALOG, description="Видимый экран")
    product_id: Optional[int] = Field(
        None, gt=0, validate_default=True, description="Открытый товар (только PRODUCT_DETAIL)"
    )

    model_config = {"frozen": True}

    @field_validator("product_id")
    @classmethod
    def validate_product_id_matches_view(cls, v: Optional[int], info) -> Optional[int]:
        """product_id обязателен для PRODUCT_DETAIL и запрещён для остальных экранов"""
        if "view" in info.data:
            view = info.data["view"]
            if view == View.PRODUCT_DETAIL and v is None:
                raise ValueError("product_id is required for PRODUCT_DETAIL")
            if view != View.PRODUCT_DETAIL and v is not None:
                raise ValueError(f"product_id must be None for {view.value}")
        return v
