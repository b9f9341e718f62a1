"""
View Models: данные для слоя представления

Чистые функции: состояние каталога/корзины → готовые к отображению значения.
Разметки и DOM здесь нет: рендерер (внешний коллаборатор) выбирает способ
отрисовки сам.

Цены форматируются только здесь: символ валюты из конфигурации, ровно 2 знака.
"""

from typing import Tuple

from pydantic import BaseModel, Field

from storefront.config import StorefrontConfig
from storefront.core.domain.cart_line import CartLine, CartSnapshot
from storefront.core.domain.product import Product
from storefront.core.domain.units import MAX_LINE_QUANTITY, MIN_LINE_QUANTITY, format_price


EMPTY_CART_MESSAGE = "Your cart is empty."


# =============================================================================
# MODELS
# =============================================================================


class ProductCardView(BaseModel):
    """Карточка товара в каталоге."""

    product_id: int
    name: str
    image_ref: str
    sale_price_text: str
    list_price_text: str
    discount_tag: str = Field(..., description="Например '-68%'")

    model_config = {"frozen": True}


class ProductDetailView(BaseModel):
    """Экран товара со степпером количества."""

    product_id: int
    name: str
    image_ref: str
    description: str
    sale_price_text: str
    list_price_text: str
    initial_quantity: int = MIN_LINE_QUANTITY
    min_quantity: int = MIN_LINE_QUANTITY
    max_quantity: int = MAX_LINE_QUANTITY

    model_config = {"frozen": True}


class CartLineView(BaseModel):
    """Строка корзины."""

    product_id: int
    name: str
    image_ref: str
    unit_price_text: str = Field(..., description="Например '₹2599.00 / unit'")
    quantity: int
    subtotal_text: str

    model_config = {"frozen": True}


class CartView(BaseModel):
    """Экран корзины."""

    lines: Tuple[CartLineView, ...] = ()
    total_text: str
    is_empty: bool
    checkout_enabled: bool
    empty_message: str = EMPTY_CART_MESSAGE

    model_config = {"frozen": True}


class HeaderView(BaseModel):
    """Шапка: бейдж количества товаров в корзине."""

    cart_count: int

    model_config = {"frozen": True}


# =============================================================================
# BUILDERS
# =============================================================================


def build_product_card(product: Product, config: StorefrontConfig) -> ProductCardView:
    symbol = config.currency_symbol
    return ProductCardView(
        product_id=product.id,
        name=product.name,
        image_ref=product.image_ref,
        sale_price_text=format_price(product.sale_price, symbol),
        list_price_text=format_price(product.list_price, symbol),
        discount_tag=f"-{product.discount_percentage()}%",
    )


def build_catalog(
    products: Tuple[Product, ...], config: StorefrontConfig
) -> Tuple[ProductCardView, ...]:
    """Карточки всех товаров в порядке каталога."""
    return tuple(build_product_card(product, config) for product in products)


def build_product_detail(product: Product, config: StorefrontConfig) -> ProductDetailView:
    symbol = config.currency_symbol
    return ProductDetailView(
        product_id=product.id,
        name=product.name,
        image_ref=product.image_ref,
        description=product.description,
        sale_price_text=format_price(product.sale_price, symbol),
        list_price_text=format_price(product.list_price, symbol),
    )


def build_cart_line(line: CartLine, config: StorefrontConfig) -> CartLineView:
    symbol = config.currency_symbol
    return CartLineView(
        product_id=line.product_id,
        name=line.display_name,
        image_ref=line.image_ref,
        unit_price_text=f"{format_price(line.unit_price, symbol)} / unit",
        quantity=line.quantity,
        subtotal_text=format_price(line.subtotal(), symbol),
    )


def build_cart_view(snapshot: CartSnapshot, config: StorefrontConfig) -> CartView:
    """
    Экран корзины из снапшота.

    Пустая корзина: сообщение EMPTY_CART_MESSAGE и выключенная кнопка checkout.
    """
    return CartView(
        lines=tuple(build_cart_line(line, config) for line in snapshot.lines),
        total_text=format_price(snapshot.total_price, config.currency_symbol),
        is_empty=snapshot.is_empty,
        checkout_enabled=not snapshot.is_empty,
    )


def build_header(snapshot: CartSnapshot) -> HeaderView:
    return HeaderView(cart_count=snapshot.total_item_count)
