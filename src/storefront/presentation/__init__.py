"""Presentation: view models для внешнего рендерера."""

from .view_models import (
    EMPTY_CART_MESSAGE,
    CartLineView,
    CartView,
    HeaderView,
    ProductCardView,
    ProductDetailView,
    build_cart_line,
    build_cart_view,
    build_catalog,
    build_header,
    build_product_card,
    build_product_detail,
)

__all__ = [
    # Models
    "ProductCardView",
    "ProductDetailView",
    "CartLineView",
    "CartView",
    "HeaderView",
    "EMPTY_CART_MESSAGE",
    # Builders
    "build_product_card",
    "build_catalog",
    "build_product_detail",
    "build_cart_line",
    "build_cart_view",
    "build_header",
]
