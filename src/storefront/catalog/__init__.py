"""Catalog: статический каталог товаров витрины."""

from .provider import DEFAULT_PRODUCTS, CatalogProvider

__all__ = [
    "CatalogProvider",
    "DEFAULT_PRODUCTS",
]
