"""Catalog Provider: неизменяемый упорядоченный каталог товаров.

Каталог поставляется контент-коллаборатором как статический список.
Провайдер только читает: мутаций нет.
"""

from decimal import Decimal
from typing import Dict, Iterable, Optional, Tuple

from storefront.core.domain.product import Product
from storefront.core.errors import NotFoundError


# =============================================================================
# DEFAULT CATALOG
# =============================================================================

DEFAULT_PRODUCTS: Tuple[Product, ...] = (
    Product(
        id=1,
        name="Classic Denim Jacket",
        list_price=Decimal("7999.00"),
        sale_price=Decimal("2599.00"),
        image_ref="./img/image.png",
        description=(
            "A timeless, rugged denim jacket perfect for all seasons. "
            "Features a button-up front and two chest pockets."
        ),
    ),
    Product(
        id=2,
        name="Wireless Noise-Cancelling Headphones",
        list_price=Decimal("19999.00"),
        sale_price=Decimal("14999.00"),
        image_ref="./img/image2.webp",
        description=(
            "Experience pure audio with industry-leading noise cancellation and a "
            "comfortable, ergonomic design. 30-hour battery life."
        ),
    ),
    Product(
        id=3,
        name="Organic Cotton T-Shirt Pack",
        list_price=Decimal("3999.00"),
        sale_price=Decimal("2999.00"),
        image_ref="./img/image3.jpg",
        description=(
            "A pack of three incredibly soft organic cotton t-shirts in essential "
            "colors. Sustainable and breathable."
        ),
    ),
    Product(
        id=4,
        name="4K Ultra HD Smart TV (55 Inch)",
        list_price=Decimal("59999.00"),
        sale_price=Decimal("49999.00"),
        image_ref="./img/image4.png",
        description=(
            "Vibrant colors and sharp details with smart features built-in. "
            "Perfect for movies and gaming."
        ),
    ),
)


# =============================================================================
# PROVIDER
# =============================================================================


class CatalogProvider:
    """Read-only каталог с поиском по id.

    Порядок товаров сохраняется как в исходном списке.
    """

    def __init__(self, products: Iterable[Product] = DEFAULT_PRODUCTS):
        """
        Args:
            products: статический список товаров

        Raises:
            ValueError: если id товаров повторяются
        """
        self._products: Tuple[Product, ...] = tuple(products)
        self._by_id: Dict[int, Product] = {}

        for product in self._products:
            if product.id in self._by_id:
                raise ValueError(f"Duplicate product id in catalog: {product.id}")
            self._by_id[product.id] = product

    def products(self) -> Tuple[Product, ...]:
        """Все товары в порядке каталога."""
        return self._products

    def find(self, product_id: int) -> Optional[Product]:
        """Поиск товара по id (None если нет)."""
        return self._by_id.get(product_id)

    def get(self, product_id: int) -> Product:
        """Товар по id.

        Raises:
            NotFoundError: если товара нет в каталоге
        """
        product = self.find(product_id)
        if product is None:
            raise NotFoundError(product_id)
        return product

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._by_id

    def __len__(self) -> int:
        return len(self._products)
