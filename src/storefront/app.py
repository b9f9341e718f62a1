"""Storefront: composition root.

Собирает по одному экземпляру каждого компонента и отдаёт их слою
представления. Также реализует пользовательские сценарии:
- открыть карточку товара из каталога
- выбрать количество степпером и добавить товар из карточки с возвратом в каталог
- открыть корзину
- checkout
"""

from typing import Iterable, Optional, Tuple

from storefront.cart.store import CartStore
from storefront.catalog.provider import DEFAULT_PRODUCTS, CatalogProvider
from storefront.checkout.flow import CheckoutFlow, CheckoutResult
from storefront.config import StorefrontConfig
from storefront.core.domain.cart_line import CartSnapshot
from storefront.core.domain.navigation_state import View
from storefront.core.domain.product import Product
from storefront.core.domain.units import MIN_LINE_QUANTITY, step_quantity
from storefront.core.errors import InvalidTransitionError
from storefront.navigation.state_machine import NavigationResult, ViewNavigator
from storefront.presentation.view_models import (
    CartView,
    HeaderView,
    ProductCardView,
    ProductDetailView,
    build_cart_view,
    build_catalog,
    build_header,
    build_product_detail,
)
from storefront.storage.adapter import ErrorReporter, StorageAdapter
from storefront.storage.key_value import InMemoryKeyValueStore, KeyValueStore


class Storefront:
    """Витрина: каталог, корзина, навигация и checkout одной сессии."""

    def __init__(
        self,
        store: Optional[KeyValueStore] = None,
        config: Optional[StorefrontConfig] = None,
        products: Iterable[Product] = DEFAULT_PRODUCTS,
        reporter: Optional[ErrorReporter] = None,
    ):
        """
        Args:
            store: key-value хранилище (по умолчанию в памяти)
            config: конфигурация витрины
            products: статический каталог
            reporter: коллаборатор наблюдаемости для ошибок хранилища
        """
        self.config = config or StorefrontConfig()
        self.catalog = CatalogProvider(products)
        self.storage = StorageAdapter(
            store if store is not None else InMemoryKeyValueStore(),
            key=self.config.storage_key,
            reporter=reporter,
        )
        self.cart = CartStore(self.catalog, self.storage, self.config)
        self.navigator = ViewNavigator(self.catalog)
        self.checkout_flow = CheckoutFlow(self.cart, self.navigator, self.config)

        self._detail_quantity = MIN_LINE_QUANTITY

    # -------------------------------------------------------------------------
    # Навигация
    # -------------------------------------------------------------------------

    def go_to(self, view: View, product_id: Optional[int] = None) -> NavigationResult:
        return self.navigator.go_to(view, product_id)

    def open_product(self, product_id: int) -> ProductDetailView:
        """Клик по карточке в каталоге; степпер количества сбрасывается в 1."""
        self.navigator.go_to(View.PRODUCT_DETAIL, product_id)
        self._detail_quantity = MIN_LINE_QUANTITY
        return build_product_detail(self.catalog.get(product_id), self.config)

    def open_cart(self) -> CartView:
        self.navigator.go_to(View.CART)
        return self.cart_view()

    def go_home(self) -> NavigationResult:
        return self.navigator.go_to(View.CATALOG)

    # -------------------------------------------------------------------------
    # Корзина
    # -------------------------------------------------------------------------

    @property
    def detail_quantity(self) -> int:
        """Текущее значение степпера на экране товара."""
        return self._detail_quantity

    def increase_detail_quantity(self) -> int:
        """Кнопка "+" степпера (не выше 99)."""
        return self._step_detail_quantity(+1)

    def decrease_detail_quantity(self) -> int:
        """Кнопка "-" степпера (не ниже 1)."""
        return self._step_detail_quantity(-1)

    def add_from_detail(self, quantity: Optional[int] = None) -> CartSnapshot:
        """Кнопка Add to Cart на экране товара: добавление и возврат в каталог.

        Args:
            quantity: явное количество; по умолчанию значение степпера

        Raises:
            InvalidTransitionError: экран товара не открыт
            InvalidQuantityError: quantity вне [1, 99]
        """
        product_id = self._open_product_id()
        if quantity is None:
            quantity = self._detail_quantity

        snapshot = self.cart.add_item(product_id, quantity)
        self.navigator.go_to(View.CATALOG)
        return snapshot

    def _step_detail_quantity(self, delta: int) -> int:
        self._open_product_id()
        self._detail_quantity = step_quantity(self._detail_quantity, delta)
        return self._detail_quantity

    def _open_product_id(self) -> int:
        product_id = self.navigator.current_product_id
        if self.navigator.current_view != View.PRODUCT_DETAIL or product_id is None:
            raise InvalidTransitionError("No product is open")
        return product_id

    def checkout(self) -> CheckoutResult:
        return self.checkout_flow.checkout()

    # -------------------------------------------------------------------------
    # View models
    # -------------------------------------------------------------------------

    def catalog_view(self) -> Tuple[ProductCardView, ...]:
        return build_catalog(self.catalog.products(), self.config)

    def cart_view(self) -> CartView:
        return build_cart_view(self.cart.snapshot(), self.config)

    def header(self) -> HeaderView:
        return build_header(self.cart.snapshot())
