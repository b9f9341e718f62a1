"""View Navigator: state machine видимого экрана витрины.

States: CATALOG / PRODUCT_DETAIL / CART, начальное: CATALOG.
- go_to(CATALOG): из любого состояния
- go_to(PRODUCT_DETAIL, product_id): только из CATALOG, product_id должен быть в каталоге
- go_to(CART): из любого состояния

Терминального состояния нет. Ровно один экран виден в каждый момент.
Бизнес-правил здесь нет: только презентационное состояние.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from storefront.catalog.provider import CatalogProvider
from storefront.core.domain.navigation_state import NavigationState, View
from storefront.core.errors import InvalidTransitionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NavigationResult:
    """Результат перехода навигации."""

    new_state: NavigationState
    previous_state: NavigationState

    # Диагностика
    transition_occurred: bool
    transition_reason: str

    # Для отладки
    details: str


class ViewNavigator:
    """Навигатор между тремя экранами.

    Переходы безусловные (один жест: один шаг), кроме двух проверок
    для PRODUCT_DETAIL: исходный экран и существование товара.
    """

    def __init__(self, catalog: CatalogProvider):
        """
        Args:
            catalog: каталог для проверки product_id при открытии карточки
        """
        self.catalog = catalog
        self._state = NavigationState()

    @property
    def state(self) -> NavigationState:
        return self._state

    @property
    def current_view(self) -> View:
        return self._state.view

    @property
    def current_product_id(self) -> Optional[int]:
        return self._state.product_id

    def is_visible(self, view: View) -> bool:
        """True ровно для одного экрана."""
        return self._state.view == view

    def go_to(self, view: View, product_id: Optional[int] = None) -> NavigationResult:
        """Переход на экран.

        Args:
            view: целевой экран
            product_id: товар (только для PRODUCT_DETAIL)

        Returns:
            NavigationResult с новым состоянием

        Raises:
            InvalidTransitionError: PRODUCT_DETAIL не из CATALOG, или product_id
                передан для другого экрана
            NotFoundError: товара нет в каталоге
        """
        previous = self._state

        if view == View.PRODUCT_DETAIL:
            if product_id is None:
                raise InvalidTransitionError("PRODUCT_DETAIL requires a product_id")
        elif product_id is not None:
            raise InvalidTransitionError(f"{view.value} does not take a product_id")

        if previous.view == view and previous.product_id == product_id:
            return NavigationResult(
                new_state=previous,
                previous_state=previous,
                transition_occurred=False,
                transition_reason="no_transition",
                details=f"Unchanged: {_describe(previous)}",
            )

        if view == View.PRODUCT_DETAIL:
            if previous.view != View.CATALOG:
                raise InvalidTransitionError(
                    f"PRODUCT_DETAIL is reachable from CATALOG only, not from {previous.view.value}"
                )
            self.catalog.get(product_id)

        target = NavigationState(view=view, product_id=product_id)

        self._state = target
        logger.debug("Navigated %s → %s", previous.view.value, view.value)

        return NavigationResult(
            new_state=target,
            previous_state=previous,
            transition_occurred=True,
            transition_reason=f"{previous.view.value}_to_{view.value}",
            details=_describe(target),
        )


def _describe(state: NavigationState) -> str:
    if state.view == View.PRODUCT_DETAIL:
        return f"Showing product {state.product_id}"
    return f"Showing {state.view.value}"
