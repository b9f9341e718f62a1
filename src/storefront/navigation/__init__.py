"""Navigation: state machine видимого экрана (каталог / товар / корзина)."""

from .state_machine import NavigationResult, ViewNavigator

__all__ = [
    "ViewNavigator",
    "NavigationResult",
]
