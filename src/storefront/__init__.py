"""
Storefront: cart state machine, persistence and navigation for a static catalog.

Packages:
- core/          : domain models, units, JSON Schema contracts, errors
- catalog/       : read-only product catalog
- storage/       : key-value stores and the cart storage adapter
- cart/          : CartStore (authoritative cart state, write-through)
- navigation/    : ViewNavigator (catalog / product detail / cart)
- checkout/      : CheckoutFlow
- presentation/  : view models for an external renderer
"""

from storefront.app import Storefront
from storefront.config import MergePolicy, StorefrontConfig

__all__ = [
    "Storefront",
    "StorefrontConfig",
    "MergePolicy",
]
