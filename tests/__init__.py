"""
Test suite for storefront

Contains:
- tests/unit/          : Unit tests for domain models, contracts, storage, cart,
                         navigation, checkout, view models and the composition root
"""
