"""
Core domain models, units, contracts and errors.

This module contains the foundational building blocks that are independent
of the key-value store and of the rendering layer.
"""
