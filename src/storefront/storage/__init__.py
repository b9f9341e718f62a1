"""Storage: персистентность корзины в key-value хранилище."""

from .adapter import (
    DEFAULT_STORAGE_KEY,
    ErrorReporter,
    StorageAdapter,
    deserialize,
    serialize,
)
from .key_value import InMemoryKeyValueStore, JsonFileKeyValueStore, KeyValueStore

__all__ = [
    "StorageAdapter",
    "ErrorReporter",
    "DEFAULT_STORAGE_KEY",
    "serialize",
    "deserialize",
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
]
