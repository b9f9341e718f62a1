"""Key-value хранилища: коллабораторы StorageAdapter.

Контракт (KeyValueStore):
- get_item(key) → Optional[str] (None если ключа нет)
- set_item(key, value): при ошибке StorageWriteError / QuotaExceededError
- remove_item(key)

Реализации:
- InMemoryKeyValueStore: dict с опциональной квотой (аналог quota local storage)
- JsonFileKeyValueStore: JSON-объект в файле, переживает перезапуск процесса
"""

import json
import os
from pathlib import Path
from typing import Dict, Optional, Protocol, Union

from storefront.core.errors import QuotaExceededError, StorageWriteError


class KeyValueStore(Protocol):
    """Протокол durable key-value хранилища (get/set по ключу)."""

    def get_item(self, key: str) -> Optional[str]:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...

    def remove_item(self, key: str) -> None:
        ...


class InMemoryKeyValueStore:
    """Хранилище в памяти.

    quota_bytes ограничивает суммарный размер ключей и значений (UTF-8);
    None: без ограничения.
    """

    def __init__(self, quota_bytes: Optional[int] = None):
        self.quota_bytes = quota_bytes
        self._items: Dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self.quota_bytes is not None:
            used = sum(
                _entry_size(k, v) for k, v in self._items.items() if k != key
            )
            required = used + _entry_size(key, value)
            if required > self.quota_bytes:
                raise QuotaExceededError(
                    f"Storage quota exceeded: {required} > {self.quota_bytes} bytes"
                )
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def __len__(self) -> int:
        return len(self._items)


class JsonFileKeyValueStore:
    """Хранилище в JSON-файле.

    Файл содержит один JSON-объект {key: value}. Запись атомарна:
    временный файл + os.replace.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def get_item(self, key: str) -> Optional[str]:
        """
        Raises:
            OSError: файл не читается
            ValueError: файл не является JSON-объектом
        """
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        try:
            items = self._read()
        except ValueError:
            # Нечитаемый файл перезаписывается
            items = {}
        except OSError as e:
            raise StorageWriteError(f"Cannot read storage file {self.path}: {e}") from e

        items[key] = value
        self._write(items)

    def remove_item(self, key: str) -> None:
        items = self._read()
        if key in items:
            del items[key]
            self._write(items)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}

        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Storage file {self.path} does not hold a JSON object")
        return data

    def _write(self, items: Dict[str, str]) -> None:
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(items, f, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            raise StorageWriteError(f"Cannot write storage file {self.path}: {e}") from e


def _entry_size(key: str, value: str) -> int:
    return len(key.encode("utf-8")) + len(value.encode("utf-8"))
