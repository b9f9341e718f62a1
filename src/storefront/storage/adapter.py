"""
Storage Adapter: сериализация корзины в единственный ключ хранилища

Каноническая форма: JSON-массив объектов ровно с полями
productId, displayName, unitPrice, imageRef, quantity (в этом порядке).
- unitPrice: JSON number, quantity: JSON integer
- отсутствие ключа (или пустое значение) → пустая корзина, не ошибка
- значение не в канонической форме → пустая корзина + CorruptStateError в reporter

Ни save(), ни load() не пробрасывают исключения: деградация до режима
"только память" или "начать с пустой корзины".

unitPrice пишется точным текстом Decimal (без float) и читается через
parse_float=Decimal: load(save(lines)) == lines для любой конечной цены.
"""

import json
import logging
from decimal import Decimal
from typing import Any, Callable, Dict, List, Optional, Sequence

from pydantic import ValidationError

from storefront.core.contracts import CART_STATE_VALIDATOR
from storefront.core.domain.cart_line import CartLine
from storefront.core.errors import CorruptStateError, StorageWriteError, StorefrontError
from storefront.storage.key_value import KeyValueStore

logger = logging.getLogger(__name__)

# Коллаборатор наблюдаемости: получает ошибки, которые не пробрасываются
ErrorReporter = Callable[[StorefrontError], None]

DEFAULT_STORAGE_KEY = "ecommerceCart"


# =============================================================================
# CODEC
# =============================================================================


def _encode_price(amount: Decimal) -> str:
    # str() конечного Decimal всегда валидный JSON number ("2599.00", "1E+400")
    return str(amount)


def _line_to_json(line: CartLine) -> str:
    fields = (
        ("productId", json.dumps(line.product_id)),
        ("displayName", json.dumps(line.display_name, ensure_ascii=False)),
        ("unitPrice", _encode_price(line.unit_price)),
        ("imageRef", json.dumps(line.image_ref, ensure_ascii=False)),
        ("quantity", json.dumps(line.quantity)),
    )
    return "{" + ", ".join(f'"{name}": {value}' for name, value in fields) + "}"


def _record_to_line(record: Dict[str, Any]) -> CartLine:
    return CartLine(
        product_id=record["productId"],
        display_name=record["displayName"],
        unit_price=record["unitPrice"],
        image_ref=record["imageRef"],
        quantity=record["quantity"],
    )


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-finite number {name} is not allowed")


def serialize(lines: Sequence[CartLine]) -> str:
    """Каноническая текстовая форма корзины."""
    return "[" + ", ".join(_line_to_json(line) for line in lines) + "]"


def deserialize(text: str) -> List[CartLine]:
    """
    Разбор канонической формы.

    Порядок проверок:
    1. JSON (NaN/Infinity запрещены)
    2. JSON Schema контракт cart_state
    3. Инварианты CartLine (pydantic)
    4. Уникальность productId

    Raises:
        CorruptStateError: на любом шаге
    """
    try:
        data = json.loads(text, parse_float=Decimal, parse_constant=_reject_constant)
    except ValueError as e:
        raise CorruptStateError(f"Persisted cart is not valid JSON: {e}") from e

    error = CART_STATE_VALIDATOR.first_error(data)
    if error is not None:
        raise CorruptStateError(
            f"Persisted cart violates cart_state contract: {error.message}"
        ) from error

    lines: List[CartLine] = []
    seen_ids = set()
    for index, record in enumerate(data):
        try:
            line = _record_to_line(record)
        except ValidationError as e:
            raise CorruptStateError(f"Persisted cart line #{index} is invalid: {e}") from e

        if line.product_id in seen_ids:
            raise CorruptStateError(
                f"Persisted cart has duplicate productId {line.product_id}"
            )
        seen_ids.add(line.product_id)
        lines.append(line)

    return lines


# =============================================================================
# ADAPTER
# =============================================================================


class StorageAdapter:
    """Адаптер между CartStore и key-value хранилищем.

    Ошибки не пробрасываются: они логируются и передаются в reporter.
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str = DEFAULT_STORAGE_KEY,
        reporter: Optional[ErrorReporter] = None,
    ):
        """
        Args:
            store: key-value хранилище
            key: единственный ключ для корзины
            reporter: коллаборатор наблюдаемости (опционально)
        """
        self.store = store
        self.key = key
        self.reporter = reporter

    def save(self, lines: Sequence[CartLine]) -> bool:
        """
        Запись корзины под ключом.

        Returns:
            True если запись прошла, False если хранилище отказало
        """
        text = serialize(lines)
        try:
            self.store.set_item(self.key, text)
        except StorageWriteError as e:
            self._report(e)
            return False
        except OSError as e:
            self._report(StorageWriteError(f"Storage write failed: {e}"))
            return False

        logger.debug("Saved %d cart lines under %r", len(lines), self.key)
        return True

    def load(self) -> List[CartLine]:
        """
        Чтение корзины.

        Returns:
            Строки корзины; пустой список если ключа нет или состояние повреждено
        """
        try:
            raw = self.store.get_item(self.key)
        except (OSError, ValueError) as e:
            self._report(CorruptStateError(f"Persisted cart could not be read: {e}"))
            return []

        if not raw:
            return []

        try:
            lines = deserialize(raw)
        except CorruptStateError as e:
            self._report(e)
            return []

        logger.info("Restored %d cart lines from %r", len(lines), self.key)
        return lines

    def _report(self, error: StorefrontError) -> None:
        logger.warning("%s: %s", error.code, error.message)
        if self.reporter is not None:
            self.reporter(error)
