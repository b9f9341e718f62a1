"""
JSON Schema Contract Validators

Валидация сохранённого состояния корзины по JSON Schema (jsonschema, Draft 2020-12).

Схемы лежат внутри пакета (contracts/schema/) и поставляются как package-data:
- cart_state.json (массив строк корзины под единственным ключом хранилища)
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match


SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Загрузка и meta-валидация схем с кэшированием по имени."""

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._cache: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Args:
            schema_name: Имя схемы без расширения ('cart_state')

        Raises:
            FileNotFoundError: Файла схемы нет
            ValueError: Файл не является валидной Draft 2020-12 схемой
        """
        cached = self._cache.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

        self._cache[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидатор данных против одной именованной схемы."""

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Raises:
            ValidationError: Наиболее релевантное нарушение контракта
        """
        error = self.first_error(data)
        if error is not None:
            raise error

    def first_error(self, data: Any) -> Optional[ValidationError]:
        """Наиболее релевантная ошибка (jsonschema best_match) или None."""
        return best_match(self._validator.iter_errors(data))


class CartStateValidator(ContractValidator):
    """
    Валидатор cart_state: массив объектов ровно с полями
    productId, displayName, unitPrice, imageRef, quantity.

    Уникальность productId схемой не выражается: проверяется в кодеке.
    """

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("cart_state", loader)


# Общий экземпляр: схема читается и компилируется один раз
CART_STATE_VALIDATOR = CartStateValidator()
