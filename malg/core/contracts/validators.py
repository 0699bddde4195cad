"""
Контракты plain-data представления матриц (JSON Schema, Draft 2020-12)

Схемы лежат в malg/core/contracts/schema/ и ставятся вместе с пакетом:
- matrix.json — {"rows": M, "cols": N, "data": [[...], ...]}
- augmented_matrix.json — {"left": <matrix>, "right": <matrix>}

Схема отвечает за структуру и типы. Согласованность data с rows/cols
(и равенство числа строк у частей augmented) проверяют конструкторы
Matrix / AugmentedMatrix через DimensionMismatchError.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

from jsonschema import Draft202012Validator, SchemaError, ValidationError
from jsonschema.exceptions import best_match

SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMAS
# =============================================================================


class SchemaLoader:
    """
    Чтение и meta-проверка схем из каталога.

    Каждая схема читается с диска один раз; повторный load_schema
    возвращает тот же dict.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        if not schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {schema_dir}")
        self.schema_dir = schema_dir
        self._cache: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Args:
            schema_name: имя файла без .json ('matrix', 'augmented_matrix')

        Raises:
            FileNotFoundError: файла схемы нет
            ValueError: файл не является корректной JSON Schema
        """
        cached = self._cache.get(schema_name)
        if cached is not None:
            return cached

        path = self.schema_dir / f"{schema_name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

        self._cache[schema_name] = schema
        return schema


_loader: Optional[SchemaLoader] = None


def _default_loader() -> SchemaLoader:
    global _loader
    if _loader is None:
        _loader = SchemaLoader()
    return _loader


# =============================================================================
# VALIDATORS
# =============================================================================


class ContractValidator:
    """Проверка payload против одной схемы из SchemaLoader."""

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or _default_loader()).load_schema(schema_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: наиболее релевантная из ошибок схемы
        """
        error = best_match(self._validator.iter_errors(data))
        if error is not None:
            raise error

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Все ошибки схемы, без остановки на первой."""
        return self._validator.iter_errors(data)


class MatrixPayloadValidator(ContractValidator):
    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("matrix", loader)


class AugmentedMatrixPayloadValidator(ContractValidator):
    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("augmented_matrix", loader)


# =============================================================================
# FUNCTIONS
# =============================================================================


def validate_matrix_payload(data: Dict[str, Any]) -> None:
    """Raises ValidationError, если data не matrix payload."""
    MatrixPayloadValidator().validate(data)


def validate_augmented_matrix_payload(data: Dict[str, Any]) -> None:
    """Raises ValidationError, если data не augmented_matrix payload."""
    AugmentedMatrixPayloadValidator().validate(data)
