"""
Contract Validation Module

Модуль для валидации plain-data payload матриц (JSON Schema).
"""

from .validators import (
    AugmentedMatrixPayloadValidator,
    ContractValidator,
    MatrixPayloadValidator,
    SchemaLoader,
    validate_augmented_matrix_payload,
    validate_matrix_payload,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MatrixPayloadValidator",
    "AugmentedMatrixPayloadValidator",
    # Functions
    "validate_matrix_payload",
    "validate_augmented_matrix_payload",
]
