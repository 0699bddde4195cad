"""
Core math modules для malg

Арифметика поля скаляров, элементарные строковые операции и алгоритм
приведения к ступенчатому виду.
"""

# Scalar Field
from malg.core.math.scalar_field import (
    INTEGER_FIELD,
    Scalar,
    ScalarField,
    ScalarFieldError,
    is_scalar,
    validate_scalar,
)

# Row Operations
from malg.core.math.row_operations import (
    RowIndexError,
    RowOps,
    check_index,
    check_row_index,
)

# Echelon Reduction
from malg.core.math.echelon import (
    EchelonResult,
    is_row_echelon,
    pivot_positions,
    row_echelon,
)

__all__ = [
    # Scalar Field — Constants
    "INTEGER_FIELD",
    # Scalar Field — Types
    "Scalar",
    "ScalarField",
    # Scalar Field — Exceptions
    "ScalarFieldError",
    # Scalar Field — Functions
    "is_scalar",
    "validate_scalar",
    # Row Operations — Types
    "RowOps",
    # Row Operations — Exceptions
    "RowIndexError",
    # Row Operations — Functions
    "check_index",
    "check_row_index",
    # Echelon Reduction — Types
    "EchelonResult",
    # Echelon Reduction — Functions
    "is_row_echelon",
    "pivot_positions",
    "row_echelon",
]
