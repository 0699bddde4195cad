"""
MatrixShape — размерности матрицы

Immutable Pydantic модель (rows, cols) и проверки согласованности
размерностей. Размерности фиксируются при создании матрицы и больше не
меняются; все несоответствия обнаруживаются сразу (fail fast), до любых
строковых операций.
"""

from typing import Any, Optional, Sequence

from pydantic import BaseModel, Field

# =============================================================================
# EXCEPTIONS
# =============================================================================


class DimensionMismatchError(ValueError):
    """
    Несогласованные размерности.

    Возникает при:
    1. Рваной (ragged) сетке элементов
    2. Несовпадении сетки с заявленными rows/cols
    3. AugmentedMatrix из частей с разным числом строк
    4. Арифметике над матрицами несовместимых размеров
    5. Операциях только для квадратных матриц (trace) над прямоугольной
    """

    pass


# =============================================================================
# SHAPE MODEL
# =============================================================================


class MatrixShape(BaseModel):
    """Размерности M x N."""

    rows: int = Field(..., ge=0, description="Число строк M")
    cols: int = Field(..., ge=0, description="Число столбцов N")

    model_config = {"frozen": True}  # Immutable

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def transposed(self) -> "MatrixShape":
        return MatrixShape(rows=self.cols, cols=self.rows)

    def __str__(self) -> str:
        return f"{self.rows}x{self.cols}"


# =============================================================================
# SHAPE CHECKS
# =============================================================================


def infer_shape(
    data: Sequence[Sequence[Any]],
    rows: Optional[int] = None,
    cols: Optional[int] = None,
) -> MatrixShape:
    """
    Определение и проверка размерностей сетки.

    Args:
        data: Сетка элементов (последовательность строк)
        rows: Ожидаемое число строк (None — не проверять)
        cols: Ожидаемое число столбцов (None — не проверять; для сетки
            без строк задаёт N, по умолчанию 0)

    Returns:
        MatrixShape сетки

    Raises:
        DimensionMismatchError: рваная сетка или несовпадение с rows/cols
    """
    n_rows = len(data)
    if rows is not None and n_rows != rows:
        raise DimensionMismatchError(f"Expected {rows} rows, got {n_rows}")

    if n_rows == 0:
        return MatrixShape(rows=0, cols=cols or 0)

    n_cols = len(data[0])
    if cols is not None and n_cols != cols:
        raise DimensionMismatchError(f"Expected {cols} columns, got {n_cols}")

    for i, row in enumerate(data):
        if len(row) != n_cols:
            raise DimensionMismatchError(
                f"Ragged grid: row {i} has {len(row)} entries, expected {n_cols}"
            )

    return MatrixShape(rows=n_rows, cols=n_cols)


def require_same_shape(left: MatrixShape, right: MatrixShape, operation: str) -> None:
    """Проверка совпадения размерностей для поэлементных операций."""
    if left != right:
        raise DimensionMismatchError(
            f"Cannot {operation} matrices of shapes {left} and {right}"
        )


def require_same_rows(left: MatrixShape, right: MatrixShape) -> None:
    """Проверка числа строк для AugmentedMatrix [left | right]."""
    if left.rows != right.rows:
        raise DimensionMismatchError(
            f"Augmented parts must have equal row counts, got {left.rows} and {right.rows}"
        )


def require_square(shape: MatrixShape, operation: str) -> None:
    if not shape.is_square:
        raise DimensionMismatchError(f"{operation} requires a square matrix, got {shape}")
