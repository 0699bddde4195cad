"""
Тесты для MatrixShape и проверок размерностей

Покрывает:
- Создание и валидация модели (Pydantic)
- Immutability (frozen=True)
- infer_shape: рваные сетки, заявленные rows/cols, пустые сетки
- require_same_shape / require_same_rows / require_square
"""

import pytest
from pydantic import ValidationError

from malg.core.domain import (
    DimensionMismatchError,
    MatrixShape,
    infer_shape,
    require_same_rows,
    require_same_shape,
    require_square,
)


class TestMatrixShape:
    """Тесты модели MatrixShape"""

    def test_valid_shape(self) -> None:
        shape = MatrixShape(rows=3, cols=2)
        assert shape.rows == 3
        assert shape.cols == 2
        assert shape.size == 6
        assert not shape.is_square
        assert str(shape) == "3x2"

    def test_empty_shape_allowed(self) -> None:
        shape = MatrixShape(rows=0, cols=0)
        assert shape.size == 0
        assert shape.is_square

    def test_negative_dimensions_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MatrixShape(rows=-1, cols=2)
        with pytest.raises(ValidationError):
            MatrixShape(rows=2, cols=-3)

    def test_frozen(self) -> None:
        shape = MatrixShape(rows=2, cols=2)
        with pytest.raises(ValidationError):
            shape.rows = 5  # type: ignore[misc]

    def test_transposed(self) -> None:
        assert MatrixShape(rows=2, cols=5).transposed() == MatrixShape(rows=5, cols=2)

    def test_equality_and_hash(self) -> None:
        assert MatrixShape(rows=2, cols=3) == MatrixShape(rows=2, cols=3)
        assert MatrixShape(rows=2, cols=3) != MatrixShape(rows=3, cols=2)
        assert len({MatrixShape(rows=1, cols=1), MatrixShape(rows=1, cols=1)}) == 1


class TestInferShape:
    """Тесты infer_shape"""

    def test_rectangular_grid(self) -> None:
        assert infer_shape([[1, 2, 3], [4, 5, 6]]) == MatrixShape(rows=2, cols=3)

    def test_ragged_grid_rejected(self) -> None:
        with pytest.raises(DimensionMismatchError, match="Ragged grid: row 1"):
            infer_shape([[1, 2], [3]])

    def test_declared_rows_mismatch(self) -> None:
        with pytest.raises(DimensionMismatchError, match="Expected 3 rows, got 2"):
            infer_shape([[1, 2], [3, 4]], rows=3)

    def test_declared_cols_mismatch(self) -> None:
        with pytest.raises(DimensionMismatchError, match="Expected 3 columns, got 2"):
            infer_shape([[1, 2], [3, 4]], cols=3)

    def test_declared_dimensions_match(self) -> None:
        assert infer_shape([[1, 2], [3, 4]], rows=2, cols=2) == MatrixShape(rows=2, cols=2)

    def test_no_rows_takes_declared_cols(self) -> None:
        assert infer_shape([], cols=4) == MatrixShape(rows=0, cols=4)
        assert infer_shape([]) == MatrixShape(rows=0, cols=0)

    def test_dimension_mismatch_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            infer_shape([[1], [2, 3]])


class TestShapeRequirements:
    """Тесты require_* проверок"""

    def test_same_shape(self) -> None:
        require_same_shape(MatrixShape(rows=2, cols=2), MatrixShape(rows=2, cols=2), "add")
        with pytest.raises(DimensionMismatchError, match="Cannot add matrices of shapes 2x2 and 2x3"):
            require_same_shape(MatrixShape(rows=2, cols=2), MatrixShape(rows=2, cols=3), "add")

    def test_same_rows(self) -> None:
        require_same_rows(MatrixShape(rows=3, cols=1), MatrixShape(rows=3, cols=7))
        with pytest.raises(DimensionMismatchError, match="equal row counts, got 3 and 2"):
            require_same_rows(MatrixShape(rows=3, cols=1), MatrixShape(rows=2, cols=1))

    def test_square(self) -> None:
        require_square(MatrixShape(rows=4, cols=4), "trace")
        with pytest.raises(DimensionMismatchError, match="trace requires a square matrix, got 2x3"):
            require_square(MatrixShape(rows=2, cols=3), "trace")
