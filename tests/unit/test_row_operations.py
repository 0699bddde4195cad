"""
Тесты для элементарных строковых операций Matrix

Coverage:
- swap_rows / scale_row / add_rows / get_row на конкретных сценариях
- Граничные случаи: i == j, масштаб на zero/one
- RowIndexError для индексов вне диапазона (матрица не изменяется)
- Протокол RowOps (structural typing)
"""

from fractions import Fraction

import pytest

from malg.core.domain import AugmentedMatrix, Matrix
from malg.core.math import RowIndexError, RowOps, check_index, check_row_index


@pytest.fixture
def a32() -> Matrix:
    """3x2 матрица [[1, 2], [3, 4], [5, 6]]"""
    return Matrix([[1, 2], [3, 4], [5, 6]])


class TestSwapRows:
    """Тесты swap_rows"""

    def test_swap(self, a32) -> None:
        a32.swap_rows(1, 2)
        assert a32 == Matrix([[1, 2], [5, 6], [3, 4]])

    def test_swap_same_row_is_noop(self, a32) -> None:
        a32.swap_rows(1, 1)
        assert a32 == Matrix([[1, 2], [3, 4], [5, 6]])

    def test_swap_twice_restores(self, a32) -> None:
        a32.swap_rows(0, 2)
        a32.swap_rows(0, 2)
        assert a32 == Matrix([[1, 2], [3, 4], [5, 6]])

    def test_swap_out_of_range(self, a32) -> None:
        with pytest.raises(RowIndexError, match="row index 3 out of range for 3 rows"):
            a32.swap_rows(0, 3)
        assert a32 == Matrix([[1, 2], [3, 4], [5, 6]])


class TestScaleRow:
    """Тесты scale_row"""

    def test_scale(self, a32) -> None:
        a32.scale_row(1, 2)
        assert a32 == Matrix([[1, 2], [6, 8], [5, 6]])

    def test_scale_by_one_is_noop(self, a32) -> None:
        a32.scale_row(0, 1)
        assert a32 == Matrix([[1, 2], [3, 4], [5, 6]])

    def test_scale_by_zero_allowed(self, a32) -> None:
        """Вырожденная строка допускается"""
        a32.scale_row(2, 0)
        assert a32.get_row(2) == [0, 0]

    def test_scale_by_fraction(self, a32) -> None:
        a32.scale_row(1, Fraction(1, 3))
        assert a32.get_row(1) == [Fraction(1), Fraction(4, 3)]

    def test_scale_out_of_range(self, a32) -> None:
        with pytest.raises(RowIndexError):
            a32.scale_row(5, 2)


class TestAddRows:
    """Тесты add_rows"""

    def test_add(self, a32) -> None:
        a32.add_rows(2, 0, 2)
        assert a32 == Matrix([[1, 2], [3, 4], [7, 10]])

    def test_source_row_unchanged(self, a32) -> None:
        a32.add_rows(1, 0, -3)
        assert a32.get_row(0) == [1, 2]
        assert a32.get_row(1) == [0, -2]

    def test_add_same_row(self, a32) -> None:
        """i == j: row[i] * (1 + a)"""
        a32.add_rows(1, 1, 2)
        assert a32.get_row(1) == [9, 12]

    def test_add_out_of_range(self, a32) -> None:
        with pytest.raises(RowIndexError):
            a32.add_rows(0, 3, 1)
        with pytest.raises(RowIndexError):
            a32.add_rows(3, 0, 1)
        assert a32 == Matrix([[1, 2], [3, 4], [5, 6]])


class TestGetRow:
    """Тесты get_row"""

    def test_get_row(self, a32) -> None:
        assert a32.get_row(1) == [3, 4]

    def test_get_row_returns_copy(self, a32) -> None:
        row = a32.get_row(0)
        row[0] = 42
        assert a32.get_row(0) == [1, 2]

    def test_negative_index_rejected(self, a32) -> None:
        """Без wrap-around как у list"""
        with pytest.raises(RowIndexError):
            a32.get_row(-1)

    def test_non_int_index_rejected(self, a32) -> None:
        with pytest.raises(RowIndexError, match="must be int"):
            a32.get_row(1.0)  # type: ignore[arg-type]
        with pytest.raises(RowIndexError, match="must be int"):
            a32.get_row(True)  # type: ignore[arg-type]

    def test_row_index_error_is_index_error(self, a32) -> None:
        with pytest.raises(IndexError):
            a32.get_row(3)


class TestRowOpsProtocol:
    """Matrix и AugmentedMatrix независимо реализуют RowOps"""

    def test_matrix_implements_protocol(self, a32) -> None:
        assert isinstance(a32, RowOps)

    def test_augmented_implements_protocol(self, a32) -> None:
        assert isinstance(AugmentedMatrix(a32, Matrix.identity(3)), RowOps)

    def test_no_shared_base_class(self) -> None:
        assert not issubclass(AugmentedMatrix, Matrix)
        assert not issubclass(Matrix, AugmentedMatrix)

    def test_plain_list_is_not_row_ops(self) -> None:
        assert not isinstance([[1, 2]], RowOps)


class TestIndexGuards:
    """Тесты check_index / check_row_index"""

    def test_valid(self) -> None:
        assert check_row_index(0, 1) == 0
        assert check_index(2, 3, "column") == 2

    def test_out_of_range(self) -> None:
        with pytest.raises(RowIndexError, match="row index 1 out of range for 1 rows"):
            check_row_index(1, 1)
        with pytest.raises(RowIndexError):
            check_row_index(0, 0)

    def test_integral_index_types_accepted(self) -> None:
        """Любой тип с __index__ приводится к int"""
        np = pytest.importorskip("numpy")
        index = check_row_index(np.int64(2), 3)
        assert index == 2
        assert type(index) is int

    def test_bool_index_rejected(self) -> None:
        with pytest.raises(RowIndexError, match="row index must be int, got bool"):
            check_row_index(False, 3)

    def test_numpy_indices_in_row_ops(self, a32) -> None:
        np = pytest.importorskip("numpy")
        a32.swap_rows(np.int64(0), np.int64(1))
        a32.add_rows(np.int64(2), np.int64(0), -1)
        assert a32 == Matrix([[3, 4], [1, 2], [2, 2]])

    def test_numpy_indices_in_augmented(self, a32) -> None:
        np = pytest.importorskip("numpy")
        aug = AugmentedMatrix(a32, Matrix.identity(3))
        aug.swap_rows(np.int64(0), np.int64(2))
        assert aug.get_row(np.int64(0)) == [5, 6]
        assert aug.right.get_row(0) == [0, 0, 1]
