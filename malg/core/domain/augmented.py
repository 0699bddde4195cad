"""
AugmentedMatrix — составная матрица [A | B]

M x (N + P) матрица, образованная дописыванием M x P матрицы B справа к
M x N матрице A. Физически это две независимые матрицы, которые держатся
в lock-step по индексам строк, а не один непрерывный буфер.

Семантика RowOps:
- swap_rows / scale_row / add_rows применяются с теми же индексами и тем же
  скаляром сначала к left, затем к right
- get_row, n_cols читают только left: алгоритм ступенчатого вида
  ориентируется по pivot-столбцам левой части, а правая часть пассивно
  несёт "ответ" системы (Ax=b, [A | I] -> обратная матрица)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. left.n_rows() == right.n_rows() (проверяется при создании)
2. Индексы проверяются до изменения любой из частей: ошибочный вызов не
   рассинхронизирует left и right
3. AugmentedMatrix владеет копиями обеих частей
"""

from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, TypeVar

from malg.core.contracts.validators import validate_augmented_matrix_payload
from malg.core.domain.matrix import Matrix
from malg.core.domain.shape import MatrixShape, require_same_rows
from malg.core.math.row_operations import check_row_index

T = TypeVar("T")


class AugmentedMatrix(Generic[T]):
    """
    Пара матриц [left | right] с общим числом строк.

    Examples:
        >>> aug = AugmentedMatrix(Matrix([[2, 0], [0, 4]]), Matrix.identity(2))
        >>> aug.scale_row(0, 3)
        >>> aug.right.as_rows()
        ((3, 0), (0, 1))
    """

    __slots__ = ("_left", "_right")

    def __init__(self, left: Matrix, right: Matrix):
        """
        Args:
            left: M x N матрица A
            right: M x P матрица B

        Raises:
            DimensionMismatchError: разное число строк у left и right
        """
        require_same_rows(left.shape, right.shape)
        self._left = left.copy()
        self._right = right.copy()

    @classmethod
    def from_payload(
        cls, payload: Dict[str, Any], scalar: Optional[Callable[[Any], T]] = None
    ) -> "AugmentedMatrix":
        """
        Создание из payload {"left": <matrix>, "right": <matrix>}.

        Raises:
            jsonschema.ValidationError: payload не соответствует схеме
            DimensionMismatchError: разное число строк у частей
        """
        validate_augmented_matrix_payload(payload)
        return cls(
            Matrix.from_payload(payload["left"], scalar),
            Matrix.from_payload(payload["right"], scalar),
        )

    # -------------------------------------------------------------------------
    # Части и размерности
    # -------------------------------------------------------------------------

    @property
    def left(self) -> Matrix:
        """Левая часть A (коэффициенты системы)."""
        return self._left

    @property
    def right(self) -> Matrix:
        """Правая часть B (правая часть системы / результат)."""
        return self._right

    @property
    def shape(self) -> MatrixShape:
        """Полная форма блока [A | B]: M x (N + P)."""
        return MatrixShape(
            rows=self._left.n_rows(),
            cols=self._left.n_cols() + self._right.n_cols(),
        )

    def n_rows(self) -> int:
        return self._left.n_rows()

    def n_cols(self) -> int:
        """Число столбцов только левой части N."""
        return self._left.n_cols()

    def n_right_cols(self) -> int:
        """Число столбцов правой части P."""
        return self._right.n_cols()

    def as_rows(self) -> Tuple[Tuple[T, ...], ...]:
        """Строки блока [A | B] (для просмотра результата)."""
        return tuple(
            left_row + right_row
            for left_row, right_row in zip(self._left.as_rows(), self._right.as_rows())
        )

    # -------------------------------------------------------------------------
    # RowOps
    # -------------------------------------------------------------------------

    def swap_rows(self, i: int, j: int) -> None:
        """Swap rows i and j in place in both parts."""
        i = check_row_index(i, self.n_rows())
        j = check_row_index(j, self.n_rows())
        self._left.swap_rows(i, j)
        self._right.swap_rows(i, j)

    def scale_row(self, i: int, a: T) -> None:
        """Scale row i by scalar a in place in both parts."""
        i = check_row_index(i, self.n_rows())
        self._left.scale_row(i, a)
        self._right.scale_row(i, a)

    def add_rows(self, i: int, j: int, a: T) -> None:
        """Replace row i with row i + a * row j in both parts."""
        i = check_row_index(i, self.n_rows())
        j = check_row_index(j, self.n_rows())
        self._left.add_rows(i, j, a)
        self._right.add_rows(i, j, a)

    def get_row(self, i: int) -> List[T]:
        """Копия строки i левой части (правая часть не возвращается)."""
        return self._left.get_row(i)

    # -------------------------------------------------------------------------
    # Сравнение и представление
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AugmentedMatrix):
            return NotImplemented
        return self._left == other._left and self._right == other._right

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"AugmentedMatrix(left={self._left!r}, right={self._right!r})"
