"""
Matrix — плотная матрица M x N над произвольным полем скаляров

Размерности фиксируются при создании; содержимое изменяется in place через
элементарные строковые операции (протокол RowOps) или доступ к элементам.

Матрица владеет своим хранилищем:
- конструктор копирует строки вызывающего кода
- get_row / as_rows возвращают копии
Поэтому разные экземпляры Matrix никогда не разделяют хранилище.

Индексация:
- m[i, j], get_entry(i, j) — zero-based
- entry(i, j) — one-based (как в математической записи a_ij)
"""

from typing import Any, Callable, Dict, Generic, List, Optional, Sequence, Tuple, TypeVar, Union

from malg.core.contracts.validators import validate_matrix_payload
from malg.core.domain.shape import (
    DimensionMismatchError,
    MatrixShape,
    infer_shape,
    require_same_shape,
    require_square,
)
from malg.core.math.row_operations import check_index, check_row_index
from malg.core.math.scalar_field import INTEGER_FIELD, ScalarField, validate_scalar

T = TypeVar("T")


class Matrix(Generic[T]):
    """
    Плотная матрица с фиксированными размерностями.

    Examples:
        >>> a = Matrix([[1, 2], [3, 4], [5, 6]])
        >>> a.swap_rows(1, 2)
        >>> a.as_rows()
        ((1, 2), (5, 6), (3, 4))
    """

    __slots__ = ("_shape", "_data")

    # numpy-скаляры слева от Matrix отдают операцию в __rmul__
    __array_ufunc__ = None

    def __init__(
        self,
        data: Union["Matrix", Sequence[Sequence[T]]],
        rows: Optional[int] = None,
        cols: Optional[int] = None,
    ):
        """
        Args:
            data: Сетка элементов (последовательность строк) или другая Matrix
            rows: Ожидаемое число строк M (None — взять из data)
            cols: Ожидаемое число столбцов N (None — взять из data)

        Raises:
            DimensionMismatchError: рваная сетка или несовпадение с rows/cols
            ScalarFieldError: элемент не поддерживает арифметику поля
        """
        if isinstance(data, Matrix):
            if cols is None:
                cols = data.n_cols()
            data = data.as_rows()
        self._shape = infer_shape(data, rows, cols)
        self._data: List[List[T]] = [[validate_scalar(x) for x in row] for row in data]

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls, rows: int, cols: int, scalar_type: type = int) -> "Matrix":
        """Матрица rows x cols из аддитивных единиц."""
        field = ScalarField.for_type(scalar_type)
        shape = MatrixShape(rows=rows, cols=cols)
        return cls([[field.zero] * shape.cols for _ in range(shape.rows)], cols=shape.cols)

    @classmethod
    def identity(cls, n: int, scalar_type: type = int) -> "Matrix":
        """Единичная матрица n x n."""
        field = ScalarField.for_type(scalar_type)
        shape = MatrixShape(rows=n, cols=n)
        return cls(
            [[field.one if i == j else field.zero for j in range(n)] for i in range(shape.rows)],
            cols=n,
        )

    @classmethod
    def from_payload(
        cls, payload: Dict[str, Any], scalar: Optional[Callable[[Any], T]] = None
    ) -> "Matrix":
        """
        Создание матрицы из plain-data payload {"rows", "cols", "data"}.

        Payload валидируется по схеме matrix.json.

        Args:
            payload: Данные матрицы
            scalar: Конвертер JSON-чисел в тип скаляра (например, Fraction)

        Raises:
            jsonschema.ValidationError: payload не соответствует схеме
            DimensionMismatchError: data не совпадает с rows/cols
        """
        validate_matrix_payload(payload)
        data = payload["data"]
        if scalar is not None:
            data = [[scalar(x) for x in row] for row in data]
        return cls(data, rows=payload["rows"], cols=payload["cols"])

    def copy(self) -> "Matrix":
        return Matrix(self._data, cols=self._shape.cols)

    # -------------------------------------------------------------------------
    # Размерности и чтение
    # -------------------------------------------------------------------------

    @property
    def shape(self) -> MatrixShape:
        return self._shape

    @property
    def field(self) -> ScalarField:
        """Поле скаляров по первому элементу (для пустой матрицы — int)."""
        if self._shape.size == 0:
            return INTEGER_FIELD
        return ScalarField.for_value(self._data[0][0])

    def n_rows(self) -> int:
        """Число строк M."""
        return self._shape.rows

    def n_cols(self) -> int:
        """Число столбцов N."""
        return self._shape.cols

    def is_square(self) -> bool:
        return self._shape.is_square

    def as_rows(self) -> Tuple[Tuple[T, ...], ...]:
        """Копия всей матрицы как кортеж строк."""
        return tuple(tuple(row) for row in self._data)

    def get_entry(self, i: int, j: int) -> Optional[T]:
        """
        Элемент (i, j), zero-based.

        Returns:
            Элемент или None, если индексы вне матрицы
        """
        if not (0 <= i < self._shape.rows and 0 <= j < self._shape.cols):
            return None
        return self._data[i][j]

    def entry(self, i: int, j: int) -> Optional[T]:
        """
        Элемент a_ij, one-based.

        Returns:
            Элемент или None, если индексы вне матрицы

        Raises:
            ValueError: если i < 1 или j < 1
        """
        if i < 1 or j < 1:
            raise ValueError(f"One-based indices must be >= 1, got ({i}, {j})")
        return self.get_entry(i - 1, j - 1)

    def __getitem__(self, index: Tuple[int, int]) -> T:
        i, j = index
        i = check_row_index(i, self._shape.rows)
        j = check_index(j, self._shape.cols, "column")
        return self._data[i][j]

    def __setitem__(self, index: Tuple[int, int], value: T) -> None:
        i, j = index
        i = check_row_index(i, self._shape.rows)
        j = check_index(j, self._shape.cols, "column")
        self._data[i][j] = validate_scalar(value)

    # -------------------------------------------------------------------------
    # RowOps
    # -------------------------------------------------------------------------

    def swap_rows(self, i: int, j: int) -> None:
        """
        Swap rows i and j in place.

        Raises:
            RowIndexError: i или j вне [0, M)
        """
        i = check_row_index(i, self._shape.rows)
        j = check_row_index(j, self._shape.rows)
        self._data[i], self._data[j] = self._data[j], self._data[i]

    def scale_row(self, i: int, a: T) -> None:
        """
        Scale row i by scalar a in place.

        Raises:
            RowIndexError: i вне [0, M)
        """
        i = check_row_index(i, self._shape.rows)
        self._data[i] = [entry * a for entry in self._data[i]]

    def add_rows(self, i: int, j: int, a: T) -> None:
        """
        Replace row i with the sum of row i and a times row j.

        При i == j результат равен row[i] * (1 + a).

        Raises:
            RowIndexError: i или j вне [0, M)
        """
        i = check_row_index(i, self._shape.rows)
        j = check_row_index(j, self._shape.rows)
        add_row = [entry * a for entry in self._data[j]]
        self._data[i] = [x + y for x, y in zip(self._data[i], add_row)]

    def get_row(self, i: int) -> List[T]:
        """
        Копия строки i.

        Raises:
            RowIndexError: i вне [0, M)
        """
        i = check_row_index(i, self._shape.rows)
        return list(self._data[i])

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def transpose(self) -> "Matrix":
        return Matrix(
            [[self._data[i][j] for i in range(self._shape.rows)] for j in range(self._shape.cols)],
            cols=self._shape.rows,
        )

    def is_zero(self) -> bool:
        """Все элементы равны аддитивной единице."""
        field = self.field
        return all(field.is_zero(x) for row in self._data for x in row)

    def trace(self) -> T:
        """
        След квадратной матрицы (сумма диагонали).

        Raises:
            DimensionMismatchError: матрица не квадратная
        """
        require_square(self._shape, "trace")
        total = self.field.zero
        for i in range(self._shape.rows):
            total = total + self._data[i][i]
        return total

    def __add__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        require_same_shape(self._shape, other._shape, "add")
        return Matrix(
            [[a + b for a, b in zip(ra, rb)] for ra, rb in zip(self._data, other._data)],
            cols=self._shape.cols,
        )

    def __sub__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        require_same_shape(self._shape, other._shape, "subtract")
        return Matrix(
            [[a - b for a, b in zip(ra, rb)] for ra, rb in zip(self._data, other._data)],
            cols=self._shape.cols,
        )

    def __matmul__(self, other: "Matrix") -> "Matrix":
        """Матричное произведение (M x N) @ (N x P) -> (M x P)."""
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._shape.cols != other._shape.rows:
            raise DimensionMismatchError(
                f"Cannot multiply matrices of shapes {self._shape} and {other._shape}"
            )

        zero = self.field.zero
        product = []
        for i in range(self._shape.rows):
            row = []
            for j in range(other._shape.cols):
                entry = zero
                for k in range(self._shape.cols):
                    entry = entry + self._data[i][k] * other._data[k][j]
                row.append(entry)
            product.append(row)
        return Matrix(product, cols=other._shape.cols)

    def __mul__(self, other: Any) -> "Matrix":
        """Матрица * матрица (как @) или матрица * скаляр."""
        if isinstance(other, Matrix):
            return self.__matmul__(other)
        validate_scalar(other)
        return Matrix(
            [[entry * other for entry in row] for row in self._data],
            cols=self._shape.cols,
        )

    def __rmul__(self, other: Any) -> "Matrix":
        validate_scalar(other)
        return Matrix(
            [[other * entry for entry in row] for row in self._data],
            cols=self._shape.cols,
        )

    # -------------------------------------------------------------------------
    # Сравнение и представление
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._shape == other._shape and self._data == other._data

    # Содержимое изменяемое
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self._data!r})"
