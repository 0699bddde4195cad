"""
Row Operations — элементарные операции над строками

Протокол RowOps описывает объект, который умеет:
- swap_rows(i, j): поменять строки i и j местами
- scale_row(i, a): умножить строку i на скаляр a
- add_rows(i, j, a): row[i] <- row[i] + a * row[j]
- get_row(i): вернуть копию строки i
- n_rows(), n_cols(): размерности

Протокол реализуют независимо Matrix и AugmentedMatrix (без общего базового
класса). Алгоритм приведения к ступенчатому виду работает только через
этот протокол.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Индекс вне диапазона → RowIndexError, объект не изменяется
2. get_row возвращает копию, а не ссылку на внутреннее хранилище
"""

import operator
from typing import Any, List, Protocol, runtime_checkable

# =============================================================================
# EXCEPTIONS
# =============================================================================


class RowIndexError(IndexError):
    """
    Индекс строки или столбца вне диапазона матрицы.

    Проверка индексов — ответственность вызывающего кода: размерности
    известны заранее, поэтому ошибка не перехватывается внутри библиотеки.
    """

    pass


# =============================================================================
# INDEX GUARDS
# =============================================================================


def check_index(index: Any, bound: int, axis: str = "row") -> int:
    """
    Проверка индекса: 0 <= index < bound.

    Отрицательные индексы не поддерживаются (без wrap-around как у list).
    Принимаются целочисленные типы с __index__ (например, numpy.int64),
    bool отклоняется.

    Args:
        index: Проверяемый индекс
        bound: Размерность по оси
        axis: Название оси для сообщения об ошибке ('row' / 'column')

    Returns:
        index как int

    Raises:
        RowIndexError: если index не целочисленный или вне [0, bound)
    """
    if isinstance(index, bool):
        raise RowIndexError(f"{axis} index must be int, got bool")
    try:
        index = operator.index(index)
    except TypeError as e:
        raise RowIndexError(f"{axis} index must be int, got {type(index).__name__}") from e
    if index < 0 or index >= bound:
        raise RowIndexError(f"{axis} index {index} out of range for {bound} {axis}s")
    return index


def check_row_index(index: Any, n_rows: int) -> int:
    """Проверка индекса строки."""
    return check_index(index, n_rows, "row")


# =============================================================================
# PROTOCOL
# =============================================================================


@runtime_checkable
class RowOps(Protocol):
    """Набор элементарных операций над строками."""

    def swap_rows(self, i: int, j: int) -> None:
        """Swap rows i and j in place."""
        ...

    def scale_row(self, i: int, a: Any) -> None:
        """Scale row i by scalar a in place."""
        ...

    def add_rows(self, i: int, j: int, a: Any) -> None:
        """Replace row i with row i + a * row j."""
        ...

    def get_row(self, i: int) -> List[Any]:
        """Copy of row i."""
        ...

    def n_rows(self) -> int:
        ...

    def n_cols(self) -> int:
        ...
