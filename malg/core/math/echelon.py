"""
Echelon Reduction — приведение к ступенчатому виду (row echelon form)

Алгоритм написан один раз против протокола RowOps и работает без изменений
как для Matrix, так и для AugmentedMatrix (в последнем случае правая часть
получает ту же последовательность строковых операций. Это стандартный способ
решения Ax=b или обращения A через [A | I]).

Порядок:
1. Внешний цикл по столбцам j = 0 .. n_cols()-1
2. Pivot — первая ненулевая строка k >= pivot_row в столбце j
3. Pivot-строка переставляется на место pivot_row и нормируется к one
4. Все строки ниже pivot_row с ненулевым элементом в столбце j
   зануляются сразу, в том же проходе
5. pivot_row увеличивается, только если pivot найден

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат — row echelon form (не reduced): строки выше pivot не меняются
2. Нет partial pivoting: алгоритм не предназначен для плохо обусловленных
   float-систем
3. Ровно n_cols() проходов, не более n_cols() * (n_rows() + 1) вызовов swap/scale/add
4. Единственное состояние между итерациями — локальный pivot_row
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from malg.core.math.row_operations import RowOps
from malg.core.math.scalar_field import ScalarField

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class EchelonResult:
    """Диагностика приведения к ступенчатому виду."""

    # (row, col) каждого pivot в порядке нахождения
    pivots: Tuple[Tuple[int, int], ...]
    # Количество swap/scale/add вызовов
    row_operations: int

    @property
    def rank(self) -> int:
        """Ранг (по левой части для AugmentedMatrix) = число pivot."""
        return len(self.pivots)

    @property
    def pivot_columns(self) -> Tuple[int, ...]:
        return tuple(col for _, col in self.pivots)


# =============================================================================
# REDUCTION
# =============================================================================


def _resolve_field(field: Optional[ScalarField], value: Any) -> ScalarField:
    if field is not None:
        return field
    return ScalarField.for_value(value)


def row_echelon(target: RowOps, field: Optional[ScalarField] = None) -> EchelonResult:
    """
    Приведение target к ступенчатому виду in place.

    Args:
        target: Объект с элементарными операциями над строками
        field: zero/one скаляров; если None — определяется по первому
            прочитанному элементу

    Returns:
        EchelonResult с позициями pivot и числом выполненных операций

    Raises:
        ZeroDivisionError (или иное исключение типа скаляра) при
        вырожденной арифметике, не перехватывается

    Examples:
        >>> m = Matrix([[3, 0, 0], [0, 2, 0], [0, 0, 1]])  # doctest: +SKIP
        >>> row_echelon(m).rank  # doctest: +SKIP
        3
    """
    n_rows = target.n_rows()
    n_cols = target.n_cols()

    pivots: List[Tuple[int, int]] = []
    operations = 0
    pivot_row = 0

    for j in range(n_cols):
        pivot_found = False

        for k in range(pivot_row, n_rows):
            value = target.get_row(k)[j]
            field = _resolve_field(field, value)
            if field.is_zero(value):
                continue

            if pivot_found:
                # Зануляем элемент под уже нормированным pivot
                leading = target.get_row(k)[j]
                target.add_rows(k, pivot_row, field.negate(leading))
                operations += 1
            else:
                pivot_found = True
                target.swap_rows(pivot_row, k)
                pivot_value = target.get_row(pivot_row)[j]
                target.scale_row(pivot_row, field.reciprocal(pivot_value))
                operations += 2
                pivots.append((pivot_row, j))
                logger.debug("pivot at (%d, %d), source row %d", pivot_row, j, k)

        if pivot_found:
            pivot_row += 1

    logger.debug(
        "row echelon form: %dx%d, rank=%d, row_operations=%d",
        n_rows,
        n_cols,
        len(pivots),
        operations,
    )
    return EchelonResult(pivots=tuple(pivots), row_operations=operations)


# =============================================================================
# DIAGNOSTICS (read-only)
# =============================================================================


def pivot_positions(
    target: RowOps, field: Optional[ScalarField] = None
) -> Tuple[Optional[Tuple[int, int]], ...]:
    """
    Позиция ведущего (первого ненулевого) элемента каждой строки.

    Returns:
        Кортеж длины n_rows(); None для нулевой строки
    """
    positions: List[Optional[Tuple[int, int]]] = []
    for i in range(target.n_rows()):
        leading: Optional[Tuple[int, int]] = None
        for j, value in enumerate(target.get_row(i)[: target.n_cols()]):
            field = _resolve_field(field, value)
            if not field.is_zero(value):
                leading = (i, j)
                break
        positions.append(leading)
    return tuple(positions)


def is_row_echelon(target: RowOps, field: Optional[ScalarField] = None) -> bool:
    """
    Проверка ступенчатого вида.

    Условия:
    1. Ведущий элемент каждой ненулевой строки равен one
    2. Ведущий элемент следующей ненулевой строки строго правее
    3. Нулевые строки только внизу

    Сравнение с one точное, поэтому проверка имеет смысл только для точных
    типов скаляров (int, Fraction, Decimal с достаточной точностью, sympy).
    Для float результат row_echelon может не пройти её из-за округления:
    49.0 * (1 / 49.0) == 0.9999999999999999. Для float-матриц pivot берут
    из EchelonResult.pivots.
    """
    last_col = -1
    seen_zero_row = False

    for position in pivot_positions(target, field):
        if position is None:
            seen_zero_row = True
            continue
        if seen_zero_row:
            return False

        i, j = position
        value = target.get_row(i)[j]
        if value != _resolve_field(field, value).one:
            return False
        if j <= last_col:
            return False
        last_col = j

    return True
