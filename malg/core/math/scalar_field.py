"""
Scalar Field — минимальная арифметика элементов матрицы

Элемент матрицы должен поддерживать:
- аддитивную единицу (zero)
- мультипликативную единицу (one)
- операции +, -, *, /

Протокол Scalar описывает арифметику (structural typing), а ScalarField
хранит zero/one для конкретного типа скаляров.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Модуль не защищает от деления на ноль и NaN/Inf: поведение определяется
   арифметикой самого типа скаляра
2. Сравнение с нулём точное (без epsilon)
"""

from dataclasses import dataclass
from typing import Any, Final, Protocol, runtime_checkable

# =============================================================================
# EXCEPTIONS
# =============================================================================


class ScalarFieldError(TypeError):
    """
    Значение не может служить элементом матрицы.

    Возникает, если тип не поддерживает арифметику поля или для него
    невозможно получить zero/one.
    """

    pass


# =============================================================================
# PROTOCOL
# =============================================================================


@runtime_checkable
class Scalar(Protocol):
    """Значение, пригодное в качестве элемента матрицы."""

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...


# Методы, через которые тип сам сообщает свои единицы (аналог Zero/One traits)
ZERO_FACTORY: Final[str] = "zero"
ONE_FACTORY: Final[str] = "one"


def is_scalar(value: Any) -> bool:
    """
    Проверка, удовлетворяет ли значение протоколу Scalar.

    str и bytes отклоняются отдельно: они частично реализуют арифметику
    (+, *), но не являются полем.
    """
    if isinstance(value, (str, bytes)):
        return False
    return isinstance(value, Scalar)


def validate_scalar(value: Any) -> Any:
    """
    Валидация элемента матрицы.

    Returns:
        value без изменений

    Raises:
        ScalarFieldError: если value не поддерживает + - * /
    """
    if not is_scalar(value):
        raise ScalarFieldError(
            f"Value {value!r} of type {type(value).__name__} does not support "
            f"field arithmetic (+, -, *, /)"
        )
    return value


# =============================================================================
# SCALAR FIELD
# =============================================================================


@dataclass(frozen=True)
class ScalarField:
    """
    Единицы поля для конкретного типа скаляров.

    Attributes:
        zero: аддитивная единица
        one: мультипликативная единица
    """

    zero: Any
    one: Any

    @classmethod
    def for_type(cls, scalar_type: type) -> "ScalarField":
        """
        Разрешение zero/one для типа.

        Порядок:
        1. classmethod/staticmethod zero() и one() на типе (пользовательские поля)
        2. конструктор типа: scalar_type(0), scalar_type(1)
           (int, float, complex, Fraction, Decimal, numpy scalars)

        Raises:
            ScalarFieldError: если ни один способ не сработал
        """
        zero_factory = getattr(scalar_type, ZERO_FACTORY, None)
        one_factory = getattr(scalar_type, ONE_FACTORY, None)
        if callable(zero_factory) and callable(one_factory):
            try:
                return cls(zero=zero_factory(), one=one_factory())
            except TypeError:
                # zero/one оказались instance-методами, пробуем конструктор
                pass

        try:
            return cls(zero=scalar_type(0), one=scalar_type(1))
        except (TypeError, ValueError) as e:
            raise ScalarFieldError(
                f"Cannot resolve zero/one for scalar type {scalar_type.__name__}: {e}"
            ) from e

    @classmethod
    def for_value(cls, value: Any) -> "ScalarField":
        """
        Поле, к которому принадлежит value.

        Порядок:
        1. for_type по классам из type(value).__mro__: библиотеки точной
           арифметики (например, sympy) возвращают для 0 и 1 singleton-подклассы
           без конструктора, а базовый класс разрешается
        2. арифметика самого значения: zero = value - value,
           one = value / value (только для ненулевого value)

        Raises:
            ScalarFieldError: value не скаляр или zero/one не получить
        """
        validate_scalar(value)

        errors = []
        for scalar_type in type(value).__mro__:
            if scalar_type is object:
                break
            try:
                return cls.for_type(scalar_type)
            except ScalarFieldError as e:
                errors.append(str(e))

        zero = value - value
        if value == zero:
            raise ScalarFieldError(
                f"Cannot resolve one for scalar type {type(value).__name__} "
                f"from a zero value: {'; '.join(errors)}"
            )
        return cls(zero=zero, one=value / value)

    def is_zero(self, value: Any) -> bool:
        """Точное сравнение с аддитивной единицей."""
        return value == self.zero

    def negate(self, value: Any) -> Any:
        """zero - one * value"""
        return self.zero - self.one * value

    def reciprocal(self, value: Any) -> Any:
        """
        one / value

        Деление на zero не перехватывается: ZeroDivisionError (или inf/nan)
        определяется типом скаляра.
        """
        return self.one / value


# Поле по умолчанию для пустых и нулевых матриц
INTEGER_FIELD: Final[ScalarField] = ScalarField(zero=0, one=1)
