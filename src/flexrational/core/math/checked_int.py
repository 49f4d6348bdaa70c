"""
Checked Integer Arithmetic — ограниченные знаковые целые типы

Python int не ограничен, поэтому границы целевого типа T проверяются явно
после каждого шага. Модуль описывает целевой тип (ширина в битах,
two's complement) и набор checked-операций над ним:
- checked_add / checked_mul / checked_neg
- checked_pow (повторное checked умножение)
- from_digit (значение одной ASCII-цифры)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат любой операции либо лежит в [min_value, max_value], либо
   выбрасывается IntegerOverflow
2. Никакого wrapping, никакого перехода во float или в более широкий тип
3. checked_pow останавливается на первом переполнившемся промежуточном
   значении; для |base| <= 1 результат вычисляется без цикла, поэтому
   время работы ограничено шириной типа, а не показателем
"""

from typing import Final

from pydantic import BaseModel, Field

# =============================================================================
# CONSTANTS
# =============================================================================

# Основание десятичной системы
RADIX: Final[int] = 10

# Допустимые символы цифр (только ASCII, без unicode-цифр вроде '³')
ASCII_DIGITS: Final[str] = "0123456789"

# Ширина exponent-а в literal (знаковый 32-битный диапазон)
EXPONENT_BITS: Final[int] = 32


# =============================================================================
# EXCEPTIONS
# =============================================================================


class IntegerOverflow(ArithmeticError):
    """
    Результат операции не представим в целевом целом типе.

    Выбрасывается вместо wrapping-а. Вызывающий код (парсер) конвертирует
    его в RationalParseError с kind=OVERFLOW.
    """

    def __init__(self, type_name: str, operation: str):
        self.type_name = type_name
        self.operation = operation
        super().__init__(f"{operation} overflows {type_name}")


# =============================================================================
# INTEGER TYPE
# =============================================================================


class IntegerType(BaseModel):
    """
    Знаковый целый тип фиксированной ширины (two's complement).

    Immutable Pydantic модель. Диапазон: [-2**(bits-1), 2**(bits-1) - 1].
    """

    name: str = Field(..., min_length=1, description="Имя типа (например, 'i32')")
    bits: int = Field(..., ge=2, le=1024, description="Ширина в битах")

    model_config = {"frozen": True}

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1

    def __str__(self) -> str:
        return self.name

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1

    def contains(self, value: int) -> bool:
        """Проверка, что value лежит в диапазоне типа."""
        return self.min_value <= value <= self.max_value

    def _checked(self, value: int, operation: str) -> int:
        if not self.contains(value):
            raise IntegerOverflow(self.name, operation)
        return value

    def checked_add(self, a: int, b: int) -> int:
        """
        Сложение с проверкой переполнения.

        Raises:
            IntegerOverflow: если a + b вне диапазона типа
        """
        return self._checked(a + b, f"{a} + {b}")

    def checked_mul(self, a: int, b: int) -> int:
        """
        Умножение с проверкой переполнения.

        Raises:
            IntegerOverflow: если a * b вне диапазона типа
        """
        return self._checked(a * b, f"{a} * {b}")

    def checked_neg(self, a: int) -> int:
        """
        Смена знака с проверкой (-min_value не представим).

        Raises:
            IntegerOverflow: если a == min_value
        """
        return self._checked(-a, f"-({a})")

    def checked_pow(self, base: int, exp: int) -> int:
        """
        Возведение в неотрицательную степень повторным checked умножением.

        Args:
            base: Основание (должно лежать в диапазоне типа)
            exp: Показатель (>= 0)

        Returns:
            base ** exp

        Raises:
            ValueError: если exp < 0
            IntegerOverflow: на первом промежуточном значении вне диапазона

        Examples:
            >>> I8.checked_pow(10, 2)
            100
            >>> I8.checked_pow(10, 3)  # doctest: +SKIP
            Traceback (most recent call last):
                ...
            IntegerOverflow: 100 * 10 overflows i8
        """
        if exp < 0:
            raise ValueError(f"exp must be non-negative, got {exp}")

        base = self._checked(base, f"{base}")
        if abs(base) <= 1:
            # 0, 1, -1: степень не растёт по модулю
            return base**exp

        result = self.one()
        for _ in range(exp):
            result = self.checked_mul(result, base)
        return result

    def from_digit(self, ch: str) -> int:
        """
        Значение одной ASCII-цифры.

        Raises:
            ValueError: если ch не является символом '0'..'9'
        """
        if len(ch) != 1 or ch not in ASCII_DIGITS:
            raise ValueError(f"Not an ASCII decimal digit: {ch!r}")
        return self._checked(ord(ch) - ord("0"), ch)


# =============================================================================
# PREDEFINED TYPES
# =============================================================================

I8: Final[IntegerType] = IntegerType(name="i8", bits=8)
I16: Final[IntegerType] = IntegerType(name="i16", bits=16)
I32: Final[IntegerType] = IntegerType(name="i32", bits=32)
I64: Final[IntegerType] = IntegerType(name="i64", bits=64)
I128: Final[IntegerType] = IntegerType(name="i128", bits=128)
ISIZE: Final[IntegerType] = IntegerType(name="isize", bits=64)

# Тип для значения exponent-а внутри literal
EXPONENT_TYPE: Final[IntegerType] = IntegerType(name="exponent", bits=EXPONENT_BITS)

INTEGER_TYPES: Final[dict[str, IntegerType]] = {
    t.name: t for t in (I8, I16, I32, I64, I128, ISIZE)
}


def integer_type_by_name(name: str) -> IntegerType:
    """
    Поиск предопределённого типа по имени.

    Raises:
        KeyError: если тип с таким именем не зарегистрирован
    """
    try:
        return INTEGER_TYPES[name]
    except KeyError:
        raise KeyError(
            f"Unknown integer type {name!r}, expected one of {sorted(INTEGER_TYPES)}"
        ) from None
