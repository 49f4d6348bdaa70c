"""
Literal — промежуточные структуры разбора

LiteralForm: какая грамматика применяется к строке.
ParsedComponents: разложение decimal/scientific literal на
sign / integer_digits / fractional_digits / exponent.

Структуры транзиентны: создаются и потребляются внутри одного вызова
парсера, наружу не выдаются.
"""

from dataclasses import dataclass
from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================


class LiteralForm(str, Enum):
    """Форма числового literal"""

    FRACTION = "FRACTION"
    DECIMAL = "DECIMAL"
    SCIENTIFIC = "SCIENTIFIC"


class Sign(str, Enum):
    """Знак literal"""

    POSITIVE = "+"
    NEGATIVE = "-"

    @classmethod
    def from_char(cls, ch: str) -> "Sign":
        return cls.NEGATIVE if ch == "-" else cls.POSITIVE

    def apply(self, value: int) -> int:
        return -value if self is Sign.NEGATIVE else value


# =============================================================================
# PARSED COMPONENTS
# =============================================================================


@dataclass(frozen=True)
class ParsedComponents:
    """
    Компоненты decimal/scientific literal.

    Инвариант: integer_digits и fractional_digits не пусты одновременно
    (в mantissa есть хотя бы одна значащая цифра).
    """

    sign: Sign
    integer_digits: str
    fractional_digits: str
    exponent: int = 0

    def __post_init__(self) -> None:
        if not self.integer_digits and not self.fractional_digits:
            raise ValueError("mantissa must contain at least one digit")

    @property
    def digits(self) -> str:
        """Немасштабированная величина: integer_digits + fractional_digits."""
        return self.integer_digits + self.fractional_digits

    @property
    def scale(self) -> int:
        """Итоговая степень десяти: exponent - len(fractional_digits)."""
        return self.exponent - len(self.fractional_digits)
