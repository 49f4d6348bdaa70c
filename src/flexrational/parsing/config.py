"""Конфигурация парсера literal."""

from dataclasses import dataclass
from typing import Final

# =============================================================================
# CONSTANTS
# =============================================================================

FRACTION_SEPARATOR: Final[str] = "/"
DECIMAL_POINT: Final[str] = "."
EXPONENT_MARKERS: Final[str] = "eE"
SIGN_CHARS: Final[str] = "+-"
DIGIT_GROUP_SEPARATOR: Final[str] = "_"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ParserConfig:
    """Конфигурация парсера.

    Значения по умолчанию дают строгую грамматику:
    [+-]?(\\d+(\\.\\d*)?|\\.\\d+)([eE][+-]?\\d+)?  или  [+-]?\\d+/[+-]?\\d+
    """

    # Разрешить '_' между цифрами (1_000/2_000, 3.14_15, 1e1_0)
    allow_underscores: bool = False

    # Отбрасывать хвостовые нули дробной части до сборки значения.
    # Значение не меняется, но "1.0000000000" помещается в i32
    trim_trailing_zeros: bool = True


DEFAULT_PARSER_CONFIG: Final[ParserConfig] = ParserConfig()
