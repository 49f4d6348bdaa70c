"""flexrational — точный разбор числовых literal в рациональные числа.

Формы: "3/4", "1.25", "1.2e-3". Результат точный (без float) над
выбранным ограниченным знаковым целым типом; переполнение сообщается
ошибкой, а не wrapping-ом.
"""

__version__ = "0.1.0"

from flexrational.core.domain import ParseErrorKind, RationalParseError
from flexrational.core.math import (
    I8,
    I16,
    I32,
    I64,
    I128,
    ISIZE,
    IntegerOverflow,
    IntegerType,
)
from flexrational.parsing import DEFAULT_PARSER_CONFIG, ParserConfig, parse_flexible
from flexrational.rational import Ratio

__all__ = [
    "__version__",
    # Parsing
    "parse_flexible",
    "ParserConfig",
    "DEFAULT_PARSER_CONFIG",
    # Errors
    "ParseErrorKind",
    "RationalParseError",
    "IntegerOverflow",
    # Types
    "Ratio",
    "IntegerType",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "ISIZE",
]
