"""Literal Parser — разбор fraction / decimal / scientific literal.

Порядок:
- Classifier: определение формы
- Fraction Handler или Decimal/Scientific Handler
- Numeric Builder: checked сборка (numerator, denominator)
"""

from .classifier import classify_literal
from .config import DEFAULT_PARSER_CONFIG, ParserConfig
from .decimal_handler import parse_decimal, split_components
from .fraction_handler import parse_fraction, parse_signed_integer
from .parser import parse_flexible

__all__ = [
    "classify_literal",
    "parse_fraction",
    "parse_signed_integer",
    "parse_decimal",
    "split_components",
    "parse_flexible",
    "ParserConfig",
    "DEFAULT_PARSER_CONFIG",
]
