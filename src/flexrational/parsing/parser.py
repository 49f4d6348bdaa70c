"""
Literal Parser — точка входа

classify_literal → (parse_fraction | parse_decimal) → (numerator, denominator)

После классификации отката к другой форме нет: если сторона дроби не
разбирается, разбор целиком завершается ошибкой.

Функция чистая и реентерабельная: нет общего изменяемого состояния,
вызовы из разных потоков не требуют синхронизации.
"""

import logging

from flexrational.core.domain.errors import RationalParseError
from flexrational.core.domain.literal import LiteralForm
from flexrational.core.math.checked_int import I32, IntegerType
from flexrational.parsing.classifier import classify_literal
from flexrational.parsing.config import DEFAULT_PARSER_CONFIG, ParserConfig
from flexrational.parsing.decimal_handler import parse_decimal
from flexrational.parsing.fraction_handler import parse_fraction

logger = logging.getLogger(__name__)


def parse_flexible(
    literal: str,
    int_type: IntegerType = I32,
    config: ParserConfig | None = None,
) -> tuple[int, int]:
    """
    Разбор числового literal в точную пару (numerator, denominator).

    Поддерживаемые формы:
    - "-35/4", "3/-4"      (Fraction)
    - "3.1415", ".5", "5." (Decimal, включая целые)
    - "-47e-2", "1E5"      (Scientific)

    Args:
        literal: Один токен без окружающих пробелов
        int_type: Целевой знаковый целый тип (default: I32)
        config: Конфигурация парсера (default: DEFAULT_PARSER_CONFIG)

    Returns:
        (numerator, denominator): denominator > 0, пара не сокращена

    Raises:
        TypeError: если literal не str
        RationalParseError: MALFORMED_LITERAL / INVALID_DIGIT /
            ZERO_DENOMINATOR / OVERFLOW

    Examples:
        >>> parse_flexible("3/4")
        (3, 4)
        >>> parse_flexible("1.25")
        (125, 100)
        >>> parse_flexible("-0.5")
        (-5, 10)
    """
    if not isinstance(literal, str):
        raise TypeError(f"literal must be str, got {type(literal).__name__}")

    config = config or DEFAULT_PARSER_CONFIG

    try:
        form = classify_literal(literal)
        if form is LiteralForm.FRACTION:
            return parse_fraction(literal, int_type, config)
        return parse_decimal(literal, int_type, config, form)
    except RationalParseError as e:
        logger.debug("Rejected literal %r as %s: %s", literal, int_type, e.kind.value)
        raise
