"""
Fraction Handler — разбор формы <signed-int> "/" <signed-int>

Каждая сторона: необязательный '+'/'-', затем одна или больше ASCII-цифр.
Десятичные точки, exponent и пробелы внутри сторон не допускаются.
Отрицательный знаменатель нормализуется сменой знака обеих компонент.
"""

from flexrational.core.domain.errors import ParseErrorKind, RationalParseError
from flexrational.core.math.checked_int import IntegerOverflow, IntegerType
from flexrational.parsing.builder import accumulate_digits, clean_digits, split_sign
from flexrational.parsing.config import FRACTION_SEPARATOR, ParserConfig


def parse_signed_integer(
    text: str,
    int_type: IntegerType,
    literal: str,
    config: ParserConfig,
    segment_name: str,
) -> int:
    """
    Разбор знакового целого.

    Величина накапливается как неотрицательная и должна помещаться в
    max_value; знак применяется после. Поэтому для i8 "-128" даёт OVERFLOW.

    Raises:
        RationalParseError(MALFORMED_LITERAL): нет цифр после знака
        RationalParseError(INVALID_DIGIT): символ вне 0-9
        RationalParseError(OVERFLOW): величина вне диапазона int_type
    """
    sign, body = split_sign(text)
    digits = clean_digits(body, literal, config, segment_name)
    if not digits:
        raise RationalParseError(
            ParseErrorKind.MALFORMED_LITERAL,
            literal,
            f"missing digits in {segment_name}",
        )
    return sign.apply(accumulate_digits(digits, int_type, literal))


def parse_fraction(literal: str, int_type: IntegerType, config: ParserConfig) -> tuple[int, int]:
    """
    Разбор дроби "n/d".

    Args:
        literal: Строка, содержащая ровно один '/'
        int_type: Целевой целый тип
        config: Конфигурация парсера

    Returns:
        (numerator, denominator), denominator > 0

    Raises:
        RationalParseError: MALFORMED_LITERAL / INVALID_DIGIT /
            ZERO_DENOMINATOR / OVERFLOW

    Examples:
        >>> from flexrational.core.math import I32
        >>> from flexrational.parsing.config import DEFAULT_PARSER_CONFIG
        >>> parse_fraction("3/-4", I32, DEFAULT_PARSER_CONFIG)
        (-3, 4)
    """
    numerator_text, denominator_text = literal.split(FRACTION_SEPARATOR)

    numerator = parse_signed_integer(numerator_text, int_type, literal, config, "numerator")
    denominator = parse_signed_integer(denominator_text, int_type, literal, config, "denominator")

    if denominator == 0:
        raise RationalParseError(ParseErrorKind.ZERO_DENOMINATOR, literal)

    if denominator < 0:
        try:
            numerator = int_type.checked_neg(numerator)
            denominator = int_type.checked_neg(denominator)
        except IntegerOverflow as e:
            raise RationalParseError(ParseErrorKind.OVERFLOW, literal, str(e)) from e

    return numerator, denominator
