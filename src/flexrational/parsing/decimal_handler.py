"""
Decimal/Scientific Handler — разбор [sign] digits [. digits] [(e|E) [sign] digits]

Разбиение literal:
    sign | integer_digits | "." | fractional_digits | "e" | exp_sign | exp_digits

Валидация:
- '.' больше одного раза                          → MALFORMED_LITERAL
- нет цифр ни в integer, ни в fractional части    → MALFORMED_LITERAL
  ("." и "-" тоже ошибки; "3." и ".5" допустимы)
- маркер exponent-а без цифр ("1e", "1e+")        → MALFORMED_LITERAL
- любой символ вне 0-9 в сегменте цифр            → INVALID_DIGIT

Значение собирается без float: см. builder.build_rational.
"""

from flexrational.core.domain.errors import ParseErrorKind, RationalParseError
from flexrational.core.domain.literal import LiteralForm, ParsedComponents
from flexrational.core.math.checked_int import IntegerType
from flexrational.parsing.builder import build_rational, clean_digits, parse_exponent, split_sign
from flexrational.parsing.config import DECIMAL_POINT, EXPONENT_MARKERS, ParserConfig


def _split_exponent(body: str) -> tuple[str, str | None]:
    """Разделение на mantissa и текст exponent-а (None, если маркера нет)."""
    for i, ch in enumerate(body):
        if ch in EXPONENT_MARKERS:
            return body[:i], body[i + 1 :]
    return body, None


def split_components(
    literal: str,
    config: ParserConfig,
    form: LiteralForm = LiteralForm.SCIENTIFIC,
) -> ParsedComponents:
    """
    Разложение decimal/scientific literal на компоненты.

    Args:
        literal: Строка без '/'
        config: Конфигурация парсера
        form: для DECIMAL маркер exponent-а не распознаётся и считается
            недопустимым символом, для SCIENTIFIC распознаётся

    Returns:
        ParsedComponents

    Raises:
        RationalParseError: MALFORMED_LITERAL / INVALID_DIGIT / OVERFLOW
            (OVERFLOW только для exponent-а вне 32-битного диапазона)
    """
    sign, body = split_sign(literal)

    if form is LiteralForm.SCIENTIFIC:
        mantissa, exponent_text = _split_exponent(body)
    else:
        mantissa, exponent_text = body, None

    # 1. Mantissa
    points = mantissa.count(DECIMAL_POINT)
    if points > 1:
        raise RationalParseError(
            ParseErrorKind.MALFORMED_LITERAL,
            literal,
            f"{points} decimal points",
        )
    integer_text, _, fractional_text = mantissa.partition(DECIMAL_POINT)

    integer_digits = clean_digits(integer_text, literal, config, "integer part")
    fractional_digits = clean_digits(fractional_text, literal, config, "fractional part")
    if not integer_digits and not fractional_digits:
        raise RationalParseError(
            ParseErrorKind.MALFORMED_LITERAL,
            literal,
            "no digits in mantissa",
        )

    # 2. Exponent
    exponent = 0
    if exponent_text is not None:
        exponent_sign, exponent_body = split_sign(exponent_text)
        exponent_digits = clean_digits(exponent_body, literal, config, "exponent")
        if not exponent_digits:
            raise RationalParseError(
                ParseErrorKind.MALFORMED_LITERAL,
                literal,
                "missing exponent digits",
            )
        exponent = parse_exponent(exponent_sign, exponent_digits, literal)

    # 3. Хвостовые нули дробной части не меняют значение
    if config.trim_trailing_zeros:
        fractional_digits = fractional_digits.rstrip("0")
        if not integer_digits and not fractional_digits:
            integer_digits = "0"

    return ParsedComponents(
        sign=sign,
        integer_digits=integer_digits,
        fractional_digits=fractional_digits,
        exponent=exponent,
    )


def parse_decimal(
    literal: str,
    int_type: IntegerType,
    config: ParserConfig,
    form: LiteralForm = LiteralForm.SCIENTIFIC,
) -> tuple[int, int]:
    """
    Разбор decimal/scientific literal в (numerator, denominator).

    Examples:
        >>> from flexrational.core.math import I32
        >>> from flexrational.parsing.config import DEFAULT_PARSER_CONFIG
        >>> parse_decimal("1.2e-3", I32, ParserConfig(trim_trailing_zeros=False))
        (12, 10000)
        >>> parse_decimal("1E5", I32, DEFAULT_PARSER_CONFIG)
        (100000, 1)
    """
    components = split_components(literal, config, form)
    return build_rational(components, int_type, literal)
