"""
Numeric Builder — сборка (numerator, denominator) из компонент

Все шаги выполняются checked-операциями над целевым типом:
- накопление цифр acc = acc*10 + digit (проверка на каждом шаге)
- 10**n повторным checked умножением
- масштабирование magnitude или denominator

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Переполнение фиксируется в момент возникновения (OVERFLOW), а не
   после накопления в более широком типе
2. denominator результата строго положителен
3. Результат не обязательно несократим (сокращение делает Ratio)
"""

from flexrational.core.domain.errors import ParseErrorKind, RationalParseError
from flexrational.core.domain.literal import ParsedComponents, Sign
from flexrational.core.math.checked_int import (
    ASCII_DIGITS,
    EXPONENT_TYPE,
    RADIX,
    IntegerOverflow,
    IntegerType,
)
from flexrational.parsing.config import DIGIT_GROUP_SEPARATOR, SIGN_CHARS, ParserConfig


# =============================================================================
# DIGIT VALIDATION
# =============================================================================


def clean_digits(segment: str, literal: str, config: ParserConfig, segment_name: str) -> str:
    """
    Проверка сегмента цифр и удаление разделителей групп.

    Пустой сегмент допустим (решение о пустоте принимает вызывающий код).

    Args:
        segment: Сегмент literal без знака
        literal: Исходная строка (для сообщения об ошибке)
        config: Конфигурация парсера
        segment_name: Имя сегмента для сообщения ('numerator', 'exponent', ...)

    Returns:
        Строка только из ASCII-цифр

    Raises:
        RationalParseError(INVALID_DIGIT): символ вне 0-9
        RationalParseError(MALFORMED_LITERAL): '_' в начале, в конце или
            подряд (только при allow_underscores)
    """
    digits = []
    for i, ch in enumerate(segment):
        if ch in ASCII_DIGITS:
            digits.append(ch)
        elif ch == DIGIT_GROUP_SEPARATOR and config.allow_underscores:
            if i == 0 or i == len(segment) - 1 or segment[i - 1] == DIGIT_GROUP_SEPARATOR:
                raise RationalParseError(
                    ParseErrorKind.MALFORMED_LITERAL,
                    literal,
                    f"misplaced digit separator in {segment_name}",
                )
        else:
            raise RationalParseError(
                ParseErrorKind.INVALID_DIGIT,
                literal,
                f"{ch!r} in {segment_name}",
            )
    return "".join(digits)


def split_sign(text: str) -> tuple[Sign, str]:
    """Отделение необязательного ведущего '+' или '-'."""
    if text and text[0] in SIGN_CHARS:
        return Sign.from_char(text[0]), text[1:]
    return Sign.POSITIVE, text


# =============================================================================
# CHECKED ACCUMULATION
# =============================================================================


def accumulate_digits(digits: str, int_type: IntegerType, literal: str) -> int:
    """
    Накопление неотрицательной величины из строки цифр.

    acc = acc*10 + digit, каждый шаг checked.

    Raises:
        RationalParseError(OVERFLOW): величина вне диапазона int_type
    """
    acc = int_type.zero()
    try:
        for ch in digits:
            acc = int_type.checked_add(int_type.checked_mul(acc, RADIX), int_type.from_digit(ch))
    except IntegerOverflow as e:
        raise RationalParseError(ParseErrorKind.OVERFLOW, literal, str(e)) from e
    return acc


def power_of_ten(exp: int, int_type: IntegerType, literal: str) -> int:
    """
    10**exp в int_type (exp >= 0).

    Raises:
        RationalParseError(OVERFLOW): 10**exp вне диапазона int_type
    """
    try:
        return int_type.checked_pow(RADIX, exp)
    except IntegerOverflow as e:
        raise RationalParseError(ParseErrorKind.OVERFLOW, literal, str(e)) from e


def parse_exponent(sign: Sign, digits: str, literal: str) -> int:
    """
    Значение exponent-а (знаковое 32-битное).

    Raises:
        RationalParseError(OVERFLOW): exponent вне 32-битного диапазона
    """
    magnitude = accumulate_digits(digits, EXPONENT_TYPE, literal)
    return sign.apply(magnitude)


# =============================================================================
# BUILD
# =============================================================================


def build_rational(components: ParsedComponents, int_type: IntegerType, literal: str) -> tuple[int, int]:
    """
    Сборка (numerator, denominator) из компонент decimal/scientific literal.

    scale = exponent - len(fractional_digits):
    - scale >= 0: (magnitude * 10**scale, 1)
    - scale < 0:  (magnitude, 10**(-scale))

    Args:
        components: Разобранные компоненты
        int_type: Целевой целый тип
        literal: Исходная строка (для сообщений об ошибке)

    Returns:
        (numerator, denominator), denominator > 0

    Raises:
        RationalParseError(OVERFLOW): magnitude или масштабирование вне
            диапазона int_type

    Examples:
        >>> from flexrational.core.math import I32
        >>> build_rational(ParsedComponents(Sign.POSITIVE, "1", "25"), I32, "1.25")
        (125, 100)
        >>> build_rational(ParsedComponents(Sign.NEGATIVE, "1", "2", -3), I32, "-1.2e-3")
        (-12, 10000)
    """
    magnitude = accumulate_digits(components.digits, int_type, literal)
    scale = components.scale

    if scale >= 0:
        try:
            numerator = int_type.checked_mul(magnitude, power_of_ten(scale, int_type, literal))
        except IntegerOverflow as e:
            raise RationalParseError(ParseErrorKind.OVERFLOW, literal, str(e)) from e
        denominator = int_type.one()
    else:
        numerator = magnitude
        denominator = power_of_ten(-scale, int_type, literal)

    # magnitude <= max_value, поэтому -magnitude всегда представим
    return components.sign.apply(numerator), denominator
