"""
Classifier — определение формы literal

Один проход по строке, содержимое цифр не проверяется:
- ровно один '/'                        → FRACTION
- один маркер exponent-а не в позиции 0 → SCIENTIFIC
- иначе                                 → DECIMAL (включая целые числа)
"""

from flexrational.core.domain.errors import ParseErrorKind, RationalParseError
from flexrational.core.domain.literal import LiteralForm
from flexrational.parsing.config import EXPONENT_MARKERS, FRACTION_SEPARATOR


def classify_literal(literal: str) -> LiteralForm:
    """
    Классификация literal по форме.

    Args:
        literal: Строка без окружающих пробелов

    Returns:
        LiteralForm

    Raises:
        RationalParseError(MALFORMED_LITERAL): пустая строка, '/' больше
            одного раза, маркер exponent-а больше одного раза
    """
    if not literal:
        raise RationalParseError(ParseErrorKind.MALFORMED_LITERAL, literal, "empty literal")

    separators = literal.count(FRACTION_SEPARATOR)
    if separators > 1:
        raise RationalParseError(
            ParseErrorKind.MALFORMED_LITERAL,
            literal,
            f"{separators} fraction separators",
        )
    if separators == 1:
        return LiteralForm.FRACTION

    markers = [i for i, ch in enumerate(literal) if ch in EXPONENT_MARKERS]
    if len(markers) > 1:
        raise RationalParseError(
            ParseErrorKind.MALFORMED_LITERAL,
            literal,
            f"{len(markers)} exponent markers",
        )
    if markers and markers[0] > 0:
        return LiteralForm.SCIENTIFIC

    return LiteralForm.DECIMAL
