"""
Parse Errors — таксономия ошибок разбора literal

Каждая ошибка обнаруживается в точке возникновения и сразу выбрасывается:
частичных результатов нет, повторных попыток нет (разбор детерминирован).
Вызывающий код получает одно исключение с kind, различающим категорию.
"""

from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================


class ParseErrorKind(str, Enum):
    """Категория ошибки разбора"""

    # Структурное нарушение грамматики: пустой ввод, лишние/неуместные
    # разделители и маркеры, отсутствие обязательных цифр
    MALFORMED_LITERAL = "MALFORMED_LITERAL"

    # Символ вне 0-9 там, где требуется цифра
    INVALID_DIGIT = "INVALID_DIGIT"

    # Знаменатель дроби равен нулю
    ZERO_DENOMINATOR = "ZERO_DENOMINATOR"

    # Промежуточное или итоговое значение вне диапазона целевого типа
    OVERFLOW = "OVERFLOW"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ParseErrorKind.MALFORMED_LITERAL: "malformed rational literal",
    ParseErrorKind.INVALID_DIGIT: "invalid digit in rational literal",
    ParseErrorKind.ZERO_DENOMINATOR: "zero value denominator",
    ParseErrorKind.OVERFLOW: "value overflows target integer type",
}


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RationalParseError(ValueError):
    """
    Ошибка разбора literal в рациональное число.

    Attributes:
        kind: Категория ошибки (ParseErrorKind)
        literal: Исходная строка
        detail: Уточнение (какой сегмент, какой символ)
    """

    def __init__(self, kind: ParseErrorKind, literal: str, detail: str = ""):
        self.kind = kind
        self.literal = literal
        self.detail = detail

        message = f"{kind.description}: {literal!r}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)

    def __reduce__(self):
        return (type(self), (self.kind, self.literal, self.detail))
