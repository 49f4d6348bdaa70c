"""
Тесты для parse_flexible

Покрытие:
- Конкретные сценарии (fraction / decimal / scientific)
- Граничные случаи и категории ошибок
- Overflow для i8 / i32
- Отсутствие отката к другой форме
- Логирование отвергнутых literal
"""

import logging
from fractions import Fraction

import pytest

from flexrational import (
    I8,
    I32,
    I64,
    ParseErrorKind,
    ParserConfig,
    RationalParseError,
    parse_flexible,
)

# =============================================================================
# HELPERS
# =============================================================================


def value_of(literal: str, int_type=I32, config=None) -> Fraction:
    """Точное значение результата parse_flexible."""
    numerator, denominator = parse_flexible(literal, int_type, config)
    return Fraction(numerator, denominator)


def kind_of(literal: str, int_type=I32, config=None) -> ParseErrorKind:
    with pytest.raises(RationalParseError) as exc_info:
        parse_flexible(literal, int_type, config)
    return exc_info.value.kind


# =============================================================================
# ТЕСТЫ СЦЕНАРИЕВ
# =============================================================================


class TestScenarios:
    """Конкретные сценарии разбора."""

    def test_fraction(self) -> None:
        assert parse_flexible("3/4") == (3, 4)

    def test_decimal_pre_reduction(self) -> None:
        """1.25 → (125, 100) до сокращения"""
        assert parse_flexible("1.25") == (125, 100)
        assert value_of("1.25") == Fraction(5, 4)

    def test_scientific(self) -> None:
        assert value_of("1.2e-3") == Fraction(3, 2500)

    def test_uppercase_exponent(self) -> None:
        assert parse_flexible("1E5") == (100000, 1)

    def test_negative_decimal(self) -> None:
        assert value_of("-0.5") == Fraction(-1, 2)

    def test_denominator_always_positive(self) -> None:
        for literal in ("-3/4", "3/-4", "-0.5", "-1e-2", "-7"):
            _, denominator = parse_flexible(literal)
            assert denominator > 0

    @pytest.mark.parametrize(
        "literal,expected",
        [
            ("314", Fraction(314)),
            ("-35/4", Fraction(-35, 4)),
            ("3.1415", Fraction(6283, 2000)),
            ("-47e-2", Fraction(-47, 100)),
            ("2.25", Fraction(9, 4)),
            ("005", Fraction(5)),
            ("003.2", Fraction(16, 5)),
            ("-3.", Fraction(-3)),
            (".6", Fraction(3, 5)),
            ("1.01", Fraction(101, 100)),
            ("32.e-5", Fraction(1, 3125)),
            ("1E+06", Fraction(1000000)),
            ("-1.23e4", Fraction(-12300)),
            (".0e+0", Fraction(0)),
            ("-0.000e0", Fraction(0)),
            ("0013/002", Fraction(13, 2)),
        ],
    )
    def test_exact_value(self, literal: str, expected: Fraction) -> None:
        """Значение совпадает с точным математическим значением literal"""
        assert value_of(literal) == expected

    @pytest.mark.parametrize(
        "literal", ["3.1415", "-47e-2", ".5", "5.", "1E5", "-1.23e4", "32.e-5", "0.000125", "-9/12"]
    )
    def test_matches_fraction_constructor(self, literal: str) -> None:
        """Результат совпадает с fractions.Fraction для той же строки"""
        assert value_of(literal, I64) == Fraction(literal)


# =============================================================================
# ТЕСТЫ СВОЙСТВ
# =============================================================================


class TestProperties:
    """Инварианты разбора."""

    def test_sign_placement_equivalent(self) -> None:
        assert value_of("-3/4") == value_of("3/-4") == -value_of("3/4")

    @pytest.mark.parametrize("k", range(0, 19))
    def test_zeros_equal_exponent(self, k: int) -> None:
        """parse("1" + "0"*k) == parse("1e" + str(k))"""
        assert parse_flexible("1" + "0" * k, I64) == parse_flexible(f"1e{k}", I64)

    def test_leading_point_equals_zero_point(self) -> None:
        assert value_of(".5") == value_of("0.5") == Fraction(1, 2)

    def test_trailing_point(self) -> None:
        assert parse_flexible("5.") == (5, 1)

    def test_zero_decimal(self) -> None:
        assert parse_flexible("0.0") == (0, 1)


# =============================================================================
# ТЕСТЫ ОШИБОК
# =============================================================================


class TestErrors:
    """Категории ошибок."""

    @pytest.mark.parametrize(
        "literal,kind",
        [
            (".", ParseErrorKind.MALFORMED_LITERAL),
            ("", ParseErrorKind.MALFORMED_LITERAL),
            ("1/0", ParseErrorKind.ZERO_DENOMINATOR),
            ("1//2", ParseErrorKind.MALFORMED_LITERAL),
            ("1e", ParseErrorKind.MALFORMED_LITERAL),
            ("1.2.3", ParseErrorKind.MALFORMED_LITERAL),
            ("3/", ParseErrorKind.MALFORMED_LITERAL),
            ("/2", ParseErrorKind.MALFORMED_LITERAL),
            ("1e5e5", ParseErrorKind.MALFORMED_LITERAL),
            ("-", ParseErrorKind.MALFORMED_LITERAL),
            ("invalid", ParseErrorKind.INVALID_DIGIT),
            ("3a2", ParseErrorKind.INVALID_DIGIT),
            ("0x10", ParseErrorKind.INVALID_DIGIT),
            ("0x10.1", ParseErrorKind.INVALID_DIGIT),
            ("e5", ParseErrorKind.INVALID_DIGIT),
            ("123.dd", ParseErrorKind.INVALID_DIGIT),
            ("789edd", ParseErrorKind.INVALID_DIGIT),
            ("¼", ParseErrorKind.INVALID_DIGIT),
            ("³.2", ParseErrorKind.INVALID_DIGIT),
            (" 3/2", ParseErrorKind.INVALID_DIGIT),
            ("3.2 ", ParseErrorKind.INVALID_DIGIT),
            ("1,000", ParseErrorKind.INVALID_DIGIT),
            ("1_000", ParseErrorKind.INVALID_DIGIT),
        ],
    )
    def test_error_kind(self, literal: str, kind: ParseErrorKind) -> None:
        assert kind_of(literal) is kind

    def test_no_fallback_from_fraction(self) -> None:
        """Сторона дроби с точкой не разбирается как decimal"""
        assert kind_of("1.5/2") is ParseErrorKind.INVALID_DIGIT

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_flexible("abc")

    def test_error_message(self) -> None:
        with pytest.raises(RationalParseError, match=r"zero value denominator: '1/0'") as exc_info:
            parse_flexible("1/0")
        assert exc_info.value.literal == "1/0"

    def test_non_string_rejected(self) -> None:
        with pytest.raises(TypeError, match="must be str"):
            parse_flexible(1.5)


class TestOverflow:
    """Переполнение целевого типа."""

    def test_i8(self) -> None:
        assert kind_of("200", I8) is ParseErrorKind.OVERFLOW
        assert kind_of("128", I8) is ParseErrorKind.OVERFLOW
        assert parse_flexible("127", I8) == (127, 1)

    @pytest.mark.parametrize(
        "literal",
        [
            "2147483648",
            "99999999999",
            "-2147483648",
            "2147483648/1",
            "-2147483648/1",
            "1/2147483648",
            "1.12345678901",
            "1e10",
            "2147483648e0",
            "1e-10",
            "1e99999999999",
        ],
    )
    def test_i32(self, literal: str) -> None:
        assert kind_of(literal, I32) is ParseErrorKind.OVERFLOW

    def test_i32_max(self) -> None:
        assert parse_flexible("2147483647") == (2147483647, 1)
        assert parse_flexible("-2147483647") == (-2147483647, 1)

    def test_trailing_zeros_do_not_overflow(self) -> None:
        assert parse_flexible("1.0000000000") == (1, 1)
        assert value_of("1.2300000") == Fraction(123, 100)

    def test_trailing_zeros_kept(self) -> None:
        config = ParserConfig(trim_trailing_zeros=False)
        assert kind_of("1.0000000000", I32, config) is ParseErrorKind.OVERFLOW

    def test_wider_type(self) -> None:
        assert value_of("3.1415926535", I64) == Fraction(6283185307, 2000000000)


# =============================================================================
# ТЕСТЫ КОНФИГУРАЦИИ
# =============================================================================


class TestUnderscores:
    """Разделители групп цифр."""

    @pytest.fixture
    def config(self):
        return ParserConfig(allow_underscores=True)

    @pytest.mark.parametrize(
        "literal,expected",
        [
            ("1_000/1", Fraction(1000)),
            ("1.50_0", Fraction(3, 2)),
            ("1_2_3", Fraction(123)),
            ("1_2_3/3_2_1", Fraction(41, 107)),
            ("3.14_15", Fraction(6283, 2000)),
            ("-1_000/2_000", Fraction(-1, 2)),
        ],
    )
    def test_accepted(self, config, literal: str, expected: Fraction) -> None:
        assert value_of(literal, I32, config) == expected

    @pytest.mark.parametrize("literal", ["_", "_1", "1__2", "1_/", "_1/", "1/_", "1._111"])
    def test_misplaced(self, config, literal: str) -> None:
        assert kind_of(literal, I32, config) is ParseErrorKind.MALFORMED_LITERAL

    def test_overflow_with_separators(self, config) -> None:
        assert kind_of("3.14_15e-1_0", I32, config) is ParseErrorKind.OVERFLOW

    @pytest.mark.parametrize("literal", ["9" * 50 + "_", "1/" + "9" * 50 + "_", "1." + "9" * 50 + "_"])
    def test_long_trailing_separator(self, config, literal: str) -> None:
        """Длинный ввод с хвостовым '_' завершается быстро"""
        assert kind_of(literal, I32, config) in (
            ParseErrorKind.MALFORMED_LITERAL,
            ParseErrorKind.OVERFLOW,
        )


# =============================================================================
# ТЕСТЫ ЛОГИРОВАНИЯ
# =============================================================================


class TestLogging:
    """Логирование отвергнутых literal."""

    def test_rejection_logged_at_debug(self, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="flexrational.parsing.parser")
        with pytest.raises(RationalParseError):
            parse_flexible("1/0")
        assert any("ZERO_DENOMINATOR" in record.getMessage() for record in caplog.records)

    def test_success_not_logged(self, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="flexrational.parsing.parser")
        parse_flexible("3/4")
        assert not caplog.records
