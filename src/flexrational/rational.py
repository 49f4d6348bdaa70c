"""
Ratio — рациональное число над ограниченным целым типом

Immutable Pydantic модель. Всегда хранится в несократимом виде с
положительным знаменателем. Альтернативный конструктор from_str_flex
вызывает парсер literal и передаёт (numerator, denominator) в Ratio.new,
где выполняются сокращение и нормализация знака.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator > 0
2. gcd(numerator, denominator) == 1
3. numerator и denominator лежат в диапазоне int_type
"""

import math
from fractions import Fraction
from typing import Any

from pydantic import BaseModel, Field, field_validator

from flexrational.core.contracts.validators import validate_ratio
from flexrational.core.domain.errors import ParseErrorKind, RationalParseError
from flexrational.core.math.checked_int import I32, IntegerOverflow, IntegerType
from flexrational.parsing.config import ParserConfig
from flexrational.parsing.parser import parse_flexible


class Ratio(BaseModel):
    """
    Несократимая дробь numerator/denominator над int_type.

    Прямой вызов конструктора только проверяет инварианты; для сокращения
    используйте Ratio.new, для разбора строки Ratio.from_str_flex.
    """

    int_type: IntegerType = Field(default=I32, description="Целевой целый тип")
    numerator: int = Field(..., description="Числитель")
    denominator: int = Field(..., gt=0, description="Знаменатель (> 0)")

    model_config = {"frozen": True}

    @field_validator("numerator", "denominator")
    @classmethod
    def validate_in_range(cls, v: int, info) -> int:
        """Проверка, что компонента помещается в int_type"""
        if "int_type" in info.data:
            int_type = info.data["int_type"]
            if not int_type.contains(v):
                raise ValueError(f"{info.field_name} {v} out of range for {int_type}")
        return v

    @field_validator("denominator")
    @classmethod
    def validate_lowest_terms(cls, v: int, info) -> int:
        """Проверка несократимости"""
        if "numerator" in info.data:
            numerator = info.data["numerator"]
            if math.gcd(numerator, v) != 1:
                raise ValueError(f"{numerator}/{v} is not in lowest terms")
        return v

    # =========================================================================
    # CONSTRUCTORS
    # =========================================================================

    @classmethod
    def new(cls, numerator: int, denominator: int, int_type: IntegerType = I32) -> "Ratio":
        """
        Сокращение и нормализация знака.

        Args:
            numerator: Числитель (в диапазоне int_type)
            denominator: Знаменатель (в диапазоне int_type, != 0)
            int_type: Целевой целый тип

        Returns:
            Ratio в несократимом виде с denominator > 0

        Raises:
            RationalParseError: ZERO_DENOMINATOR если denominator == 0,
                OVERFLOW если нормализация знака выходит за диапазон
                (например, 1/-128 для i8)

        Examples:
            >>> Ratio.new(125, 100)
            Ratio(int_type=IntegerType(name='i32', bits=32), numerator=5, denominator=4)
        """
        text = f"{numerator}/{denominator}"
        if denominator == 0:
            raise RationalParseError(ParseErrorKind.ZERO_DENOMINATOR, text)

        g = math.gcd(numerator, denominator)
        numerator //= g
        denominator //= g

        if denominator < 0:
            try:
                numerator = int_type.checked_neg(numerator)
                denominator = int_type.checked_neg(denominator)
            except IntegerOverflow as e:
                raise RationalParseError(ParseErrorKind.OVERFLOW, text, str(e)) from e

        return cls(int_type=int_type, numerator=numerator, denominator=denominator)

    @classmethod
    def from_str_flex(
        cls,
        literal: str,
        int_type: IntegerType = I32,
        config: ParserConfig | None = None,
    ) -> "Ratio":
        """
        Разбор literal ("3/4", "1.25", "1.2e-3") в Ratio.

        Raises:
            RationalParseError: см. parse_flexible

        Examples:
            >>> str(Ratio.from_str_flex("1.2e-3"))
            '3/2500'
        """
        numerator, denominator = parse_flexible(literal, int_type, config)
        return cls.new(numerator, denominator, int_type)

    # =========================================================================
    # ACCESSORS
    # =========================================================================

    def is_integer(self) -> bool:
        return self.denominator == 1

    def to_fraction(self) -> Fraction:
        """Конверсия в fractions.Fraction (неограниченная точность)."""
        return Fraction(self.numerator, self.denominator)

    def __neg__(self) -> "Ratio":
        """
        Raises:
            RationalParseError: OVERFLOW если numerator == min_value
        """
        try:
            numerator = self.int_type.checked_neg(self.numerator)
        except IntegerOverflow as e:
            raise RationalParseError(ParseErrorKind.OVERFLOW, f"-({self})", str(e)) from e
        return Ratio.new(numerator, self.denominator, self.int_type)

    def __str__(self) -> str:
        """Формат "n/d" или "n" для целых; разбирается обратно from_str_flex."""
        if self.is_integer():
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    # =========================================================================
    # SERIALIZATION
    # =========================================================================

    def to_dict(self) -> dict[str, Any]:
        """
        Сериализация по контракту ratio.json.

        int_type записывается как {"name", "bits"}, поэтому пользовательские
        типы (например, i24) восстанавливаются так же, как предопределённые.
        """
        data = {
            "numerator": self.numerator,
            "denominator": self.denominator,
            "int_type": {"name": self.int_type.name, "bits": self.int_type.bits},
        }
        validate_ratio(data)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Ratio":
        """
        Десериализация по контракту ratio.json.

        Raises:
            jsonschema.ValidationError: данные не соответствуют схеме
            pydantic.ValidationError: нарушены инварианты Ratio
        """
        validate_ratio(data)
        return cls(
            int_type=IntegerType(**data["int_type"]),
            numerator=data["numerator"],
            denominator=data["denominator"],
        )
