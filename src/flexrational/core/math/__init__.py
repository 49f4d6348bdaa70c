"""
Core math modules для flexrational

Ограниченные целые типы и checked-арифметика без wrapping-а.
"""

from flexrational.core.math.checked_int import (
    # Constants
    ASCII_DIGITS,
    EXPONENT_BITS,
    RADIX,
    # Exceptions
    IntegerOverflow,
    # Types
    IntegerType,
    I8,
    I16,
    I32,
    I64,
    I128,
    ISIZE,
    EXPONENT_TYPE,
    INTEGER_TYPES,
    # Functions
    integer_type_by_name,
)

__all__ = [
    # Constants
    "ASCII_DIGITS",
    "EXPONENT_BITS",
    "RADIX",
    # Exceptions
    "IntegerOverflow",
    # Types
    "IntegerType",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "ISIZE",
    "EXPONENT_TYPE",
    "INTEGER_TYPES",
    # Functions
    "integer_type_by_name",
]
