"""
Contract Validation Module

Валидация сериализованного Ratio против JSON Schema контракта.
"""

from .validators import RATIO_SCHEMA, RATIO_VALIDATOR, load_schema, validate_ratio

__all__ = [
    "RATIO_SCHEMA",
    "RATIO_VALIDATOR",
    "load_schema",
    "validate_ratio",
]
