"""
Domain models and value objects.

Contains parse error taxonomy and the transient literal structures.
"""

from flexrational.core.domain.errors import ParseErrorKind, RationalParseError
from flexrational.core.domain.literal import LiteralForm, ParsedComponents, Sign

__all__ = [
    # Errors
    "ParseErrorKind",
    "RationalParseError",
    # Literal structures
    "LiteralForm",
    "Sign",
    "ParsedComponents",
]
