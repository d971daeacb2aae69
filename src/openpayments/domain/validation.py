"""
Schema facet checks for simple ISO 20022 values.

This module contains pure functions that implement the facet rules of the
XML Schema simple types used by the catalog. No side effects, no I/O.

Each check raises ValidationError with its code when the facet does not
hold and returns None otherwise. Callers run them in a fixed order
(minimum length, maximum length, minimum value, pattern) so the first
violated facet is always the one reported.

Design Decisions:
- Length counts Unicode code points, matching the schema's notion of characters
- Patterns are searched for anywhere in the value, not anchored; a schema
  that needs a whole-value match anchors its own pattern
- Messages name the value in snake_case (max35_text, cd), and minimums are
  printed with six decimals
- Decimal comparison is exact; no tolerance applies to schema minimums
"""

import re
from decimal import Decimal

from .errors import ErrorCode, ValidationError


def check_min_length(name: str, value: str, min_length: int) -> None:
    """Rule: len(value) >= min_length."""
    if len(value) < min_length:
        raise ValidationError(
            ErrorCode.TOO_SHORT,
            f"{name} is shorter than the minimum length of {min_length}",
        )


def check_max_length(name: str, value: str, max_length: int) -> None:
    """Rule: len(value) <= max_length."""
    if len(value) > max_length:
        raise ValidationError(
            ErrorCode.TOO_LONG,
            f"{name} exceeds the maximum length of {max_length}",
        )


def check_min_inclusive(name: str, value: Decimal, minimum: Decimal) -> None:
    """Rule: value >= minimum."""
    if value < minimum:
        raise ValidationError(
            ErrorCode.BELOW_MINIMUM,
            f"{name} is less than the minimum value of {minimum:.6f}",
        )


def check_pattern(name: str, value: str, pattern: re.Pattern[str]) -> None:
    """Rule: the schema pattern occurs in value."""
    if pattern.search(value) is None:
        raise ValidationError(
            ErrorCode.PATTERN_MISMATCH,
            f"{name} does not match the required pattern",
        )


def check_facets(
    name: str,
    value: str | Decimal,
    *,
    min_length: int | None = None,
    max_length: int | None = None,
    min_inclusive: Decimal | None = None,
    pattern: re.Pattern[str] | None = None,
) -> None:
    """Run every declared facet check on value, in the fixed order."""
    if min_length is not None:
        check_min_length(name, value, min_length)
    if max_length is not None:
        check_max_length(name, value, max_length)
    if min_inclusive is not None:
        check_min_inclusive(name, value, min_inclusive)
    if pattern is not None:
        check_pattern(name, value, pattern)
