"""Lenient parsing of numeric user input."""

import math

from fitness_tracker.domain.errors import InvalidQuantity


def parse_number(value: object, default: float = 0.0) -> float:
    """Parse a non-negative number, returning ``default`` when it is not one.

    Accepts ints, floats and numeric strings. Negative values, NaN, booleans
    and anything unparseable fall back to ``default``.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return default
    else:
        return default
    if math.isnan(number) or math.isinf(number) or number < 0:
        return default
    return number


def parse_count(value: object, default: int = 0) -> int:
    """Parse a non-negative whole count such as reps."""
    return int(parse_number(value, float(default)))


def parse_flag(value: object) -> bool:
    """Parse a completion flag."""
    if isinstance(value, str):
        return value.strip().lower() in {"true", "1", "yes"}
    return bool(value)


def parse_quantity(value: object) -> float:
    """Parse a logged quantity, raising InvalidQuantity unless it is positive."""
    if isinstance(value, bool):
        raise InvalidQuantity
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            raise InvalidQuantity from None
    else:
        raise InvalidQuantity
    if math.isnan(number) or math.isinf(number) or number <= 0:
        raise InvalidQuantity
    return number
