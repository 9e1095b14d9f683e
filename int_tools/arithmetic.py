"""Small arithmetic helpers for integers."""
import math


def absolute(value: int) -> int:
    return -value if value < 0 else value


def clamp(value: int, min_value: int, max_value: int) -> int:
    """Bound ``value`` to ``[min_value, max_value]``."""
    if value < min_value:
        return min_value
    if value > max_value:
        return max_value
    return value


def clamp_sym(value: int, max_value: int) -> int:
    """Bound ``value`` to ``[-max_value, max_value]``."""
    return clamp(value, -max_value, max_value)


def compare(a: int, b: int) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def interpolate(f: float, a: int, b: int) -> int:
    """Interpolate between ``a`` and ``b`` at ``f``, rounding halves up."""
    return math.floor(a + (b - a) * f + 0.5)


def is_even(value: int) -> bool:
    return value % 2 == 0


def is_odd(value: int) -> bool:
    return value % 2 != 0


def maximum(a: int, b: int) -> int:
    return a if a > b else b


def minimum(a: int, b: int) -> int:
    return a if a < b else b


def sign(value: int) -> int:
    if value < 0:
        return -1
    if value > 0:
        return 1
    return 0


def wrap_circular(value: int, max_value: int) -> int:
    """Wrap ``value`` into ``[0, max_value)``, counting backwards for negatives."""
    if max_value <= 0:
        raise ValueError("The wrap limit must be a positive integer.")
    return value % max_value
