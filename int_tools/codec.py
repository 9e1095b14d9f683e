"""Conversion between integers and their numerals in bases 2 to 36."""
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Optional

from .constants import (
    DEFAULT_NEGATIVE_SIGN,
    DEFAULT_POSITIVE_SIGN,
    DIGITS,
    HEX_PREFIX,
    INT_MAX,
    INT_MIN,
    MAX_RADIX,
    MIN_RADIX,
)
from .errors import InvalidRadixError


@dataclass(frozen=True)
class SignMarkers:
    """Prefixes recognised by ``parse`` and emitted by ``format_int``."""

    negative: str = DEFAULT_NEGATIVE_SIGN
    positive: str = DEFAULT_POSITIVE_SIGN

    def parse(self, text: str, radix: Optional[int] = None) -> Optional[int]:
        return parse(text, radix, self.negative, self.positive)

    def format(self, value: int, radix: int) -> str:
        return format_int(value, radix, self.negative)


@lru_cache(maxsize=1)
def _digit_values() -> Dict[str, int]:
    return {char: index for index, char in enumerate(DIGITS)}


def _check_radix(radix: int) -> None:
    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise InvalidRadixError(radix)


def parse(
    text: str,
    radix: Optional[int] = None,
    negative_sign: str = DEFAULT_NEGATIVE_SIGN,
    positive_sign: str = DEFAULT_POSITIVE_SIGN,
) -> Optional[int]:
    """Parse ``text`` as an integer numeral.

    The radix defaults to 10, or 16 when the text carries a ``0x`` prefix.
    Returns ``None`` when the text is not a valid numeral in that radix or
    when its value does not fit a signed 32-bit integer. Only an out of
    range ``radix`` raises.

    An empty sign marker is ignored, so ``positive_sign=""`` still lets a
    leading ``negative_sign`` through.
    """
    if radix is not None:
        _check_radix(radix)

    negative = False
    if positive_sign and text.startswith(positive_sign):
        text = text[len(positive_sign):]
    elif negative_sign and text.startswith(negative_sign):
        text = text[len(negative_sign):]
        negative = True

    if not text:
        return None

    text = text.strip().lower()
    if text.startswith(HEX_PREFIX):
        if radix is not None and radix != 16:
            return None
        radix = 16
        text = text[len(HEX_PREFIX):]

    if radix is None:
        radix = 10

    values = _digit_values()
    result = 0
    for char in text:
        digit = values.get(char)
        if digit is None or digit >= radix:
            return None
        result = result * radix + digit

    if negative:
        result = -result
    if not INT_MIN <= result <= INT_MAX:
        return None
    return result


def can_parse(
    text: str,
    radix: Optional[int] = None,
    negative_sign: str = DEFAULT_NEGATIVE_SIGN,
    positive_sign: str = DEFAULT_POSITIVE_SIGN,
) -> bool:
    """Tell whether ``parse`` would accept ``text`` with the same arguments."""
    return parse(text, radix, negative_sign, positive_sign) is not None


def format_int(value: int, radix: int, negative_sign: str = DEFAULT_NEGATIVE_SIGN) -> str:
    """Render ``value`` in the given radix with lowercase digits.

    Decimal values and zero use the plain ``str`` rendering, so the custom
    ``negative_sign`` only applies to the other radices.
    """
    _check_radix(radix)
    if radix == 10 or value == 0:
        return str(value)

    digits = []
    number = abs(value)
    while number:
        number, remainder = divmod(number, radix)
        digits.append(DIGITS[remainder])
    numeral = "".join(reversed(digits))
    return negative_sign + numeral if value < 0 else numeral
