"""Constants shared by the integer helpers."""
import string


DIGITS = string.digits + string.ascii_lowercase

MIN_RADIX = 2
MAX_RADIX = len(DIGITS)

DEFAULT_NEGATIVE_SIGN = "-"
DEFAULT_POSITIVE_SIGN = "+"

HEX_PREFIX = "0x"

# Signed 32-bit bounds
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
