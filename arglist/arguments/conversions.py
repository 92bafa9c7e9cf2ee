"""Field converters for typed arguments.

Every converter takes the raw text of one field and either returns the
converted value or raises TypeConversionError. Values are bounded to 32
bits, matching the width of the configuration values they feed.
"""

from fractions import Fraction
from ipaddress import AddressValueError, IPv4Address, IPv6Address
from typing import Tuple
import math
import re

from arglist.arguments.models import ArgType
from arglist.core.logging import get_module_logger
from arglist.errors import TypeConversionError, UnsupportedTypeError

logger = get_module_logger()

UINT_MAX = 0xFFFFFFFF
SINT_MAX = 0x7FFFFFFF
SINT_MIN = -0x80000000

_DIGITS = re.compile(r"[0-9]+")
_LEADING_DIGITS = re.compile(r"([0-9]+)(.*)", re.DOTALL)

# Unit length in seconds, as a fraction
TIME_UNITS = {
    "us": Fraction(1, 1000000),
    "ms": Fraction(1, 1000),
    "s": Fraction(1),
    "m": Fraction(60),
    "h": Fraction(3600),
    "d": Fraction(86400),
}

SIZE_SUFFIXES = {
    "k": 10,
    "m": 20,
    "g": 30,
}

# digits in UINT_MAX once leading zeros are dropped
MAX_DIGITS = len(str(UINT_MAX))


def _digits_value(digits: str, text: str) -> int:
    """Value of a run of ASCII digits, rejecting runs too long to fit 32 bits."""
    significant = digits.lstrip("0")
    if len(significant) > MAX_DIGITS:
        raise TypeConversionError(f"Number out of range: '{text}'")
    return int(significant or "0")


def parse_uint(text: str) -> int:
    """Parse a decimal unsigned 32-bit integer."""
    if not _DIGITS.fullmatch(text):
        raise TypeConversionError(f"Invalid unsigned integer: '{text}'")

    value = _digits_value(text, text)
    if value > UINT_MAX:
        raise TypeConversionError(f"Unsigned integer out of range: '{text}'")
    return value


def parse_sint(text: str) -> Tuple[ArgType, int]:
    """Parse an optionally signed integer.

    Returns:
        (ArgType.UINT, value) when no sign is present, otherwise
        (ArgType.SINT, value)
    """
    if not text:
        raise TypeConversionError("Empty signed integer")

    if text[0].isdigit():
        return ArgType.UINT, parse_uint(text)

    sign, magnitude = text[0], text[1:]
    if sign not in "+-":
        raise TypeConversionError(f"Invalid sign character: '{sign}'")

    value = parse_uint(magnitude)
    if sign == "-":
        value = -value

    if not SINT_MIN <= value <= SINT_MAX:
        raise TypeConversionError(f"Signed integer out of range: '{text}'")
    return ArgType.SINT, value


def parse_ipv4(text: str) -> IPv4Address:
    """Parse a dotted-decimal IPv4 address."""
    try:
        return IPv4Address(text)
    except AddressValueError as e:
        raise TypeConversionError(f"Invalid IPv4 address '{text}': {e}")


def parse_ipv4_mask(text: str) -> IPv4Address:
    """Parse an IPv4 netmask, dotted-decimal or as a prefix length.

    Dotted masks are taken as-is, without checking that the bits are
    contiguous.
    """
    if "." in text:
        return parse_ipv4(text)

    if not _DIGITS.fullmatch(text):
        raise TypeConversionError(f"Invalid IPv4 mask: '{text}'")

    length = _digits_value(text, text)
    if length > 32:
        raise TypeConversionError(f"IPv4 mask length out of range: '{text}'")
    if not length:
        return IPv4Address(0)
    return IPv4Address((UINT_MAX << (32 - length)) & UINT_MAX)


def parse_ipv6(text: str) -> IPv6Address:
    """Parse an IPv6 address literal, without scope identifier."""
    if "%" in text:
        raise TypeConversionError(f"Scoped IPv6 address not allowed: '{text}'")
    try:
        return IPv6Address(text)
    except AddressValueError as e:
        raise TypeConversionError(f"Invalid IPv6 address '{text}': {e}")


def parse_ipv6_mask(text: str):
    """IPv6 masks have no conversion and always fail."""
    raise UnsupportedTypeError(f"IPv6 masks are not supported: '{text}'")


def parse_time(text: str, unit: str = "ms", strict: bool = False) -> int:
    """Parse a delay into an integer count of <unit>.

    The number may be followed by one of us, ms, s, m, h or d. Without a
    suffix the number is already expressed in <unit>. Conversions round
    up, so a non-zero delay never becomes zero.

    Args:
        text: Field text, e.g. "1500", "30s", "2m"
        unit: Output unit, one of the TIME_UNITS keys
        strict: Reject characters after the unit instead of logging a warning

    Returns:
        Delay in <unit>
    """
    if unit not in TIME_UNITS:
        raise ValueError(f"Unknown output time unit: {unit}")

    match = _LEADING_DIGITS.fullmatch(text)
    if not match:
        raise TypeConversionError(f"Invalid delay: '{text}'")

    value = _digits_value(match.group(1), text)
    rest = match.group(2)

    if not rest:
        result = value
    else:
        in_unit = rest[:2] if rest[:2] in TIME_UNITS else rest[:1]
        if in_unit not in TIME_UNITS:
            raise TypeConversionError(
                f"Invalid delay unit in '{text}', only "
                "us, ms, s, m, h and d are supported"
            )

        trailing = rest[len(in_unit) :]
        if trailing:
            if strict:
                raise TypeConversionError(
                    f"Unexpected characters '{trailing}' after delay '{text}'"
                )
            logger.warning(
                "time_value_trailing_characters",
                value=text,
                trailing=trailing,
            )

        result = math.ceil(value * TIME_UNITS[in_unit] / TIME_UNITS[unit])

    if result > UINT_MAX:
        raise TypeConversionError(f"Delay out of range: '{text}'")
    return result


def parse_size(text: str) -> int:
    """Parse a size in bytes, with an optional k, m or g suffix (powers of 1024)."""
    match = _LEADING_DIGITS.fullmatch(text)
    if not match:
        raise TypeConversionError(f"Invalid size: '{text}'")

    value = _digits_value(match.group(1), text)
    suffix = match.group(2)

    if suffix:
        shift = SIZE_SUFFIXES.get(suffix.lower())
        if shift is None:
            raise TypeConversionError(
                f"Invalid size suffix in '{text}', only k, m and g are supported"
            )
        value <<= shift

    if value > UINT_MAX:
        raise TypeConversionError(f"Size out of range: '{text}'")
    return value
