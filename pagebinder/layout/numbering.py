# pagebinder/layout/numbering.py
# ============================================================
# Page Number Formatting
# ============================================================
# Turns a 1-based page index into the string printed on the
# page. Five styles are supported, selected by NumberFormat:
#   "1" arabic, "a"/"A" base-36, "i"/"I" Roman numerals.
#
# Usage:
#   from pagebinder.layout.numbering import format_page_number
#   format_page_number(14, "i")   # -> "xiv"
# ============================================================

from typing import Union

from pagebinder.layout.options import NumberFormat

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

# Hundreds, tens and units, each indexed by the decimal digit
_ROMAN_HUNDREDS = ("", "C", "CC", "CCC", "CD", "D", "DC", "DCC", "DCCC", "CM")
_ROMAN_TENS = ("", "X", "XX", "XXX", "XL", "L", "LX", "LXX", "LXXX", "XC")
_ROMAN_UNITS = ("", "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX")


def _check_page_index(number: int) -> None:
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"Page number must be an int, got {type(number).__name__}")
    if number < 1:
        raise ValueError(f"Page number must be >= 1, got {number}")


def to_base36(number: int) -> str:
    """Lowercase base-36 representation of a positive integer."""
    _check_page_index(number)
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(_BASE36_DIGITS[rem])
    return "".join(reversed(digits))


def to_roman(number: int) -> str:
    """
    Uppercase Roman numeral for a positive integer.

    Values of 4000 and above keep prepending one "M" per thousand
    rather than switching to overline notation.

    Example:
        >>> to_roman(1994)
        'MCMXCIV'
    """
    _check_page_index(number)
    thousands, rest = divmod(number, 1000)
    hundreds, rest = divmod(rest, 100)
    tens, units = divmod(rest, 10)
    return (
        "M" * thousands
        + _ROMAN_HUNDREDS[hundreds]
        + _ROMAN_TENS[tens]
        + _ROMAN_UNITS[units]
    )


def format_page_number(number: int, style: Union[NumberFormat, str] = NumberFormat.ARABIC) -> str:
    """
    Format a page index for display.

    Args:
        number: 1-based page index.
        style: A NumberFormat, its token ("1", "a", "A", "i", "I") or its
               name ("arabic", "alpha-lower", "roman-upper", ...).

    Returns:
        The display string.

    Raises:
        ValueError: If number < 1 or the style is unknown.
        TypeError: If number is not an int.
    """
    style = NumberFormat(style)
    _check_page_index(number)

    if style is NumberFormat.ALPHA_LOWER:
        return to_base36(number)
    if style is NumberFormat.ALPHA_UPPER:
        return to_base36(number).upper()
    if style is NumberFormat.ROMAN_LOWER:
        return to_roman(number).lower()
    if style is NumberFormat.ROMAN_UPPER:
        return to_roman(number)
    return str(number)
