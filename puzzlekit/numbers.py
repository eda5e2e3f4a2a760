"""Number puzzles: numeral systems, powers, square sums and integer parsing."""

from __future__ import annotations

import math
from itertools import takewhile

__all__ = [
    "int_to_roman",
    "convert_to_title",
    "is_power_of_two",
    "is_power_of_three",
    "is_power_of_four",
    "num_squares",
    "smallest_good_base",
    "my_atoi",
]

_ROMAN = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

_INT32_MAX = 2**31 - 1
_INT32_MIN = -(2**31)
_UINT64_LIMIT = 2**64

# Largest power of three that fits in a signed 32-bit integer.
_MAX_POWER_OF_THREE = 3**19


def int_to_roman(num: int) -> str:
    """Write ``num`` as a Roman numeral using subtractive notation."""
    parts = []
    for value, symbol in _ROMAN:
        count, num = divmod(num, value) if num >= value else (0, num)
        parts.append(symbol * count)
    return "".join(parts)


def convert_to_title(column_number: int) -> str:
    """Return the spreadsheet column title (A, B, ..., Z, AA, ...) for a number."""
    if column_number < 0:
        raise ValueError("column number must not be negative")
    letters = []
    while column_number > 26:
        rem = column_number % 26
        letters.append(_title_letter(rem))
        column_number = (column_number - (rem or 26)) // 26
    letters.append(_title_letter(column_number))
    return "".join(reversed(letters))


def _title_letter(value: int) -> str:
    """Letter for a remainder in 0..26, where both 0 and 26 stand for Z."""
    return "Z" if value in (0, 26) else chr(ord("A") + value - 1)


def is_power_of_two(n: int) -> bool:
    """True if ``n`` is a positive power of two."""
    return n > 0 and bin(n).count("1") == 1


def is_power_of_three(n: int) -> bool:
    """True if ``n`` is a power of three within the signed 32-bit range."""
    return n > 0 and _MAX_POWER_OF_THREE % n == 0


def is_power_of_four(n: int) -> bool:
    """True if ``n`` is a positive power of four."""
    if n <= 0 or n == 2 or n & (n - 1):
        return False
    return n % 3 == 1


def _is_perfect_square(x: int) -> bool:
    return x >= 0 and math.isqrt(x) ** 2 == x


def _is_four_squares_form(x: int) -> bool:
    """True if ``x`` has the form 4^k * (8m + 7)."""
    while x % 4 == 0:
        x //= 4
    return x % 8 == 7


def num_squares(n: int) -> int:
    """Least number of perfect squares that sum to ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    if _is_perfect_square(n):
        return 1
    if _is_four_squares_form(n):
        return 4
    i = 1
    while i * i < n:
        if _is_perfect_square(n - i * i):
            return 2
        i += 1
    return 3


def smallest_good_base(n: str) -> str:
    """Smallest base ``k >= 2`` in which the number ``n`` is written as all ones."""
    value = int(n)
    if not 0 < value < _UINT64_LIMIT:
        raise ValueError(f"n out of range: {n!r}")
    as_float = float(value)
    longest = int(math.log2(as_float))
    for m in range(longest, 1, -1):
        k = int(as_float ** (1.0 / m))
        if sum(k**power for power in range(m + 1)) == value:
            return str(k)
    return str(value - 1)


def my_atoi(s: str) -> int:
    """Parse a leading signed integer, clamping it to the signed 32-bit range."""
    text = s.lstrip(" ")
    if not text:
        return 0
    sign = 1
    first = text[0]
    if first == "-":
        sign, text = -1, text[1:]
    elif first == "+":
        text = text[1:]
    elif not "0" <= first <= "9":
        return 0

    result = 0
    for char in takewhile(lambda c: "0" <= c <= "9", text):
        result = result * 10 + sign * (ord(char) - ord("0"))
        if result > _INT32_MAX:
            return _INT32_MAX
        if result < _INT32_MIN:
            return _INT32_MIN
    return result