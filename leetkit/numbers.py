"""Integer problems: digit reversal and Roman numerals."""

from __future__ import annotations

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

_ROMAN_VALUES: tuple[tuple[int, str], ...] = (
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

# Two-letter tokens are tried before single letters.
_ROMAN_TOKENS: tuple[tuple[str, int], ...] = tuple(
    (symbol, value)
    for symbol, value in sorted(
        ((s, v) for v, s in _ROMAN_VALUES), key=lambda item: -len(item[0])
    )
)


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of x, keeping its sign.

    Returns 0 when the result falls outside the signed 32-bit range.
    """
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    if not _INT32_MIN <= result <= _INT32_MAX:
        return 0
    return result


def int_to_roman(num: int) -> str:
    """Write num as a Roman numeral; zero and negative numbers give ''."""
    parts: list[str] = []
    for value, symbol in _ROMAN_VALUES:
        if num <= 0:
            break
        count, num = divmod(num, value)
        parts.append(symbol * count)
    return "".join(parts)


def roman_to_int(s: str) -> int:
    """Read a Roman numeral and return its value."""
    total = 0
    rest = s
    while rest:
        for symbol, value in _ROMAN_TOKENS:
            if rest.startswith(symbol):
                total += value
                rest = rest[len(symbol):]
                break
        else:
            raise ValueError(f"not a Roman numeral: {s!r}")
    return total