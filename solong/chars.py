"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

_WHITESPACE = frozenset({9, 10, 11, 12, 13, 32})


def _code(c: int | str) -> int:
    """Return the character code of ``c``, given as an int or a one-character str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return c


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return 48 <= _code(c) <= 57


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def _shift(c: int | str, low: int, high: int, delta: int) -> int | str:
    code = _code(c)
    if low <= code <= high:
        code += delta
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    return _shift(c, 65, 90, 32)


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    return _shift(c, 97, 122, -32)


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping leading whitespace.

    At most one sign is accepted; parsing stops at the first non-digit.
    Text without a number yields 0.
    """
    pos = 0
    end = len(text)
    while pos < end and ord(text[pos]) in _WHITESPACE:
        pos += 1
    negative = False
    if pos < end and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    start = pos
    while pos < end and "0" <= text[pos] <= "9":
        pos += 1
    value = int(text[start:pos]) if pos > start else 0
    return -value if negative else value


def itoa(n: int) -> str:
    """Format an integer in decimal, with a leading minus sign if negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)