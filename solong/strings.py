"""String helpers: searching, comparing, slicing, splitting and bounded copies.

Functions that take text work on ``str``. ``strlcpy`` and ``strlcat`` work on
NUL-terminated byte buffers, because they write into a buffer of fixed size.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, TypeVar, Union

T = TypeVar("T")

ByteString = Union[bytes, bytearray, memoryview]


def _char(c: Union[int, str]) -> str:
    """Normalise ``c`` to a one-character string.

    Integer codes are reduced to a byte value.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return chr(c & 0xFF)


def _cstr_len(buf: ByteString) -> int:
    """Length of the NUL-terminated string held in ``buf``."""
    data = bytes(buf)
    end = data.find(0)
    return len(data) if end == -1 else end


def strlen(s: Union[str, ByteString]) -> int:
    """Length of ``s``; for byte buffers, the number of bytes before the first NUL."""
    if isinstance(s, str):
        return len(s)
    return _cstr_len(s)


def strchr(s: str, c: Union[int, str]) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``s``, or None.

    Searching for the NUL character yields ``len(s)``, the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index == -1 else index


def strrchr(s: str, c: Union[int, str]) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``s``, or None.

    Searching for the NUL character yields ``len(s)``, the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index == -1 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference between the codes of the first differing
    characters, a missing character counting as 0, or 0 if they match.
    """
    for a, b in zip(s1[:n], s2[:n]):
        if a != b:
            return ord(a) - ord(b)
    if n <= 0:
        return 0
    shorter = min(len(s1), len(s2), n)
    if shorter == n:
        return 0
    tail1 = ord(s1[shorter]) if shorter < len(s1) else 0
    tail2 = ord(s2[shorter]) if shorter < len(s2) else 0
    return tail1 - tail2


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` in ``big``, matching only within the first ``length`` characters.

    An empty ``little`` is found at index 0.
    """
    if not little:
        return 0
    if length <= 0:
        return None
    index = big[:length].find(little)
    return None if index == -1 else index


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return "".join(s)


def substr(s: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``s`` starting at ``start``.

    A start beyond the end of ``s`` yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``s``."""
    return s.strip(charset) if charset else s


def split(s: str, sep: Union[int, str]) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    ch = _char(sep)
    return [word for word in s.split(ch) if word]


def strmapi(s: str, func: Optional[Callable[[int, str], str]]) -> str:
    """Build a new string from ``func(index, char)`` for each character of ``s``.

    Without a function, ``s`` is returned as it is.
    """
    if func is None:
        return s
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(buf: MutableSequence[T], func: Callable[[int, T], Optional[T]]) -> None:
    """Call ``func(index, item)`` on each item of ``buf`` in place.

    A value returned by ``func`` replaces the item; None leaves it unchanged.
    """
    for index, item in enumerate(list(buf)):
        replacement = func(index, item)
        if replacement is not None:
            buf[index] = replacement


def strlcpy(dst: bytearray, src: ByteString, size: int) -> int:
    """Copy the string in ``src`` into ``dst``, writing at most ``size`` bytes.

    The copy is always NUL-terminated when ``size`` is positive. Returns the
    length of the string in ``src``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    src_len = _cstr_len(src)
    if size == 0:
        return src_len
    count = min(src_len, size - 1)
    if count >= len(dst):
        raise ValueError(f"destination of size {len(dst)} cannot hold {count + 1} bytes")
    dst[:count] = bytes(src[:count])
    dst[count] = 0
    return src_len


def strlcat(dst: bytearray, src: ByteString, size: int) -> int:
    """Append the string in ``src`` to the string in ``dst`` within ``size`` bytes.

    Returns the length of the string it tried to create:
    ``min(size, len(dst string)) + len(src string)``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    src_len = _cstr_len(src)
    if size < 1:
        return src_len + size
    dst_len = _cstr_len(dst)
    count = max(0, min(src_len, size - 1 - dst_len))
    end = dst_len + count
    if end >= len(dst):
        raise ValueError(f"destination of size {len(dst)} cannot hold {end + 1} bytes")
    dst[dst_len:end] = bytes(src[:count])
    dst[end] = 0
    return min(size, dst_len) + src_len