"""Character classification and string search helpers with C string semantics.

Strings are treated as NUL-terminated: anything after the first ``"\\0"``
is ignored by the search and comparison functions. Searches return an
index into the text, or ``None`` when nothing is found.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Union

CharLike = Union[int, str]

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = "0123456789"


def _code(value: CharLike) -> int:
    """Return the integer code for a character or an integer."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return ord(value)
    return int(value)


def _terminated(text: str) -> str:
    """Return ``text`` up to (not including) its first NUL character."""
    return text.split("\0", 1)[0]


def _byte_char(value: CharLike) -> str:
    """Return the character for ``value`` reduced to an unsigned byte."""
    if isinstance(value, str):
        _code(value)
        return value
    return chr(int(value) & 0xFF)


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace; 0 if none."""
    text = _terminated(text)
    position = 0
    while position < len(text) and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    if position < len(text) and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    start = position
    while position < len(text) and text[position] in _DIGITS:
        position += 1
    digits = text[start:position]
    if not digits:
        return 0
    return sign * int(digits)


def itoa(number: int) -> str:
    """Return the decimal representation of ``number``."""
    number = int(number)
    magnitude = abs(number)
    digits = []
    while magnitude:
        magnitude, remainder = divmod(magnitude, 10)
        digits.append(_DIGITS[remainder])
    if not digits:
        return "0"
    if number < 0:
        digits.append("-")
    return "".join(reversed(digits))


def is_alpha(code: CharLike) -> bool:
    """True for ASCII letters."""
    value = _code(code)
    return ord("a") <= value <= ord("z") or ord("A") <= value <= ord("Z")


def is_digit(code: CharLike) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(code) <= ord("9")


def is_alnum(code: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(code) or is_digit(code)


def is_ascii(code: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(code) <= 127


def is_print(code: CharLike) -> bool:
    """True for printable ASCII characters (space to tilde)."""
    return 32 <= _code(code) <= 126


def _convert_case(code: CharLike, low: str, high: str, shift: int) -> CharLike:
    value = _code(code)
    if ord(low) <= value <= ord(high):
        value += shift
    return chr(value) if isinstance(code, str) else value


def to_lower(code: CharLike) -> CharLike:
    """Lower-case an ASCII letter; other values come back unchanged."""
    return _convert_case(code, "A", "Z", 32)


def to_upper(code: CharLike) -> CharLike:
    """Upper-case an ASCII letter; other values come back unchanged."""
    return _convert_case(code, "a", "z", -32)


def strchr(text: str, char: CharLike) -> Optional[int]:
    """Index of the first ``char`` in ``text``; the NUL char finds the end."""
    text = _terminated(text)
    target = _byte_char(char)
    if target == "\0":
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: str, char: CharLike) -> Optional[int]:
    """Index of the last ``char`` in ``text``; the NUL char finds the end."""
    text = _terminated(text)
    target = _byte_char(char)
    if target == "\0":
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters; return the first difference."""
    if count <= 0:
        return 0
    left = _terminated(first)[:count]
    right = _terminated(second)[:count]
    for a, b in zip_longest(left, right, fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` within the first ``length`` chars of ``haystack``."""
    needle = _terminated(needle)
    if not needle:
        return 0
    window = _terminated(haystack)[: max(length, 0)]
    index = window.find(needle)
    return None if index < 0 else index