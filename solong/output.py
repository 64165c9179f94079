"""Writing characters, strings and numbers, and a small printf.

The printf supports the conversions ``c s p d i u x X %``. Integer
arguments are reduced to 32-bit C ``int``/``unsigned int`` values and
pointers to 64-bit values, as a C program would see them.
"""

from __future__ import annotations

import re
import sys
from typing import Any, List, Optional, TextIO, Tuple

from solong.strings import itoa, to_upper

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF
_CONSUMING = frozenset("cspdiuxX")
_CONVERSION = re.compile(r"%(.?)", re.DOTALL)


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _signed32(number: int) -> int:
    number = int(number) & _UINT32
    return number - (1 << 32) if number >= (1 << 31) else number


def put_char(char: str, stream: Optional[TextIO] = None) -> None:
    """Write a single character."""
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _stream(stream).write(char)


def put_str(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` up to its first NUL character."""
    _stream(stream).write(text.split("\0", 1)[0])


def put_endl(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline."""
    put_str(text, stream)
    _stream(stream).write("\n")


def put_number(number: int, stream: Optional[TextIO] = None) -> None:
    """Write ``number`` as a 32-bit signed decimal integer."""
    _stream(stream).write(itoa(_signed32(number)))


def unsigned_itoa(number: int) -> str:
    """Decimal text of ``number`` taken as a 32-bit unsigned integer."""
    return str(int(number) & _UINT32)


def hexa_itoa(number: int) -> str:
    """Lower-case hexadecimal text of ``number`` as a 64-bit unsigned value."""
    return format(int(number) & _UINT64, "x")


def get_address(pointer: Optional[int]) -> str:
    """Render a pointer value as ``0x...``, or ``(nil)`` for a null pointer."""
    if not pointer:
        return "(nil)"
    return "0x" + hexa_itoa(pointer)


def _char_text(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def format_conversion(kind: str, value: Any = None) -> Optional[str]:
    """Render one conversion; ``None`` for an unknown conversion letter."""
    if kind == "c":
        return _char_text(value)
    if kind == "s":
        return "(null)" if value is None else str(value).split("\0", 1)[0]
    if kind == "p":
        return get_address(value)
    if kind in ("d", "i"):
        return itoa(_signed32(value))
    if kind == "u":
        return unsigned_itoa(value)
    if kind == "x":
        return hexa_itoa(int(value) & _UINT32)
    if kind == "X":
        return "".join(to_upper(c) for c in hexa_itoa(int(value) & _UINT32))
    if kind == "%":
        return "%"
    return None


def _render(fmt: str, args: Tuple[Any, ...]) -> Tuple[str, int]:
    """Return the rendered text and the count printf reports for it."""
    pieces: List[str] = []
    unknown = 0
    remaining = iter(args)
    start = 0
    for match in _CONVERSION.finditer(fmt):
        pieces.append(fmt[start : match.start()])
        kind = match.group(1)
        value = None
        if kind in _CONSUMING:
            try:
                value = next(remaining)
            except StopIteration:
                raise TypeError(f"not enough arguments for format {fmt!r}") from None
        text = format_conversion(kind, value)
        if text is None:
            unknown += 1
        else:
            pieces.append(text)
        start = match.end()
    pieces.append(fmt[start:])
    text = "".join(pieces)
    return text, len(text) + unknown


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``."""
    return _render(fmt, args)[0]


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text and return the number of characters counted.

    An unknown conversion writes nothing but still counts as one character.
    """
    text, count = _render(fmt, args)
    _stream(stream).write(text)
    return count