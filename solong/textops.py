"""String building helpers: splitting, bounded copies, trimming and mapping.

Bounded copy and concatenation mirror the classic ``strlcpy``/``strlcat``
contract. They return the resulting text together with the length the
operation tried to create, which makes truncation easy to detect.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple


def _terminated(text: str) -> str:
    """Return ``text`` up to (not including) its first NUL character."""
    return text.split("\0", 1)[0]


def split(text: str, separator: str) -> List[str]:
    """Split ``text`` on ``separator``, dropping empty segments."""
    if len(separator) != 1:
        raise ValueError(f"separator must be a single character, got {separator!r}")
    return [segment for segment in _terminated(text).split(separator) if segment]


def strlcpy(source: str, size: int) -> Tuple[str, int]:
    """Copy ``source`` into a buffer of ``size`` characters including NUL.

    Returns the copied text and the full length of ``source``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    source = _terminated(source)
    return source[: max(size - 1, 0)], len(source)


def strlcat(destination: str, source: str, size: int) -> Tuple[str, int]:
    """Append ``source`` to ``destination`` within a buffer of ``size``.

    Returns the resulting text and the length the result was meant to have:
    ``len(source)`` plus the smaller of ``size`` and ``len(destination)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    destination = _terminated(destination)
    source = _terminated(source)
    room = max(size - len(destination) - 1, 0)
    total = len(source) + min(size, len(destination))
    return destination + source[:room], total


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    mapped = "".join(func(index, char) for index, char in enumerate(_terminated(text)))
    return _terminated(mapped)


def striteri(text: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Visit every character with its index.

    ``func`` may return a replacement character, or ``None`` to keep the
    character as it is. The resulting string is returned.
    """
    result = []
    for index, char in enumerate(_terminated(text)):
        replacement = func(index, char)
        result.append(char if replacement is None else replacement)
    return "".join(result)


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if text is None or charset is None:
        raise TypeError("text and charset must be strings")
    return _terminated(text).strip(_terminated(charset))


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _terminated(text)
    if start >= len(text):
        return ""
    return text[start : start + length]