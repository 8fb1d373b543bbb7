"""Character classification and trimming helpers."""

from __future__ import annotations

NEW_LINE_CHARS = "\n\r"
INLINE_SPACE_CHARS = " \t"
SPACE_CHARS = INLINE_SPACE_CHARS + NEW_LINE_CHARS + "\f\v"


def is_new_line(char: str) -> bool:
    return char != "" and char in NEW_LINE_CHARS


def is_inline_space(char: str) -> bool:
    return char != "" and char in INLINE_SPACE_CHARS


def is_space(char: str) -> bool:
    """Return True for inline spaces, line breaks, form feeds and vertical tabs.

    The empty string (an out-of-range read through `char_at`) is not a space.
    """
    return char != "" and char in SPACE_CHARS


def char_at(text: str, index: int) -> str:
    """Return the character at `index`, or an empty string when out of range.

    Examples:
        char_at("ab", 1)  # "b"
        char_at("ab", 2)  # ""
    """
    if 0 <= index < len(text):
        return text[index]
    return ""


def at_line_start(text: str, index: int) -> bool:
    """Determine whether `index` is at offset zero or right after a line break."""
    return index == 0 or is_new_line(char_at(text, index - 1))


def slice_text(text: str, start: int, end: int) -> str:
    """Return the region ``[start, end)`` of `text`, clamped to its bounds.

    Examples:
        slice_text("[title](url)", 1, 6)  # "title"
    """
    start = max(start, 0)
    end = min(end, len(text))
    if start >= end:
        return ""
    return text[start:end]


def trim_start(text: str) -> str:
    return text.lstrip(SPACE_CHARS)


def trim_end(text: str) -> str:
    return text.rstrip(SPACE_CHARS)


def trim(text: str) -> str:
    return trim_end(trim_start(text))


def line_end(text: str, start: int) -> int:
    """Return the offset of the first line break at or after `start`.

    Returns the text length when no line break follows.
    """
    end = text.find("\n", start)
    if end == -1:
        end = len(text)
    carriage = text.find("\r", start, end)
    return end if carriage == -1 else carriage


def skip_new_lines(text: str, start: int) -> int:
    """Return the offset of the first character at or after `start` that is not a line break."""
    index = start
    while index < len(text) and is_new_line(text[index]):
        index += 1
    return index


def count_line_breaks(text: str) -> int:
    """Count line breaks in `text`, a ``\\r\\n`` pair counting once.

    Examples:
        count_line_breaks("a\\r\\n\\nb")  # 2
    """
    return text.count("\n") + text.count("\r") - text.count("\r\n")
