"""Delimiter matching over source text."""

from __future__ import annotations

from .text import is_space, line_end


def index_of(text: str, chunk: str, start: int, break_on_line: bool = False) -> int | None:
    """Find the next occurrence of `chunk` at or after `start`.

    Args:
        text: Text to search.
        chunk: Exact sequence to look for, such as ``"]"`` or ``"**"``.
        start: Zero-based offset where the search begins.
        break_on_line: When True, the search gives up at the first line break.

    Returns:
        int | None: Offset of the match, or None when there is none.

    Examples:
        index_of("a *b* c", "*", 3)  # 4
        index_of("a *b\\nc*", "*", 3, break_on_line=True)  # None
    """
    start = max(start, 0)
    stop = line_end(text, start) if break_on_line else len(text)
    found = text.find(chunk, start, stop)
    return None if found == -1 else found


def find_closing_run(text: str, chunk: str, start: int) -> int | None:
    """Find the closer of an inline span on the current line.

    Candidates directly preceded by whitespace cannot close a span, so the
    search continues past them. This keeps ``*one* *two*`` as two spans.

    Args:
        text: Text to search.
        chunk: The opening delimiter run, such as ``"*"`` or ``"__"``.
        start: Offset right after the opening run.

    Returns:
        int | None: Offset of the closing run, or None when the line has none.

    Examples:
        find_closing_run("*a * b*", "*", 1)  # 6
    """
    stop = line_end(text, start)
    position = start
    while True:
        end = text.find(chunk, position, stop)
        if end == -1:
            return None
        if end > 0 and is_space(text[end - 1]):
            position = end + 1
            continue
        return end


def find_fence_closer(text: str, chunk: str, start: int) -> int | None:
    """Find the closing run of a fenced code block anywhere after `start`."""
    return index_of(text, chunk, start)
