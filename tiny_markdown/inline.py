"""Inline constructs: links, emphasis and code spans, fenced code, list bullets."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .constants import (
    BOLD,
    BULLET,
    CODE,
    CODE_MARKER,
    LINK_ARROW,
    LINK_MARKER,
    LIST_MARKER,
    SPAN_MARKERS,
    STRIKE,
    UNDERLINE,
)
from .matcher import find_closing_run, find_fence_closer, index_of
from .models import DelimiterRun, Palette, ScanContext, StylePair
from .text import (
    char_at,
    count_line_breaks,
    is_inline_space,
    is_new_line,
    is_space,
    line_end,
    skip_new_lines,
    slice_text,
    trim_end,
)

if TYPE_CHECKING:
    from .renderer import Renderer


def style_for(marker: str, palette: Palette) -> StylePair:
    """Return the style pair a span marker stands for.

    Raises:
        KeyError: If `marker` is not a span marker.
    """
    return {
        "*": BOLD,
        "_": UNDERLINE,
        "~": STRIKE,
        "-": palette.dim,
        "`": CODE,
    }[marker]


def render_link(renderer: Renderer, ctx: ScanContext, index: int) -> int | None:
    """Render ``[title](url)`` as the title followed by a dimmed arrow and URL.

    Both brackets and parentheses must close on the same line. The title must
    be non-empty and must not end with whitespace.

    Examples:
        "[Title](http://x)"  # "Title" DIM " → " "http://x" /DIM
        "[Title ](http://x)"  # literal
    """
    text = ctx.text
    close = index_of(text, "]", index + 1, break_on_line=True)
    if close is None or close == index + 1 or is_space(text[close - 1]):
        return None
    if char_at(text, close + 1) != "(":
        return None
    end = index_of(text, ")", close + 2, break_on_line=True)
    if end is None:
        return None

    renderer.flush(ctx, index)
    emitter = renderer.emitter
    dim = renderer.palette.dim
    emitter.write(slice_text(text, index + 1, close))
    emitter.open(dim)
    emitter.write(LINK_ARROW)
    emitter.write(slice_text(text, close + 2, end))
    emitter.close(dim)
    return end + 1


def render_span(renderer: Renderer, ctx: ScanContext, index: int) -> int | None:
    """Handle a span marker: ``*``, ``_``, ``~``, ``-`` or a backtick.

    Markers other than the backtick only count after whitespace or at the
    start of the text. The repeat count of the opening run must be matched by
    the closer, so ``*bold*`` and ``**bold**`` render the same way.
    """
    text = ctx.text
    marker = text[index]
    if marker != CODE_MARKER and index > 0 and not is_space(text[index - 1]):
        return None

    run = DelimiterRun.scan(text, index)

    if marker == CODE_MARKER and run.count > 1:
        return _render_fence(renderer, ctx, run)

    if run.end < len(text) and not is_space(text[run.end]):
        return _render_inline_span(renderer, ctx, run)

    if marker == LIST_MARKER and not ctx.nested:
        return _render_bullet(renderer, ctx, index)

    return None


def _render_fence(renderer: Renderer, ctx: ScanContext, run: DelimiterRun) -> int | None:
    text = ctx.text
    # the rest of the opening line is an info string and is dropped
    body_start = line_end(text, run.end)
    closer = find_fence_closer(text, run.chunk, body_start)
    if closer is None:
        return None

    emitter = renderer.emitter
    pending = text[ctx.pending_start : run.start]
    trimmed = trim_end(pending)
    emitter.write(trimmed)
    if run.start > 0:
        emitter.new_line(2 if count_line_breaks(pending[len(trimmed) :]) > 1 else 1)

    body_start = skip_new_lines(text, body_start)
    emitter.multiline(trim_end(text[body_start:closer]))
    return closer + run.count


def _render_inline_span(renderer: Renderer, ctx: ScanContext, run: DelimiterRun) -> int | None:
    text = ctx.text
    if ctx.known_unclosed(run.chunk, run.end):
        return None
    closer = find_closing_run(text, run.chunk, run.end)
    if closer is None:
        ctx.unclosed[run.chunk] = (run.end, line_end(text, run.end))
        return None

    renderer.flush(ctx, run.start)
    emitter = renderer.emitter
    style = style_for(run.marker, renderer.palette)
    content = text[run.end : closer]
    emitter.open(style)
    if run.marker == CODE_MARKER:
        emitter.write(content)
    else:
        renderer.render_nested(content, ctx.depth + 1)
    emitter.close(style)
    return closer + run.count


def _render_bullet(renderer: Renderer, ctx: ScanContext, index: int) -> int | None:
    text = ctx.text
    back = index - 1
    while back >= 0 and is_inline_space(text[back]):
        back -= 1
    if back >= 0 and not is_new_line(text[back]):
        return None

    # the indentation is still pending and is written as is
    renderer.flush(ctx, index)
    renderer.emitter.write(BULLET)
    return index + 1


HANDLERS = {LINK_MARKER: render_link}
HANDLERS.update({marker: render_span for marker in SPAN_MARKERS})
