"""Line-structural constructs: blockquotes and headers.

Both are recognized only by a top-level scan and only at the start of a line.
Handlers return the offset where scanning resumes, or None when the text at
`index` is not the construct.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .constants import BOLD, HEADER, HEADER_MARKER, QUOTE, QUOTE_MARKER
from .models import DelimiterRun, ScanContext
from .text import at_line_start, char_at, is_inline_space, is_space, line_end, skip_new_lines, trim

if TYPE_CHECKING:
    from .renderer import Renderer


def render_blockquote(renderer: Renderer, ctx: ScanContext, index: int) -> int | None:
    """Replace a leading ``>`` run with quote glyphs.

    Spaces between markers are accepted, so ``>>`` and ``> >`` both produce
    two glyphs. The run must be followed by an inline space, which is left in
    the pending text.

    Examples:
        "> quoted"  # QUOTE + " quoted"
        ">no space"  # literal
    """
    text = ctx.text
    if ctx.nested or not at_line_start(text, index):
        return None

    end = index + 1
    while end < len(text) and (text[end] == QUOTE_MARKER or is_inline_space(text[end])):
        end += 1
    while is_inline_space(text[end - 1]):
        end -= 1

    if not is_inline_space(char_at(text, end)):
        return None

    renderer.flush(ctx, index)
    for char in text[index:end]:
        if not is_inline_space(char):
            renderer.emitter.write(QUOTE)
    return end


def render_header(renderer: Renderer, ctx: ScanContext, index: int) -> int | None:
    """Render a ``#`` header line followed by a single newline.

    A level 1 header is rendered bold inside the header style; deeper levels
    use the header style alone. Every line break right after the header is
    consumed, so blank lines below a header collapse into the one newline
    written here.

    Examples:
        "# Title\\n\\nNext"  # HEADER + BOLD "Title" /BOLD /HEADER "\\n" "Next"
        "#hashtag"  # literal
    """
    text = ctx.text
    if ctx.nested or not at_line_start(text, index):
        return None

    run = DelimiterRun.scan(text, index)
    if run.end < len(text) and not is_space(text[run.end]):
        return None

    title_end = line_end(text, run.end)
    title = trim(text[run.end : title_end])

    renderer.flush(ctx, index)
    emitter = renderer.emitter
    emitter.open(HEADER)
    if run.count == 1:
        emitter.open(BOLD)
        emitter.write(title)
        emitter.close(BOLD)
    else:
        emitter.write(title)
    emitter.close(HEADER)
    emitter.new_line()

    return skip_new_lines(text, title_end)


HANDLERS = {
    QUOTE_MARKER: render_blockquote,
    HEADER_MARKER: render_header,
}
