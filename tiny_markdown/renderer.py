"""Single-pass Markdown to terminal renderer."""

from __future__ import annotations

import io
import sys
from typing import TextIO

from . import blocks, inline
from .config import RenderConfig, normalize_config, validate_config
from .constants import palette_for
from .emitter import Emitter
from .models import Palette, ScanContext
from .text import slice_text

HANDLERS = {**blocks.HANDLERS, **inline.HANDLERS}


class Renderer:
    """Scan Markdown text and write styled output through an `Emitter`.

    The scanner walks the text once, left to right. Characters that do not
    start a construct accumulate as pending literal text, which is flushed
    right before any styled output and at the end of the scan. Inline spans
    are rendered by scanning their content again with the nesting flag set.

    Args:
        emitter: Destination of the rendered output.
        config: Rendering configuration; defaults to a new `RenderConfig`.

    Examples:
        renderer = Renderer(Emitter(sys.stdout, palette_for("posix")))
        renderer.render("some *markdown*")
    """

    def __init__(self, emitter: Emitter, config: RenderConfig | None = None):
        self.emitter = emitter
        self.config = config or RenderConfig()

    @property
    def palette(self) -> Palette:
        return self.emitter.palette

    def render(self, text: str, nested: bool = False, depth: int = 0) -> None:
        """Render `text`.

        Args:
            text: Complete Markdown text.
            nested: True when `text` is the content of an inline span; headers,
                blockquotes and list bullets are then not recognized.
            depth: Number of enclosing inline spans.
        """
        ctx = ScanContext(text=text, nested=nested, depth=depth)
        index = 0
        while index < len(text):
            handler = HANDLERS.get(text[index])
            resume = handler(self, ctx, index) if handler is not None else None
            if resume is None:
                index += 1
            else:
                ctx.pending_start = index = resume
        self.flush(ctx, len(text))

    def render_nested(self, text: str, depth: int) -> None:
        """Render the content of an inline span.

        Content beyond `max_depth` nested spans is written verbatim.
        """
        if depth > self.config.max_depth:
            self.emitter.write(text)
            return
        self.render(text, nested=True, depth=depth)

    def flush(self, ctx: ScanContext, end: int) -> None:
        """Write the pending literal text up to `end`."""
        self.emitter.write(slice_text(ctx.text, ctx.pending_start, end))
        ctx.pending_start = end


def render(
    text: str,
    nested: bool = False,
    *,
    sink: TextIO | None = None,
    config: RenderConfig | None = None,
) -> None:
    """Render Markdown text to a terminal stream.

    The final reset sequence is not written; callers that own the terminal
    write it once they are done.

    Args:
        text: Complete Markdown text.
        nested: Disable line-structural constructs, as for span content.
        sink: Output stream; defaults to `sys.stdout`.
        config: Rendering configuration; defaults to a new `RenderConfig`.

    Raises:
        ConfigError: If the configuration fails validation.

    Examples:
        render("# Title\\n\\nsome *bold* text")
    """
    config = normalize_config(config or RenderConfig())
    validate_config(config)
    emitter = Emitter(sink if sink is not None else sys.stdout, palette_for(config.platform))
    Renderer(emitter, config).render(text, nested)


def render_to_string(text: str, config: RenderConfig | None = None) -> str:
    """Render Markdown text and return the output as a string.

    Examples:
        render_to_string("*bold*", RenderConfig(platform="posix"))
        # "\\x1b[1mbold\\x1b[22m"
    """
    buffer = io.StringIO()
    render(text, sink=buffer, config=config)
    return buffer.getvalue()
