"""Output of literal text and control sequences."""

from __future__ import annotations

import re
from typing import TextIO

from .constants import CLEAR_EOL, CODE, RESET
from .models import Palette, StylePair

_LINE_BREAK = re.compile(r"(\r\n|\r|\n)")


class Emitter:
    """Append text and style sequences to a sink in call order.

    Args:
        sink: Text stream receiving the output. Nothing is ever read back.
        palette: Platform variant for dim sequences and newlines.
    """

    def __init__(self, sink: TextIO, palette: Palette):
        self.sink = sink
        self.palette = palette

    def write(self, text: str) -> None:
        if text:
            self.sink.write(text)

    def open(self, style: StylePair) -> None:
        self.sink.write(style.start)

    def close(self, style: StylePair) -> None:
        self.sink.write(style.end)

    def new_line(self, count: int = 1) -> None:
        self.sink.write(self.palette.new_line * count)

    def reset(self) -> None:
        self.sink.write(RESET)

    def multiline(self, code: str) -> None:
        """Write a fenced code body with a full-width background.

        A clear-to-end-of-line sequence follows every source line, so the
        code background reaches the terminal edge on short lines too. Line
        breaks are written exactly as they appear in `code`.

        Args:
            code: Code block content, without fences.

        Examples:
            emitter.multiline("a\\nb")
            # CODE.start, CLEAR_EOL, "a", CLEAR_EOL, "\\n", "b", CLEAR_EOL, CODE.end
        """
        self.open(CODE)
        self.sink.write(CLEAR_EOL)
        # split() keeps the captured line breaks at odd positions
        for position, piece in enumerate(_LINE_BREAK.split(code)):
            if position % 2:
                self.sink.write(piece)
            else:
                self.write(piece)
                self.sink.write(CLEAR_EOL)
        self.close(CODE)
