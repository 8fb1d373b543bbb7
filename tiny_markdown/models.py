"""Data models for tiny-markdown."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class StylePair:
    """Open/close control sequences for one terminal style.

    Attributes:
        start: Sequence switching the style on.
        end: Sequence switching the style off.
    """

    start: str
    end: str


@dataclass(frozen=True)
class Palette:
    """Platform-dependent part of the output format.

    Attributes:
        dim: Style pair used for dim text and link targets.
        new_line: Literal line break written after headers and before code blocks.
    """

    dim: StylePair
    new_line: str


@dataclass(frozen=True)
class DelimiterRun:
    """A maximal run of one repeated marker character.

    Attributes:
        marker: The repeated character.
        start: Zero-based offset of the first marker.
        count: Number of consecutive markers (the repeat count).

    Examples:
        DelimiterRun.scan("**bold**", 0)  # DelimiterRun("*", 0, 2)
    """

    marker: str
    start: int
    count: int

    @classmethod
    def scan(cls, text: str, start: int) -> DelimiterRun:
        marker = text[start]
        end = start + 1
        while end < len(text) and text[end] == marker:
            end += 1
        return cls(marker, start, end - start)

    @property
    def end(self) -> int:
        return self.start + self.count

    @property
    def chunk(self) -> str:
        return self.marker * self.count


@dataclass
class ScanContext:
    """State of a single scanner invocation.

    A new context is created for every call, nested ones included.

    Attributes:
        text: Text being scanned.
        nested: True while scanning the content of an inline span.
        depth: Number of enclosing inline spans.
        pending_start: Offset where the not yet emitted literal text begins.
        unclosed: For each delimiter chunk, the ``(start, line_end)`` region
            already known to hold no closer of that chunk.
    """

    text: str
    nested: bool = False
    depth: int = 0
    pending_start: int = 0
    unclosed: dict[str, tuple[int, int]] = field(default_factory=dict)

    def known_unclosed(self, chunk: str, start: int) -> bool:
        """Tell whether a closer search for `chunk` from `start` already failed.

        A search that finds nothing from one offset finds nothing from any
        later offset on the same line.
        """
        region = self.unclosed.get(chunk)
        return region is not None and region[0] <= start <= region[1]
