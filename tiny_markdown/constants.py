"""Constants used across the tiny-markdown package."""

from __future__ import annotations

from .config import RenderConfig
from .models import Palette, StylePair

DEFAULT_CONFIG = RenderConfig()
DEFAULT_MAX_INPUT_SIZE = DEFAULT_CONFIG.max_input_size

# Glyphs and single control sequences
BULLET = "•"
CLEAR_EOL = "\x1b[K"
RESET = "\x1b[0m"
QUOTE = "\x1b[100m \x1b[49m"
LINK_ARROW = " → "

# Open/close pairs
BOLD = StylePair("\x1b[1m", "\x1b[22m")
CODE = StylePair("\x1b[97;100m", "\x1b[39;49m")
HEADER = StylePair("\x1b[7m", "\x1b[27m")
STRIKE = StylePair("\x1b[9m", "\x1b[29m")
UNDERLINE = StylePair("\x1b[4m", "\x1b[24m")

# Platform variants
POSIX_PALETTE = Palette(dim=StylePair("\x1b[2m", "\x1b[22m"), new_line="\n")
WINDOWS_PALETTE = Palette(dim=StylePair("\x1b[90m", "\x1b[37m"), new_line="\r\n")
PALETTES = {"posix": POSIX_PALETTE, "windows": WINDOWS_PALETTE}

# Markers
LINK_MARKER = "["
QUOTE_MARKER = ">"
HEADER_MARKER = "#"
LIST_MARKER = "*"
CODE_MARKER = "`"
SPAN_MARKERS = frozenset("*_~-`")
TRIGGER_CHARS = frozenset("[>#") | SPAN_MARKERS

USAGE = """
# Tiny Markdown

 *usage*

```
  tmd 'some *markdown*'
  tmd file.md
  cat file.md | tmd
```

 -render markdown straight to the terminal-

"""


def palette_for(platform: str) -> Palette:
    """Return the output palette for a platform variant.

    Args:
        platform: ``"posix"`` or ``"windows"``.

    Returns:
        Palette: Dim sequences and newline literal for the platform.

    Raises:
        KeyError: If the platform is unknown.
    """
    return PALETTES[platform]
