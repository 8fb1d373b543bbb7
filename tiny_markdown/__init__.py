"""
tiny-markdown: Markdown rendered straight to the terminal.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    tmd README.md
    tmd 'some *markdown*'
    cat README.md | tmd

Library Usage:
    from tiny_markdown import render, render_to_string

    render("# Title\\n\\nsome *bold* text")
    styled = render_to_string("`code` and ~strike~")
"""

from .config import ConfigError, RenderConfig
from .emitter import Emitter
from .exceptions import InputTooLargeError, SourceDecodeError, SourceError
from .renderer import Renderer, render, render_to_string

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "render",
    "render_to_string",
    "Renderer",
    "Emitter",
    # Configuration
    "RenderConfig",
    "ConfigError",
    # Exceptions
    "SourceError",
    "InputTooLargeError",
    "SourceDecodeError",
    # Version
    "__version__",
]
