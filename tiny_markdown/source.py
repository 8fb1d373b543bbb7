"""Input acquisition for the tmd command."""

from __future__ import annotations

import io
import os
import stat
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, TextIO

from .constants import DEFAULT_MAX_INPUT_SIZE, USAGE
from .exceptions import InputTooLargeError, SourceDecodeError

MAX_INPUT_SIZE_ENV_VAR = "TINY_MARKDOWN_MAX_INPUT_SIZE"


@dataclass
class Source:
    """Text to render and where it came from.

    Attributes:
        text: Complete Markdown text.
        kind: One of ``"file"``, ``"stdin"``, ``"literal"`` or ``"usage"``.
    """

    text: str
    kind: str


def get_max_input_size(default: int = DEFAULT_MAX_INPUT_SIZE) -> int:
    """Resolve the maximum allowed input size.

    Args:
        default: Fallback value in bytes when the environment variable is unset.

    Returns:
        int: Maximum allowed input size in bytes.

    Raises:
        ValueError: If the environment value is not a positive integer.

    Examples:
        os.environ["TINY_MARKDOWN_MAX_INPUT_SIZE"] = "204800"
        limit = get_max_input_size(default=102400)
    """
    env_value = os.environ.get(MAX_INPUT_SIZE_ENV_VAR)
    if env_value is None:
        return default

    try:
        max_size = int(env_value)
    except ValueError as error:
        error_message = (
            f"Invalid value for {MAX_INPUT_SIZE_ENV_VAR}: {env_value} (expected positive integer)"
        )
        raise ValueError(error_message) from error

    if max_size <= 0:
        error_message = f"{MAX_INPUT_SIZE_ENV_VAR} must be a positive integer, got {max_size}."
        raise ValueError(error_message)

    return max_size


def collect_file_stat(filepath: Path) -> os.stat_result:
    """Return stat information for a regular file.

    Raises:
        IOError: If the path is inaccessible or not a regular file.
    """
    try:
        stat_result = os.stat(filepath)
    except OSError as error:
        error_message = f"Error accessing {filepath}: {error}"
        raise IOError(error_message) from error

    if not stat.S_ISREG(stat_result.st_mode):
        error_message = f"{filepath} is not a regular file."
        raise IOError(error_message)

    return stat_result


def read_file(filepath: Path, max_size: int = DEFAULT_MAX_INPUT_SIZE) -> str:
    """Read a Markdown file whole, keeping its line breaks as they are.

    Args:
        filepath: Path to the file.
        max_size: Maximum allowed size in bytes.

    Returns:
        str: File content.

    Raises:
        IOError: If the file cannot be accessed or read.
        InputTooLargeError: If the file is larger than `max_size`.
        SourceDecodeError: If the file is not valid UTF-8.

    Examples:
        text = read_file(Path("README.md"))
    """
    stat_result = collect_file_stat(filepath)
    if stat_result.st_size > max_size:
        raise InputTooLargeError(str(filepath), max_size)

    try:
        with open(filepath, "r", encoding="UTF-8", newline="") as file:
            return file.read()
    except UnicodeDecodeError as error:
        raise SourceDecodeError(str(filepath), str(error)) from error
    except (PermissionError, IsADirectoryError, NotADirectoryError) as error:
        error_message = f"Error accessing {filepath}: {error}"
        raise IOError(error_message) from error


def read_stream(
    stream: BinaryIO, max_size: int = DEFAULT_MAX_INPUT_SIZE, origin: str = "stdin"
) -> str:
    """Read a binary stream to its end and decode it as UTF-8.

    Args:
        stream: Binary stream, usually standard input.
        max_size: Maximum allowed size in bytes.
        origin: Name used in error messages.

    Returns:
        str: Decoded content with line breaks preserved.

    Raises:
        InputTooLargeError: If the stream holds more than `max_size` bytes.
        SourceDecodeError: If the content is not valid UTF-8.
    """
    data = stream.read(max_size + 1)
    if len(data) > max_size:
        raise InputTooLargeError(origin, max_size)

    try:
        return data.decode("UTF-8")
    except UnicodeDecodeError as error:
        raise SourceDecodeError(origin, str(error)) from error


def resolve_source(
    arguments: Sequence[str],
    stdin: BinaryIO,
    interactive: bool,
    max_size: int = DEFAULT_MAX_INPUT_SIZE,
    warn: Callable[[str], None] | None = None,
) -> Source:
    """Decide what to render from the command-line arguments and stdin.

    A single argument naming an existing file is read from disk. Any other
    arguments are joined with spaces and rendered as Markdown themselves, so
    a missing file name is simply printed. Without arguments, piped input is
    read; an interactive terminal gets the usage text instead.

    Args:
        arguments: Positional command-line arguments.
        stdin: Binary standard input.
        interactive: True when standard input is a terminal.
        max_size: Maximum allowed input size in bytes.
        warn: Optional callback for non-fatal notices.

    Returns:
        Source: Text to render and its origin.

    Raises:
        IOError: If a file argument cannot be read.
        SourceError: If the input is too large or not valid UTF-8.

    Examples:
        resolve_source(["README.md"], sys.stdin.buffer, sys.stdin.isatty())
        resolve_source(["some", "*markdown*"], sys.stdin.buffer, True)
    """
    if len(arguments) == 1:
        path, kind = _classify_argument(arguments[0])
        if kind == "file":
            return Source(read_file(path, max_size), "file")
        if kind == "directory" and warn is not None:
            warn(f"Warning: {path} is a directory; rendering the argument as text")

    if arguments:
        text = " ".join(arguments)
        if len(text.encode("UTF-8")) > max_size:
            raise InputTooLargeError("argument", max_size)
        return Source(text, "literal")

    if interactive:
        return Source(USAGE, "usage")

    return Source(read_stream(stdin, max_size), "stdin")


def open_output(stream: BinaryIO) -> TextIO:
    """Wrap a binary stream for writing rendered text without newline translation.

    The caller must `detach()` the wrapper once done so that `stream` stays open.
    """
    return io.TextIOWrapper(stream, encoding="UTF-8", newline="", write_through=True)


def _classify_argument(argument: str) -> tuple[Path, str | None]:
    # literal Markdown often makes an unusable path, such as "~strike~"
    path = Path(argument)
    try:
        path = path.expanduser()
        if path.is_file():
            return path, "file"
        if path.is_dir():
            return path, "directory"
    except (OSError, RuntimeError, ValueError):
        return path, None
    return path, None
