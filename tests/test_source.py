from __future__ import annotations

import io
from pathlib import Path

import pytest

from tiny_markdown.constants import USAGE
from tiny_markdown.exceptions import InputTooLargeError, SourceDecodeError, SourceError
from tiny_markdown.source import (
    collect_file_stat,
    get_max_input_size,
    open_output,
    read_file,
    read_stream,
    resolve_source,
)


def test_get_max_input_size_defaults(monkeypatch):
    monkeypatch.delenv("TINY_MARKDOWN_MAX_INPUT_SIZE", raising=False)
    assert get_max_input_size(default=42) == 42


def test_get_max_input_size_reads_environment(monkeypatch):
    monkeypatch.setenv("TINY_MARKDOWN_MAX_INPUT_SIZE", "2048")
    assert get_max_input_size() == 2048


@pytest.mark.parametrize("value", ["invalid", "0", "-5"])
def test_get_max_input_size_rejects_bad_values(monkeypatch, value: str):
    monkeypatch.setenv("TINY_MARKDOWN_MAX_INPUT_SIZE", value)
    with pytest.raises(ValueError, match="TINY_MARKDOWN_MAX_INPUT_SIZE"):
        get_max_input_size()


def test_collect_file_stat_handles_missing_file(tmp_path: Path):
    with pytest.raises(IOError, match="Error accessing"):
        collect_file_stat(tmp_path / "missing.md")


def test_collect_file_stat_rejects_directory(tmp_path: Path):
    with pytest.raises(IOError, match="not a regular file"):
        collect_file_stat(tmp_path)


def test_read_file_keeps_line_breaks(tmp_path: Path):
    target = tmp_path / "doc.md"
    target.write_bytes(b"# T\r\nbody\n")

    assert read_file(target) == "# T\r\nbody\n"


def test_read_file_enforces_size(tmp_path: Path):
    target = tmp_path / "big.md"
    target.write_text("x" * 11, encoding="utf-8")

    with pytest.raises(InputTooLargeError) as excinfo:
        read_file(target, max_size=10)

    assert excinfo.value.limit == 10
    assert "exceeds the maximum allowed size of 10 bytes" in str(excinfo.value)


def test_read_file_rejects_invalid_utf8(tmp_path: Path):
    target = tmp_path / "bad.md"
    target.write_bytes(b"\xff\xfe\xfa")

    with pytest.raises(SourceDecodeError, match="Invalid UTF-8"):
        read_file(target)


def test_read_stream_decodes():
    assert read_stream(io.BytesIO("*héllo*\r\n".encode("utf-8"))) == "*héllo*\r\n"


def test_read_stream_enforces_size():
    with pytest.raises(InputTooLargeError, match="stdin"):
        read_stream(io.BytesIO(b"x" * 5), max_size=4)


def test_read_stream_rejects_invalid_utf8():
    with pytest.raises(SourceError):
        read_stream(io.BytesIO(b"\xc3"))


def test_resolve_source_reads_file(tmp_path: Path):
    target = tmp_path / "doc.md"
    target.write_text("*doc*", encoding="utf-8")

    source = resolve_source([str(target)], io.BytesIO(b"ignored"), interactive=False)

    assert source.text == "*doc*"
    assert source.kind == "file"


def test_resolve_source_renders_missing_file_name(tmp_path: Path):
    missing = str(tmp_path / "missing.md")

    source = resolve_source([missing], io.BytesIO(), interactive=True)

    assert source.text == missing
    assert source.kind == "literal"


def test_resolve_source_joins_arguments():
    source = resolve_source(["some", "*markdown*"], io.BytesIO(), interactive=True)

    assert source.text == "some *markdown*"
    assert source.kind == "literal"


@pytest.mark.parametrize("argument", ["~strike~", "a\x00b", "x" * 5000])
def test_resolve_source_accepts_text_that_is_not_a_path(argument: str):
    source = resolve_source([argument], io.BytesIO(), interactive=True)

    assert source.text == argument
    assert source.kind == "literal"


def test_resolve_source_warns_on_directory(tmp_path: Path):
    messages: list[str] = []

    source = resolve_source([str(tmp_path)], io.BytesIO(), interactive=True, warn=messages.append)

    assert source.kind == "literal"
    assert messages and "is a directory" in messages[0]


def test_resolve_source_reads_pipe():
    source = resolve_source([], io.BytesIO(b"piped *text*"), interactive=False)

    assert source.text == "piped *text*"
    assert source.kind == "stdin"


def test_resolve_source_shows_usage_on_terminal():
    source = resolve_source([], io.BytesIO(), interactive=True)

    assert source.text == USAGE
    assert source.kind == "usage"


def test_resolve_source_limits_literal_size():
    with pytest.raises(InputTooLargeError):
        resolve_source(["x" * 20], io.BytesIO(), interactive=True, max_size=10)


def test_open_output_does_not_translate_newlines():
    stream = io.BytesIO()
    output = open_output(stream)

    output.write("a\r\nb\n")
    output.flush()
    output.detach()

    assert stream.getvalue() == b"a\r\nb\n"
    assert not stream.closed
