from __future__ import annotations

import time

import pytest

from tiny_markdown.config import RenderConfig
from tiny_markdown.constants import (
    BOLD,
    BULLET,
    CODE,
    LINK_ARROW,
    POSIX_PALETTE,
    STRIKE,
    UNDERLINE,
    WINDOWS_PALETTE,
)
from tiny_markdown.inline import style_for
from tiny_markdown.renderer import render_to_string

DIM = POSIX_PALETTE.dim


def test_bold_span(md):
    assert md("*bold*") == f"{BOLD.start}bold{BOLD.end}"


def test_double_marker_renders_like_single(md):
    assert md("**bold**") == md("*bold*")


@pytest.mark.parametrize(
    ("marker", "style"),
    [("_", UNDERLINE), ("~", STRIKE), ("-", DIM), ("`", CODE)],
)
def test_span_styles(md, marker: str, style):
    assert md(f"{marker}word{marker}") == f"{style.start}word{style.end}"


def test_nested_spans_close_inner_first(md):
    assert md("*_x_*") == f"{BOLD.start}{UNDERLINE.start}x{UNDERLINE.end}{BOLD.end}"


def test_span_keeps_surrounding_text_in_order(md):
    assert md("a *b* c") == f"a {BOLD.start}b{BOLD.end} c"


def test_two_spans_on_one_line(md):
    assert md("*one* *two*") == f"{BOLD.start}one{BOLD.end} {BOLD.start}two{BOLD.end}"


def test_closer_preceded_by_space_is_skipped(md):
    assert md("*a * b*") == f"{BOLD.start}a * b{BOLD.end}"


def test_marker_inside_word_is_literal(md):
    assert md("snake_case_name") == "snake_case_name"
    assert md("word*not*") == "word*not*"


def test_opener_followed_by_space_is_literal(md):
    assert md("a _ b_") == "a _ b_"


@pytest.mark.parametrize("text", ["*open", "a *b", "_half", "~x\ny~"])
def test_unmatched_opener_is_literal(md, text: str):
    assert md(text) == text


def test_unclosed_opener_does_not_hide_later_line(md):
    assert md("_a _b\n_c_") == f"_a _b\n{UNDERLINE.start}c{UNDERLINE.end}"


@pytest.mark.parametrize("unit", ["_a ", "*a ", "["])
def test_long_line_of_unclosed_openers_renders_quickly(md, unit: str):
    text = unit * 20000

    started = time.perf_counter()
    rendered = md(text)
    elapsed = time.perf_counter() - started

    assert rendered == text
    assert elapsed < 5


def test_code_span_may_touch_words(md):
    assert md("x`code`y") == f"x{CODE.start}code{CODE.end}y"


def test_code_span_content_is_not_parsed(md):
    assert md("`*a*`") == f"{CODE.start}*a*{CODE.end}"


def test_span_content_is_parsed_recursively(md):
    assert md("_a *b* c_") == (
        f"{UNDERLINE.start}a {BOLD.start}b{BOLD.end} c{UNDERLINE.end}"
    )


def test_nested_scan_ignores_line_structure(md):
    assert md("*# x*") == f"{BOLD.start}# x{BOLD.end}"


def test_dim_uses_windows_variant():
    config = RenderConfig(platform="windows")
    dim = WINDOWS_PALETTE.dim

    assert render_to_string("-dim-", config) == f"{dim.start}dim{dim.end}"


def test_spans_beyond_max_depth_are_verbatim():
    config = RenderConfig(platform="posix", max_depth=1)

    assert render_to_string("*_~x~_*", config) == (
        f"{BOLD.start}{UNDERLINE.start}~x~{UNDERLINE.end}{BOLD.end}"
    )


def test_style_for_unknown_marker():
    with pytest.raises(KeyError):
        style_for("+", POSIX_PALETTE)


def test_link(md):
    assert md("[Title](http://x)") == f"Title{DIM.start}{LINK_ARROW}http://x{DIM.end}"


def test_link_arrow_bytes(md):
    assert md("[T](u)") == "T\x1b[2m → u\x1b[22m"


def test_link_inside_text(md):
    assert md("see [docs](u) now") == f"see docs{DIM.start}{LINK_ARROW}u{DIM.end} now"


def test_link_inside_span(md):
    assert md("*[a](b)*") == (
        f"{BOLD.start}a{DIM.start}{LINK_ARROW}b{DIM.end}{BOLD.end}"
    )


@pytest.mark.parametrize(
    "text",
    [
        "[](http://x)",
        "[Title ](http://x)",
        "[Title]",
        "[Title] (http://x)",
        "[Title](http://x",
        "[Ti\ntle](http://x)",
        "[Title](http://\nx)",
    ],
)
def test_malformed_links_are_literal(md, text: str):
    assert md(text) == text


def test_bullet_at_start(md):
    assert md("* item") == f"{BULLET} item"


def test_bullet_keeps_indentation(md):
    assert md("text\n  * item") == f"text\n  {BULLET} item"


def test_bullet_items_on_consecutive_lines(md):
    assert md("* a\n* b") == f"{BULLET} a\n{BULLET} b"


def test_star_inside_line_is_literal(md):
    assert md("a * b") == "a * b"


def test_bold_at_line_start_is_not_a_bullet(md):
    assert md("*item*") == f"{BOLD.start}item{BOLD.end}"


def test_dash_is_never_a_bullet(md):
    assert md("- item") == "- item"


def test_no_bullet_inside_span(md):
    assert md("_* x_") == f"{UNDERLINE.start}* x{UNDERLINE.end}"
