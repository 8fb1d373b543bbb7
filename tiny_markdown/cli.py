"""
Renders Markdown to the terminal.
The text comes from a file, from the arguments themselves, or from a pipe.
"""

from __future__ import annotations

from pathlib import Path

import click
from .config import PLATFORMS, ConfigError, build_config
from .constants import palette_for
from .emitter import Emitter
from .exceptions import SourceError
from .renderer import render
from .source import get_max_input_size, open_output, resolve_source

__all__ = ["cli"]


@click.command()
@click.version_option(package_name="tiny-markdown")
@click.option("--platform", type=click.Choice(PLATFORMS), help="Output variant (dim and newlines)")
@click.option("--max-depth", type=int, help="Maximum nesting of re-scanned inline spans")
@click.argument("markdown", nargs=-1)
def cli(
    markdown: tuple[str, ...],
    platform: str | None = None,
    max_depth: int | None = None,
):
    """
    Entry point for rendering Markdown with terminal styles.

    Args:
        markdown: A file path, or Markdown text split across arguments.
        platform: Override for the output variant.
        max_depth: Override for the maximum inline nesting depth.

    Returns:
        None.

    Raises:
        click.BadParameter: If configuration values are invalid.
        click.ClickException: If the input cannot be read, is too large, is not
            valid UTF-8, or memory runs out while rendering.

    Examples:
        tmd README.md
        tmd 'some *markdown*'
        cat README.md | tmd
    """
    try:
        config = build_config(Path.cwd(), platform=platform, max_depth=max_depth)
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        max_input_size = get_max_input_size(default=config.max_input_size)
    except ValueError as error:
        raise click.ClickException(str(error)) from error

    stdin = click.get_binary_stream("stdin")
    try:
        source = resolve_source(
            markdown,
            stdin,
            interactive=stdin.isatty(),
            max_size=max_input_size,
            warn=lambda message: click.echo(message, err=True),
        )
    except (IOError, SourceError) as error:
        raise click.ClickException(str(error)) from error

    output = open_output(click.get_binary_stream("stdout"))
    try:
        render(source.text, sink=output, config=config)
        # leave the terminal as it was found
        emitter = Emitter(output, palette_for(config.platform))
        emitter.reset()
        if source.kind == "literal":
            emitter.new_line()
    except MemoryError as error:
        raise click.ClickException("out of memory") from error
    finally:
        output.flush()
        output.detach()


if __name__ == "__main__":
    cli()
