import pytest
from click.testing import CliRunner

from tiny_markdown.config import RenderConfig
from tiny_markdown.renderer import render_to_string


@pytest.fixture()
def cli_runner() -> CliRunner:
    """Provides a reusable Click CLI runner."""
    return CliRunner()


@pytest.fixture()
def posix_config() -> RenderConfig:
    """Configuration pinned to the POSIX output variant."""
    return RenderConfig(platform="posix")


@pytest.fixture()
def md(posix_config):
    """Renders Markdown to a string with the POSIX output variant."""

    def _render(text: str) -> str:
        return render_to_string(text, posix_config)

    return _render
