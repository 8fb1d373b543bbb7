"""Configuration loading and management."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
import tomllib

PLATFORMS = ("posix", "windows")

_PLATFORM_ALIASES = {
    "nt": "windows",
    "win": "windows",
    "win32": "windows",
    "win64": "windows",
    "linux": "posix",
    "darwin": "posix",
    "unix": "posix",
}


def detect_platform() -> str:
    """Return the output variant matching the running interpreter."""
    return "windows" if os.name == "nt" else "posix"


@dataclass
class RenderConfig:
    """Configuration for rendering Markdown to the terminal.

    Attributes:
        platform: Output variant, ``"posix"`` or ``"windows"``. Selects the dim
            sequences and the newline literal.
        max_depth: Maximum number of nested inline spans that are re-scanned;
            deeper span contents are written verbatim.
        max_input_size: Maximum input size in bytes that will be rendered.

    Examples:
        RenderConfig(platform="windows", max_depth=16)
    """

    platform: str = field(default_factory=detect_platform)

    # Limits
    max_depth: int = 64
    max_input_size: int = 10 * 1024 * 1024


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`max_depth` must be a positive integer")
    """


def load_config(search_path: Path) -> RenderConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.tiny-markdown]`` table from `pyproject.toml` and the
    ``[tiny-markdown]`` or ``[tool.tiny-markdown]`` table from
    `.tiny-markdown.toml` when present. Returns default values when no
    configuration is found. TOML files that cannot be read or decoded are
    skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        RenderConfig: Loaded configuration with defaults applied when necessary.

    Raises:
        ConfigError: If the table is present but not a mapping or contains
            unsupported keys.

    Examples:
        load_config(Path("docs"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", "tiny-markdown")]
        )
        if pyproject_config is not None:
            return normalize_config(pyproject_config)

        dotfile_config = _load_from_file(
            current / ".tiny-markdown.toml",
            table_paths=[("tiny-markdown",), ("tool", "tiny-markdown")],
        )
        if dotfile_config is not None:
            return normalize_config(dotfile_config)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return RenderConfig()


_MISSING = object()


def _load_from_file(config_file: Path, table_paths: list[tuple[str, ...]]) -> RenderConfig | None:
    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> RenderConfig:
    table_display = ".".join(table_path)

    if raw_config is None:
        return RenderConfig()

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    if not raw_config:
        return RenderConfig()

    # TOML keys use dashes, dataclass fields use underscores
    settings = {key.replace("-", "_"): value for key, value in raw_config.items()}
    try:
        return RenderConfig(**settings)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def normalize_config(config: RenderConfig) -> RenderConfig:
    platform = config.platform
    if isinstance(platform, str):
        platform = platform.strip().lower()
        platform = _PLATFORM_ALIASES.get(platform, platform)
    return replace(config, platform=platform)


def validate_config(config: RenderConfig) -> None:
    """Validate a `RenderConfig` instance.

    Args:
        config: Configuration to validate.

    Returns:
        None.

    Raises:
        ConfigError: If the platform is unknown or numeric limits are not
            positive integers.

    Examples:
        validate_config(RenderConfig(platform="posix", max_depth=8))
    """
    config = normalize_config(config)

    if config.platform not in PLATFORMS:
        raise ConfigError(f"`platform` must be one of: {', '.join(PLATFORMS)}")

    _ensure_integers(
        {
            "max_depth": config.max_depth,
            "max_input_size": config.max_input_size,
        }
    )
    _ensure_positive(
        {
            "max_depth": config.max_depth,
            "max_input_size": config.max_input_size,
        }
    )


def apply_overrides(config: RenderConfig, **overrides: object) -> RenderConfig:
    """Apply override values to a `RenderConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set to
            None are ignored.

    Returns:
        RenderConfig: New configuration with the provided overrides applied. The
        original configuration is returned when no changes are supplied.

    Raises:
        TypeError: If an override name is not defined on `RenderConfig`.

    Examples:
        updated = apply_overrides(config, platform="windows")
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> RenderConfig:
    """Load, override, and validate configuration.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Override values keyed by configuration attributes; None values
            are ignored.

    Returns:
        RenderConfig: Validated configuration ready for rendering.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), platform="posix")
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    config = normalize_config(config)
    validate_config(config)
    return config


def _ensure_positive(values: dict[str, int]) -> None:
    for key, value in values.items():
        if value <= 0:
            raise ConfigError(f"`{key}` must be a positive integer")


def _ensure_integers(values: dict[str, object]) -> None:
    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"`{key}` must be an integer")
