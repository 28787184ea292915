"""Configuration loading from pyproject.toml.

Reads the [tool.fmtcheck] table. Keys use TOML style dashes:

    [tool.fmtcheck]
    formatter = "black"
    roots = ["src", "tests"]
    include = ["*.py"]
    exclude = ["*/migrations/*"]
    language-version = "3.12"

    [tool.fmtcheck.preferences]
    line-length = 100
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

from fmtcheck.domain.exceptions.configuration import ConfigurationError
from fmtcheck.domain.model.configuration import DEFAULT_FORMATTER, FormatConfiguration

logger = logging.getLogger(__name__)

TOOL_TABLE = "fmtcheck"
DEFAULT_CONFIG_FILE = "pyproject.toml"

_KNOWN_KEYS = frozenset(
    {"formatter", "roots", "include", "exclude", "language-version", "preferences"},
)


@dataclass(frozen=True, slots=True)
class LoadedConfiguration:
    """Configuration file contents.

    Attributes:
        config: Format configuration
        roots: Root directories, resolved against the config file's directory.
            Empty = not configured.
    """

    config: FormatConfiguration
    roots: tuple[Path, ...] = ()


def load_configuration(path: Path, *, required: bool = False) -> LoadedConfiguration:
    """Load [tool.fmtcheck] from a pyproject file.

    Missing table yields defaults. Missing file yields defaults unless required.

    Args:
        path: pyproject.toml path
        required: Path was named explicitly, so it must exist

    Returns:
        Loaded configuration

    Raises:
        ConfigurationError: Required file missing, malformed TOML,
            unknown keys or wrong value types
    """
    if not path.is_file():
        if required:
            raise ConfigurationError(f"{path}: config file not found")
        logger.debug("No config file at %s, using defaults", path)
        return LoadedConfiguration(config=FormatConfiguration())

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"{path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"{path}: cannot read ({e})") from e

    table = data.get("tool", {}).get(TOOL_TABLE)
    if table is None:
        logger.debug("No [tool.%s] table in %s, using defaults", TOOL_TABLE, path)
        return LoadedConfiguration(config=FormatConfiguration())
    if not isinstance(table, dict):
        raise ConfigurationError(f"{path}: [tool.{TOOL_TABLE}] must be a table")

    return parse_table(table, base_dir=path.parent, source=str(path))


def parse_table(table: dict[str, object], *, base_dir: Path, source: str) -> LoadedConfiguration:
    """Convert a raw [tool.fmtcheck] table to LoadedConfiguration.

    Raises:
        ConfigurationError: Unknown keys or wrong value types
    """
    unknown = sorted(set(table) - _KNOWN_KEYS)
    if unknown:
        raise ConfigurationError(f"{source}: unknown keys {unknown}")

    formatter = table.get("formatter", DEFAULT_FORMATTER)
    if not isinstance(formatter, str) or not formatter:
        raise ConfigurationError(f"{source}: 'formatter' must be a non-empty string")

    preferences = table.get("preferences", {})
    if not isinstance(preferences, dict):
        raise ConfigurationError(f"{source}: 'preferences' must be a table")

    language_version = table.get("language-version")
    if language_version is not None and (
        not isinstance(language_version, str) or not language_version.strip()
    ):
        raise ConfigurationError(f"{source}: 'language-version' must be a non-empty string")

    include = _string_tuple(table, "include", source)
    exclude = _string_tuple(table, "exclude", source) or ()
    roots = _string_tuple(table, "roots", source) or ()

    if include is not None and not include:
        raise ConfigurationError(f"{source}: 'include' must not be empty")

    config = FormatConfiguration(
        formatter=formatter,
        preferences=preferences,
        include=include,
        exclude=exclude,
        language_version=language_version,
    )
    return LoadedConfiguration(
        config=config,
        roots=tuple(base_dir / root for root in roots),
    )


def _string_tuple(table: dict[str, object], key: str, source: str) -> tuple[str, ...] | None:
    """Read optional list of strings. Missing key = None."""
    value = table.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigurationError(f"{source}: '{key}' must be a list of strings")
    return tuple(value)
