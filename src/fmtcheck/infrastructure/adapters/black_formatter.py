"""Black formatter adapter.

Implements FormatterPort using black as a library.
Preferences map 1:1 to black.Mode keyword arguments.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import black

from fmtcheck.domain.exceptions.configuration import ConfigurationError
from fmtcheck.domain.exceptions.parsing import ParseFailure
from fmtcheck.domain.ports.formatter import FormatterPort

if TYPE_CHECKING:
    from collections.abc import Mapping

    from fmtcheck.domain.model.configuration import FormatConfiguration


class BlackFormatter(FormatterPort):
    """Formatter backed by black.format_str().

    Stateless: black.Mode is built per call from the configuration.
    """

    name = "black"
    default_include = ("*.py", "*.pyi")

    def format(self, text: str, config: FormatConfiguration) -> str:
        """Format Python source with black.

        Args:
            text: Python source
            config: preferences become black.Mode kwargs,
                language_version selects the target version

        Returns:
            Formatted source

        Raises:
            ParseFailure: black cannot parse text
            ConfigurationError: Mode rejects preferences or version is unknown
        """
        mode = build_mode(config.preferences, config.language_version)
        try:
            return black.format_str(text, mode=mode)
        except black.InvalidInput as e:
            raise ParseFailure(str(e) or "invalid input") from e


def build_mode(preferences: Mapping[str, object], language_version: str | None) -> black.Mode:
    """Build black.Mode from opaque preferences.

    Keys may use TOML style dashes ("line-length"). target_versions may be
    given as a list of version hints, as in black's own pyproject table.

    Raises:
        ConfigurationError: Unknown or ill-typed preference, unknown version
    """
    kwargs = {key.replace("-", "_"): value for key, value in preferences.items()}
    if "target_versions" in kwargs:
        kwargs["target_versions"] = _target_versions(kwargs["target_versions"])
    if language_version is not None:
        if "target_versions" in kwargs:
            raise ConfigurationError("set either language_version or target_versions, not both")
        kwargs["target_versions"] = {parse_target_version(language_version)}

    try:
        return black.Mode(**kwargs)
    except TypeError as e:
        raise ConfigurationError(f"black rejected preferences: {e}") from e


def parse_target_version(hint: str) -> black.TargetVersion:
    """Map a version hint to black.TargetVersion.

    Examples:
        "3.11" → PY311
        "3.11.4-rc1" → PY311 (qualifier after "-" dropped)
        "py311" → PY311

    Raises:
        ConfigurationError: Hint does not name a version black knows
    """
    normalized = hint.strip().lower().split("-")[0]

    if normalized.startswith("py"):
        digits = normalized[2:]
    else:
        parts = normalized.split(".")
        if len(parts) < 2:
            raise ConfigurationError(f"language version must be MAJOR.MINOR, got '{hint}'")
        digits = parts[0] + parts[1]

    try:
        return black.TargetVersion[f"PY{digits}"]
    except KeyError as e:
        known = ", ".join(v.name.lower() for v in black.TargetVersion)
        raise ConfigurationError(f"unknown language version '{hint}'. Known: {known}") from e


def _target_versions(value: object) -> set[black.TargetVersion]:
    """Convert a target_versions preference to a set of TargetVersion.

    Raises:
        ConfigurationError: Not a collection of version hints
    """
    if isinstance(value, str) or not isinstance(value, (list, tuple, set, frozenset)):
        raise ConfigurationError(f"target_versions must be a list of versions, got {value!r}")
    return {v if isinstance(v, black.TargetVersion) else parse_target_version(_hint(v)) for v in value}


def _hint(value: object) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"target version must be a string, got {value!r}")
    return value
