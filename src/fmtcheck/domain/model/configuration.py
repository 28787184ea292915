"""Format configuration value object."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

DEFAULT_FORMATTER = "black"


@dataclass(frozen=True, slots=True)
class FormatConfiguration:
    """Immutable configuration for one run.

    Loaded once, passed into every call. FAIL-FIRST validation.

    Attributes:
        formatter: Registered formatter name
        preferences: Style preferences. Opaque to the pipeline,
            passed to the formatter unvalidated.
        include: Glob patterns a file must match. None = formatter default.
        exclude: Glob patterns that drop a file. Empty = exclude nothing.
        language_version: Version hint passed to the formatter. None = formatter default.
    """

    formatter: str = DEFAULT_FORMATTER
    preferences: Mapping[str, object] = field(default_factory=dict)
    include: tuple[str, ...] | None = None
    exclude: tuple[str, ...] = ()
    language_version: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants and freeze preferences. FAIL-FIRST."""
        if not self.formatter:
            raise ValueError("formatter must not be empty")
        if self.preferences is None:
            raise TypeError("preferences must not be None")
        if self.include is not None and not self.include:
            raise ValueError("include must be None or non-empty")
        if self.language_version is not None and not self.language_version.strip():
            raise ValueError("language_version must be None or non-blank")

        # slots + frozen: bypass __setattr__ to store normalised values
        object.__setattr__(self, "preferences", MappingProxyType(dict(self.preferences)))
        if self.include is not None:
            object.__setattr__(self, "include", tuple(self.include))
        object.__setattr__(self, "exclude", tuple(self.exclude))

    def include_patterns(self, default: tuple[str, ...]) -> tuple[str, ...]:
        """Configured include patterns, or default when none configured."""
        return self.include if self.include is not None else default
