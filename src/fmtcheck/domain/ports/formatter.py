"""Formatter port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from fmtcheck.domain.model.configuration import FormatConfiguration


class FormatterPort(ABC):
    """Port for source formatters.

    Infrastructure layer must provide implementation.
    Any formatter satisfying this contract is pluggable.

    Attributes:
        name: Registry name (e.g. "black")
        default_include: Glob patterns used when configuration has no include
    """

    name: ClassVar[str]
    default_include: ClassVar[tuple[str, ...]]

    @abstractmethod
    def format(self, text: str, config: FormatConfiguration) -> str:
        """Format source text.

        Implementations must be idempotent: formatting the output again
        returns it unchanged. Must be safe to call from several threads.

        Args:
            text: Full file content
            config: Run configuration (preferences, language_version)

        Returns:
            Canonically formatted text (equal to text when already formatted)

        Raises:
            ParseFailure: If text cannot be parsed
            ConfigurationError: If preferences or language_version are rejected
        """
        ...
