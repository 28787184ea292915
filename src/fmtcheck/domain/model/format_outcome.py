"""Per-file formatting outcome."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fmtcheck.domain.model.source_file import SourceFile


class OutcomeStatus(Enum):
    """Classification of one file's formatting result."""

    UNCHANGED = "unchanged"
    CHANGED = "changed"
    PARSE_ERROR = "error"


@dataclass(frozen=True, slots=True)
class FormatOutcome:
    """Result of formatting a single file.

    Produced once per file per run, never mutated.
    original_text is authoritative for PARSE_ERROR outcomes.

    Attributes:
        source: File that was formatted
        original_text: Content as read from disk
        formatted_text: Formatter output (CHANGED only)
        status: Outcome classification
        message: Formatter's parse error message (PARSE_ERROR only)
    """

    source: SourceFile
    original_text: str
    formatted_text: str | None
    status: OutcomeStatus
    message: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.source is None:
            raise TypeError("source must not be None")

        match self.status:
            case OutcomeStatus.UNCHANGED:
                if self.formatted_text is not None or self.message is not None:
                    raise ValueError("UNCHANGED outcome carries no formatted_text or message")
            case OutcomeStatus.CHANGED:
                if self.formatted_text is None:
                    raise ValueError("CHANGED outcome requires formatted_text")
                if self.formatted_text == self.original_text:
                    raise ValueError("CHANGED outcome requires formatted_text != original_text")
                if self.message is not None:
                    raise ValueError("CHANGED outcome carries no message")
            case OutcomeStatus.PARSE_ERROR:
                if not self.message:
                    raise ValueError("PARSE_ERROR outcome requires a message")
                if self.formatted_text is not None:
                    raise ValueError("PARSE_ERROR outcome carries no formatted_text")

    @classmethod
    def classify(cls, source: SourceFile, original: str, formatted: str) -> FormatOutcome:
        """Build UNCHANGED or CHANGED outcome by comparing texts."""
        if formatted == original:
            return cls.unchanged(source, original)
        return cls.changed(source, original, formatted)

    @classmethod
    def unchanged(cls, source: SourceFile, original: str) -> FormatOutcome:
        return cls(source, original, None, OutcomeStatus.UNCHANGED)

    @classmethod
    def changed(cls, source: SourceFile, original: str, formatted: str) -> FormatOutcome:
        return cls(source, original, formatted, OutcomeStatus.CHANGED)

    @classmethod
    def parse_error(cls, source: SourceFile, original: str, message: str) -> FormatOutcome:
        return cls(source, original, None, OutcomeStatus.PARSE_ERROR, message)

    @property
    def needs_attention(self) -> bool:
        """True for CHANGED and PARSE_ERROR outcomes."""
        return self.status is not OutcomeStatus.UNCHANGED
