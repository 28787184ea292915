"""Run result aggregate."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from fmtcheck.domain.model.format_outcome import FormatOutcome, OutcomeStatus
from fmtcheck.domain.model.source_file import SourceFile


@dataclass(frozen=True, slots=True)
class RunResult:
    """Outcomes of one pipeline run, in discovery order.

    Immutable aggregate consumed by reporters and modes.
    Every discovered file appears in exactly one outcome.

    Attributes:
        outcomes: One outcome per discovered file
    """

    outcomes: tuple[FormatOutcome, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        seen: set[Path] = set()
        for outcome in self.outcomes:
            if outcome.source.path in seen:
                raise ValueError(f"duplicate outcome for {outcome.source.path}")
            seen.add(outcome.source.path)

    @property
    def changed(self) -> tuple[FormatOutcome, ...]:
        """CHANGED outcomes, in outcome order."""
        return tuple(o for o in self.outcomes if o.status is OutcomeStatus.CHANGED)

    @property
    def errors(self) -> tuple[FormatOutcome, ...]:
        """PARSE_ERROR outcomes, in outcome order."""
        return tuple(o for o in self.outcomes if o.status is OutcomeStatus.PARSE_ERROR)

    @property
    def changed_files(self) -> tuple[SourceFile, ...]:
        return tuple(o.source for o in self.changed)

    @property
    def error_files(self) -> tuple[SourceFile, ...]:
        return tuple(o.source for o in self.errors)

    @property
    def needs_attention(self) -> tuple[SourceFile, ...]:
        """Changed and errored files, in outcome order."""
        return tuple(o.source for o in self.outcomes if o.needs_attention)

    @property
    def passed(self) -> bool:
        """True when no file needs attention."""
        return not any(o.needs_attention for o in self.outcomes)

    @property
    def file_count(self) -> int:
        return len(self.outcomes)

    @classmethod
    def empty(cls) -> RunResult:
        """Create empty run result (passed, no files)."""
        return cls(outcomes=())


@dataclass(frozen=True, slots=True)
class WriteResult:
    """Result of a write-mode run.

    Attributes:
        result: Outcomes the writes were based on
        written: Files overwritten with formatted text
    """

    result: RunResult
    written: tuple[SourceFile, ...]
