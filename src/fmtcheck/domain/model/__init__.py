"""Domain model: immutable value objects."""

from fmtcheck.domain.model.configuration import FormatConfiguration
from fmtcheck.domain.model.format_outcome import FormatOutcome, OutcomeStatus
from fmtcheck.domain.model.run_result import RunResult, WriteResult
from fmtcheck.domain.model.source_file import SourceFile

__all__ = [
    "FormatConfiguration",
    "FormatOutcome",
    "OutcomeStatus",
    "RunResult",
    "SourceFile",
    "WriteResult",
]
