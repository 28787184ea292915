"""fmtcheck - formatting verification pipeline with pluggable formatters."""

__version__ = "0.1.0"

from fmtcheck.application.services import FormatPipeline, check, strict_check, write
from fmtcheck.domain.model import FormatConfiguration, FormatOutcome, OutcomeStatus, RunResult, SourceFile

__all__ = [
    "FormatConfiguration",
    "FormatOutcome",
    "FormatPipeline",
    "OutcomeStatus",
    "RunResult",
    "SourceFile",
    "__version__",
    "check",
    "strict_check",
    "write",
]
