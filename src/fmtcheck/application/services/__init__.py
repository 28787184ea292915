"""Application services: format pipeline and run modes."""

from fmtcheck.application.services.modes import check, strict_check, write
from fmtcheck.application.services.pipeline import FormatPipeline

__all__ = [
    "FormatPipeline",
    "check",
    "strict_check",
    "write",
]
