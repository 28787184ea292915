"""Domain ports (interfaces/protocols)."""

from fmtcheck.domain.ports.formatter import FormatterPort
from fmtcheck.domain.ports.reporter import ReporterProtocol

__all__ = [
    "FormatterPort",
    "ReporterProtocol",
]
