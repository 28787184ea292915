"""Infrastructure adapters: formatter implementations and their registry."""

from fmtcheck.infrastructure.adapters.black_formatter import BlackFormatter
from fmtcheck.infrastructure.adapters.registry import FormatterRegistry, default_registry
from fmtcheck.infrastructure.adapters.whitespace_formatter import WhitespaceFormatter

__all__ = [
    "BlackFormatter",
    "FormatterRegistry",
    "WhitespaceFormatter",
    "default_registry",
]
