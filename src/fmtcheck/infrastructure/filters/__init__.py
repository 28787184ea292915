"""Infrastructure layer: stateless path filter functions.

Filters are pure functions: Filter = Callable[[str], bool]
Input is a root-relative POSIX path. True = keep file, False = drop file.

Usage:
    from fmtcheck.infrastructure.filters import source_filter

    flt = source_filter(include=("*.py",), exclude=("*/migrations/*",))
    kept = [p for p in paths if flt(p)]
"""

from fmtcheck.infrastructure.filters.path import exclude_paths, include_paths, matches, source_filter
from fmtcheck.infrastructure.filters.types import Filter

__all__ = [
    "Filter",
    "exclude_paths",
    "include_paths",
    "matches",
    "source_filter",
]
