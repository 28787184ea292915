"""Path filters.

Filter files by glob patterns.
Uses fnmatch for glob matching (* matches any character including /).
A pattern matches when it matches the file name or the whole relative path,
so "*.py" selects by extension and "*/build/*" selects by directory.
"""

from __future__ import annotations

import fnmatch
import posixpath
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fmtcheck.infrastructure.filters.types import Filter


def matches(relative_path: str, pattern: str) -> bool:
    """Check one pattern against file name and relative path."""
    name = posixpath.basename(relative_path)
    return fnmatch.fnmatchcase(name, pattern) or fnmatch.fnmatchcase(relative_path, pattern)


def include_paths(*patterns: str) -> Filter:
    """Create filter that keeps files matching any pattern.

    Args:
        *patterns: Glob patterns (e.g., "*.py", "src/*").

    Returns:
        Filter that returns True for paths matching any pattern.
        No patterns = keeps nothing.
    """

    def _filter(relative_path: str) -> bool:
        return any(matches(relative_path, p) for p in patterns)

    return _filter


def exclude_paths(*patterns: str) -> Filter:
    """Create filter that drops files matching any pattern.

    Args:
        *patterns: Glob patterns to exclude (e.g., "*/.venv/*", "test_*").

    Returns:
        Filter that returns False for paths matching any pattern.
        No patterns = keeps everything.
    """

    def _filter(relative_path: str) -> bool:
        return not any(matches(relative_path, p) for p in patterns)

    return _filter


def source_filter(include: tuple[str, ...], exclude: tuple[str, ...] = ()) -> Filter:
    """Create the discovery filter: included and not excluded.

    Exclusion wins over inclusion.
    """
    keep = include_paths(*include)
    drop = exclude_paths(*exclude)

    def _filter(relative_path: str) -> bool:
        return keep(relative_path) and drop(relative_path)

    return _filter
