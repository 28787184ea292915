"""Source file discovery from directory structure."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from fmtcheck.domain.exceptions.filesystem import DiscoveryError
from fmtcheck.domain.model.source_file import SourceFile
from fmtcheck.infrastructure.filters import source_filter

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)


def discover_files(
    roots: Iterable[Path],
    include: tuple[str, ...],
    exclude: tuple[str, ...] = (),
) -> tuple[SourceFile, ...]:
    """Discover all source files under roots.

    Recursively scans every root. A file is kept iff it matches an
    include pattern and no exclude pattern. Patterns match the file
    name or the root-relative POSIX path.

    Args:
        roots: Directories to scan. Missing roots contribute nothing.
        include: Glob patterns a file must match
        exclude: Glob patterns that drop a file

    Returns:
        Tuple of SourceFile sorted by absolute path. A file reachable
        from several roots appears once, with the first root's display path.

    Raises:
        DiscoveryError: If a root is not a directory or a directory cannot be listed

    Example:
        >>> discover_files([Path("src")], include=("*.py",))
        (SourceFile(path=PosixPath('/repo/src/app/__init__.py'), display_path='app/__init__.py'), ...)
    """
    keep = source_filter(include, exclude)
    found: dict[Path, SourceFile] = {}

    for root in roots:
        absolute_root = root.resolve()
        if not absolute_root.exists():
            logger.debug("Skipping missing root %s", root)
            continue
        if not absolute_root.is_dir():
            raise DiscoveryError(root, "not a directory")

        for path in _walk(absolute_root):
            relative = path.relative_to(absolute_root).as_posix()
            if path in found or not keep(relative):
                continue
            found[path] = SourceFile(path=path, display_path=relative)

    files = tuple(found[p] for p in sorted(found, key=str))
    logger.debug("Discovered %d file(s)", len(files))
    return files


def _walk(directory: Path) -> Iterator[Path]:
    """Yield regular files under directory, not following directory symlinks."""
    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        raise DiscoveryError(directory, e.strerror or str(e)) from e

    for entry in entries:
        if entry.is_dir():
            if entry.is_symlink():
                logger.debug("Not following directory symlink %s", entry)
                continue
            yield from _walk(entry)
        elif entry.is_file():
            yield entry
