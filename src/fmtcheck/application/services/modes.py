"""Run modes: write, check, strict check.

All three share FormatPipeline. check() is the basis: strict_check()
delegates to it, write() reuses the same outcomes and persists changes.
Each mode is a single pass with no retry.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeAlias

from fmtcheck.application.reporters.render import render
from fmtcheck.domain.exceptions.strict import StrictCheckError
from fmtcheck.domain.model.run_result import WriteResult

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from pathlib import Path

    from fmtcheck.application.services.pipeline import FormatPipeline
    from fmtcheck.domain.model.configuration import FormatConfiguration
    from fmtcheck.domain.model.run_result import RunResult

logger = logging.getLogger(__name__)

Emit: TypeAlias = "Callable[[RunResult], None]"


def check(
    pipeline: FormatPipeline,
    roots: Iterable[Path],
    config: FormatConfiguration,
    *,
    emit: Emit | None = None,
) -> RunResult:
    """Report files that need attention. Never writes.

    Args:
        pipeline: Pipeline to run
        roots: Directories to scan
        config: Run configuration
        emit: Called with the result before returning (report hook)

    Returns:
        RunResult; result.needs_attention holds changed and errored files

    Raises:
        DiscoveryError, ReadError, ConfigurationError: Fatal run errors
    """
    result = render(pipeline.run_roots(roots, config))

    if not result.passed:
        logger.info(
            "%d of %d file(s) need attention (%d changed, %d parse error(s))",
            len(result.needs_attention),
            result.file_count,
            len(result.changed),
            len(result.errors),
        )

    if emit is not None:
        emit(result)
    return result


def strict_check(
    pipeline: FormatPipeline,
    roots: Iterable[Path],
    config: FormatConfiguration,
    *,
    emit: Emit | None = None,
) -> RunResult:
    """check(), then fail if any file needs attention.

    The report is emitted before the failure is raised.

    Raises:
        StrictCheckError: If result.needs_attention is non-empty
    """
    result = check(pipeline, roots, config, emit=emit)
    if not result.passed:
        raise StrictCheckError(result.needs_attention)
    return result


def write(
    pipeline: FormatPipeline,
    roots: Iterable[Path],
    config: FormatConfiguration,
    *,
    emit: Emit | None = None,
) -> WriteResult:
    """Persist formatted text for every changed file.

    Parse-error files are left untouched. Not transactional:
    an interrupted run leaves already written files in place.

    Returns:
        WriteResult with the run result and the files written

    Raises:
        WriteError: A changed file cannot be written (earlier writes stay)
    """
    result = render(pipeline.run_roots(roots, config))

    written = []
    for outcome in result.changed:
        logger.info("Formatting %s . . .", outcome.source)
        # CHANGED guarantees formatted_text is set
        outcome.source.write_text(outcome.formatted_text or "")
        written.append(outcome.source)

    if emit is not None:
        emit(result)
    return WriteResult(result=result, written=tuple(written))
