"""Format pipeline: SourceFile → FormatOutcome.

Reads each file, runs the formatter, classifies the result.
Performs no writes. FAIL-FIRST on I/O errors, per-file parse
failures are recorded and the run continues.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from fmtcheck.application.discovery.files import discover_files
from fmtcheck.domain.exceptions.parsing import ParseFailure
from fmtcheck.domain.model.format_outcome import FormatOutcome

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

    from fmtcheck.domain.model.configuration import FormatConfiguration
    from fmtcheck.domain.model.source_file import SourceFile
    from fmtcheck.domain.ports.formatter import FormatterPort

logger = logging.getLogger(__name__)


class FormatPipeline:
    """Runs a formatter over source files.

    Stateless between runs. With max_workers > 1 files are formatted on a
    thread pool; outcomes are still returned in input order.

    Attributes:
        _formatter: Formatter the pipeline delegates to
        _max_workers: Thread count, 1 = sequential
    """

    def __init__(self, formatter: FormatterPort, *, max_workers: int = 1) -> None:
        """Initialize pipeline.

        Args:
            formatter: Formatter implementation
            max_workers: Worker threads (must be >= 1)

        Raises:
            TypeError: If formatter is None
            ValueError: If max_workers < 1
        """
        if formatter is None:
            raise TypeError("formatter must not be None")
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")

        self._formatter = formatter
        self._max_workers = max_workers

    @property
    def formatter(self) -> FormatterPort:
        return self._formatter

    def discover(self, roots: Iterable[Path], config: FormatConfiguration) -> tuple[SourceFile, ...]:
        """Discover files using config filters and the formatter's default include."""
        return discover_files(
            roots,
            include=config.include_patterns(self._formatter.default_include),
            exclude=config.exclude,
        )

    def run(self, files: Sequence[SourceFile], config: FormatConfiguration) -> tuple[FormatOutcome, ...]:
        """Format files.

        Args:
            files: Files in discovery order
            config: Run configuration

        Returns:
            One outcome per file, in input order

        Raises:
            ReadError: If any file cannot be read (aborts the run)
            ConfigurationError: If the formatter rejects the configuration
        """
        if self._max_workers == 1 or len(files) < 2:
            return tuple(self._format_one(f, config) for f in files)

        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            # map() yields in submission order
            return tuple(pool.map(lambda f: self._format_one(f, config), files))

    def run_roots(self, roots: Iterable[Path], config: FormatConfiguration) -> tuple[FormatOutcome, ...]:
        """Discover then format."""
        return self.run(self.discover(roots, config), config)

    def _format_one(self, source: SourceFile, config: FormatConfiguration) -> FormatOutcome:
        original = source.read_text()

        try:
            formatted = self._formatter.format(original, config)
        except ParseFailure as e:
            logger.warning("%s parser error in file %s: %s", self._formatter.name, source, e.reason)
            return FormatOutcome.parse_error(source, original, e.reason)

        return FormatOutcome.classify(source, original, formatted)
