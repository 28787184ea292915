"""End-to-end scenarios through the library API.

Tests:
- Scenario A: clean tree passes strict check
- Scenario B: one misformatted file, check vs strict vs write
- Scenario C: unparseable file is reported, never rewritten
- Scenario D: everything excluded
- Idempotence of formatting and of write mode
"""

from pathlib import Path

import pytest

from fmtcheck import FormatConfiguration, FormatPipeline, RunResult, check, strict_check, write
from fmtcheck.application.reporters import PlainTextReporter, summarize
from fmtcheck.domain.exceptions import StrictCheckError
from fmtcheck.domain.model.format_outcome import OutcomeStatus
from fmtcheck.infrastructure.adapters import BlackFormatter, WhitespaceFormatter
from tests.factories import snapshot, write_tree

CLEAN_MODULE = 'def greet(name):\n    return f"hello {name}"\n'
MESSY_MODULE = "def greet( name ):\n  return f'hello {name}'\n"
BROKEN_MODULE = "def greet(:\n"


@pytest.fixture
def black_pipeline() -> FormatPipeline:
    return FormatPipeline(BlackFormatter())


@pytest.fixture
def black_config() -> FormatConfiguration:
    return FormatConfiguration(formatter="black")


class TestScenarioCleanTree:
    """All files already formatted."""

    def test_strict_check_passes(
        self, tmp_path: Path, black_pipeline: FormatPipeline, black_config: FormatConfiguration
    ) -> None:
        write_tree(tmp_path, {"pkg/a.py": CLEAN_MODULE, "pkg/b.py": "x = 1\n"})

        result = strict_check(black_pipeline, [tmp_path], black_config)

        assert result.passed
        assert result.file_count == 2
        assert summarize(result) == ()


class TestScenarioOneMisformatted:
    """One file needs reformatting."""

    @pytest.fixture
    def tree(self, tmp_path: Path) -> Path:
        write_tree(tmp_path, {"pkg/a.py": CLEAN_MODULE, "pkg/b.py": MESSY_MODULE})
        return tmp_path

    def test_check_reports_without_writing(
        self, tree: Path, black_pipeline: FormatPipeline, black_config: FormatConfiguration
    ) -> None:
        before = snapshot(tree)

        result = check(black_pipeline, [tree], black_config)

        assert summarize(result) == ("changed: pkg/b.py",)
        assert snapshot(tree) == before

    def test_strict_check_fails_after_report(
        self, tree: Path, black_pipeline: FormatPipeline, black_config: FormatConfiguration
    ) -> None:
        reports: list[str] = []

        def emit(result: RunResult) -> None:
            reports.append(PlainTextReporter().report(result))

        with pytest.raises(StrictCheckError):
            strict_check(black_pipeline, [tree], black_config, emit=emit)

        assert len(reports) == 1
        assert "\tchanged: pkg/b.py" in reports[0]

    def test_write_then_strict_check_passes(
        self, tree: Path, black_pipeline: FormatPipeline, black_config: FormatConfiguration
    ) -> None:
        written = write(black_pipeline, [tree], black_config)

        assert [f.display_path for f in written.written] == ["pkg/b.py"]
        assert (tree / "pkg/b.py").read_text(encoding="utf-8") == CLEAN_MODULE
        assert strict_check(black_pipeline, [tree], black_config).passed


class TestScenarioUnparseable:
    """A file the formatter cannot parse."""

    def test_reported_as_error_and_left_alone(
        self, tmp_path: Path, black_pipeline: FormatPipeline, black_config: FormatConfiguration
    ) -> None:
        write_tree(tmp_path, {"a.py": CLEAN_MODULE, "broken.py": BROKEN_MODULE})

        written = write(black_pipeline, [tmp_path], black_config)

        (error,) = written.result.errors
        assert error.source.display_path == "broken.py"
        assert error.status is OutcomeStatus.PARSE_ERROR
        assert error.message
        assert written.written == ()
        assert (tmp_path / "broken.py").read_text(encoding="utf-8") == BROKEN_MODULE

    def test_strict_check_fails(
        self, tmp_path: Path, black_pipeline: FormatPipeline, black_config: FormatConfiguration
    ) -> None:
        write_tree(tmp_path, {"broken.py": BROKEN_MODULE})

        with pytest.raises(StrictCheckError) as exc_info:
            strict_check(black_pipeline, [tmp_path], black_config)

        assert [f.display_path for f in exc_info.value.needs_attention] == ["broken.py"]


class TestScenarioAllExcluded:
    """Exclude patterns remove every file."""

    def test_nothing_to_check(self, tmp_path: Path, black_pipeline: FormatPipeline) -> None:
        write_tree(tmp_path, {"a.py": MESSY_MODULE, "sub/b.py": BROKEN_MODULE})
        config = FormatConfiguration(formatter="black", exclude=("*",))

        result = strict_check(black_pipeline, [tmp_path], config)

        assert result.file_count == 0
        assert result.passed


class TestIdempotence:
    """Formatting formatted text changes nothing."""

    @pytest.mark.parametrize("source", [CLEAN_MODULE, MESSY_MODULE, "x=[1,2,\n3]\n", ""])
    def test_black_changed_output_is_stable(self, source: str, black_config: FormatConfiguration) -> None:
        formatter = BlackFormatter()

        once = formatter.format(source, black_config)

        assert formatter.format(once, black_config) == once

    @pytest.mark.parametrize("source", ["a  \r\nb\t\n\n\n", "", "\n\n", "no newline"])
    def test_whitespace_output_is_stable(self, source: str) -> None:
        formatter = WhitespaceFormatter()
        config = FormatConfiguration(formatter="whitespace")

        once = formatter.format(source, config)

        assert formatter.format(once, config) == once

    def test_second_write_changes_nothing(self, tmp_path: Path, black_pipeline: FormatPipeline) -> None:
        write_tree(tmp_path, {"a.py": MESSY_MODULE, "b.py": "y  =  2\n"})
        config = FormatConfiguration(formatter="black")
        write(black_pipeline, [tmp_path], config)
        after_first = snapshot(tmp_path)

        second = write(black_pipeline, [tmp_path], config)

        assert second.written == ()
        assert snapshot(tmp_path) == after_first
