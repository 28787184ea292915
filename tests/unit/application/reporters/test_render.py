"""Tests for reporters/render.py."""

import pytest

from fmtcheck.application.reporters.render import render, summarize
from fmtcheck.domain.model.run_result import RunResult
from tests.factories import make_changed, make_parse_error, make_run_result, make_unchanged


class TestRender:
    """Tests for render()."""

    def test_keeps_order(self) -> None:
        outcomes = [make_changed("b.py"), make_unchanged("a.py"), make_parse_error("c.py")]

        result = render(outcomes)

        assert result.outcomes == tuple(outcomes)

    def test_accepts_generator(self) -> None:
        result = render(o for o in [make_unchanged("a.py")])

        assert result.file_count == 1

    def test_empty(self) -> None:
        assert render([]) == RunResult.empty()

    def test_duplicate_file_raises(self) -> None:
        with pytest.raises(ValueError, match="duplicate"):
            render([make_unchanged("a.py"), make_changed("a.py")])


class TestSummarize:
    """Tests for summarize()."""

    def test_one_line_per_attention_file(self) -> None:
        result = make_run_result(
            make_changed("pkg/a.py"),
            make_unchanged("pkg/b.py"),
            make_parse_error("pkg/c.py", message="bad input on line 1"),
        )

        assert summarize(result) == (
            "changed: pkg/a.py",
            "error: pkg/c.py: bad input on line 1",
        )

    def test_applied_labels_changed_as_formatted(self) -> None:
        result = make_run_result(make_changed("a.py"), make_parse_error("b.py"))

        lines = summarize(result, applied=True)

        assert lines[0] == "formatted: a.py"
        assert lines[1].startswith("error: b.py: ")

    def test_clean_result_is_empty(self) -> None:
        assert summarize(make_run_result(make_unchanged("a.py"))) == ()

    def test_empty_result_is_empty(self) -> None:
        assert summarize(RunResult.empty()) == ()
