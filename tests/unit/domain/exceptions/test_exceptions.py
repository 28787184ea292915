"""Tests for domain/exceptions."""

from pathlib import Path

import pytest

from fmtcheck.domain.exceptions import (
    ConfigurationError,
    DiscoveryError,
    FmtCheckError,
    ParseFailure,
    ReadError,
    StrictCheckError,
    WriteError,
)
from fmtcheck.domain.exceptions.strict import STRICT_FAILURE_MESSAGE
from tests.factories import make_source_file


class TestDiscoveryError:
    """Tests for DiscoveryError exception."""

    def test_is_fmtcheck_error(self) -> None:
        assert issubclass(DiscoveryError, FmtCheckError)

    def test_attributes(self) -> None:
        err = DiscoveryError(Path("src"), "permission denied")
        assert err.path == Path("src")
        assert err.reason == "permission denied"

    def test_message_format(self) -> None:
        err = DiscoveryError(Path("src"), "not a directory")
        assert "Cannot scan" in str(err)
        assert "src" in str(err)
        assert "not a directory" in str(err)

    def test_none_path_raises(self) -> None:
        with pytest.raises(TypeError):
            DiscoveryError(None, "reason")  # type: ignore[arg-type]

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError):
            DiscoveryError(Path("src"), "")


class TestReadError:
    """Tests for ReadError exception."""

    def test_is_fmtcheck_error(self) -> None:
        assert issubclass(ReadError, FmtCheckError)

    def test_message_format(self) -> None:
        err = ReadError(Path("src/main.py"), "permission denied")
        assert "Cannot read" in str(err)
        assert "main.py" in str(err)
        assert "permission denied" in str(err)

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError):
            ReadError(Path("a.py"), "")


class TestWriteError:
    """Tests for WriteError exception."""

    def test_is_fmtcheck_error(self) -> None:
        assert issubclass(WriteError, FmtCheckError)

    def test_message_format(self) -> None:
        err = WriteError(Path("src/main.py"), "permission denied")
        assert str(err) == "Cannot write src/main.py: permission denied"
        assert err.reason == "permission denied"

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError):
            WriteError(Path("a.py"), "")


class TestParseFailure:
    """Tests for ParseFailure exception."""

    def test_is_fmtcheck_error(self) -> None:
        assert issubclass(ParseFailure, FmtCheckError)

    def test_message_is_reason(self) -> None:
        err = ParseFailure("Cannot parse: 1:6")
        assert err.reason == "Cannot parse: 1:6"
        assert str(err) == "Cannot parse: 1:6"

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError):
            ParseFailure("")


class TestConfigurationError:
    """Tests for ConfigurationError exception."""

    def test_message_format(self) -> None:
        err = ConfigurationError("unknown formatter 'x'")
        assert str(err) == "Invalid configuration: unknown formatter 'x'"
        assert err.reason == "unknown formatter 'x'"

    def test_can_catch_as_fmtcheck_error(self) -> None:
        with pytest.raises(FmtCheckError) as exc_info:
            raise ConfigurationError("bad")
        assert isinstance(exc_info.value, ConfigurationError)


class TestStrictCheckError:
    """Tests for StrictCheckError exception."""

    def test_fixed_message(self) -> None:
        err = StrictCheckError((make_source_file("a.py"),))
        assert str(err) == STRICT_FAILURE_MESSAGE
        assert str(err) == "Some files have formatting errors."

    def test_keeps_files(self) -> None:
        files = (make_source_file("a.py"), make_source_file("b.py"))
        err = StrictCheckError(files)
        assert err.needs_attention == files

    def test_requires_files(self) -> None:
        with pytest.raises(ValueError, match="at least one"):
            StrictCheckError(())
