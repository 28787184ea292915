"""Tests for adapters/registry.py."""

from unittest.mock import MagicMock, patch

import pytest

from fmtcheck.domain.exceptions import ConfigurationError
from fmtcheck.infrastructure.adapters import BlackFormatter, FormatterRegistry, WhitespaceFormatter, default_registry
from tests.factories import MarkerFormatter


class TestFormatterRegistry:
    """Tests for FormatterRegistry."""

    def test_register_and_get(self) -> None:
        registry = FormatterRegistry()
        formatter = WhitespaceFormatter()
        registry.register(formatter)
        assert registry.get("whitespace") is formatter

    def test_names_sorted(self) -> None:
        registry = FormatterRegistry()
        registry.register(WhitespaceFormatter())
        registry.register(BlackFormatter())
        assert registry.names() == ["black", "whitespace"]

    def test_unknown_name_lists_available(self) -> None:
        registry = FormatterRegistry()
        registry.register(BlackFormatter())
        with pytest.raises(ConfigurationError, match="Available formatters: black"):
            registry.get("prettier")

    def test_duplicate_name_raises(self) -> None:
        registry = FormatterRegistry()
        registry.register(BlackFormatter())
        with pytest.raises(ConfigurationError, match="already registered"):
            registry.register(BlackFormatter())


class TestEntryPoints:
    """Tests for load_entry_points()."""

    def test_loads_class_entry_point(self) -> None:
        ep = MagicMock()
        ep.name = "marker"
        ep.value = "tests.factories:MarkerFormatter"
        ep.load.return_value = MarkerFormatter

        registry = FormatterRegistry()
        with patch("fmtcheck.infrastructure.adapters.registry.entry_points", return_value=[ep]):
            registry.load_entry_points()

        assert isinstance(registry.get("marker"), MarkerFormatter)

    def test_non_formatter_fails_on_request(self) -> None:
        ep = MagicMock()
        ep.name = "bogus"
        ep.load.return_value = object()

        registry = FormatterRegistry()
        with patch("fmtcheck.infrastructure.adapters.registry.entry_points", return_value=[ep]):
            registry.load_entry_points()

        with pytest.raises(ConfigurationError, match="'bogus' failed to load: .*FormatterPort"):
            registry.get("bogus")

    def test_import_failure_does_not_escape(self, caplog: pytest.LogCaptureFixture) -> None:
        ep = MagicMock()
        ep.name = "broken"
        ep.load.side_effect = ImportError("No module named 'broken_plugin'")

        registry = FormatterRegistry()
        registry.register(WhitespaceFormatter())
        with (
            caplog.at_level("WARNING", logger="fmtcheck"),
            patch("fmtcheck.infrastructure.adapters.registry.entry_points", return_value=[ep]),
        ):
            registry.load_entry_points()

        assert isinstance(registry.get("whitespace"), WhitespaceFormatter)
        assert "broken" in caplog.text
        with pytest.raises(ConfigurationError, match="No module named 'broken_plugin'"):
            registry.get("broken")

    def test_constructor_failure_does_not_escape(self) -> None:
        class Exploding(WhitespaceFormatter):
            name = "exploding"

            def __init__(self) -> None:
                raise RuntimeError("missing license key")

        ep = MagicMock()
        ep.name = "exploding"
        ep.load.return_value = Exploding

        registry = FormatterRegistry()
        with patch("fmtcheck.infrastructure.adapters.registry.entry_points", return_value=[ep]):
            registry.load_entry_points()

        with pytest.raises(ConfigurationError, match="missing license key"):
            registry.get("exploding")

    def test_builtin_name_wins_over_plugin(self) -> None:
        class Shadow(MarkerFormatter):
            name = "whitespace"

        ep = MagicMock()
        ep.name = "whitespace"
        ep.load.return_value = Shadow
        builtin = WhitespaceFormatter()
        registry = FormatterRegistry()
        registry.register(builtin)
        with patch("fmtcheck.infrastructure.adapters.registry.entry_points", return_value=[ep]):
            registry.load_entry_points()

        assert registry.get("whitespace") is builtin

class TestDefaultRegistry:
    """Tests for default_registry()."""

    def test_has_builtins(self) -> None:
        with patch("fmtcheck.infrastructure.adapters.registry.entry_points", return_value=[]):
            registry = default_registry()
        assert isinstance(registry.get("black"), BlackFormatter)
        assert isinstance(registry.get("whitespace"), WhitespaceFormatter)

    def test_broken_plugin_keeps_builtins_usable(self) -> None:
        ep = MagicMock()
        ep.name = "broken"
        ep.load.side_effect = ImportError("boom")

        with patch("fmtcheck.infrastructure.adapters.registry.entry_points", return_value=[ep]):
            registry = default_registry()

        assert isinstance(registry.get("black"), BlackFormatter)
