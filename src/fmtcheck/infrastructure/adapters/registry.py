"""Formatter registry and discovery helpers."""

from __future__ import annotations

import logging
from importlib.metadata import EntryPoint, entry_points

from fmtcheck.domain.exceptions.configuration import ConfigurationError
from fmtcheck.domain.ports.formatter import FormatterPort
from fmtcheck.infrastructure.adapters.black_formatter import BlackFormatter
from fmtcheck.infrastructure.adapters.whitespace_formatter import WhitespaceFormatter

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "fmtcheck.formatters"


class FormatterRegistry:
    """Registry for formatters, keyed by FormatterPort.name.

    Entry points that fail to load are remembered, not raised:
    the failure surfaces only when that formatter is requested.
    """

    def __init__(self) -> None:
        self._formatters: dict[str, FormatterPort] = {}
        self._broken: dict[str, str] = {}

    def register(self, formatter: FormatterPort) -> None:
        """Register formatter instance by unique name.

        Raises:
            ConfigurationError: If formatter has no name or name is taken
        """
        name = getattr(formatter, "name", "").strip()
        if not name:
            raise ConfigurationError("formatter must define a non-empty 'name'")
        if name in self._formatters:
            raise ConfigurationError(f"formatter '{name}' is already registered")
        self._formatters[name] = formatter

    def names(self) -> list[str]:
        """Return registered formatter names, sorted."""
        return sorted(self._formatters)

    def get(self, name: str) -> FormatterPort:
        """Get formatter by name.

        Raises:
            ConfigurationError: If name is not registered or its entry point is broken
        """
        if name in self._broken:
            raise ConfigurationError(f"formatter '{name}' failed to load: {self._broken[name]}")
        try:
            return self._formatters[name]
        except KeyError as e:
            raise ConfigurationError(
                f"unknown formatter '{name}'. Available formatters: {', '.join(self.names())}"
            ) from e

    def load_entry_points(self, group: str = ENTRY_POINT_GROUP) -> None:
        """Register formatters advertised by installed distributions.

        An entry point may reference a FormatterPort subclass or instance.
        A broken entry point is logged and skipped, so it cannot take the
        built-in formatters down with it. Names already registered win.
        """
        for ep in entry_points(group=group):
            try:
                formatter = _load_formatter(ep)
                self.register(formatter)
            except Exception as e:
                # plugin code: any failure disables only this entry point
                logger.warning("Skipping formatter entry point '%s': %s", ep.name, e)
                if ep.name not in self._formatters:
                    self._broken.setdefault(ep.name, str(e) or type(e).__name__)
                continue
            logger.debug("Loaded formatter '%s' from entry point %s", formatter.name, ep.value)


def _load_formatter(ep: EntryPoint) -> FormatterPort:
    """Import an entry point and instantiate it when it is a class.

    Raises:
        ConfigurationError: If the entry point does not yield a FormatterPort
    """
    loaded = ep.load()
    formatter = loaded() if isinstance(loaded, type) else loaded
    if not isinstance(formatter, FormatterPort):
        raise ConfigurationError(
            f"entry point '{ep.name}' must provide a FormatterPort, got {type(formatter).__name__}"
        )
    return formatter


def default_registry() -> FormatterRegistry:
    """Registry with built-in formatters plus installed entry points."""
    registry = FormatterRegistry()
    registry.register(BlackFormatter())
    registry.register(WhitespaceFormatter())
    registry.load_entry_points()
    return registry
