"""Source file discovery."""

from fmtcheck.application.discovery.files import discover_files

__all__ = ["discover_files"]
