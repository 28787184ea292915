"""fmtcheck command line interface."""

from fmtcheck.presentation.cli.app import app, main

__all__ = ["app", "main"]
