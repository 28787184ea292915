"""Allow `python -m fmtcheck`."""

from fmtcheck.presentation.cli.app import main

main()
