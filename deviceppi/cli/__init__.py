"""deviceppi command line interface."""

from deviceppi.cli.main import app, cli_main

__all__ = ["app", "cli_main"]
