"""Command line interface for genmodule."""

from genmodule.cli.app import app

__all__ = ["app"]
