"""Command line interface."""

from funcore.cli.app import app

__all__ = ["app"]
