"""Command-line interface for sparkapi."""

from sparkapi.cli.app import app, create_app, run

__all__ = ["app", "create_app", "run"]
