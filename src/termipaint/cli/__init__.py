"""Command-line interface."""

from termipaint.cli.app import create_app

__all__ = ["create_app"]
