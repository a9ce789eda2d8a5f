"""Command-line interface for paramregistry."""

from .main import cli

__all__ = ["cli"]
