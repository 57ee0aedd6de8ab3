"""Command line interface for mtr-directions."""

from .main import cli

__all__ = ["cli"]
