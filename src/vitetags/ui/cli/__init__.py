"""Command line interface package."""

from vitetags.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
