"""Command line argument handling package."""

from vitetags.ui.cli.args.options import CLIArgs, PathArgs, StatusArgs, TagsArgs
from vitetags.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "CLIArgs", "PathArgs", "StatusArgs", "TagsArgs"]
