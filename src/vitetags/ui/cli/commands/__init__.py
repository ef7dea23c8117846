"""Command execution package for CLI."""

from vitetags.ui.cli.commands.executor import CommandExecutor
from vitetags.ui.cli.commands.path import PathCommand
from vitetags.ui.cli.commands.status import StatusCommand
from vitetags.ui.cli.commands.tags import TagsCommand

__all__ = ["CommandExecutor", "PathCommand", "StatusCommand", "TagsCommand"]
