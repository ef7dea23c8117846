"""Command line interface for vitetags."""

import sys
from typing import final

from vitetags.config.config import ConfigError
from vitetags.features.resolution.domain.errors import ViteError
from vitetags.platform.logging import logger
from vitetags.ui.cli.args import ArgumentParser
from vitetags.ui.cli.args.options import CLIArgs, PathArgs, StatusArgs, TagsArgs
from vitetags.ui.cli.commands import CommandExecutor, PathCommand, StatusCommand, TagsCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def build_command(args: CLIArgs) -> CommandExecutor:
        if isinstance(args, TagsArgs):
            return TagsCommand(args)
        if isinstance(args, PathArgs):
            return PathCommand(args)
        assert isinstance(args, StatusArgs)
        return StatusCommand(args)

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            CommandProcessor.build_command(args).execute()
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(130)
        except (ViteError, ConfigError) as e:
            logger.error("%s", e)
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through ``sys.exit``.
    """
    CommandProcessor.process_command()
    return 0
