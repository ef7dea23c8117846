"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from vitetags.features.resolution.domain.attributes import AttributeValue
from vitetags.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from vitetags.ui.cli.args.options import CLIArgs, PathArgs, StatusArgs, TagsArgs


def parse_attribute(raw: str) -> tuple[str, AttributeValue]:
    """Parse ``KEY=VALUE`` into an attribute pair; a bare ``KEY`` is boolean.

    Raises:
        argparse.ArgumentTypeError: If the key is empty.
    """

    name, sep, value = raw.partition("=")
    name = name.strip()
    if not name:
        raise argparse.ArgumentTypeError(f"Invalid attribute: {raw!r}")
    if not sep:
        return name, True
    return name, value


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="vitetags",
            description="Resolve Vite entrypoints into HTML tags and asset URLs.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "--config",
            type=str,
            help="Path to the vite.toml configuration file",
            metavar="CONFIG_PATH",
        )
        _ = parser.add_argument(
            "--log-file",
            nargs="?",
            const=str(DEFAULT_LOG_FILE),
            help=f"Also write debug logs to a rotating file (default: {DEFAULT_LOG_FILE})",
            metavar="LOG_FILE",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show resolver debug events",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all log output except errors",
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        tags_parser = subparsers.add_parser(
            "tags",
            help="Print script and stylesheet tags for entrypoints",
        )
        _ = tags_parser.add_argument(
            "entry_points",
            nargs="*",
            help="Entrypoints to render (defaults to the configured entrypoints)",
            metavar="ENTRY",
        )
        _ = tags_parser.add_argument(
            "--attr",
            action="append",
            type=parse_attribute,
            default=[],
            help="Extra attribute as KEY=VALUE, or KEY for a boolean attribute",
            metavar="KEY[=VALUE]",
        )
        _ = tags_parser.add_argument(
            "--react",
            action="store_true",
            help="Prepend the React fast-refresh preamble in hot mode",
        )

        path_parser = subparsers.add_parser(
            "path",
            help="Print the public URL of an asset",
        )
        _ = path_parser.add_argument(
            "asset",
            type=str,
            help="Entrypoint or dev server asset path",
            metavar="ASSET",
        )

        _ = subparsers.add_parser(
            "status",
            help="Show the detected mode and resolved locations",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO
        log_file = Path(parsed_args.log_file) if parsed_args.log_file else None
        _ = setup_logger(log_file=log_file, console_level=log_level)

        config_path = Path(parsed_args.config) if parsed_args.config else None
        command: str = parsed_args.command

        if command == "tags":
            return TagsArgs(
                command="tags",
                config_path=config_path,
                entry_points=list(parsed_args.entry_points),
                attributes=dict(parsed_args.attr),
                react=parsed_args.react,
            )

        if command == "path":
            return PathArgs(command="path", config_path=config_path, asset=parsed_args.asset)

        if command == "status":
            return StatusArgs(command="status", config_path=config_path)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)
