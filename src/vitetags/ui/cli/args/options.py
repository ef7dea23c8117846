"""Command line argument options."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, final

from vitetags.features.resolution.domain.attributes import AttributeValue


@final
@dataclass(slots=True)
class TagsArgs:
    """Command line arguments for the ``tags`` subcommand."""

    command: Literal["tags"]
    config_path: Path | None
    entry_points: list[str]
    attributes: dict[str, AttributeValue] = field(default_factory=dict)
    react: bool = False


@final
@dataclass(slots=True)
class PathArgs:
    """Command line arguments for the ``path`` subcommand."""

    command: Literal["path"]
    config_path: Path | None
    asset: str


@final
@dataclass(slots=True)
class StatusArgs:
    """Command line arguments for the ``status`` subcommand."""

    command: Literal["status"]
    config_path: Path | None


CLIArgs = TagsArgs | PathArgs | StatusArgs

__all__ = ["CLIArgs", "PathArgs", "StatusArgs", "TagsArgs"]
