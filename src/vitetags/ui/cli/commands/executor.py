"""src/vitetags/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Build the resolver from configuration once per command invocation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from pathlib import Path

from rich.console import Console

from vitetags.config.config import load_vite_config
from vitetags.features.resolution.usecases.resolver import Vite


def build_vite(config_path: Path | None) -> Vite:
    """Create a resolver from the configuration file at ``config_path``."""

    return Vite(load_vite_config(path=config_path))


class CommandExecutor(ABC):
    """Base class for command execution."""

    vite: Vite
    console: Console

    def __init__(
        self,
        config_path: Path | None,
        *,
        vite_factory: Callable[[Path | None], Vite] | None = None,
        console: Console | None = None,
    ) -> None:
        self.vite = (vite_factory or build_vite)(config_path)
        # Tags go to stdout verbatim, so highlighting and wrapping stay off.
        self.console = console or Console(highlight=False, soft_wrap=True)

    @abstractmethod
    def execute(self) -> None:
        """Execute the command."""
        ...
