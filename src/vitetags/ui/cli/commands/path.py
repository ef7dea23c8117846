"""src/vitetags/ui/cli/commands/path.py
What: Print the public URL of a single asset.
Why: Expose asset_path for scripts that only need a URL.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import final

from typing_extensions import override
from rich.console import Console

from vitetags.features.resolution.usecases.resolver import Vite
from vitetags.ui.cli.args.options import PathArgs

from .executor import CommandExecutor


@final
class PathCommand(CommandExecutor):
    """Render the URL for one asset."""

    def __init__(
        self,
        args: PathArgs,
        *,
        vite_factory: Callable[[Path | None], Vite] | None = None,
        console: Console | None = None,
    ) -> None:
        super().__init__(args.config_path, vite_factory=vite_factory, console=console)
        self.args = args

    @override
    def execute(self) -> None:
        self.console.out(self.vite.asset_path(self.args.asset))
