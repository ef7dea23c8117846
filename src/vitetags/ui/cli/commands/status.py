"""src/vitetags/ui/cli/commands/status.py
What: Summarize the detected mode and resolved locations in a Rich table.
Why: Make it obvious whether a stale hot file is shadowing a production build.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import final

from typing_extensions import override
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from vitetags.features.resolution.usecases.resolver import Vite
from vitetags.ui.cli.args.options import StatusArgs

from .executor import CommandExecutor


@final
class StatusCommand(CommandExecutor):
    """Render resolver status."""

    def __init__(
        self,
        args: StatusArgs,
        *,
        vite_factory: Callable[[Path | None], Vite] | None = None,
        console: Console | None = None,
    ) -> None:
        super().__init__(args.config_path, vite_factory=vite_factory, console=console)
        self.args = args

    @override
    def execute(self) -> None:
        self.console.print(self._build_table())

    def _build_table(self) -> Table:
        options = self.vite.options
        hot = self.vite.is_hot()

        table = Table(
            title="Vite Asset Status",
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE_HEAD,
        )
        table.add_column("Setting", style="bold")
        table.add_column("Value")

        mode = Text("hot", style="yellow") if hot else Text("manifest", style="green")
        table.add_row("Mode", mode)
        table.add_row("Dev URL", self._or_dim(self.vite.dev_url()))
        table.add_row("Assets URL", self._or_dim(self.vite.assets_url()))
        table.add_row("Hot file", str(options.hot_file))
        table.add_row("Build directory", str(options.build_directory))
        table.add_row("Entrypoints", self._or_dim(", ".join(options.entrypoints)))
        if not hot:
            table.add_row("Manifest entries", str(len(self.vite.manifest())))
        return table

    @staticmethod
    def _or_dim(value: str) -> Text:
        if not value:
            return Text("N/A", style="dim")
        return Text(value)
