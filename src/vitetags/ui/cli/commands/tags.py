"""src/vitetags/ui/cli/commands/tags.py
What: Print serialized tags for the requested entrypoints.
Why: Let build scripts and templates outside Python reuse the resolver.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import final

from typing_extensions import override
from rich.console import Console

from vitetags.features.resolution.domain.element import ViteElement
from vitetags.features.resolution.usecases.resolver import Vite
from vitetags.platform.logging import logger
from vitetags.ui.cli.args.options import TagsArgs

from .executor import CommandExecutor


@final
class TagsCommand(CommandExecutor):
    """Render tags one per line."""

    def __init__(
        self,
        args: TagsArgs,
        *,
        vite_factory: Callable[[Path | None], Vite] | None = None,
        console: Console | None = None,
    ) -> None:
        super().__init__(args.config_path, vite_factory=vite_factory, console=console)
        self.args = args

    @override
    def execute(self) -> None:
        entry_points = self.args.entry_points or list(self.vite.options.entrypoints)
        if not entry_points:
            logger.warning("No entrypoints given and none configured")
            return

        tags: list[ViteElement] = []
        if self.args.react:
            preamble = self.vite.get_react_hmr_script()
            if preamble is not None:
                tags.append(preamble)
        tags.extend(
            self.vite.generate_entry_points_tags(entry_points, self.args.attributes or None)
        )

        for tag in tags:
            self.console.out(str(tag))
