"""Common shape of the per-vertical file generators."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from backforge.config import ProjectConfig

from .fragments import build_context
from .templates import TemplateRenderer


class FileGenerator:
    """Renders a table of templates into the project tree.

    Subclasses set ``name`` and ``_FILES`` (template path -> output path,
    relative to the project root) and override ``enabled`` and ``files``
    where the set of outputs depends on the configuration.
    """

    name: str = ""
    _FILES: dict[str, str] = {}

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def enabled(self, config: ProjectConfig) -> bool:
        return True

    def files(self, config: ProjectConfig) -> dict[str, str]:
        return dict(self._FILES)

    def context(self, config: ProjectConfig) -> dict[str, Any]:
        return build_context(config)

    async def generate(self, root: Path, config: ProjectConfig) -> list[Path]:
        """Write this generator's files under *root*.

        Returns:
            The written paths, in table order.  Empty when the generator is
            disabled for *config*.
        """
        if not self.enabled(config):
            return []

        context = self.context(config)
        written: list[Path] = []
        for template_name, output_name in self.files(config).items():
            path = await self.renderer.render_to_file(
                template_name, root / output_name, context
            )
            written.append(path)
        return written
