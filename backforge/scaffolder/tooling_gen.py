"""Developer tooling: the ``make:*`` code generator and the commander CLI."""

from __future__ import annotations

from backforge.config import ProjectConfig

from .base import FileGenerator


class ToolingGenerator(FileGenerator):
    """Writes ``scripts/make.ts`` and ``scripts/commands/*``.

    Command modules exist only for enabled features, and
    ``scripts/commands/index.ts`` registers exactly those modules.
    """

    name = "tooling"
    _FILES = {
        "tooling/make.ts.j2": "scripts/make.ts",
        "tooling/commands_index.ts.j2": "scripts/commands/index.ts",
        "tooling/db-seed.ts.j2": "scripts/commands/db-seed.ts",
    }

    def files(self, config: ProjectConfig) -> dict[str, str]:
        files = dict(self._FILES)
        if config.include_redis:
            files["tooling/cache-clear.ts.j2"] = "scripts/commands/cache-clear.ts"
        if config.include_queue:
            files["tooling/queue-work.ts.j2"] = "scripts/commands/queue-work.ts"
        return files
