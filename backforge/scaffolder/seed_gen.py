"""Database seeding and model factories."""

from __future__ import annotations

from backforge.config import ProjectConfig

from .base import FileGenerator


class SeedGenerator(FileGenerator):
    name = "seed"
    _FILES = {"seed/seed.ts.j2": "prisma/seed.ts"}

    def files(self, config: ProjectConfig) -> dict[str, str]:
        files = dict(self._FILES)
        if config.include_auth:
            files["seed/user.factory.ts.j2"] = "src/factories/user.factory.ts"
        return files
