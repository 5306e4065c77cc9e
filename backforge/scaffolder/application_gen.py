"""Application building blocks: DTOs, events, scheduled tasks, DI, modules,
the layered config system, API versioning and authorization guards."""

from __future__ import annotations

from backforge.config import ProjectConfig

from .base import FileGenerator


class ApplicationGenerator(FileGenerator):
    name = "application"
    _FILES = {
        "application/dto.ts.j2": "src/validators/dto.ts",
        "application/eventEmitter.ts.j2": "src/events/eventEmitter.ts",
        "application/listeners.ts.j2": "src/events/listeners/index.ts",
        "application/tasks.ts.j2": "src/tasks/index.ts",
        "application/container.ts.j2": "src/di/container.ts",
        "application/module.ts.j2": "src/modules/module.ts",
        "application/examples.ts.j2": "src/modules/examples.ts",
        "application/app.config.ts.j2": "src/config/app.config.ts",
        "application/database.config.ts.j2": "src/config/database.config.ts",
        "application/cache.config.ts.j2": "src/config/cache.config.ts",
        "application/config_index.ts.j2": "src/config/index.ts",
        "application/versioning.ts.j2": "src/routes/versioning.ts",
    }

    def files(self, config: ProjectConfig) -> dict[str, str]:
        files = dict(self._FILES)
        if config.include_auth:
            files["application/guards.ts.j2"] = "src/middlewares/guards.ts"
        return files
