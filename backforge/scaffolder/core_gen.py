"""Application core: entrypoint, configuration modules, routing and shared utilities."""

from __future__ import annotations

from .base import FileGenerator


class CoreGenerator(FileGenerator):
    """Writes the files every generated project needs.

    ``src/index.ts`` and ``src/routes/index.ts`` are the two files whose
    imports depend on other verticals; both take their conditional pieces
    (startup hooks, route mounts) from the shared fragment context.
    """

    name = "core"
    _FILES = {
        "core/index.ts.j2": "src/index.ts",
        "core/env.ts.j2": "src/config/env.ts",
        "core/database.ts.j2": "src/config/database.ts",
        "core/middlewares.ts.j2": "src/config/middlewares.ts",
        "core/swagger.ts.j2": "src/config/swagger.ts",
        "core/routes_index.ts.j2": "src/routes/index.ts",
        "core/health.routes.ts.j2": "src/routes/health.routes.ts",
        "core/types.ts.j2": "src/types/index.ts",
        "core/validator.ts.j2": "src/middlewares/validator.ts",
        "core/resource.ts.j2": "src/utils/resource.ts",
        "core/pagination.ts.j2": "src/utils/pagination.ts",
    }
