"""Jest test suites for the generated project."""

from __future__ import annotations

from backforge.config import ProjectConfig

from .base import FileGenerator


class TestsGenerator(FileGenerator):
    """Writes the health tests, plus auth validator tests when auth is enabled."""

    __test__ = False

    name = "tests"
    _FILES = {
        "tests/health.controller.test.ts.j2": "tests/unit/health.controller.test.ts",
        "tests/health.api.test.ts.j2": "tests/integration/health.api.test.ts",
    }

    def files(self, config: ProjectConfig) -> dict[str, str]:
        files = dict(self._FILES)
        if config.include_auth:
            files["tests/auth.validator.test.ts.j2"] = "tests/unit/auth.validator.test.ts"
        return files
