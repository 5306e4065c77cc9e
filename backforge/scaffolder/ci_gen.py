"""GitHub Actions workflow generation."""

from __future__ import annotations

from .base import FileGenerator


class CIGenerator(FileGenerator):
    """Writes ``.github/workflows/ci.yml``.

    The test job gets a service container matching the database (none for
    SQLite) plus Redis when enabled, and a ``pnpm/action-setup`` step when
    the project uses pnpm.
    """

    name = "ci"
    _FILES = {"ci/ci.yml.j2": ".github/workflows/ci.yml"}
