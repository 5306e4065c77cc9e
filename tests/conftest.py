"""Shared pytest fixtures for the BackForge test suite.

Provides reusable fixtures for:
- Project configurations (minimal, default, fully-featured)
- Temporary parent directories for generated projects
- A renderer bound to the bundled templates
- A generator helper that writes a project and returns its root
- A mocked ``run_command`` for the creation driver
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from backforge.config import ProjectConfig, Settings
from backforge.scaffolder.generator import ProjectGenerator
from backforge.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------

@pytest.fixture
def minimal_config() -> ProjectConfig:
    """SQLite, every optional vertical off."""
    return ProjectConfig.build(
        project_name="mini-api",
        database="sqlite",
        include_auth=False,
        include_docker=False,
        include_file_upload=False,
        include_redis=False,
        include_queue=False,
        package_manager="npm",
    )


@pytest.fixture
def default_config() -> ProjectConfig:
    """The answers a user gets by pressing Enter at every prompt."""
    return ProjectConfig.build(project_name="my-api")


@pytest.fixture
def full_config() -> ProjectConfig:
    """Every vertical on, S3 storage, pnpm."""
    return ProjectConfig.build(
        project_name="full-api",
        database="mysql",
        include_auth=True,
        include_docker=True,
        include_file_upload=True,
        file_storage="s3",
        include_redis=True,
        include_queue=True,
        package_manager="pnpm",
    )


# ---------------------------------------------------------------------------
# Paths & rendering
# ---------------------------------------------------------------------------

@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Parent directory that generated projects are created in."""
    parent = tmp_path / "workspace"
    parent.mkdir()
    return parent


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture
def generate_project(
    output_dir: Path,
) -> Callable[[ProjectConfig], Awaitable[Path]]:
    """Return an async helper that writes *config* under ``output_dir``."""

    async def _generate(config: ProjectConfig) -> Path:
        generator = ProjectGenerator(config)
        return await generator.generate(output_dir / config.project_name)

    return _generate


# ---------------------------------------------------------------------------
# Creation driver
# ---------------------------------------------------------------------------

@pytest.fixture
def settings(output_dir: Path) -> Settings:
    return Settings(directory=output_dir)


@pytest.fixture
def mock_run_command():
    """Patch the driver's ``run_command`` so no package manager is spawned.

    The mock succeeds by default; set ``return_value`` or ``side_effect`` on
    it to simulate failures.
    """
    mock = AsyncMock(return_value=(0, "", ""))
    with patch("backforge.creator.run_command", mock):
        yield mock
