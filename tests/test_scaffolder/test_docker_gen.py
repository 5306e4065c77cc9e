"""Tests for Dockerfile, docker-compose and CI workflow generation.

Covers:
- DockerGenerator gating on include_docker
- Output paths (with a mocked renderer)
- Compose services per database, Redis, upload volume
- Dockerfile install lines per package manager
- CI service containers, env and pnpm setup step
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
import yaml

from backforge.config import Database, ProjectConfig
from backforge.scaffolder.ci_gen import CIGenerator
from backforge.scaffolder.docker_gen import DockerGenerator
from backforge.scaffolder.fragments import compose_database_url
from backforge.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_renderer() -> MagicMock:
    """A mock TemplateRenderer that tracks render_to_file calls."""
    renderer = MagicMock(spec=TemplateRenderer)

    async def mock_render_to_file(template_path: str, output_path, context):
        out = Path(output_path)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(f"# Rendered from {template_path}\n", encoding="utf-8")
        return out

    renderer.render_to_file = AsyncMock(side_effect=mock_render_to_file)
    return renderer


def _config(**overrides) -> ProjectConfig:
    values = {"project_name": "dock-api", "include_docker": True}
    values.update(overrides)
    return ProjectConfig.build(**values)


async def _compose(tmp_path: Path, **overrides) -> dict:
    await DockerGenerator(TemplateRenderer()).generate(tmp_path, _config(**overrides))
    return yaml.safe_load((tmp_path / "docker-compose.yml").read_text(encoding="utf-8"))


async def _workflow(tmp_path: Path, **overrides) -> dict:
    await CIGenerator(TemplateRenderer()).generate(tmp_path, _config(**overrides))
    return yaml.safe_load((tmp_path / ".github/workflows/ci.yml").read_text(encoding="utf-8"))


# ---------------------------------------------------------------------------
# DockerGenerator
# ---------------------------------------------------------------------------


class TestDockerGenerator:
    async def test_writes_three_files(self, mock_renderer, tmp_path: Path):
        written = await DockerGenerator(mock_renderer).generate(tmp_path, _config())
        assert [p.relative_to(tmp_path).as_posix() for p in written] == [
            "Dockerfile",
            "docker-compose.yml",
            ".dockerignore",
        ]
        assert mock_renderer.render_to_file.await_count == 3

    async def test_disabled_without_docker(self, mock_renderer, tmp_path: Path):
        written = await DockerGenerator(mock_renderer).generate(
            tmp_path, _config(include_docker=False)
        )
        assert written == []
        mock_renderer.render_to_file.assert_not_awaited()

    async def test_context_passed_to_renderer(self, mock_renderer, tmp_path: Path):
        await DockerGenerator(mock_renderer).generate(tmp_path, _config(database="mysql"))
        context = mock_renderer.render_to_file.await_args_list[0].args[2]
        assert context["project_name"] == "dock-api"
        assert context["compose_db"].name == "mysql"


class TestCompose:
    @pytest.mark.parametrize(
        "database, service",
        [("postgresql", "postgres"), ("mysql", "mysql"), ("mongodb", "mongodb")],
    )
    async def test_database_service(self, tmp_path: Path, database, service):
        compose = await _compose(tmp_path, database=database)
        assert set(compose["services"]) == {"app", service}
        assert compose["services"]["app"]["depends_on"] == [service]
        env = compose["services"]["app"]["environment"]
        assert f"DATABASE_URL={compose_database_url(Database(database))}" in env
        assert len(compose["volumes"]) == 1

    async def test_sqlite_has_only_app(self, tmp_path: Path):
        compose = await _compose(tmp_path, database="sqlite")
        assert set(compose["services"]) == {"app"}
        assert "depends_on" not in compose["services"]["app"]
        assert "volumes" not in compose

    async def test_redis_service(self, tmp_path: Path):
        compose = await _compose(tmp_path, include_redis=True)
        assert "redis" in compose["services"]
        assert compose["services"]["app"]["depends_on"] == ["postgres", "redis"]
        assert "REDIS_HOST=redis" in compose["services"]["app"]["environment"]
        assert set(compose["volumes"]) == {"postgres_data", "redis_data"}

    async def test_local_upload_volume(self, tmp_path: Path):
        compose = await _compose(tmp_path, include_file_upload=True)
        assert compose["services"]["app"]["volumes"] == ["./uploads:/app/uploads"]

    async def test_s3_upload_has_no_volume(self, tmp_path: Path):
        compose = await _compose(tmp_path, include_file_upload=True, file_storage="s3")
        assert "volumes" not in compose["services"]["app"]

    async def test_every_service_on_backend_network(self, tmp_path: Path):
        compose = await _compose(tmp_path, include_redis=True)
        for service in compose["services"].values():
            assert service["networks"] == ["backend"]
        assert "backend" in compose["networks"]


class TestDockerfile:
    @pytest.mark.parametrize(
        "pm, lockfile, install",
        [
            ("npm", "package-lock.json", "npm ci"),
            ("pnpm", "pnpm-lock.yaml", "pnpm install"),
            ("yarn", "yarn.lock", "yarn install"),
        ],
    )
    async def test_install_matches_package_manager(self, tmp_path: Path, pm, lockfile, install):
        await DockerGenerator(TemplateRenderer()).generate(tmp_path, _config(package_manager=pm))
        dockerfile = (tmp_path / "Dockerfile").read_text(encoding="utf-8")
        assert f"COPY package.json {lockfile}* ./" in dockerfile
        assert install in dockerfile
        assert f"{pm} run db:generate && {pm} run build" in dockerfile
        assert dockerfile.count("FROM node:20-alpine") == 2

    async def test_dockerignore(self, tmp_path: Path):
        await DockerGenerator(TemplateRenderer()).generate(tmp_path, _config())
        ignored = (tmp_path / ".dockerignore").read_text(encoding="utf-8").split()
        assert "node_modules" in ignored
        assert ".env" in ignored


# ---------------------------------------------------------------------------
# CIGenerator
# ---------------------------------------------------------------------------


class TestCIWorkflow:
    async def test_written_regardless_of_docker(self, tmp_path: Path):
        written = await CIGenerator(TemplateRenderer()).generate(
            tmp_path, _config(include_docker=False)
        )
        assert [p.relative_to(tmp_path).as_posix() for p in written] == [".github/workflows/ci.yml"]

    @pytest.mark.parametrize(
        "database, service",
        [("postgresql", "postgres"), ("mysql", "mysql"), ("mongodb", "mongodb")],
    )
    async def test_database_service(self, tmp_path: Path, database, service):
        workflow = await _workflow(tmp_path, database=database)
        job = workflow["jobs"]["test"]
        assert list(job["services"]) == [service]
        assert job["env"]["DATABASE_URL"].startswith(f"{database}://")

    async def test_sqlite_has_no_services(self, tmp_path: Path):
        workflow = await _workflow(tmp_path, database="sqlite")
        job = workflow["jobs"]["test"]
        assert "services" not in job
        assert job["env"]["DATABASE_URL"] == "file:./test.db"

    async def test_redis_service_and_env(self, tmp_path: Path):
        workflow = await _workflow(tmp_path, include_redis=True)
        job = workflow["jobs"]["test"]
        assert list(job["services"]) == ["postgres", "redis"]
        assert job["env"]["REDIS_HOST"] == "localhost"

    async def test_jwt_secret_only_with_auth(self, tmp_path: Path):
        with_auth = await _workflow(tmp_path / "a", include_auth=True)
        without_auth = await _workflow(tmp_path / "b", include_auth=False)
        assert "JWT_SECRET" in with_auth["jobs"]["test"]["env"]
        assert "JWT_SECRET" not in without_auth["jobs"]["test"]["env"]

    @pytest.mark.parametrize("pm", ["npm", "pnpm", "yarn"])
    async def test_steps_use_package_manager(self, tmp_path: Path, pm):
        workflow = await _workflow(tmp_path, package_manager=pm)
        steps = workflow["jobs"]["test"]["steps"]
        runs = [step["run"] for step in steps if "run" in step]
        assert runs == [
            f"{pm} install",
            f"{pm} run db:generate",
            f"{pm} run lint",
            f"{pm} run test",
            f"{pm} run build",
        ]
        uses = [step["uses"] for step in steps if "uses" in step]
        assert ("pnpm/action-setup@v4" in uses) is (pm == "pnpm")

    async def test_triggers(self, tmp_path: Path):
        workflow = await _workflow(tmp_path)
        # PyYAML reads the bare ``on`` key as boolean True
        triggers = workflow[True]
        assert triggers["push"]["branches"] == ["main", "develop"]
        assert triggers["pull_request"]["branches"] == ["main", "develop"]
