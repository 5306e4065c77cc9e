"""Docker image and compose file generation.

The compose file carries one database service block for the selected engine
(none for SQLite) and an additional Redis service when Redis is enabled.
"""

from __future__ import annotations

from backforge.config import ProjectConfig

from .base import FileGenerator


class DockerGenerator(FileGenerator):
    """Generates ``Dockerfile``, ``docker-compose.yml`` and ``.dockerignore``."""

    name = "docker"
    _FILES = {
        "docker/Dockerfile.j2": "Dockerfile",
        "docker/docker-compose.yml.j2": "docker-compose.yml",
        "docker/dockerignore.j2": ".dockerignore",
    }

    def enabled(self, config: ProjectConfig) -> bool:
        return config.include_docker
