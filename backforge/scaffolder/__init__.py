"""BackForge scaffolder -- writes a complete backend project tree.

This package takes a ``ProjectConfig`` and renders an Express + TypeScript +
Prisma project into a directory: package manifest, compiler and linter
configs, Prisma schema, Docker and CI files, and the optional
authentication, upload, Redis and queue verticals.

Quick usage::

    from backforge.config import ProjectConfig
    from backforge.scaffolder import ProjectGenerator

    config = ProjectConfig(project_name="my-api", include_redis=True)
    generator = ProjectGenerator(config)
    project_path = await generator.generate("/tmp/my-api")
"""

from backforge.scaffolder.base import FileGenerator
from backforge.scaffolder.generator import GENERATOR_ORDER, ProjectGenerator
from backforge.scaffolder.templates import TemplateRenderer

__all__ = [
    "FileGenerator",
    "GENERATOR_ORDER",
    "ProjectGenerator",
    "TemplateRenderer",
]
