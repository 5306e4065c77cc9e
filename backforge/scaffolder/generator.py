"""Main scaffolding orchestrator.

Takes a ``ProjectConfig`` and writes a complete Express + TypeScript + Prisma
project into a given root directory: the directory skeleton first, then every
per-domain generator in a fixed order.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from backforge.config import ProjectConfig
from backforge.utils import ensure_dirs

from .application_gen import ApplicationGenerator
from .auth_gen import AuthGenerator
from .base import FileGenerator
from .ci_gen import CIGenerator
from .core_gen import CoreGenerator
from .docker_gen import DockerGenerator
from .observability_gen import ObservabilityGenerator
from .prisma_gen import PrismaGenerator
from .queue_gen import QueueGenerator
from .redis_gen import RedisGenerator
from .root_gen import RootFilesGenerator
from .seed_gen import SeedGenerator
from .templates import TemplateRenderer
from .tests_gen import TestsGenerator
from .tooling_gen import ToolingGenerator
from .upload_gen import FileUploadGenerator


# ---------------------------------------------------------------------------
# Directory skeleton
# ---------------------------------------------------------------------------

BASE_DIRECTORIES: tuple[str, ...] = (
    "src/config",
    "src/controllers",
    "src/services",
    "src/repositories",
    "src/middlewares",
    "src/routes",
    "src/types",
    "src/utils",
    "src/validators",
    "src/events/listeners",
    "src/tasks",
    "src/di",
    "src/modules",
    "src/factories",
    "tests/unit",
    "tests/integration",
    "prisma",
    "scripts/commands",
    ".github/workflows",
)

# Generator classes, in the order their files are written.
GENERATOR_ORDER: tuple[type[FileGenerator], ...] = (
    RootFilesGenerator,
    PrismaGenerator,
    DockerGenerator,
    CoreGenerator,
    AuthGenerator,
    TestsGenerator,
    FileUploadGenerator,
    RedisGenerator,
    QueueGenerator,
    ToolingGenerator,
    SeedGenerator,
    ApplicationGenerator,
    ObservabilityGenerator,
    CIGenerator,
)


def project_directories(config: ProjectConfig) -> list[str]:
    """Relative directories to create before any file is written."""
    dirs = list(BASE_DIRECTORIES)
    if config.include_file_upload:
        dirs.append("uploads")
    if config.include_queue:
        dirs.append("src/queue")
    return dirs


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Main scaffolding orchestrator.

    Generators run strictly one after another; only the directory skeleton
    is created concurrently.  Nothing is caught here: the first failing
    write propagates to the caller, which owns cleanup.
    """

    def __init__(
        self,
        config: ProjectConfig,
        renderer: TemplateRenderer | None = None,
        on_file: Callable[[Path], None] | None = None,
    ) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()
        self.on_file = on_file
        self.generators: list[FileGenerator] = [cls(self.renderer) for cls in GENERATOR_ORDER]

    # -- Public API --------------------------------------------------------

    async def generate(self, root: str | Path) -> Path:
        """Generate the complete project under *root*.

        Args:
            root: The project root itself (not its parent).  It is created
                if missing.

        Returns:
            Path to the generated project root.
        """
        project_root = Path(root)
        await self.create_directories(project_root)

        for generator in self.generators:
            written = await generator.generate(project_root, self.config)
            if self.on_file is not None:
                for path in written:
                    self.on_file(path)

        return project_root

    async def create_directories(self, root: Path) -> list[Path]:
        """Create the root and the directory skeleton; safe to call twice."""
        paths = [root] + [root / rel for rel in project_directories(self.config)]
        return await ensure_dirs(paths)
