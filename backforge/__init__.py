"""BackForge -- interactive generator for Express + TypeScript + Prisma backends."""

__version__ = "1.0.0"

from backforge.config import Database, FileStorage, PackageManager, ProjectConfig, Settings
from backforge.creator import CreationResult, CreationState, ProjectCreator
from backforge.errors import (
    BackforgeError,
    ConfigurationError,
    DirectoryExistsError,
    GenerationError,
    SubprocessError,
)

__all__ = [
    "__version__",
    "BackforgeError",
    "ConfigurationError",
    "CreationResult",
    "CreationState",
    "Database",
    "DirectoryExistsError",
    "FileStorage",
    "GenerationError",
    "PackageManager",
    "ProjectConfig",
    "ProjectCreator",
    "Settings",
    "SubprocessError",
]
