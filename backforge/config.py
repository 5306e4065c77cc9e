"""BackForge configuration.

Two pydantic v2 models live here:

* ``ProjectConfig`` -- the immutable record of user choices that drives every
  generation decision.  It is built once per run and passed, read-only, to
  every generator.
* ``Settings`` -- run-level knobs (where to create the project, whether to
  run the package manager) that do not affect the generated content.
"""

from __future__ import annotations

import os
import re
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .errors import ConfigurationError


PROJECT_NAME_PATTERN = re.compile(r"^[a-z0-9-]+$")


class Database(str, Enum):
    POSTGRESQL = "postgresql"
    MYSQL = "mysql"
    MONGODB = "mongodb"
    SQLITE = "sqlite"


class FileStorage(str, Enum):
    LOCAL = "local"
    S3 = "s3"
    NONE = "none"


class PackageManager(str, Enum):
    NPM = "npm"
    PNPM = "pnpm"
    YARN = "yarn"


def normalize_project_name(name: str) -> str:
    """Lower-case and trim *name*, then validate it.

    Raises:
        ConfigurationError: If the result is empty or contains anything other
            than lowercase letters, digits and hyphens.
    """
    normalized = name.strip().lower()
    if not PROJECT_NAME_PATTERN.match(normalized):
        raise ConfigurationError(
            f"Invalid project name '{name}': project name must be lowercase, "
            "alphanumeric, and can contain hyphens"
        )
    return normalized


class ProjectConfig(BaseModel):
    """Immutable record of the options selected for a generated project."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., description="Directory name and package.json name")
    database: Database = Field(default=Database.POSTGRESQL)
    include_auth: bool = Field(default=True, description="JWT authentication vertical")
    include_docker: bool = Field(default=True, description="Dockerfile and compose file")
    include_file_upload: bool = Field(default=False)
    file_storage: FileStorage = Field(default=FileStorage.NONE)
    include_redis: bool = Field(default=False, description="Redis client and cache service")
    include_queue: bool = Field(default=False, description="Bull job queue (requires Redis)")
    package_manager: PackageManager = Field(default=PackageManager.NPM)

    @field_validator("project_name", mode="before")
    @classmethod
    def _validate_name(cls, value: object) -> str:
        if not isinstance(value, str):
            raise ConfigurationError("Project name must be a string")
        return normalize_project_name(value)

    @model_validator(mode="before")
    @classmethod
    def _normalize_file_storage(cls, data: object) -> object:
        # file_storage only carries meaning when uploads are enabled
        if not isinstance(data, dict):
            return data
        values = dict(data)
        storage = values.get("file_storage", FileStorage.NONE)
        storage = storage.value if isinstance(storage, FileStorage) else storage
        if not values.get("include_file_upload", False):
            values["file_storage"] = FileStorage.NONE
        elif storage in (None, FileStorage.NONE.value):
            values["file_storage"] = FileStorage.LOCAL
        return values

    @model_validator(mode="after")
    def _check_queue_requires_redis(self) -> "ProjectConfig":
        if self.include_queue and not self.include_redis:
            raise ConfigurationError("The job queue requires Redis to be enabled")
        return self

    @classmethod
    def build(cls, **values: object) -> "ProjectConfig":
        """Construct a config, reporting any validation failure as ``ConfigurationError``."""
        try:
            return cls(**values)
        except ValidationError as exc:
            raise ConfigurationError(_first_error_message(exc)) from exc

    # ------------------------------------------------------------------
    # Derived flags
    # ------------------------------------------------------------------

    @property
    def uses_s3(self) -> bool:
        return self.include_file_upload and self.file_storage is FileStorage.S3

    @property
    def needs_client_generation(self) -> bool:
        """Whether the driver runs ``db:generate`` after installing."""
        return self.database is not Database.SQLITE


def _first_error_message(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {first.get('msg', 'invalid value')}" if location else first.get("msg", str(exc))


class Settings(BaseModel):
    """Run-level settings that do not influence generated content."""

    directory: Path = Field(default_factory=Path.cwd, description="Parent of the new project")
    skip_install: bool = Field(default=False, description="Skip the package-manager steps")
    verbose: bool = Field(default=False, description="Print every written file")

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            BACKFORGE_DIRECTORY, BACKFORGE_SKIP_INSTALL, BACKFORGE_VERBOSE.
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("BACKFORGE_DIRECTORY"):
            kwargs["directory"] = Path(os.environ["BACKFORGE_DIRECTORY"])
        if os.environ.get("BACKFORGE_SKIP_INSTALL"):
            kwargs["skip_install"] = _env_flag(os.environ["BACKFORGE_SKIP_INSTALL"])
        if os.environ.get("BACKFORGE_VERBOSE"):
            kwargs["verbose"] = _env_flag(os.environ["BACKFORGE_VERBOSE"])
        return cls(**kwargs)


def _env_flag(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}
