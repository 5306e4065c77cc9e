"""Interactive collection of a ``ProjectConfig``.

Questions are asked with ``rich.prompt`` on a ``Console`` (injectable for
tests).  Dependent questions are skipped when their parent option is off:
storage only follows an enabled upload, the queue only follows Redis.
"""

from __future__ import annotations

from rich.console import Console
from rich.prompt import Confirm, Prompt

from .config import (
    Database,
    FileStorage,
    PackageManager,
    ProjectConfig,
    normalize_project_name,
)
from .errors import ConfigurationError

DEFAULT_PROJECT_NAME = "my-project"


def _choices(enum_cls: type) -> list[str]:
    return [member.value for member in enum_cls if member.value != "none"]


def ask_project_name(console: Console) -> str:
    """Ask for a project name until a valid one is entered."""
    while True:
        raw = Prompt.ask("Project name", default=DEFAULT_PROJECT_NAME, console=console)
        try:
            return normalize_project_name(raw)
        except ConfigurationError as exc:
            console.print(f"[red]{exc}[/red]")


def prompt_project_config(
    default_name: str | None = None,
    console: Console | None = None,
) -> ProjectConfig:
    """Collect the project options.

    Args:
        default_name: Name given on the command line.  When non-empty it is
            validated immediately and the name question is skipped.
        console: Console to prompt on.  Defaults to a fresh stdout console.

    Raises:
        ConfigurationError: If *default_name* is not a valid project name.
    """
    console = console or Console()

    if default_name:
        project_name = normalize_project_name(default_name)
    else:
        project_name = ask_project_name(console)

    database = Prompt.ask(
        "Select database",
        choices=_choices(Database),
        default=Database.POSTGRESQL.value,
        console=console,
    )
    include_auth = Confirm.ask("Include JWT authentication?", default=True, console=console)
    include_docker = Confirm.ask("Include Docker configuration?", default=True, console=console)

    include_file_upload = Confirm.ask("Include file upload support?", default=False, console=console)
    file_storage = FileStorage.NONE.value
    if include_file_upload:
        file_storage = Prompt.ask(
            "File storage",
            choices=_choices(FileStorage),
            default=FileStorage.LOCAL.value,
            console=console,
        )

    include_redis = Confirm.ask("Include Redis cache?", default=False, console=console)
    include_queue = False
    if include_redis:
        include_queue = Confirm.ask("Include job queue (Bull)?", default=False, console=console)

    package_manager = Prompt.ask(
        "Select package manager",
        choices=_choices(PackageManager),
        default=PackageManager.NPM.value,
        console=console,
    )

    return ProjectConfig.build(
        project_name=project_name,
        database=database,
        include_auth=include_auth,
        include_docker=include_docker,
        include_file_upload=include_file_upload,
        file_storage=file_storage,
        include_redis=include_redis,
        include_queue=include_queue,
        package_manager=package_manager,
    )
