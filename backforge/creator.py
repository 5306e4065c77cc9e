"""Project creation driver.

Runs one project creation end to end: destination check, scaffolding,
package installation and Prisma client generation, then the next-steps
summary.  Any failure after the destination has been created removes it
again before the error is raised.
"""

from __future__ import annotations

import asyncio
import shutil
from enum import Enum
from pathlib import Path

from pydantic import BaseModel
from rich.panel import Panel

from .config import ProjectConfig, Settings
from .errors import DirectoryExistsError, GenerationError, SubprocessError
from .scaffolder.fragments import install_command, run_script, run_script_command
from .scaffolder.generator import ProjectGenerator
from .scaffolder.templates import TemplateRenderer
from .utils import console, print_success, print_summary_table, print_warning, run_command

DOCS_URL = "http://localhost:3000/api-docs"


class CreationState(str, Enum):
    VALIDATING = "validating"
    SCAFFOLDING = "scaffolding"
    INSTALLING = "installing"
    GENERATING_CLIENT = "generating_client"
    DONE = "done"
    ROLLED_BACK = "rolled_back"


class CreationResult(BaseModel):
    """Outcome of a successful creation."""

    path: Path
    config: ProjectConfig
    state: CreationState


class ProjectCreator:
    """Creates one project on disk.

    Attributes:
        config: The options the project is generated from.
        settings: Where to create it and whether to install dependencies.
        state: The current ``CreationState``; ``ROLLED_BACK`` after a
            failure that removed the destination.
    """

    def __init__(
        self,
        config: ProjectConfig,
        settings: Settings | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.settings = settings or Settings()
        self.renderer = renderer or TemplateRenderer()
        self.state = CreationState.VALIDATING

    @property
    def project_path(self) -> Path:
        return Path(self.settings.directory).resolve() / self.config.project_name

    # -- Public API --------------------------------------------------------

    async def create(self) -> CreationResult:
        """Create the project.

        Raises:
            DirectoryExistsError: The destination exists; nothing was touched.
            GenerationError: Writing the tree failed; the destination was
                removed and the original exception is ``__cause__``.
            SubprocessError: Installation or client generation exited
                non-zero; the destination was removed.
        """
        self.state = CreationState.VALIDATING
        root = self.project_path
        if root.exists():
            raise DirectoryExistsError(root)

        self.state = CreationState.SCAFFOLDING
        try:
            with console.status("[bold cyan]Generating project files...[/bold cyan]"):
                generator = ProjectGenerator(
                    self.config,
                    renderer=self.renderer,
                    on_file=self._report_file if self.settings.verbose else None,
                )
                await generator.generate(root)
        except Exception as exc:
            await self.rollback(root)
            raise GenerationError(root, str(exc)) from exc
        print_success("Project files generated")

        if not self.settings.skip_install:
            pm = self.config.package_manager

            self.state = CreationState.INSTALLING
            console.print("[cyan]Installing dependencies (this may take a while)...[/cyan]")
            await self._run_step(install_command(pm), root)

            if self.config.needs_client_generation:
                self.state = CreationState.GENERATING_CLIENT
                console.print("[cyan]Generating Prisma client...[/cyan]")
                await self._run_step(run_script_command(pm, "db:generate"), root)

            print_success("Dependencies installed successfully")

        self.state = CreationState.DONE
        self.print_next_steps()
        return CreationResult(path=root, config=self.config, state=self.state)

    async def rollback(self, root: Path) -> None:
        """Remove *root*, reporting (not raising) any failure to do so."""
        self.state = CreationState.ROLLED_BACK
        if not root.exists():
            return
        try:
            await asyncio.to_thread(shutil.rmtree, root)
        except OSError as exc:
            print_warning(f"Could not remove {root}: {exc}")

    def next_steps(self) -> list[str]:
        """Shell commands the user runs to start the new project."""
        pm = self.config.package_manager
        steps = [f"cd {self.config.project_name}"]
        if self.settings.skip_install:
            steps.append(" ".join(install_command(pm)))
        steps.append("cp .env.example .env")
        if self.config.needs_client_generation:
            steps.append(run_script(pm, "db:push"))
        steps.append(run_script(pm, "dev"))
        return steps

    def print_next_steps(self) -> None:
        print_summary_table(
            {
                "Database": self.config.database.value,
                "Authentication": _yes_no(self.config.include_auth),
                "Docker": _yes_no(self.config.include_docker),
                "File upload": self.config.file_storage.value if self.config.include_file_upload else "no",
                "Redis": _yes_no(self.config.include_redis),
                "Job queue": _yes_no(self.config.include_queue),
                "Package manager": self.config.package_manager.value,
            },
            title=self.config.project_name,
        )
        body = "\n".join(f"  {step}" for step in self.next_steps())
        console.print(
            Panel(
                f"[bold]Next steps:[/bold]\n{body}\n\n"
                f"Docs will be available at: [link]{DOCS_URL}[/link]",
                title="[bold green]Project created successfully![/bold green]",
                border_style="green",
            )
        )

    # -- Internals ---------------------------------------------------------

    async def _run_step(self, cmd: list[str], root: Path) -> None:
        try:
            returncode, _, _ = await run_command(cmd, cwd=root, capture=False)
        except OSError as exc:
            await self.rollback(root)
            raise SubprocessError(cmd, 127) from exc
        if returncode != 0:
            await self.rollback(root)
            raise SubprocessError(cmd, returncode)

    def _report_file(self, path: Path) -> None:
        console.print(f"  [dim]created[/dim] {path.relative_to(self.project_path)}")


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"
