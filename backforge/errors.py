"""Exception hierarchy for BackForge.

Callers (the CLI, tests, alternate front-ends) distinguish failure causes by
type rather than by message:

* ``ConfigurationError`` -- the requested project cannot be created as asked
  (invalid name, inconsistent options).  Raised before any filesystem change.
* ``DirectoryExistsError`` -- the destination already exists.
* ``GenerationError`` -- writing the project tree failed.  The original
  exception is chained as ``__cause__``.
* ``SubprocessError`` -- a package-manager command exited non-zero.
"""

from __future__ import annotations

from pathlib import Path


class BackforgeError(Exception):
    """Base class for every error BackForge raises on purpose."""


class ConfigurationError(BackforgeError):
    """Raised when the project configuration is invalid."""


class DirectoryExistsError(ConfigurationError):
    """Raised when the destination directory already exists."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Directory {path.name} already exists")


class GenerationError(BackforgeError):
    """Raised when scaffolding the project tree fails."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"Failed to generate project files in {path}: {message}")


class SubprocessError(BackforgeError):
    """Raised when an install or client-generation command fails."""

    def __init__(self, command: list[str], returncode: int) -> None:
        self.command = command
        self.returncode = returncode
        super().__init__(
            f"Command '{' '.join(command)}' failed with exit code {returncode}"
        )
