"""Command-line entry point for ``backforge``."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from . import __version__
from .config import Settings
from .creator import ProjectCreator
from .errors import BackforgeError
from .prompts import prompt_project_config
from .utils import console, print_banner, print_error

BANNER_TITLE = "BackForge - Production-Ready Backend Generator"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="backforge",
        description="Generate a production-ready Express + TypeScript + Prisma backend",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  backforge\n"
            "  backforge my-api\n"
            "  backforge my-api --directory ~/code --skip-install\n"
        ),
    )
    parser.add_argument(
        "project_name",
        nargs="?",
        default=None,
        help="Project name (asked interactively if omitted)",
    )
    parser.add_argument(
        "--directory", "-d",
        default=None,
        help="Parent directory for the new project (default: current directory)",
    )
    parser.add_argument(
        "--skip-install",
        action="store_true",
        help="Do not run the package manager after generating files",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print every generated file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def resolve_settings(args: argparse.Namespace) -> Settings:
    """Environment settings, overridden by whatever was given on the command line."""
    settings = Settings.from_env()
    overrides: dict[str, object] = {}
    if args.directory:
        overrides["directory"] = Path(args.directory).expanduser()
    if args.skip_install:
        overrides["skip_install"] = True
    if args.verbose:
        overrides["verbose"] = True
    return settings.model_copy(update=overrides)


def main(argv: list[str] | None = None) -> int:
    """Run one interactive project creation.

    Returns:
        Process exit code: 0 on success, 1 on a reported failure or when
        stdin is closed, 130 when interrupted.
    """
    args = build_parser().parse_args(argv)
    settings = resolve_settings(args)

    print_banner(BANNER_TITLE, f"v{__version__}")

    try:
        config = prompt_project_config(default_name=args.project_name, console=console)
        creator = ProjectCreator(config, settings)
        asyncio.run(creator.create())
    except BackforgeError as exc:
        print_error(str(exc))
        return 1
    except EOFError:
        print_error("No input available; run backforge from an interactive terminal")
        return 1
    except KeyboardInterrupt:
        print_error("Aborted")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
