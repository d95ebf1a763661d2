"""Command-line front end for create-frontend-setup.

Parses the app name and options, hands a ``ScaffoldRequest`` to the
scaffolder and turns the outcome into an exit status.

Usage::

    create-frontend-setup my-app
    create-frontend-setup my-app -p pnpm
    create-frontend-setup my-app --no-install
"""

from __future__ import annotations

import argparse
import asyncio
from collections.abc import Sequence

from pydantic import ValidationError
from rich.markup import escape

from create_frontend_setup import __version__
from create_frontend_setup.config import ScaffoldRequest, ScaffoldSettings
from create_frontend_setup.scaffolder import ProjectGenerator, ScaffoldError
from create_frontend_setup.scaffolder.commands import dev_command
from create_frontend_setup.utils import console, print_error

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def build_parser(settings: ScaffoldSettings | None = None) -> argparse.ArgumentParser:
    """Build the argument parser, taking defaults from *settings*."""
    settings = settings or ScaffoldSettings()

    parser = argparse.ArgumentParser(
        prog="create-frontend-setup",
        description="Scaffold React + Vite + SCSS with Redux, Axios and toasts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-frontend-setup my-app\n"
            "  create-frontend-setup my-app -p pnpm\n"
            "  create-frontend-setup my-app --no-install\n"
        ),
    )
    parser.add_argument(
        "app_name",
        metavar="app-name",
        help="Directory name for the new app",
    )
    parser.add_argument(
        "--package-manager", "-p",
        default=settings.package_manager,
        metavar="PM",
        help=f"npm | pnpm | yarn | bun (default: {settings.package_manager})",
    )
    parser.add_argument(
        "--no-install",
        dest="install",
        action="store_false",
        default=settings.install,
        help="Skip installing deps after template creation",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point.  Returns the process exit status."""
    parser = build_parser(ScaffoldSettings.from_env())
    args = parser.parse_args(argv)

    try:
        request = ScaffoldRequest(
            app_name=args.app_name,
            package_manager=args.package_manager,
            install=args.install,
        )
    except ValidationError as exc:
        reasons = "; ".join(err["msg"] for err in exc.errors())
        print_error(f"\nScaffold failed: {reasons}")
        return EXIT_FAILURE

    try:
        asyncio.run(ProjectGenerator(request).generate())
    except ScaffoldError as exc:
        print_error(f"\nScaffold failed: {exc}")
        return EXIT_FAILURE
    except KeyboardInterrupt:
        print_error("\nScaffold interrupted.")
        return EXIT_INTERRUPTED

    console.print(
        f"\n[bold green]Done.[/bold green] Next:\n"
        f"  cd {escape(request.app_name)}\n"
        f"  {dev_command(request.manager)}\n",
        highlight=False,
        soft_wrap=True,
    )
    return EXIT_OK


def run() -> None:
    """Console-script wrapper around :func:`main`."""
    raise SystemExit(main())
