"""Main scaffolding orchestrator.

Takes a ``ScaffoldRequest`` and turns an empty (or missing) directory into a
Vite + React project wired with Redux Toolkit, Axios, react-hot-toast and an
SCSS partial layout.

The run is an ordered list of stages.  Each stage either awaits child
processes one after another or awaits a gathered batch of independent file
operations.  The first failure aborts the run; nothing already written is
removed.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from create_frontend_setup.config import ScaffoldRequest, is_known_package_manager
from create_frontend_setup.utils import (
    ensure_dir,
    format_command,
    is_empty_dir,
    print_banner,
    print_command,
    print_stage_header,
    print_success,
    print_warning,
    run_command,
)
from .commands import generator_command, install_commands
from .templates import TemplateWriter


COMPLETION_MESSAGE = "Scaffolded Redux, hooks, API, Toaster, and SCSS successfully."


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Base class for every failure the scaffolder reports."""


class DirectoryNotEmptyError(ScaffoldError):
    """Raised when the target directory already has entries in it."""

    def __init__(self, app_name: str) -> None:
        self.app_name = app_name
        super().__init__(f"Directory '{app_name}' already exists and is not empty.")


class ExternalProcessError(ScaffoldError):
    """Raised when a child process exits non-zero or cannot be spawned."""

    def __init__(self, command: list[str], returncode: int | None, reason: str = "") -> None:
        self.command = list(command)
        self.returncode = returncode
        line = format_command(self.command)
        if returncode is None:
            message = f"Could not run `{line}`: {reason}"
        else:
            message = f"Command `{line}` failed with exit code {returncode}"
        super().__init__(message)


class ScaffoldFileSystemError(ScaffoldError):
    """Raised when a directory or file cannot be created or written."""


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Runs the scaffolding stages for one ``ScaffoldRequest``.

    Stages, in order:

    1. Validate (or create) the target directory.
    2. Run the package manager's create-vite command.
    3. Install base, dev and runtime dependencies (skipped with ``install=False``).
    4. Create the source folder layout.
    5. Write the template files.
    6. Report completion.
    """

    STAGES: list[tuple[str, str]] = [
        ("Validate target directory", "_validate_target"),
        ("Create Vite + React project", "_run_generator"),
        ("Install dependencies", "_install_dependencies"),
        ("Create folders", "_create_folders"),
        ("Write template files", "_write_templates"),
        ("Finish", "_finish"),
    ]

    def __init__(
        self,
        request: ScaffoldRequest,
        cwd: str | Path | None = None,
        writer: TemplateWriter | None = None,
    ) -> None:
        self.request = request
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()
        self.writer = writer or TemplateWriter()
        self.manager = request.manager
        self.project_root = (self.cwd / request.app_name).resolve()

    # -- Public API --------------------------------------------------------

    async def generate(self) -> Path:
        """Run every stage in order and return the project root.

        Raises:
            ScaffoldError: From the first stage that fails.
        """
        if not is_known_package_manager(self.request.package_manager):
            print_warning(
                f"Unknown package manager '{self.request.package_manager}', "
                f"falling back to {self.manager.value}."
            )

        print_banner(
            "create-frontend-setup",
            {
                "App": self.request.app_name,
                "Package manager": self.manager.value,
                "Install": "yes" if self.request.install else "no",
                "Target": str(self.project_root),
            },
        )

        total = len(self.STAGES)
        for index, (label, method_name) in enumerate(self.STAGES, start=1):
            print_stage_header(index, total, label)
            await getattr(self, method_name)()

        return self.project_root

    # -- Stages ------------------------------------------------------------

    async def _validate_target(self) -> None:
        """Refuse a non-empty target; create a missing one."""
        root = self.project_root
        try:
            if root.exists():
                if not root.is_dir():
                    raise ScaffoldFileSystemError(
                        f"'{self.request.app_name}' already exists and is not a directory."
                    )
                if not await asyncio.to_thread(is_empty_dir, root):
                    raise DirectoryNotEmptyError(self.request.app_name)
            else:
                await asyncio.to_thread(ensure_dir, root)
        except OSError as exc:
            raise ScaffoldFileSystemError(
                f"Could not prepare directory '{self.request.app_name}': {exc}"
            ) from exc

    async def _run_generator(self) -> None:
        """Let create-vite populate the target from the invoking directory."""
        cmd = generator_command(self.manager, self.request.app_name)
        await self._run(cmd, cwd=self.cwd)

    async def _install_dependencies(self) -> None:
        if not self.request.install:
            print_warning("Skipping dependency installation (--no-install).")
            return
        for cmd in install_commands(self.manager):
            await self._run(cmd, cwd=self.project_root)

    async def _create_folders(self) -> None:
        try:
            await self.writer.create_folders(self.project_root)
        except OSError as exc:
            raise ScaffoldFileSystemError(f"Could not create folders: {exc}") from exc

    async def _write_templates(self) -> None:
        try:
            await self.writer.write_files(self.project_root)
        except OSError as exc:
            raise ScaffoldFileSystemError(f"Could not write template files: {exc}") from exc

    async def _finish(self) -> None:
        print_success(COMPLETION_MESSAGE)

    # -- Helpers -----------------------------------------------------------

    async def _run(self, cmd: list[str], cwd: Path) -> None:
        """Run one child process with inherited streams; raise on failure."""
        print_command(cmd, cwd)
        try:
            returncode = await run_command(cmd, cwd=cwd)
        except OSError as exc:
            raise ExternalProcessError(cmd, None, str(exc)) from exc
        if returncode != 0:
            raise ExternalProcessError(cmd, returncode)
