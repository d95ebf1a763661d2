"""Shared pytest fixtures for the create-frontend-setup test suite.

Provides reusable fixtures for:
- An isolated working directory and environment
- A stubbed ``run_command`` that records every child process
- Mock asyncio subprocess objects for the low-level runner
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, patch

import pytest

from create_frontend_setup.config import ScaffoldRequest


# ---------------------------------------------------------------------------
# Paths & environment
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer shell settings out of the tests."""
    monkeypatch.delenv("CFS_PACKAGE_MANAGER", raising=False)
    monkeypatch.delenv("CFS_NO_INSTALL", raising=False)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty directory that is also the process working directory."""
    cwd = tmp_path / "work"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


@pytest.fixture
def scaffold_request() -> ScaffoldRequest:
    """Default request: app ``demo``, npm, installs enabled."""
    return ScaffoldRequest(app_name="demo")


# ---------------------------------------------------------------------------
# Child processes
# ---------------------------------------------------------------------------

class CommandRecorder:
    """Stand-in for ``run_command`` that records calls instead of spawning.

    Every call exits ``0`` unless ``fail_at`` (a call index) returns
    ``fail_code`` or ``spawn_error_at`` raises ``FileNotFoundError`` the way
    a missing executable would.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[list[str], Any]] = []
        self.fail_at: int | None = None
        self.fail_code = 1
        self.spawn_error_at: int | None = None

    async def __call__(self, cmd: list[str], cwd: Any = None) -> int:
        index = len(self.calls)
        self.calls.append((list(cmd), cwd))
        if index == self.spawn_error_at:
            raise FileNotFoundError(2, "No such file or directory", cmd[0])
        if index == self.fail_at:
            return self.fail_code
        return 0

    @property
    def commands(self) -> list[list[str]]:
        return [cmd for cmd, _ in self.calls]

    @property
    def cwds(self) -> list[Any]:
        return [cwd for _, cwd in self.calls]


@pytest.fixture
def fake_run_command():
    """Replace the generator's ``run_command`` with a ``CommandRecorder``.

    Usage:
        def test_x(fake_run_command):
            ...
            assert fake_run_command.commands[0][0] == "npm"
    """
    recorder = CommandRecorder()
    with patch("create_frontend_setup.scaffolder.generator.run_command", recorder):
        yield recorder


@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances whose ``wait()``
    resolves to the given return code.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """
    def factory(returncode: int = 0) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory
