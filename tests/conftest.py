"""Shared pytest fixtures for the expressgen test suite.

Provides reusable fixtures for:
- Temporary parent directories for generated projects
- Scripted console input for the question sequence
- Mocked package-manager commands and subprocesses
- Common ``ProjectSpec`` / ``GeneratorConfig`` instances
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from expressgen.config import GeneratorConfig
from expressgen.scaffolder.generator import ProjectSpec

# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Empty parent directory for generated projects (auto-cleanup)."""
    parent = tmp_path / "workspace"
    parent.mkdir()
    yield parent


# ---------------------------------------------------------------------------
# Scripted console
# ---------------------------------------------------------------------------

def _make_scripted_console(answers: Iterable[str]) -> MagicMock:
    """Console double whose ``input`` returns *answers* in order, then EOF."""
    remaining = list(answers)
    console = MagicMock()

    def fake_input(prompt: str = "", **kwargs) -> str:
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    console.input = MagicMock(side_effect=fake_input)
    return console


@pytest.fixture
def scripted_console() -> Callable[[Iterable[str]], MagicMock]:
    """Factory for consoles that replay a fixed list of answers.

    Usage:
        def test_prompts(scripted_console):
            console = scripted_console(["blog", "", "no", "", "no"])
            spec = PromptCollector(console).collect()
    """
    return _make_scripted_console


# ---------------------------------------------------------------------------
# Mock package manager
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_run_command():
    """Patch the installer's ``run_command`` so no npm process is spawned.

    Every command succeeds; inspect ``mock.await_args_list`` for the calls.
    """
    mock = AsyncMock(return_value=0)
    with patch("expressgen.scaffolder.installer.run_command", mock):
        yield mock


@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances with a
    configurable return code.

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
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory


# ---------------------------------------------------------------------------
# Specs and configs
# ---------------------------------------------------------------------------

@pytest.fixture
def offline_config() -> GeneratorConfig:
    """Default configuration with the install step switched off."""
    return GeneratorConfig(install=False)


@pytest.fixture
def blog_spec() -> ProjectSpec:
    """Plain project: no database, default port, no animations."""
    return ProjectSpec(name="blog")


@pytest.fixture
def shop_spec() -> ProjectSpec:
    """Project with MongoDB on port 8080."""
    return ProjectSpec(name="shop", include_database=True, port="8080")


@pytest.fixture
def animated_spec() -> ProjectSpec:
    """Project with animation assets."""
    return ProjectSpec(name="landing", include_animations=True)
