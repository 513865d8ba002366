"""Main scaffolding orchestrator.

Takes a ``ProjectSpec`` built from the user's answers and materialises an
Express + EJS project: the project folder, the npm manifest and
dependencies, the fixed directory tree and the templated source files.
"""

from __future__ import annotations

import asyncio
import errno
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from expressgen.config import GeneratorConfig
from expressgen.utils import ensure_dir, print_step, print_warning, write_text

from .artifacts import ArtifactBuilder, ArtifactOptions
from .installer import DependencyInstaller
from .templates import TemplateRenderer

DEFAULT_PORT = "3000"


# ---------------------------------------------------------------------------
# Answer helpers
# ---------------------------------------------------------------------------


def is_yes(answer: str) -> bool:
    """Return ``True`` only for a case-insensitive ``"yes"``.

    Anything else (``"y"``, ``"no"``, empty input, typos) counts as no.
    """
    return answer.lower() == "yes"


def resolve_port(answer: str) -> str:
    """Return the raw port answer, or ``DEFAULT_PORT`` when it is empty.

    The text is not checked for being numeric; it ends up verbatim in
    ``server.js`` and ``.env``.
    """
    return answer or DEFAULT_PORT


# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------


class ProjectSpec(BaseModel):
    """Answers collected for a single generator run."""

    name: str = Field(..., description="Project folder and npm package name")
    target_directory: str = Field(
        default="", description="Parent directory; empty means the current directory"
    )
    include_database: bool = Field(default=False)
    port: str = Field(default=DEFAULT_PORT, description="Port text, passed through verbatim")
    include_animations: bool = Field(default=False)


def directory_tree(images_dir: str = "images") -> dict[str, dict[str, Any]]:
    """Return the fixed folder layout of a generated project.

    Each key is a folder name and each value holds its children.  Only the
    name of the public image folder can vary.
    """
    return {
        "config": {},
        "controllers": {},
        "docs": {},
        "middleware": {},
        "models": {},
        "public": {
            "css": {},
            "js": {},
            images_dir: {},
        },
        "routes": {},
        "utils": {},
        "views": {
            "partials": {},
        },
    }


def flatten_tree(tree: Mapping[str, Mapping[str, Any]], prefix: Path | None = None) -> Iterator[Path]:
    """Yield every folder in *tree* as a relative path, parents before children."""
    for name, children in tree.items():
        path = prefix / name if prefix is not None else Path(name)
        yield path
        yield from flatten_tree(children, path)


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Turns a ``ProjectSpec`` into directories, files and installed packages.

    Every step runs to completion before the next one starts:

    1. create ``<base>/<name>`` and any missing parents inside it (an
       existing folder is reused)
    2. ``npm init -y`` and ``npm install`` via :class:`DependencyInstaller`
    3. the folders from :func:`directory_tree`
    4. every file from :meth:`ArtifactBuilder.plan`, overwriting old content

    Nothing is rolled back when a step fails.
    """

    def __init__(
        self,
        spec: ProjectSpec,
        config: GeneratorConfig | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.spec = spec
        self.config = config or GeneratorConfig()
        self.renderer = renderer or TemplateRenderer()
        self.installer = DependencyInstaller(self.config)
        self.artifacts = ArtifactBuilder(self.renderer, self._artifact_options())
        self.written_files: list[Path] = []

    # -- Public API --------------------------------------------------------

    async def generate(self, base_dir: str | Path | None = None) -> Path:
        """Generate the complete project.

        Args:
            base_dir: Parent directory for the project folder.  Defaults to
                ``spec.target_directory`` and then the current directory.

        Returns:
            Path to the generated project root.

        Raises:
            FileNotFoundError: If the parent directory does not exist.
            ValueError: If the project name is empty.
            InstallError: If a package-manager command exits non-zero.
        """
        if not self.spec.name:
            raise ValueError("Project name must not be empty")

        base = self._resolve_base_dir(base_dir)
        project_root = base / self.spec.name

        print_step(f"Creating project folder {project_root}")
        await asyncio.to_thread(ensure_dir, project_root)

        if self.config.install:
            await self.installer.install(project_root, self.spec.include_database)
        else:
            print_warning("Skipping package installation")

        await self._create_directory_structure(project_root)
        self.written_files = await self._write_artifacts(project_root)
        return project_root

    # -- Steps -------------------------------------------------------------

    def _resolve_base_dir(self, base_dir: str | Path | None) -> Path:
        """Pick the parent directory and check that it exists."""
        if base_dir is not None:
            base = Path(base_dir)
        elif self.spec.target_directory:
            base = Path(self.spec.target_directory)
        else:
            return Path.cwd()

        if not base.is_dir():
            raise FileNotFoundError(errno.ENOENT, "Target directory does not exist", str(base))
        return base

    async def _create_directory_structure(self, root: Path) -> None:
        """Create the fixed project directory tree."""
        print_step("Creating directory structure")
        for relative in flatten_tree(directory_tree(self.config.images_dir)):
            await asyncio.to_thread(ensure_dir, root / relative)

    async def _write_artifacts(self, root: Path) -> list[Path]:
        """Write every planned artifact, one file at a time."""
        written: list[Path] = []
        for relative, content in self.artifacts.plan().items():
            out = root / relative
            print_step(f"Writing {relative}")
            await asyncio.to_thread(write_text, out, content)
            written.append(out)
        return written

    def _artifact_options(self) -> ArtifactOptions:
        """Merge the answers and generator settings into template options."""
        return ArtifactOptions(
            project_name=self.spec.name,
            port=self.spec.port,
            include_database=self.spec.include_database,
            include_animations=self.spec.include_animations,
            css_partial=self.config.css_partial,
            env_file=self.config.env_file,
            gitignore=self.config.gitignore,
        )
