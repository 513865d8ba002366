"""npm manifest initialisation and dependency installation.

Commands run one after another inside the project folder, with the
package manager's own output going straight to the terminal.  The first
non-zero exit stops the run.
"""

from __future__ import annotations

from pathlib import Path

from expressgen.config import GeneratorConfig
from expressgen.utils import print_step, run_command


class InstallError(Exception):
    """Raised when a package-manager command exits with a non-zero status."""

    def __init__(self, command: list[str], returncode: int) -> None:
        self.command = command
        self.returncode = returncode
        super().__init__(
            f"Command failed with exit code {returncode}: {' '.join(command)}"
        )


class DependencyInstaller:
    """Runs ``npm init -y`` and the ``npm install`` calls for a new project."""

    def __init__(self, config: GeneratorConfig) -> None:
        self.config = config

    def commands(self, include_database: bool) -> list[list[str]]:
        """Return the ordered command lines without running them."""
        pm = self.config.package_manager
        cmds = [
            [pm, "init", "-y"],
            [pm, "install", *self.config.core_dependencies],
        ]
        if include_database and self.config.database_dependencies:
            cmds.append([pm, "install", *self.config.database_dependencies])
        return cmds

    async def install(self, project_root: Path, include_database: bool) -> None:
        """Run every command in *project_root*, waiting for each to finish.

        Raises:
            InstallError: On the first command that exits non-zero.
            FileNotFoundError: If the package manager is not on ``PATH``.
        """
        for cmd in self.commands(include_database):
            print_step(" ".join(cmd))
            returncode = await run_command(cmd, cwd=project_root)
            if returncode != 0:
                raise InstallError(cmd, returncode)
