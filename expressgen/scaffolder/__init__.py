"""expressgen scaffolder -- writes the files of a new Express project.

Takes a ``ProjectSpec`` and produces the project folder, the npm manifest
and dependencies, the fixed directory tree and the rendered templates.
"""

from expressgen.scaffolder.artifacts import ArtifactBuilder, ArtifactOptions
from expressgen.scaffolder.generator import (
    DEFAULT_PORT,
    ProjectGenerator,
    ProjectSpec,
    directory_tree,
    flatten_tree,
    is_yes,
    resolve_port,
)
from expressgen.scaffolder.installer import DependencyInstaller, InstallError
from expressgen.scaffolder.templates import TemplateRenderer

__all__ = [
    "DEFAULT_PORT",
    "ArtifactBuilder",
    "ArtifactOptions",
    "DependencyInstaller",
    "InstallError",
    "ProjectGenerator",
    "ProjectSpec",
    "TemplateRenderer",
    "directory_tree",
    "flatten_tree",
    "is_yes",
    "resolve_port",
]
