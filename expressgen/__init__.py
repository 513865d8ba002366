"""expressgen -- interactive scaffolding for minimal Express + EJS servers.

Quick usage::

    from expressgen.scaffolder import ProjectGenerator, ProjectSpec

    spec = ProjectSpec(name="blog", include_database=True, port="8080")
    project_path = await ProjectGenerator(spec).generate("/tmp")
"""

__version__ = "0.1.0"
