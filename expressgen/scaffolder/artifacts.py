"""Content for every file written into a generated project.

Each artifact has a named method on :class:`ArtifactBuilder` that renders
its Jinja2 template with the same :class:`ArtifactOptions`.  The
database and animation flags are decided once, in the options, and every
template reads them from there.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from .templates import TemplateRenderer


class ArtifactOptions(BaseModel):
    """Everything the templates are allowed to vary on."""

    project_name: str
    port: str = Field(default="3000")
    include_database: bool = False
    include_animations: bool = False
    css_partial: bool = False
    env_file: bool = True
    gitignore: bool = True


class ArtifactBuilder:
    """Renders the source files of a generated Express project."""

    def __init__(self, renderer: TemplateRenderer, options: ArtifactOptions) -> None:
        self.renderer = renderer
        self.options = options

    # -- Individual artifacts ----------------------------------------------

    def database_js(self) -> str:
        """Mongoose connector, or an empty file when no database was requested."""
        if not self.options.include_database:
            return ""
        return self._render("config/database.js.j2")

    def main_css(self) -> str:
        return self._render("public/css/main.css.j2")

    def index_controller(self) -> str:
        return self._render("controllers/indexController.js.j2")

    def index_route(self) -> str:
        return self._render("routes/indexRoute.js.j2")

    def index_view(self) -> str:
        """Landing page; links the stylesheet directly or via the css partial."""
        return self._render("views/index.ejs.j2")

    def css_partial_view(self) -> str:
        return self._render("views/partials/css.ejs.j2")

    def animation_js(self) -> str:
        return self._render("public/js/animation.js.j2")

    def animation_css(self) -> str:
        return self._render("public/css/animation.css.j2")

    def server_js(self) -> str:
        """Entry point wiring middleware, views, the index route and ``listen``."""
        return self._render("server.js.j2")

    def env_file(self) -> str:
        return self._render("env.j2")

    def gitignore(self) -> str:
        return self._render("gitignore.j2")

    # -- Plan --------------------------------------------------------------

    def plan(self) -> dict[str, str]:
        """Return ``{relative output path: content}`` for every file to write.

        ``config/database.js`` is always present, possibly empty.  Optional
        files are left out entirely when their flag is off.
        """
        opts = self.options
        files: dict[str, str] = {
            "config/database.js": self.database_js(),
            "public/css/main.css": self.main_css(),
            "controllers/indexController.js": self.index_controller(),
            "routes/indexRoute.js": self.index_route(),
            "views/index.ejs": self.index_view(),
        }
        if opts.css_partial:
            files["views/partials/css.ejs"] = self.css_partial_view()
        if opts.include_animations:
            files["public/js/animation.js"] = self.animation_js()
            files["public/css/animation.css"] = self.animation_css()
        files["server.js"] = self.server_js()
        if opts.env_file:
            files[".env"] = self.env_file()
        if opts.gitignore:
            files[".gitignore"] = self.gitignore()
        return files

    # -- Helpers -----------------------------------------------------------

    def _context(self) -> dict[str, Any]:
        return self.options.model_dump()

    def _render(self, template_path: str) -> str:
        return self.renderer.render(template_path, self._context())
