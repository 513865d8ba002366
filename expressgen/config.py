"""expressgen configuration.

Typed settings for one generator run. The model is built from defaults,
then environment variables, then command-line flags, and is validated at
construction time by Pydantic v2.
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class GeneratorConfig(BaseModel):
    """Knobs that shape the generated project and the install step.

    The defaults reproduce the most complete flavour of the generator: the
    animation question is asked, ``.env`` and ``.gitignore`` are written and
    the stylesheet is linked directly from ``views/index.ejs``.
    """

    package_manager: str = Field(default="npm", min_length=1)
    core_dependencies: list[str] = Field(
        default_factory=lambda: ["express", "ejs", "body-parser", "dotenv"],
    )
    database_dependencies: list[str] = Field(default_factory=lambda: ["mongoose"])

    install: bool = Field(
        default=True, description="Run the package manager after creating the project folder"
    )
    ask_animations: bool = Field(
        default=True, description="Ask whether animation assets should be generated"
    )
    css_partial: bool = Field(
        default=False, description="Link the stylesheet through views/partials/css.ejs"
    )
    env_file: bool = Field(default=True, description="Write a .env file")
    gitignore: bool = Field(default=True, description="Write a .gitignore file")
    images_dir: str = Field(default="images", pattern=r"^(images|img)$")

    @classmethod
    def from_env(cls, **overrides: Any) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            EXPRESSGEN_PACKAGE_MANAGER, EXPRESSGEN_SKIP_INSTALL,
            EXPRESSGEN_ASK_ANIMATIONS, EXPRESSGEN_CSS_PARTIAL,
            EXPRESSGEN_ENV_FILE, EXPRESSGEN_GITIGNORE, EXPRESSGEN_IMAGES_DIR.

        Keyword arguments win over the environment, which lets the CLI
        layer its flags on top.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("EXPRESSGEN_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["EXPRESSGEN_PACKAGE_MANAGER"]
        if os.environ.get("EXPRESSGEN_IMAGES_DIR"):
            kwargs["images_dir"] = os.environ["EXPRESSGEN_IMAGES_DIR"]

        skip_install = _env_flag("EXPRESSGEN_SKIP_INSTALL")
        if skip_install is not None:
            kwargs["install"] = not skip_install

        for field_name, var in (
            ("ask_animations", "EXPRESSGEN_ASK_ANIMATIONS"),
            ("css_partial", "EXPRESSGEN_CSS_PARTIAL"),
            ("env_file", "EXPRESSGEN_ENV_FILE"),
            ("gitignore", "EXPRESSGEN_GITIGNORE"),
        ):
            value = _env_flag(var)
            if value is not None:
                kwargs[field_name] = value

        kwargs.update(overrides)
        return cls(**kwargs)


def _env_flag(name: str) -> bool | None:
    """Parse a boolean environment variable, ``None`` when unset or blank."""
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return None
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be one of {sorted(_TRUE_VALUES | _FALSE_VALUES)}, got {raw!r}")
