"""Command-line entry point.

Usage::

    expressgen
    expressgen --skip-install --css-partial
    python -m expressgen --no-animations
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Any

from expressgen.config import GeneratorConfig
from expressgen.prompts import InputExhaustedError, PromptCollector
from expressgen.scaffolder import InstallError, ProjectGenerator
from expressgen.utils import (
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="expressgen",
        description="Interactive generator for a minimal Express + EJS project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  expressgen\n"
            "  expressgen --skip-install\n"
            "  expressgen --css-partial --images-dir img --no-env-file\n"
        ),
    )
    parser.add_argument(
        "--package-manager",
        default=None,
        help="Package manager executable (default: npm)",
    )
    parser.add_argument(
        "--skip-install",
        action="store_true",
        help="Do not run the package manager",
    )
    parser.add_argument(
        "--no-animations",
        action="store_true",
        help="Do not ask about animation assets",
    )
    parser.add_argument(
        "--css-partial",
        action="store_true",
        help="Link the stylesheet through views/partials/css.ejs",
    )
    parser.add_argument(
        "--no-env-file",
        action="store_true",
        help="Do not write a .env file",
    )
    parser.add_argument(
        "--no-gitignore",
        action="store_true",
        help="Do not write a .gitignore file",
    )
    parser.add_argument(
        "--images-dir",
        choices=["images", "img"],
        default=None,
        help="Name of the public image folder (default: images)",
    )
    return parser


def _overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Translate CLI flags into ``GeneratorConfig`` keyword overrides."""
    overrides: dict[str, Any] = {}
    if args.package_manager:
        overrides["package_manager"] = args.package_manager
    if args.images_dir:
        overrides["images_dir"] = args.images_dir
    if args.skip_install:
        overrides["install"] = False
    if args.no_animations:
        overrides["ask_animations"] = False
    if args.css_partial:
        overrides["css_partial"] = True
    if args.no_env_file:
        overrides["env_file"] = False
    if args.no_gitignore:
        overrides["gitignore"] = False
    return overrides


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``expressgen`` and ``python -m expressgen``."""
    args = build_parser().parse_args(argv)

    try:
        config = GeneratorConfig.from_env(**_overrides(args))
    except ValueError as exc:
        print_error(f"Error: invalid configuration: {exc}")
        sys.exit(2)

    try:
        spec = PromptCollector(ask_animations=config.ask_animations).collect()
        generator = ProjectGenerator(spec, config)
        project_root = asyncio.run(generator.generate())
    except KeyboardInterrupt:
        print_warning("Aborted.")
        sys.exit(130)
    except (InputExhaustedError, InstallError, OSError, ValueError) as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    print_summary_table(
        {
            "Project": spec.name,
            "Location": str(project_root),
            "MongoDB": "yes" if spec.include_database else "no",
            "Port": spec.port,
            "Animations": "yes" if spec.include_animations else "no",
            "Files written": str(len(generator.written_files)),
        },
        title="expressgen",
    )
    print_success("Project created successfully!")
