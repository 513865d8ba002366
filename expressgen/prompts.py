"""Interactive question sequence for a new project.

The questions are asked one at a time, in a fixed order, and every answer
is accepted as typed.  Only the port has a fallback (``3000``) and the
yes/no questions are reduced to booleans.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from rich.console import Console

from expressgen.scaffolder.generator import ProjectSpec, is_yes, resolve_port
from expressgen.utils import console as default_console


class InputExhaustedError(Exception):
    """Raised when input ends before every question has been answered."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Input ended before an answer for '{field}' was given")


def _as_is(answer: str) -> str:
    return answer


@dataclass(frozen=True)
class PromptStep:
    """One question: the ``ProjectSpec`` field it fills and how to convert it."""

    field: str
    text: str
    transform: Callable[[str], Any] = _as_is


PROMPT_STEPS: tuple[PromptStep, ...] = (
    PromptStep("name", "Enter the project name: "),
    PromptStep("target_directory", "Enter the directory: "),
    PromptStep("include_database", "Include MongoDB? (yes/no): ", is_yes),
    PromptStep("port", "Enter the port number: ", resolve_port),
)

ANIMATIONS_STEP = PromptStep("include_animations", "Include Animations? (yes/no): ", is_yes)


class PromptCollector:
    """Asks the questions on a Rich console and builds a ``ProjectSpec``."""

    def __init__(self, console: Console | None = None, ask_animations: bool = True) -> None:
        self.console = console or default_console
        self.ask_animations = ask_animations

    def steps(self) -> list[PromptStep]:
        steps = list(PROMPT_STEPS)
        if self.ask_animations:
            steps.append(ANIMATIONS_STEP)
        return steps

    def collect(self) -> ProjectSpec:
        """Ask every question in order and return the answers.

        Raises:
            InputExhaustedError: If stdin closes before the last answer.
        """
        answers: dict[str, Any] = {}
        for step in self.steps():
            try:
                raw = self.console.input(step.text, markup=False)
            except EOFError as exc:
                raise InputExhaustedError(step.field) from exc
            answers[step.field] = step.transform(raw)
        return ProjectSpec(**answers)
