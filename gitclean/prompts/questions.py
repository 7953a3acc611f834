"""Guided question sequence for building a commit.

Asks a list of questions in order and collects the answers into a dict.
Free-text questions of kind "spellcheck" use the live spell-checked prompt
when running in a terminal; everything else reads lines with input().
"""

import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from gitclean.config import SpellCheckSettings
from gitclean.output import bold, dim, error, info
from gitclean.prompts.spell_input import PromptAborted, SpellCheckInput, resolve_callback
from gitclean.spelling import SpellChecker

QUESTION_KINDS = {"select", "input", "confirm", "spellcheck"}


@dataclass
class Choice:
    value: str
    label: str


@dataclass
class Question:
    """One step of the guided form."""
    name: str
    kind: str
    message: str
    choices: Sequence[Choice] = field(default_factory=list)
    default: Any = None
    validate: Callable | None = None
    filter: Callable | None = None

    def __post_init__(self):
        if self.kind not in QUESTION_KINDS:
            raise ValueError(f"Unknown question kind: {self.kind}")


def _read_line(prompt: str) -> str:
    try:
        return input(prompt)
    except (KeyboardInterrupt, EOFError):
        print()
        raise PromptAborted("Prompt cancelled by user")


def _prompt_prefix(message: str) -> str:
    return f"{info('?')} {bold(message)} "


def ask_select(question: Question) -> str:
    """Numbered list; Enter picks the default (or the first choice)."""
    print(_prompt_prefix(question.message))
    for i, choice in enumerate(question.choices, 1):
        print(f"  {info(str(i) + '.')} {choice.label}")

    values = [c.value for c in question.choices]
    default_idx = values.index(question.default) if question.default in values else 0
    while True:
        raw = _read_line(dim(f"  Select [1-{len(values)}] (default {default_idx + 1}): ")).strip()
        if not raw:
            return values[default_idx]
        if raw.isdigit() and 1 <= int(raw) <= len(values):
            return values[int(raw) - 1]
        # Allow typing the value itself, e.g. "fix"
        matches = [v for v in values if v.lower() == raw.lower()]
        if matches:
            return matches[0]
        print(error(f"  >> Enter a number from 1 to {len(values)}"))


def ask_confirm(question: Question) -> bool:
    default = bool(question.default) if question.default is not None else True
    hint = "Y/n" if default else "y/N"
    while True:
        raw = _read_line(f"{_prompt_prefix(question.message)}{dim(f'({hint})')} ").strip().lower()
        if not raw:
            return default
        if raw in ("y", "yes"):
            return True
        if raw in ("n", "no"):
            return False
        print(error("  >> Please answer y or n"))


def ask_input(question: Question) -> str:
    """Plain line input with the same validate/filter contract as the widget."""
    default_hint = f"{dim(f'({question.default})')} " if question.default else ""
    while True:
        text = _read_line(f"{_prompt_prefix(question.message)}{default_hint}")
        if not text and question.default:
            text = str(question.default)
        if question.validate is not None:
            verdict = resolve_callback(question.validate(text))
            if verdict is not True:
                print(error(f">> {verdict if isinstance(verdict, str) and verdict else 'Invalid input'}"))
                continue
        return resolve_callback(question.filter(text)) if question.filter is not None else text


def _use_widget(settings: SpellCheckSettings) -> bool:
    return settings.enabled and sys.stdin.isatty() and sys.stdout.isatty()


def ask(
    questions: Sequence[Question],
    settings: SpellCheckSettings | None = None,
    checker: SpellChecker | None = None,
    terminal=None,
) -> dict[str, Any]:
    """Ask each question in order and return answers keyed by name.

    Raises PromptAborted if the user cancels at any point.
    """
    settings = settings or SpellCheckSettings()
    answers: dict[str, Any] = {}
    for question in questions:
        if question.kind == "select":
            answers[question.name] = ask_select(question)
        elif question.kind == "confirm":
            answers[question.name] = ask_confirm(question)
        elif question.kind == "spellcheck" and (terminal is not None or _use_widget(settings)):
            prompt = SpellCheckInput(
                question.message,
                validate=question.validate,
                filter=question.filter,
                checker=checker,
                debounce_ms=settings.debounce_ms,
                terminal=terminal,
            )
            answers[question.name] = prompt.run()
        else:
            answers[question.name] = ask_input(question)
    return answers
