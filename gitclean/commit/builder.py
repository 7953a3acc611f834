"""Commit Builder - guided form, spelling review, and the commit itself."""

import logging
from collections.abc import Callable
from pathlib import Path

from gitclean import COMMIT_TYPES, COMMIT_TYPE_NAMES
from gitclean.commit.format import (
    CommitAnswers,
    build_commit_body,
    build_commit_header,
    build_full_message,
    format_commit_preview,
    validate_commit_message,
)
from gitclean.config import Config
from gitclean.git import GitError, GitRepo
from gitclean.output import (
    ARROW, BULLET, CHECK, CROSS,
    Spinner, dim, error, paint, print_box, success, warning,
)
from gitclean.prompts.questions import Choice, Question, ask, ask_input, ask_select
from gitclean.prompts.render import highlight
from gitclean.spelling import SpellChecker, get_spell_checker

logger = logging.getLogger(__name__)

SPELLING_ACTIONS = [
    Choice("auto-correct", "Auto-correct all issues"),
    Choice("edit", "Edit manually"),
    Choice("continue", "Continue with current text"),
]


def _strip(text: str) -> str:
    return text.strip()


def commit_type_choices() -> list[Choice]:
    width = max(len(name) for name in COMMIT_TYPE_NAMES)
    return [
        Choice(name, f"{paint(name.ljust(width), info['color'])}  - {info['description']}")
        for name, info in COMMIT_TYPES.items()
    ]


class CommitBuilder:
    """Runs one guided commit from the first question to the final push."""

    def __init__(self, config: Config, repo: GitRepo | None = None, checker: SpellChecker | None = None,
                 terminal=None):
        self.config = config
        self.repo = repo or GitRepo()
        self.checker = checker or get_spell_checker(config.spellcheck.custom_words)
        self.terminal = terminal

    def _validate_message(self, text: str) -> bool | str:
        return validate_commit_message(text, self.config.max_subject_length)

    def questions(self) -> list[Question]:
        text_kind = "spellcheck" if self.config.spellcheck.enabled else "input"
        return [
            Question("type", "select", "Select the type of change you're committing:",
                     choices=commit_type_choices()),
            Question("scope", "input", "What is the scope of this change? (optional):", filter=_strip),
            Question("message", text_kind, "Write a short, imperative tense description of the change:",
                     validate=self._validate_message, filter=_strip),
            Question("body", text_kind, "Provide a longer description of the change (optional):",
                     filter=_strip),
            Question("breaking", "confirm", "Are there any breaking changes?", default=False),
            Question("issues", "input", 'Add issue references (e.g., "fixes #123", "closes #456"):',
                     filter=_strip),
        ]

    def collect_answers(self) -> CommitAnswers:
        answers = ask(self.questions(), settings=self.config.spellcheck, checker=self.checker,
                      terminal=self.terminal)
        return CommitAnswers(**answers)

    def review_spelling(self, text: str, field: str, validate: Callable | None = None) -> str:
        """Offer to fix whatever the checker finds in text; returns the text to use.

        validate applies to the corrected or edited text the same way it
        applied to the original answer. A correction that fails it goes
        back to the user for editing.
        """
        findings = self.checker.check(text)
        if not findings:
            return text

        lines = [warning(f"Spelling issues found in {field}:"), highlight(text, findings), ""]
        for finding in findings:
            suggestions = f" {ARROW} {success(', '.join(finding.suggestions))}" if finding.suggestions else ""
            lines.append(f"{error(f'{BULLET} {finding.word}')}{suggestions}")
        print_box("\n".join(lines), title="Spell Check", color="yellow")

        action = ask_select(Question("action", "select", "What would you like to do?", choices=SPELLING_ACTIONS))
        if action == "auto-correct":
            corrected = self.checker.auto_correct(text)
            print_box(f"{success('Auto-corrected text:')}\n{corrected}", title="Auto-Correction Result",
                      color="green")
            verdict = validate(corrected) if validate is not None else True
            if verdict is True:
                return corrected
            print(error(f">> {verdict if isinstance(verdict, str) and verdict else 'Invalid input'}"))
            text = corrected
            action = "edit"
        if action == "edit":
            edited = ask_input(Question("edited", "input", f"Edit your {field}:", default=text,
                                        validate=validate, filter=_strip))
            return self.review_spelling(edited, field, validate)
        return text

    def show_helper(self) -> None:
        stats = self.checker.stats()
        dictionary = f"{CHECK} Loaded" if stats.has_dictionary else "Fallback mode"
        print_box(
            "\n".join([
                dim("Tips:"),
                dim(f"{BULLET} Press ESC at any time to cancel"),
                dim(f"{BULLET} Misspelled words are underlined as you type"),
                dim(f"{BULLET} Use auto-correct to fix spelling errors"),
                "",
                dim("Spell Checker Status:"),
                dim(f"{BULLET} Dictionary: {dictionary}"),
                dim(f"{BULLET} Technical words: {stats.technical_word_count}"),
                dim(f"{BULLET} Typo rules: {stats.typo_rule_count}"),
            ]),
            title="GitClean Helper",
            color="blue",
        )

    def run(self, hook_file: str | Path | None = None) -> int:
        """Full interactive flow. Returns a process exit code."""
        self.show_helper()
        answers = self.collect_answers()

        answers.message = self.review_spelling(answers.message, "commit message", self._validate_message)
        if answers.body:
            answers.body = self.review_spelling(answers.body, "commit body")

        commit_color = COMMIT_TYPES.get(answers.type, {}).get('color')
        print_box(format_commit_preview(answers), title="Final Commit Message", color=commit_color)

        confirmed = ask([Question("confirm", "confirm", "Ready to commit?", default=True)])["confirm"]
        if not confirmed:
            print_box(warning(f"{CROSS} Operation cancelled"), color="yellow")
            return 1

        if hook_file:
            Path(hook_file).write_text(build_full_message(answers) + "\n", encoding='utf-8')
            logger.debug("Wrote commit message to %s", hook_file)
            print_box(success(f"{CHECK} Commit message created successfully!"), color="green")
            return 0

        return self.execute(answers)

    def execute(self, answers: CommitAnswers) -> int:
        """Stage, commit and push according to the workflow settings."""
        workflow = self.config.workflow
        try:
            if workflow.auto_add:
                with Spinner("Staging..."):
                    self.repo.add(workflow.add_files)
            with Spinner("Committing..."):
                self.repo.commit(build_commit_header(answers), build_commit_body(answers))
            print(success(f"{CHECK} Commit created successfully!"))
            if workflow.auto_push:
                with Spinner("Pushing..."):
                    self.repo.push()
                print(success(f"{CHECK} Pushed to remote"))
        except GitError as e:
            logger.debug("Git workflow failed: %s", e)
            print_box(error(f"{CROSS} Failed to complete git workflow\n{e}"), color="red")
            return 1
        return 0
