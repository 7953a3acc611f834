"""Commit message assembly and preview formatting."""

from dataclasses import dataclass

from gitclean import COMMIT_TYPES
from gitclean.output import dim, paint

DEFAULT_MAX_SUBJECT_LENGTH = 72


@dataclass
class CommitAnswers:
    """Everything the guided form collects for one commit."""
    type: str
    message: str
    scope: str = ""
    body: str = ""
    breaking: bool = False
    issues: str = ""


def build_commit_header(answers: CommitAnswers) -> str:
    """TYPE(scope)!: message"""
    scope = f"({answers.scope})" if answers.scope else ""
    breaking = "!" if answers.breaking else ""
    return f"{answers.type}{scope}{breaking}: {answers.message}"


def build_commit_body(answers: CommitAnswers) -> str:
    """Everything after the header, blank-line separated."""
    sections = []
    if answers.body:
        sections.append(answers.body)
    if answers.breaking:
        sections.append(f"BREAKING CHANGE: {answers.message}")
    if answers.issues:
        sections.append(answers.issues)
    return "\n\n".join(sections)


def build_full_message(answers: CommitAnswers) -> str:
    body = build_commit_body(answers)
    header = build_commit_header(answers)
    return f"{header}\n\n{body}" if body else header


def format_commit_preview(answers: CommitAnswers) -> str:
    """Coloured rendering of the final message for the confirmation box."""
    commit_type = COMMIT_TYPES.get(answers.type, {})
    color = commit_type.get('color')
    emoji = commit_type.get('emoji', '')
    header = build_commit_header(answers)

    lines = [f"{emoji} {paint(header, color)}".strip()]
    if answers.body:
        lines += ["", dim(answers.body)]
    if answers.breaking:
        lines += ["", paint(f"BREAKING CHANGE: {header}", 'bright_red')]
    if answers.issues:
        lines += ["", paint(answers.issues, 'blue')]
    return "\n".join(lines)


def validate_commit_message(text: str, max_length: int = DEFAULT_MAX_SUBJECT_LENGTH) -> bool | str:
    """True, or the reason the subject line is not acceptable."""
    if len(text.strip()) < 1:
        return "Please enter a commit message."
    if len(text) > max_length:
        return f"Keep the first line under {max_length} characters."
    return True
