"""Commit Building Package"""

from gitclean.commit.builder import CommitBuilder, SPELLING_ACTIONS, commit_type_choices
from gitclean.commit.format import (
    CommitAnswers,
    DEFAULT_MAX_SUBJECT_LENGTH,
    build_commit_body,
    build_commit_header,
    build_full_message,
    format_commit_preview,
    validate_commit_message,
)

__all__ = [
    "CommitBuilder",
    "CommitAnswers",
    "SPELLING_ACTIONS",
    "DEFAULT_MAX_SUBJECT_LENGTH",
    "commit_type_choices",
    "build_commit_header",
    "build_commit_body",
    "build_full_message",
    "format_commit_preview",
    "validate_commit_message",
]
