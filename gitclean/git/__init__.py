"""Git Operations Package"""

from gitclean.git.repo import GitRepo, GitError, HOOK_MARKER, HOOK_NAME, HOOK_SCRIPT, find_git_root

__all__ = [
    "GitRepo",
    "GitError",
    "HOOK_MARKER",
    "HOOK_NAME",
    "HOOK_SCRIPT",
    "find_git_root",
]
