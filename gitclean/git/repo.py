"""Git Repository - Thin wrapper over the git CLI for the commit workflow."""

import logging
import os
import stat
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

HOOK_NAME = "prepare-commit-msg"
HOOK_MARKER = "GitClean prepare-commit-msg hook"

HOOK_SCRIPT = f"""#!/bin/sh
# {HOOK_MARKER}
# This hook is installed by the gitclean CLI tool

COMMIT_MSG_FILE=$1
COMMIT_SOURCE=$2

# Only run for regular commits (not merge, squash, etc.)
if [ -z "$COMMIT_SOURCE" ] || [ "$COMMIT_SOURCE" = "message" ]; then
  if [ ! -s "$COMMIT_MSG_FILE" ] || grep -q "^#" "$COMMIT_MSG_FILE"; then
    exec < /dev/tty
    gitclean commit --hook "$COMMIT_MSG_FILE"
  fi
fi
"""


class GitError(Exception):
    """Raised when git operations fail."""
    pass


def _run_git(*args: str, cwd: Path | None = None) -> str:
    """Run a git command and return stdout."""
    logger.debug("Running: git %s", " ".join(args))
    try:
        result = subprocess.run(
            ['git', *args],
            capture_output=True,
            text=True,
            check=True,
            encoding='utf-8',
            errors='replace',
            cwd=cwd,
        )
        return result.stdout
    except subprocess.CalledProcessError as e:
        raise GitError(f"Git command failed: git {' '.join(args)}\n{e.stderr}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH")


def find_git_root(cwd: Path | None = None) -> Path | None:
    """Top-level directory of the enclosing repository, or None outside one."""
    try:
        return Path(_run_git('rev-parse', '--show-toplevel', cwd=cwd).strip())
    except GitError:
        return None


class GitRepo:
    """The repository containing the working directory (or cwd)."""

    def __init__(self, cwd: Path | None = None):
        self.cwd = Path(cwd) if cwd is not None else None
        self._root: Path | None = None

    def _git(self, *args: str) -> str:
        return _run_git(*args, cwd=self.cwd)

    def root(self) -> Path:
        if self._root is None:
            root = find_git_root(self.cwd)
            if root is None:
                raise GitError("Not in a git repository")
            self._root = root
        return self._root

    def status(self) -> str:
        """Short status of the working tree; empty when clean."""
        return self._git('status', '--short')

    def add(self, paths: list[str]) -> None:
        if not paths:
            return
        self._git('add', '--', *paths)

    def has_staged_changes(self) -> bool:
        return bool(self._git('diff', '--cached', '--name-only').strip())

    def commit(self, header: str, body: str = "") -> str:
        args = ['commit', '-m', header]
        if body:
            args += ['-m', body]
        return self._git(*args)

    def push(self) -> str:
        return self._git('push')

    @property
    def hook_path(self) -> Path:
        hooks_dir = self._git('rev-parse', '--git-path', 'hooks').strip()
        path = Path(hooks_dir)
        if not path.is_absolute():
            path = (self.cwd or Path.cwd()) / path
        return path / HOOK_NAME

    def install_hook(self) -> Path:
        """Write the prepare-commit-msg hook.

        An existing hook not written by gitclean is left alone.
        """
        path = self.hook_path
        if path.exists() and HOOK_MARKER not in path.read_text(encoding='utf-8', errors='replace'):
            raise GitError(f"A {HOOK_NAME} hook already exists and was not created by gitclean: {path}")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(HOOK_SCRIPT, encoding='utf-8')
        mode = os.stat(path).st_mode
        os.chmod(path, mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        logger.debug("Installed hook at %s", path)
        return path

    def remove_hook(self) -> bool:
        """Delete the hook. Returns False when there was none to remove."""
        path = self.hook_path
        if not path.exists():
            return False
        if HOOK_MARKER not in path.read_text(encoding='utf-8', errors='replace'):
            raise GitError("Hook exists but was not created by gitclean")
        path.unlink()
        logger.debug("Removed hook at %s", path)
        return True

    def hook_installed(self) -> bool:
        path = self.hook_path
        return path.exists() and HOOK_MARKER in path.read_text(encoding='utf-8', errors='replace')
