"""CLI Commands"""

import os
import sys

from gitclean.commit import CommitBuilder
from gitclean.config import (
    ConfigError, ConfigManager, create_default_config, get_config_path, load_config,
)
from gitclean.git import GitError, GitRepo
from gitclean.output import (
    ARROW, BULLET, CHECK, CROSS,
    bold, dim, error, info, print_box, print_error, print_success, print_warning, success, warning,
)
from gitclean.prompts.render import highlight
from gitclean.spelling import get_spell_checker

SAMPLE_MESSAGES = [
    "Fix typo in fucntion name",
    "Add new componnet for user managment",
    "Update documention for the API",
    "Refactor databse connection handlr",
    "Implement authetication middleware",
    "Fix issue with responsivness on mobile devices",
    "Optimize perfomance of the serach algoritm",
    "Add git hooks for automatic testing",
    "Configure webpack and babel setup",
    "Deploy to production enviroment",
]


def _checker():
    return get_spell_checker(load_config().spellcheck.custom_words)


def run_commit(hook_file: str | None = None) -> int:
    """Guided commit; in hook mode the message goes to hook_file."""
    config = load_config()
    try:
        repo = GitRepo()
        repo.root()
    except GitError as e:
        print_error(str(e))
        return 1
    return CommitBuilder(config, repo=repo, checker=_checker()).run(hook_file)


def run_default() -> int:
    """No subcommand: commit everything if there is anything to commit."""
    try:
        status = GitRepo().status()
    except GitError as e:
        print_error(str(e))
        return 1

    if not status.strip():
        print(warning("No changes to commit"))
        print(dim("Make some changes and run `gitclean` again"))
        print(dim("\nTry these commands:"))
        print(dim(f'{BULLET} gitclean spellcheck "your text" - Test spell checker'))
        print(dim(f"{BULLET} gitclean test - Run spell checker tests"))
        print(dim(f"{BULLET} gitclean setup - Install git hooks"))
        return 0

    workflow = load_config().workflow
    steps = []
    if workflow.auto_add:
        steps.append(f"git add {' '.join(workflow.add_files)}")
    steps.append("git commit")
    if workflow.auto_push:
        steps.append("git push")
    print(info("Found changes to commit"))
    print(dim(f"This will: {f' {ARROW} '.join(steps)}\n"))
    return run_commit()


def run_setup() -> int:
    try:
        path = GitRepo().install_hook()
    except (GitError, OSError) as e:
        print_error(f"Failed to install hooks: {e}")
        return 1
    print_success("GitClean hooks installed successfully!")
    print(dim(f"  {path}"))
    return 0


def run_uninstall() -> int:
    try:
        removed = GitRepo().remove_hook()
    except (GitError, OSError) as e:
        print_error(f"Failed to remove hooks: {e}")
        return 1
    if removed:
        print_success("GitClean hooks removed successfully!")
    else:
        print_warning("No gitclean hook installed.")
    return 0


def run_status() -> int:
    try:
        status = GitRepo().status()
    except GitError as e:
        print_error(str(e))
        return 1
    if status.strip():
        print(info(bold("Git Status:")))
        print(status.rstrip())
    else:
        print(success(f"{CHECK} Working directory clean"))
    return 0


def display_stats(checker) -> None:
    stats = checker.stats()
    print_box(
        "\n".join([
            dim(f"Dictionary: {f'{CHECK} Loaded' if stats.has_dictionary else 'Fallback mode'}"),
            dim(f"Technical words: {stats.technical_word_count}"),
            dim(f"Typo correction rules: {stats.typo_rule_count}"),
            "",
            warning("This spell checker is optimized for:"),
            dim(f"{BULLET} Git commit messages"),
            dim(f"{BULLET} Programming terminology"),
            dim(f"{BULLET} Common development terms"),
            dim(f"{BULLET} Technical abbreviations"),
        ]),
        title="Spell Checker Status",
        color="blue",
    )


def run_spellcheck(text: str | None, details: bool = False) -> int:
    checker = _checker()
    if details:
        display_stats(checker)

    if not text:
        print(warning('Tip: Provide text to check: gitclean spellcheck "your text here"'))
        return 0

    findings = checker.check(text)
    if not findings:
        print_box(f"{success(f'{CHECK} No spelling issues found!')}\n\n{dim(f'Checked text: {text!r}')}",
                  title="Spell Check Results", color="green")
        return 0

    lines = [
        warning("Spelling issues found:"),
        "",
        f"{dim('Original:')}  {highlight(text, findings)}",
        f"{dim('Corrected:')} {success(checker.auto_correct(text))}",
        "",
        info("Issues found:"),
    ]
    for finding in findings:
        suggestions = f" {ARROW} {success(', '.join(finding.suggestions))}" if finding.suggestions else " (no suggestions)"
        lines.append(f"{error(f'{BULLET} {finding.word}')}{suggestions}")
    print_box("\n".join(lines), title="Spell Check Results", color="yellow")
    return 0


def run_test() -> int:
    """Spell check a fixed set of sample commit messages."""
    checker = _checker()
    print_box(dim("Testing with common development-related text..."), title="Spell Checker Test Suite",
              color="blue")

    for i, sample in enumerate(SAMPLE_MESSAGES, 1):
        print(dim(f"\n{i}. Testing: {sample!r}"))
        findings = checker.check(sample)
        if not findings:
            print(success(f"   {CHECK} No issues found"))
            continue
        print(error(f"   {CROSS} Found {len(findings)} issue(s)"))
        print(warning(f"   Corrected: {checker.auto_correct(sample)!r}"))

    stats = checker.stats()
    print_box(
        "\n".join([
            success(f"{CHECK} Test completed!"),
            "",
            dim(f"Dictionary status: {'Active' if stats.has_dictionary else 'Fallback mode'}"),
            dim(f"Total technical terms: {stats.technical_word_count}"),
            dim(f"Total typo rules: {stats.typo_rule_count}"),
        ]),
        title="Test Results",
        color="green",
    )
    return 0


def run_init_config(global_config: bool = False) -> int:
    path = ConfigManager().default_path(global_config)
    try:
        create_default_config(path)
    except ConfigError as e:
        print_error(str(e))
        return 1
    print_success(f"Created {path}")
    return 0


def display_config() -> int:
    """Display current configuration."""
    config = load_config()
    config_path = get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no {ConfigManager.CONFIG_FILENAME} found)")

    spell = config.spellcheck
    flow = config.workflow
    print()
    print(f"  {bold('Settings:')}")
    print(f"    max_subject_length:     {info(str(config.max_subject_length))}")
    print(f"    spellcheck.enabled:     {info(str(spell.enabled).lower())}")
    print(f"    spellcheck.debounce_ms: {info(str(spell.debounce_ms))}")
    print(f"    spellcheck.custom_words: {info(', '.join(spell.custom_words) or '(none)')}")
    print(f"    workflow.auto_add:      {info(str(flow.auto_add).lower())}")
    print(f"    workflow.auto_push:     {info(str(flow.auto_push).lower())}")
    print(f"    workflow.add_files:     {info(' '.join(flow.add_files))}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Repository: {ConfigManager.CONFIG_FILENAME} (at the git root)")
    print(f"    Local:      {ConfigManager.CONFIG_FILENAME} (in current directory)")
    print(f"    Global:     ~/{ConfigManager.CONFIG_FILENAME}")
    print(f"\n  {dim('Run')} gitclean init-config {dim('to create one')}\n")

    return 0


def run_install_completion() -> int:
    """Show how to install shell tab completion."""
    shell = os.environ.get('SHELL', '')
    line = 'eval "$(register-python-argcomplete gitclean)"'

    print(f"\n{bold('Tab Completion Setup')}\n")

    if 'zsh' in shell or 'bash' in shell:
        rc_file = os.path.expanduser('~/.zshrc' if 'zsh' in shell else '~/.bashrc')
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim('source ' + rc_file)}")
    elif sys.platform == 'win32':
        print("For PowerShell, run:\n")
        print("  register-python-argcomplete --shell powershell gitclean | Out-String | Invoke-Expression")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print(f"  {line}\n")
        print(f"  {dim('# Fish')}")
        print("  register-python-argcomplete --shell fish gitclean | source")

    print(f"\n{dim('After setup, press TAB to autocomplete commands.')}")
    return 0
