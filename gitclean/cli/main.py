"""CLI Main Entry Point"""

import logging

from gitclean.cli.args import parse_args
from gitclean.cli.commands import (
    display_config,
    run_commit,
    run_default,
    run_init_config,
    run_install_completion,
    run_setup,
    run_spellcheck,
    run_status,
    run_test,
    run_uninstall,
)
from gitclean.log import setup_logging
from gitclean.output import dim, print_box, warning
from gitclean.prompts import PromptAborted

logger = logging.getLogger(__name__)


def show_cancelled() -> None:
    print_box(
        f"{warning('Operation cancelled by user')}\n\n{dim('Run the command again when you are ready to commit.')}",
        title="Operation Cancelled",
        color="yellow",
    )


def _dispatch(args) -> int:
    command = args.command
    if command == 'commit':
        return run_commit(args.hook)
    if command == 'setup':
        return run_setup()
    if command == 'uninstall':
        return run_uninstall()
    if command == 'status':
        return run_status()
    if command == 'spellcheck':
        return run_spellcheck(args.text, args.details)
    if command == 'test':
        return run_test()
    if command == 'init-config':
        return run_init_config(args.global_config)
    if command == 'config':
        return display_config()
    if command == 'completion':
        return run_install_completion()
    return run_default()


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    setup_logging(args.verbose)
    logger.debug("Running command: %s", args.command or "(default)")

    try:
        return _dispatch(args)
    except (PromptAborted, KeyboardInterrupt):
        show_cancelled()
        return 0
