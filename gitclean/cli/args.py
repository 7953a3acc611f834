"""CLI Argument Parsing"""

import argparse
import argcomplete

from gitclean import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='gitclean',
        description='Clean, conventional commits made easy',
        epilog='Example: gitclean (guided commit: git add, commit, push)'
    )

    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--verbose', action='store_true', help='Show debug logging on stderr')

    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND')

    commit = subparsers.add_parser('commit', help='Create a conventional commit interactively')
    commit.add_argument('--hook', type=str, metavar='FILE', help='Hook mode: write the message to FILE instead of committing')

    subparsers.add_parser('setup', aliases=['install'], help='Install the gitclean git hook')
    subparsers.add_parser('uninstall', aliases=['remove'], help='Remove the gitclean git hook')
    subparsers.add_parser('status', aliases=['s'], help='Show git status')

    spell = subparsers.add_parser('spellcheck', aliases=['spell'], help='Spell check some text')
    spell.add_argument('text', nargs='?', help='Text to spell check')
    spell.add_argument('-v', '--verbose', dest='details', action='store_true', help='Show spell checker details')

    subparsers.add_parser('test', help='Run the spell checker against sample commit messages')

    init = subparsers.add_parser('init-config', help='Write a default .gitclean.json')
    init.add_argument('--global', dest='global_config', action='store_true', help='Write to ~/.gitclean.json instead')

    subparsers.add_parser('config', help='Show current configuration')
    subparsers.add_parser('completion', help='Show how to install shell tab completion')

    return parser


# Subcommand aliases resolve to their canonical name
COMMAND_ALIASES = {
    'install': 'setup',
    'remove': 'uninstall',
    's': 'status',
    'spell': 'spellcheck',
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    args = parser.parse_args(argv)
    if args.command:
        args.command = COMMAND_ALIASES.get(args.command, args.command)
    return args
