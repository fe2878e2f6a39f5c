"""Main CLI entry point for shellvars."""

import argparse
import sys
from typing import Optional

from .commands import array_command, tokenize_command, word_command


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Options shared by every subcommand."""
    parser.add_argument(
        '--var',
        action='append',
        metavar='NAME=VALUE',
        help='Define a symbol; NAME=(a b) defines an array (can be specified multiple times)'
    )
    parser.add_argument(
        '--vars-file',
        type=str,
        help='Path to YAML file mapping names to strings or lists'
    )
    parser.add_argument(
        '--source',
        type=str,
        help='Path to shell assignment file (NAME=VALUE lines)'
    )
    parser.add_argument(
        '--no-substitute',
        action='store_true',
        help='Skip variable substitution (words are still unquoted)'
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Print results as a JSON list'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Only log errors'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default='warn',
        help='Set log level'
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the shellvars CLI."""
    parser = argparse.ArgumentParser(
        prog='shellvars',
        description='Shell-style array tokenizing and variable substitution'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    word_parser = subparsers.add_parser('word', help='Substitute and unquote words')
    word_parser.add_argument(
        'words',
        nargs='+',
        help='Words to parse'
    )
    _add_common_arguments(word_parser)

    array_parser = subparsers.add_parser('array', help='Parse an array literal')
    array_parser.add_argument(
        'literal',
        type=str,
        help="Array literal, e.g. \"(a 'b c' $d)\""
    )
    _add_common_arguments(array_parser)

    tokenize_parser = subparsers.add_parser(
        'tokenize', help='Split an array literal without substitution or unquoting'
    )
    tokenize_parser.add_argument(
        'literal',
        type=str,
        help='Array literal'
    )
    tokenize_parser.add_argument(
        '--json',
        action='store_true',
        help='Print results as a JSON list'
    )

    return parser


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    if parsed_args.command == 'word':
        return word_command(parsed_args)
    elif parsed_args.command == 'array':
        return array_command(parsed_args)
    elif parsed_args.command == 'tokenize':
        return tokenize_command(parsed_args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
