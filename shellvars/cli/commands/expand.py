"""Word, array and tokenize command implementations."""

import json
import logging
from argparse import Namespace
from pathlib import Path
from typing import List, Optional

from shellvars.exceptions import SymbolTableValidationError
from shellvars.loader import SymbolTableLoader, load_assignments, parse_assignments
from shellvars.symbols.table import SymbolTable
from shellvars.words import parse_array, parse_word, tokenize_array


logger = logging.getLogger(__name__)


def configure_logging(args: Namespace) -> None:
    """Set up logging from --log-level, --debug and --quiet."""
    level_name = getattr(args, 'log_level', 'warn')
    log_level = getattr(logging, 'WARNING' if level_name == 'warn' else level_name.upper())
    if getattr(args, 'debug', False):
        log_level = logging.DEBUG
    elif getattr(args, 'quiet', False):
        log_level = logging.ERROR

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def build_table(args: Namespace) -> Optional[SymbolTable]:
    """
    Build the symbol table for a command.

    Sources are applied in order: --vars-file, --source, then each --var,
    so later definitions override earlier ones.

    Returns:
        The table, or None when --no-substitute is given

    Raises:
        FileNotFoundError: If a referenced file does not exist
        SymbolTableValidationError: If a source fails validation
    """
    if args.no_substitute:
        return None

    table = SymbolTable()

    if args.vars_file:
        vars_file = Path(args.vars_file)
        if not vars_file.exists():
            raise FileNotFoundError(f"Vars file not found: {vars_file}")
        table = SymbolTableLoader().load(vars_file)

    if args.source:
        source_file = Path(args.source)
        if not source_file.exists():
            raise FileNotFoundError(f"Source file not found: {source_file}")
        table = load_assignments(source_file, table)

    if args.var:
        table = parse_assignments(args.var, table, source='--var')

    return table


def _emit(values: List[str], as_json: bool) -> None:
    if as_json:
        print(json.dumps(values))
    else:
        for value in values:
            print(value)


def _run(args: Namespace, literal_handler) -> int:
    configure_logging(args)

    try:
        table = build_table(args)
        _emit(literal_handler(table), args.json)
        return 0

    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 1
    except SymbolTableValidationError as e:
        for error in e.errors:
            if error.path:
                logger.error(f"Validation error at {error.path}: {error.message}")
            else:
                logger.error(f"Validation error: {error.message}")
        return e.exit_code
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return 1


def word_command(args: Namespace) -> int:
    """Parse each word argument and print the results."""
    return _run(args, lambda table: [parse_word(table, word) for word in args.words])


def array_command(args: Namespace) -> int:
    """Parse an array literal and print its elements."""
    return _run(args, lambda table: parse_array(table, args.literal))


def tokenize_command(args: Namespace) -> int:
    """Print the raw elements of an array literal."""
    _emit(tokenize_array(args.literal), args.json)
    return 0
