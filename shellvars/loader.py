"""Symbol table loaders: YAML tables and shell assignment files."""

import logging
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union
import yaml

from shellvars.exceptions import ValidationError, SymbolTableValidationError
from shellvars.symbols.table import SymbolTable
from shellvars.words.arrays import ARRAY_OPEN, is_array_closed
from shellvars.words.parser import parse_array, parse_word


logger = logging.getLogger(__name__)


class PreservingLoader(yaml.SafeLoader):
    """Custom YAML loader that keeps values like 'on' and 'yes' as strings instead of booleans."""
    pass


# Shell configuration treats on/off/yes/no as plain words, so drop the implicit
# bool resolvers for the letters those words start with. 'true'/'false' still
# resolve to booleans.
PreservingLoader.yaml_implicit_resolvers = dict(PreservingLoader.yaml_implicit_resolvers)
for _first_char in 'oOyYnN':
    if _first_char in PreservingLoader.yaml_implicit_resolvers:
        PreservingLoader.yaml_implicit_resolvers[_first_char] = [
            (tag, regexp) for tag, regexp in PreservingLoader.yaml_implicit_resolvers[_first_char]
            if tag != 'tag:yaml.org,2002:bool'
        ]


class SymbolTableLoader:
    """Loads a symbol table from a YAML mapping of name -> scalar or list."""

    def __init__(self):
        """Initialize loader."""
        self.errors: List[ValidationError] = []

    def load(self, table_path: Union[str, Path]) -> SymbolTable:
        """
        Load and validate a YAML symbol table.

        Args:
            table_path: Path to the YAML file

        Returns:
            Symbol table with one symbol per top-level key

        Raises:
            SymbolTableValidationError: If the file cannot be read or fails validation
        """
        self.errors = []
        try:
            with open(table_path, 'r') as f:
                document = yaml.load(f, Loader=PreservingLoader)
        except (OSError, yaml.YAMLError) as e:
            self._add_error(f"Failed to load symbol table: {e}", str(table_path))
            self._raise_validation_errors()

        logger.info(f"Loaded symbol table: {table_path}")
        return self.load_document(document, str(table_path))

    def load_document(self, document: Any, source: str = "") -> SymbolTable:
        """
        Validate an already-parsed YAML document and build a table from it.

        Args:
            document: Parsed YAML (None for an empty file)
            source: Name used in error paths

        Returns:
            Symbol table

        Raises:
            SymbolTableValidationError: If validation fails
        """
        self.errors = []
        table = SymbolTable()

        if document is None:
            return table

        if not isinstance(document, dict):
            self._add_error(
                f"Symbol table must be a YAML mapping, got {type(document).__name__}", source
            )
            self._raise_validation_errors()

        for name, value in document.items():
            path = f"{source}:{name}" if source else str(name)

            if not SymbolTable.is_valid_name(name):
                self._add_error(f"Invalid symbol name {name!r}", path)
                continue

            if isinstance(value, list):
                items = []
                for i, item in enumerate(value):
                    text = self._scalar_text(item, f"{path}[{i}]")
                    if text is not None:
                        items.append(text)
                table.set_array(name, items)
            else:
                text = self._scalar_text(value, path)
                if text is not None:
                    table.set_scalar(name, text)

        if self.errors:
            self._raise_validation_errors()

        return table

    def _scalar_text(self, value: Any, path: str) -> Optional[str]:
        """Convert a YAML scalar to symbol text, recording an error for anything else."""
        if isinstance(value, bool):
            return 'true' if value else 'false'
        elif isinstance(value, (int, float)):
            return str(value)
        elif isinstance(value, str):
            return value
        elif value is None:
            self._add_error("Value cannot be null", path)
        else:
            self._add_error(f"Value must be a string, number or list, got {type(value).__name__}", path)
        return None

    def _add_error(self, message: str, path: str = "", exit_code: int = 2):
        """Add validation error."""
        self.errors.append(ValidationError(message, path, exit_code))

    def _raise_validation_errors(self):
        """Raise SymbolTableValidationError with accumulated errors."""
        raise SymbolTableValidationError(self.errors)


class AssignmentParser:
    """
    Reads shell-style assignments into a symbol table.

        pkgname=foo
        pkgver=1.0
        source=("$pkgname-$pkgver.tar.gz"
                'extra file.patch')

    Each value is resolved against the symbols assigned before it. Array
    values may span several lines until their closing ')'.
    """

    COMMENT_CHAR = '#'

    def __init__(self, table: Optional[SymbolTable] = None):
        """
        Initialize the parser.

        Args:
            table: Starting table; it is copied, never modified
        """
        self.table = table.snapshot() if table is not None else SymbolTable()
        self.errors: List[ValidationError] = []

    def parse(self, lines: Iterable[str], source: str = "<assignments>") -> SymbolTable:
        """
        Parse assignment lines.

        Args:
            lines: Lines of the assignment file
            source: Name used in error paths

        Returns:
            The table extended with every assignment

        Raises:
            SymbolTableValidationError: If any line is not a valid assignment
        """
        self.errors = []
        line_iter = iter(enumerate(lines, start=1))

        for lineno, line in line_iter:
            line = line.rstrip('\r\n')
            stripped = line.strip()
            if not stripped or stripped.startswith(self.COMMENT_CHAR):
                continue

            path = f"{source}:{lineno}"
            if '=' not in stripped:
                self._add_error(f"Invalid assignment: {stripped}. Expected NAME=VALUE", path)
                continue

            name, value = stripped.split('=', 1)
            if not SymbolTable.is_valid_name(name):
                self._add_error(f"Invalid symbol name {name!r}", path)
                continue

            if value.startswith(ARRAY_OPEN):
                while not is_array_closed(value):
                    next_line = next(line_iter, None)
                    if next_line is None:
                        logger.warning(f"Array '{name}' at {path} is missing its closing ')'")
                        break
                    if next_line[1].strip().startswith(self.COMMENT_CHAR):
                        continue
                    value = value + '\n' + next_line[1].rstrip('\r\n')
                self.table.set_array(name, parse_array(self.table, value))
            else:
                self.table.set_scalar(name, parse_word(self.table, value))
            logger.debug(f"Assigned {name} at {path}")

        if self.errors:
            raise SymbolTableValidationError(self.errors)

        return self.table

    def _add_error(self, message: str, path: str = "", exit_code: int = 2):
        """Add validation error."""
        self.errors.append(ValidationError(message, path, exit_code))


def parse_assignments(
    lines: Iterable[str],
    table: Optional[SymbolTable] = None,
    source: str = "<assignments>"
) -> SymbolTable:
    """
    Parse NAME=VALUE lines into a symbol table.

    Args:
        lines: Assignment lines
        table: Optional starting table (copied, not modified)
        source: Name used in error paths

    Returns:
        New symbol table

    Raises:
        SymbolTableValidationError: If any line is invalid
    """
    return AssignmentParser(table).parse(lines, source)


def load_assignments(path: Union[str, Path], table: Optional[SymbolTable] = None) -> SymbolTable:
    """
    Read a shell assignment file into a symbol table.

    Raises:
        FileNotFoundError: If the file does not exist
        SymbolTableValidationError: If any line is invalid
    """
    path = Path(path)
    with open(path, 'r') as f:
        lines = f.read().splitlines()
    logger.info(f"Loading assignments: {path}")
    return parse_assignments(lines, table, str(path))
