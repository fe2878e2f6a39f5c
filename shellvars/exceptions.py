"""shellvars exceptions."""

from typing import List
from dataclasses import dataclass


class NullInputError(ValueError):
    """Raised when a word operation is given no input at all (None)."""


@dataclass
class ValidationError:
    """Single validation error."""
    message: str
    path: str = ""
    exit_code: int = 2


class SymbolTableValidationError(Exception):
    """Raised when a symbol table source fails validation.

    The loader collects every problem it finds before raising, so the CLI
    can report all of them at once and map them to an exit code.
    """

    def __init__(self, errors: List[ValidationError]):
        self.errors = errors
        self.exit_code = 2

        messages = []
        for error in errors:
            if error.path:
                messages.append(f"Validation error at {error.path}: {error.message}")
            else:
                messages.append(f"Validation error: {error.message}")

        super().__init__("\n".join(messages))
