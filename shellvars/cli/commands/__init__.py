"""CLI command handlers."""

from .expand import array_command, tokenize_command, word_command

__all__ = ['array_command', 'tokenize_command', 'word_command']
