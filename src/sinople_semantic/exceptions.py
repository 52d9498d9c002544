"""
Exception types raised by the semantic engine.

Two failure kinds are kept apart so callers can tell "your input was bad"
from "the engine is broken":

- ParseError: the Turtle text handed to the engine is malformed.
- SerializationError: an internal record could not be mapped to the
  boundary shape.
"""

from typing import Optional


class SemanticError(Exception):
    """Base class for all engine errors."""


class ParseError(SemanticError, ValueError):
    """
    Raised when Turtle input does not conform to the grammar.

    Attributes:
        message: Description of what failed.
        line: 1-based line of the offending input, if known.
        column: 1-based column of the offending input, if known.
    """

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.message = message
        self.line = line
        self.column = column
        if line is not None and column is not None:
            text = f"Invalid Turtle syntax at line {line}, column {column}: {message}"
        elif line is not None:
            text = f"Invalid Turtle syntax at line {line}: {message}"
        else:
            text = f"Invalid Turtle syntax: {message}"
        super().__init__(text)


class SerializationError(SemanticError):
    """Raised when a record cannot be converted to its boundary shape."""


class ConfigError(SemanticError, ValueError):
    """Raised for unreadable or invalid configuration."""
