"""
Error types for qmlkit parsing, resource loading and configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .tree import Node


@dataclass(frozen=True)
class ErrorContext:
    """Where in a QML text an error was found, with a numbered excerpt."""

    source: str
    line: int
    column: int
    excerpt: str = ""

    def __str__(self) -> str:
        location = f"{self.source}:{self.line}:{self.column}"
        return f"{location}\n{self.excerpt}" if self.excerpt else location


class QmlError(Exception):
    """Base exception for all qmlkit errors."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(f"{context}\n{message}" if context else message)


class ParseError(QmlError):
    """
    Raised when QML syntax cannot be parsed.

    Examples:
    - An identifier followed by something other than ':' or '{'
    - Blocks nested deeper than the parser can follow
    """


class UnexpectedCharacterError(ParseError):
    """
    Raised when an identifier is followed by a character that is neither
    ':' nor '{'.

    Attributes:
        node: The enclosing node whose block was being parsed
        character: The offending character, or None at end of input
        identifier: The identifier that preceded it
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        source: Source name of the parsed text
    """

    def __init__(
        self,
        node: Node,
        character: str | None,
        identifier: str,
        line: int,
        column: int = 1,
        source: str = "",
        excerpt: str = "",
    ):
        self.node = node
        self.character = character
        self.identifier = identifier
        self.line = line
        self.column = column
        self.source = source

        found = f"'{character}'" if character is not None else "end of input"
        detail = f"Unexpected character {found} after identifier '{identifier}' at line {line}"
        where = f" in '{node.source}'" if node.source else ""

        context = ErrorContext(source, line, column, excerpt) if source else None
        super().__init__(f"QML error{where}: {detail}", context)


class ResourceError(QmlError):
    """Raised when a QML file cannot be located or read."""


class ConfigError(QmlError):
    """Raised when a qmlkit.toml file is missing or malformed."""


def make_resource_error(name: str, reason: str) -> ResourceError:
    return ResourceError(f"unable to read file '{name}': {reason}")
