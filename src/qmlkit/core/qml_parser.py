"""
Recursive-descent parser for QML-style UI declarations.

Grammar handled, statement by statement inside each block::

    import QtQuick 2.15                  # skipped
    signal clicked(int x)                # skipped
    property <type|alias> <name>: <value>
    function <name>(<args>) { <body> }   # captured as opaque text
    <identifier>: <value>
    <Identifier> { <statements> }

The parser builds an unnormalized ``Document``; see ``normalizer`` for the
tag rewrite applied afterwards.
"""

from __future__ import annotations

import logging

from .cursor import Cursor
from .errors import ParseError, UnexpectedCharacterError
from .tree import Document, Node
from .values import read_value

logger = logging.getLogger(__name__)


def is_identifier_char(ch: str) -> bool:
    return (ch.isascii() and ch.isalnum()) or ch in ("_", ".", "-")


class QmlParser:
    """
    Parser for one QML source text.

    Holds per-parse state (the cursor and its line counter); create a new
    instance for every parse.
    """

    def __init__(self, text: str, source: str = ""):
        """
        Initialize parser.

        Args:
            text: QML source text
            source: Source name recorded on every node (usually the file name)
        """
        self.source = source
        self.cursor = Cursor(text, source)

    @classmethod
    def parse(cls, text: str, source: str = "") -> Document:
        """
        Parse QML text into an unnormalized document.

        Raises:
            UnexpectedCharacterError: If an identifier is followed by
                something other than ':' or '{'
            ParseError: If blocks are nested too deeply to follow
        """
        parser = cls(text, source)
        doc = Document.create(source)
        try:
            parser.parse_block(doc)
        except RecursionError as e:
            raise ParseError(
                f"QML error in '{source or '<text>'}': blocks nested too deeply "
                f"(near line {parser.cursor.line})"
            ) from e
        logger.debug("Parsed %d top-level node(s) from %s", len(doc.children), source or "<text>")
        return doc

    def parse_block(self, parent: Node) -> None:
        """
        Parse statements into ``parent`` until end of input or a closing '}'.

        The closing '}' is consumed; recursion into nested blocks happens for
        every ``Identifier {``.
        """
        cursor = self.cursor

        while True:
            cursor.skip_whitespace()
            if cursor.at_end:
                return

            if cursor.peek() == "}":
                cursor.get()
                return

            line = cursor.line
            identifier = cursor.read_while(is_identifier_char)

            if not identifier:
                # Malformed input ends the block without a diagnostic
                if cursor.peek() != "}":
                    return
                continue

            if identifier == "import":
                cursor.skip_line()
            elif identifier == "signal":
                self._skip_signal()
            elif identifier == "property":
                self._parse_property(parent, line)
            elif identifier == "function":
                self._parse_function(parent, line)
            else:
                self._parse_statement(parent, identifier, line)

    def _location(self, line: int) -> str:
        return f"{self.source}:{line}"

    def _skip_signal(self) -> None:
        while not self.cursor.at_end:
            if self.cursor.get() in ("\n", ";"):
                return

    def _parse_property(self, parent: Node, line: int) -> None:
        """property <type|alias> <name>: <value>"""
        cursor = self.cursor

        cursor.skip_blanks()
        cursor.read_while(lambda ch: not ch.isspace())  # type or alias
        if cursor.peek().isspace():
            # The separator after the type is consumed even when it is a newline
            cursor.get()

        cursor.skip_blanks()
        name = cursor.read_while(lambda ch: ch != ":" and not ch.isspace())

        cursor.skip_whitespace()
        if cursor.peek() != ":":
            # Declarations without an initial value produce no node
            return

        cursor.get()
        value = read_value(cursor)
        if name:
            parent.add_child(
                Node(tag=name, value=value, unique=True, source=self._location(line))
            )

        self._skip_semicolon()

    def _parse_function(self, parent: Node, line: int) -> None:
        """function <name>(<args>) { <body> }"""
        cursor = self.cursor

        cursor.skip_whitespace()
        name = cursor.read_while(lambda ch: ch != "(" and not ch.isspace())

        body = read_value(cursor)
        if not name:
            return
        parent.add_child(
            Node(tag=name, value="function " + body, unique=True, source=self._location(line))
        )

    def _parse_statement(self, parent: Node, identifier: str, line: int) -> None:
        """<identifier>: <value>  or  <Identifier> { ... }"""
        cursor = self.cursor
        cursor.skip_whitespace()

        next_char = cursor.peek()
        if next_char == ":":
            cursor.get()
            value = read_value(cursor)
            parent.add_child(
                Node(tag=identifier, value=value, unique=True, source=self._location(line))
            )
            self._skip_semicolon()

        elif next_char == "{":
            cursor.get()
            node = parent.add_child(Node(tag=identifier, source=self._location(line)))
            self.parse_block(node)

        else:
            raise UnexpectedCharacterError(
                node=parent,
                character=next_char or None,
                identifier=identifier,
                line=cursor.line,
                column=cursor.column,
                source=self.source,
                excerpt=cursor.snippet(cursor.line, cursor.column),
            )

    def _skip_semicolon(self) -> None:
        self.cursor.skip_whitespace()
        if self.cursor.peek() == ";":
            self.cursor.get()
