"""
Character cursor for the QML parser.

An index-addressed view over an in-memory buffer with single-character
lookahead and one-step push-back. Line numbers are tracked as characters are
consumed and restored when a newline is pushed back.
"""

from __future__ import annotations

from collections.abc import Callable


class Cursor:
    """
    Reading position over QML source text.

    Attributes:
        text: Full source text
        source: Source name used in diagnostics
        pos: Index of the next character to read
        line: Current line number (1-indexed)
    """

    def __init__(self, text: str, source: str = ""):
        self.text = text
        self.source = source
        self.pos = 0
        self.line = 1

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    @property
    def column(self) -> int:
        """Column (1-indexed) of the next character to read."""
        return self.pos - self.text.rfind("\n", 0, self.pos)

    def peek(self, offset: int = 0) -> str:
        """Look at a character without consuming it. Returns "" past the end."""
        pos = self.pos + offset
        if pos >= len(self.text):
            return ""
        return self.text[pos]

    def get(self) -> str:
        """Consume and return the next character, or "" at end of input."""
        if self.pos >= len(self.text):
            return ""
        ch = self.text[self.pos]
        self.pos += 1
        if ch == "\n":
            self.line += 1
        return ch

    def retreat(self) -> None:
        """Push back the last consumed character."""
        if self.pos == 0:
            return
        self.pos -= 1
        if self.text[self.pos] == "\n":
            self.line -= 1

    def read_while(self, predicate: Callable[[str], bool]) -> str:
        """Consume characters while ``predicate`` holds and return them."""
        start = self.pos
        while not self.at_end and predicate(self.text[self.pos]):
            self.get()
        return self.text[start : self.pos]

    def skip_blanks(self) -> None:
        """Skip spaces and tabs only."""
        while self.peek() in (" ", "\t") and not self.at_end:
            self.pos += 1

    def skip_line(self) -> None:
        """Consume everything up to and including the next newline."""
        while not self.at_end:
            if self.get() == "\n":
                return

    def skip_whitespace(self) -> None:
        """
        Skip whitespace, ``//`` line comments and ``/* */`` block comments.

        Stops right before the first character that is none of those. An
        unterminated block comment runs to end of input without error.
        """
        while not self.at_end:
            ch = self.get()
            if ch.isspace():
                continue

            if ch == "/":
                nxt = self.peek()
                if nxt == "/":
                    self.skip_line()
                    continue
                if nxt == "*":
                    self.get()
                    self._skip_block_comment()
                    continue

            self.retreat()
            return

    def _skip_block_comment(self) -> None:
        while not self.at_end:
            if self.get() == "*" and self.peek() == "/":
                self.get()
                return

    def snippet(self, line: int, column: int = 0, radius: int = 2) -> str:
        """
        Numbered source lines around ``line``.

        A ``^^^`` marker is drawn under ``column`` when one is given.
        """
        lines = self.text.split("\n")
        first = max(1, line - radius)
        out = []
        for number in range(first, min(len(lines), line + radius) + 1):
            gutter = f"{number:4d} | "
            out.append(gutter + lines[number - 1])
            if number == line and column > 0:
                out.append(" " * (len(gutter) + column - 1) + "^^^")
        return "\n".join(out)
