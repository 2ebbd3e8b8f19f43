"""
Right-hand-side reader for QML property values.

A value runs until a newline or ';' outside quotes and brackets, or until a
closing '}' that belongs to the enclosing block. Nested ``{}``, ``()`` and
``[]`` keep multi-line bindings and function bodies together as one string.
"""

from __future__ import annotations

from .cursor import Cursor


def read_value(cursor: Cursor) -> str:
    """
    Read a property value starting at the cursor.

    The terminating newline or ';' is consumed but not included; a closing
    '}' of the enclosing block is left for the caller. Trailing whitespace is
    trimmed and a value framed by double quotes is unquoted.

    Args:
        cursor: Cursor positioned right after the ':' (or function name)

    Returns:
        The value text
    """
    cursor.skip_blanks()

    chars: list[str] = []
    in_quote = False
    escaped = False
    brace_depth = 0
    paren_depth = 0
    bracket_depth = 0

    while not cursor.at_end:
        ch = cursor.get()
        balanced = brace_depth == 0 and paren_depth == 0 and bracket_depth == 0

        if ch == "\n" and not in_quote and balanced:
            break

        if in_quote:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_quote = False
        elif ch == '"':
            in_quote = True
        elif ch == "{":
            brace_depth += 1
        elif ch == "}":
            if brace_depth > 0:
                brace_depth -= 1
            else:
                cursor.retreat()
                break
        elif ch == "(":
            paren_depth += 1
        elif ch == ")":
            paren_depth -= 1
        elif ch == "[":
            bracket_depth += 1
        elif ch == "]":
            bracket_depth -= 1
        elif ch == ";" and balanced:
            break

        chars.append(ch)

    return unquote("".join(chars).rstrip())


def unquote(value: str) -> str:
    """Strip surrounding double quotes from a fully quoted value."""
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value
