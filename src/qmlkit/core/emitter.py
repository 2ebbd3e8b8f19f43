"""
OTML text emitter.

Serializes a (normalized) tree into the indentation-based OTML/OTUI text the
UI loader reads::

    Widget
      background-color: #ff0000
      Label
        text: hi

Multi-line values use a block scalar whose indicator records trailing
newlines: ``|-`` (none), ``|`` (one), ``|+`` (several).
"""

from __future__ import annotations

from .tree import Document, Node

INDENT = "  "


def emit(node: Node) -> str:
    """Render ``node`` and its subtree. A Document renders only its children."""
    lines: list[str] = []
    if isinstance(node, Document):
        for child in node.children:
            _emit_node(child, 0, lines)
    else:
        _emit_node(node, 0, lines)
    return "\n".join(lines)


def _emit_node(node: Node, depth: int, lines: list[str]) -> None:
    indent = INDENT * depth
    head = indent + (node.tag or "-")
    if node.value is not None or node.unique:
        head += ":"

    value = node.value
    if value and "\n" in value:
        if value.endswith("\n\n"):
            head += " |+"
        elif value.endswith("\n"):
            head += " |"
        else:
            head += " |-"
        lines.append(head)
        block_indent = INDENT * (depth + 1)
        for part in value.rstrip("\n").split("\n"):
            lines.append(block_indent + part if part else "")
    elif value:
        lines.append(f"{head} {value}")
    else:
        lines.append(head)

    for child in node.children:
        _emit_node(child, depth + 1, lines)
