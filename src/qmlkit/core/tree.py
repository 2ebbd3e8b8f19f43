"""
Attributed tree types produced by the QML parser.

A parsed file becomes a ``Document`` whose children are ``Node`` objects.
Property-style nodes carry a scalar ``value``; component blocks carry
``children``. Each node remembers where it was declared through ``source``
(``"<sourceName>:<line>"``).
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, Field


class Node(BaseModel):
    """
    One element of the attributed tree.

    Attributes:
        tag: Component or attribute name (mutable, rewritten by normalization)
        value: Raw string payload for property nodes
        unique: Replace rather than accumulate on duplicate insertion
        source: ``"<sourceName>:<line>"`` set once at creation
        children: Ordered child nodes
    """

    tag: str
    value: str | None = None
    unique: bool = False
    source: str = Field(default="", frozen=True)
    children: list[Node] = Field(default_factory=list)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.tag}: {self.value}"
        return self.tag

    @property
    def has_value(self) -> bool:
        return self.value is not None

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    def add_child(self, child: Node) -> Node:
        """
        Insert a child and return it.

        When a child with the same tag already exists and either node is
        unique, the new child takes the old one's place and every other
        child with that tag is dropped.
        """
        if child.tag:
            for index, existing in enumerate(self.children):
                if existing.tag == child.tag and (existing.unique or child.unique):
                    child.unique = True
                    self.children[index] = child
                    self.children = [
                        node
                        for node in self.children
                        if node is child or node.tag != child.tag
                    ]
                    return child

        self.children.append(child)
        return child

    def get(self, tag: str) -> Node | None:
        """Return the first direct child with the given tag."""
        for child in self.children:
            if child.tag == tag:
                return child
        return None

    def has_child(self, tag: str) -> bool:
        return self.get(tag) is not None

    def children_by_tag(self, tag: str) -> list[Node]:
        return [child for child in self.children if child.tag == tag]

    def value_at(self, tag: str, default: str | None = None) -> str | None:
        """Value of the first child with ``tag``, or ``default``."""
        child = self.get(tag)
        if child is None or child.value is None:
            return default
        return child.value

    def walk(self) -> Iterator[Node]:
        """Traverse depth-first, yielding self then descendants."""
        yield self
        for child in self.children:
            yield from child.walk()


class Document(Node):
    """
    Root container of a parsed file.

    The document's own ``source`` is the bare source name; its children are
    the top-level declarations.
    """

    tag: str = "doc"

    @classmethod
    def create(cls, source: str = "") -> Document:
        return cls(source=source)


# Update forward references for recursive types
Node.model_rebuild()
Document.model_rebuild()
