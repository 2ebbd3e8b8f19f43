"""
Tag normalization from QML component names to the OTUI widget vocabulary.

The rewrite policy is data: a mapping from source tag to a ``ComponentRule``
naming the new tag and the direct children to rename. ``normalize_node``
applies it recursively, descending only into children whose tag starts with
an uppercase letter (nested component definitions).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from .tree import Document, Node

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChildRename:
    """Retag the first direct child tagged ``source`` as ``target``."""

    source: str
    target: str


@dataclass(frozen=True)
class ComponentRule:
    """New tag for a component plus the child renames that go with it."""

    tag: str
    renames: tuple[ChildRename, ...] = ()


_WIDGET = ComponentRule("Widget", (ChildRename("color", "background-color"),))
_LABEL = ComponentRule("Label")

COMPONENT_RULES: dict[str, ComponentRule] = {
    "Item": _WIDGET,
    "Rectangle": _WIDGET,
    "Text": _LABEL,
    "Label": _LABEL,
    "Image": ComponentRule("Widget", (ChildRename("source", "image-source"),)),
    "MouseArea": ComponentRule("Widget"),
}


def is_component_tag(tag: str) -> bool:
    """Component definitions start with an uppercase letter."""
    return bool(tag) and tag[0].isascii() and tag[0].isupper()


def normalize_node(node: Node, rules: Mapping[str, ComponentRule] = COMPONENT_RULES) -> None:
    """Rewrite ``node`` in place, then recurse into nested components."""
    rule = rules.get(node.tag)
    if rule is not None:
        node.tag = rule.tag
        for rename in rule.renames:
            child = node.get(rename.source)
            if child is not None:
                child.tag = rename.target

    for child in node.children:
        if is_component_tag(child.tag):
            normalize_node(child, rules)


def normalize(document: Document, rules: Mapping[str, ComponentRule] = COMPONENT_RULES) -> Document:
    """
    Normalize every top-level node of ``document`` in place.

    Args:
        document: Parsed document
        rules: Tag rewrite table (defaults to ``COMPONENT_RULES``)

    Returns:
        The same document, for chaining
    """
    for node in document.children:
        normalize_node(node, rules)
    logger.debug("Normalized %s", document.source or "<document>")
    return document
