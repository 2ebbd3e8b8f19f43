"""
qmlkit - QML-style UI declarations to OTML attribute trees.

Parses brace-delimited QML markup into a generic node tree and rewrites
component names to the OTUI widget vocabulary.
"""

from __future__ import annotations

from ._version import get_version
from .core.document import parse_file, parse_stream
from .core.errors import ParseError, QmlError, ResourceError, UnexpectedCharacterError
from .core.tree import Document, Node

__version__ = get_version()

__all__ = [
    "__version__",
    "Document",
    "Node",
    "ParseError",
    "QmlError",
    "ResourceError",
    "UnexpectedCharacterError",
    "parse_file",
    "parse_stream",
]
