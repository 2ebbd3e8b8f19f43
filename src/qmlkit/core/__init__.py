"""
qmlkit core: QML parsing, normalization and supporting services.
"""

from .document import parse_file, parse_stream
from .errors import (
    ConfigError,
    ErrorContext,
    ParseError,
    QmlError,
    ResourceError,
    UnexpectedCharacterError,
)
from .normalizer import COMPONENT_RULES, ChildRename, ComponentRule, normalize
from .qml_parser import QmlParser
from .resources import ResourceManager
from .tree import Document, Node

__all__ = [
    "COMPONENT_RULES",
    "ChildRename",
    "ComponentRule",
    "ConfigError",
    "Document",
    "ErrorContext",
    "Node",
    "ParseError",
    "QmlError",
    "QmlParser",
    "ResourceError",
    "ResourceManager",
    "UnexpectedCharacterError",
    "normalize",
    "parse_file",
    "parse_stream",
]
