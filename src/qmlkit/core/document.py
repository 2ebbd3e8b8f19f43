"""
Entry points: parse QML from a named file or from a stream.

``parse_file`` never raises; failures are logged and reported as None.
``parse_stream`` lets parse errors propagate so callers can inspect them.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TextIO

from .errors import QmlError
from .normalizer import COMPONENT_RULES, ComponentRule, normalize
from .qml_parser import QmlParser
from .resources import ResourceManager
from .tree import Document

logger = logging.getLogger(__name__)


def parse_file(
    file_name: str,
    resources: ResourceManager | None = None,
    rules: Mapping[str, ComponentRule] = COMPONENT_RULES,
) -> Document | None:
    """
    Read, parse and normalize a QML file.

    Args:
        file_name: Name resolved through ``resources``
        resources: File reader (defaults to reading ``file_name`` directly)
        rules: Tag rewrite table

    Returns:
        The normalized document, or None if the file could not be read or
        parsed (the reason is logged)
    """
    if resources is None:
        resources = ResourceManager()

    try:
        buffer = resources.read_file_contents(file_name)
        return parse_stream(buffer, file_name, rules)
    except (QmlError, OSError) as e:
        logger.error("Failed to parse QML file '%s': %s", file_name, e)
        return None


def parse_stream(
    stream: str | TextIO,
    source: str,
    rules: Mapping[str, ComponentRule] = COMPONENT_RULES,
) -> Document:
    """
    Parse and normalize QML text.

    Args:
        stream: QML text, or a text file object to read it from
        source: Source name recorded on nodes and in errors

    Raises:
        ParseError: On a syntax error
    """
    text = stream if isinstance(stream, str) else stream.read()
    doc = QmlParser.parse(text, source)
    return normalize(doc, rules)
