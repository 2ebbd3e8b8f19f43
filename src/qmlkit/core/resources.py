"""
File lookup and reading for QML sources.

Names are resolved against an ordered list of search paths; the first
directory holding the file wins. A leading '/' in a name is relative to the
search path, not the filesystem root.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .errors import make_resource_error

logger = logging.getLogger(__name__)


class ResourceManager:
    """Reads QML files from a set of search paths."""

    def __init__(self, search_paths: Iterable[str | Path] = (), encoding: str = "utf-8"):
        self.search_paths: list[Path] = [Path(p) for p in search_paths]
        self.encoding = encoding

    def add_search_path(self, path: str | Path, prepend: bool = False) -> None:
        if prepend:
            self.search_paths.insert(0, Path(path))
        else:
            self.search_paths.append(Path(path))

    def resolve(self, name: str) -> Path | None:
        """Return the path ``name`` refers to, or None if no such file exists."""
        if not self.search_paths:
            path = Path(name)
            return path if path.is_file() else None

        relative = name.lstrip("/")
        for base in self.search_paths:
            candidate = base / relative
            if candidate.is_file():
                return candidate
        return None

    def exists(self, name: str) -> bool:
        return self.resolve(name) is not None

    def read_file_contents(self, name: str) -> str:
        """
        Read a whole file as text.

        Raises:
            ResourceError: If the file is missing, unreadable or not valid
                text in the configured encoding
        """
        path = self.resolve(name)
        if path is None:
            raise make_resource_error(name, "file not found")

        try:
            text = path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise make_resource_error(name, str(e)) from e

        logger.debug("Read %s (%d chars)", path, len(text))
        return text
