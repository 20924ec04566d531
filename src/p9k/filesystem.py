"""Filesystem access used when writing generated files."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class FileSystem(ABC):
    """Minimal set of filesystem operations the scaffolder relies on.

    Implementations must let OS-level errors propagate to the caller.
    """

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Return whether ``path`` exists."""

    @abstractmethod
    def make_directory(self, path: Path) -> None:
        """Create the single directory ``path``; its parent must already exist."""

    @abstractmethod
    def write_text_file(self, path: Path, content: str) -> None:
        """Write ``content`` to ``path`` as UTF-8, replacing any existing file."""


class LocalFileSystem(FileSystem):
    """:class:`FileSystem` backed by :mod:`pathlib`."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def make_directory(self, path: Path) -> None:
        Path(path).mkdir()

    def write_text_file(self, path: Path, content: str) -> None:
        Path(path).write_text(content, encoding=self._encoding)


__all__ = ["FileSystem", "LocalFileSystem"]
