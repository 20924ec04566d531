"""Configuration helpers shared by the scaffolder and CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from enum import Enum
from pathlib import Path
from typing import Mapping

__all__ = [
    "ArtifactKind",
    "ArtifactRequest",
    "directory_name",
    "resolve_target_directory",
]


class ArtifactKind(str, Enum):
    """Categories of generated files, in the order they are written."""

    CONSTANT = "constant"
    FUNCTION = "function"
    INTERFACE = "interface"
    MODULE = "module"
    PACKAGE = "package"
    REPOSITORY = "repository"
    SCRIPT = "script"
    TYPE = "type"


@dataclass(frozen=True, slots=True)
class ArtifactRequest:
    """The set of artifact kinds selected for a single invocation.

    Every kind is an independent selector. Builders for ``module``, ``package``
    and ``script`` read the sibling selectors to pick their variant content.
    """

    constant: bool = False
    function: bool = False
    interface: bool = False
    module: bool = False
    package: bool = False
    repository: bool = False
    script: bool = False
    type: bool = False

    @classmethod
    def from_flags(cls, flags: Mapping[str | ArtifactKind, bool]) -> "ArtifactRequest":
        """Build a request from a ``{kind: enabled}`` mapping.

        Keys may be plain strings or :class:`ArtifactKind` members. Missing
        kinds are disabled.
        """

        known = {kind.value for kind in ArtifactKind}
        values: dict[str, bool] = {}
        for key, enabled in flags.items():
            name = key.value if isinstance(key, ArtifactKind) else str(key)
            if name not in known:
                raise ValueError(f"unknown artifact kind '{name}'")
            values[name] = bool(enabled)
        return cls(**values)

    def is_enabled(self, kind: ArtifactKind) -> bool:
        return bool(getattr(self, ArtifactKind(kind).value))

    def enabled(self) -> tuple[ArtifactKind, ...]:
        """Return the selected kinds in declaration order."""

        return tuple(kind for kind in ArtifactKind if self.is_enabled(kind))

    def is_empty(self) -> bool:
        return not any(getattr(self, field.name) for field in fields(self))


def resolve_target_directory(cwd: str | Path, user_input: str | None = None) -> Path:
    """Return the directory files are generated into.

    ``user_input`` is always joined onto ``cwd``, even when it starts with a
    path separator, so ``"/x"`` names ``cwd/x``. When it is omitted or empty
    ``cwd`` itself is the target. Dot segments are collapsed so the directory
    name is always the last real path component.
    """

    base = Path(cwd)
    if not user_input:
        return base
    relative = user_input.lstrip(os.sep)
    return Path(os.path.normpath(os.path.join(base, relative)))


def directory_name(target: str | Path) -> str:
    """Return the final path segment of ``target``."""

    return Path(target).name
