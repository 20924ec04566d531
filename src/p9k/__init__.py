"""Scaffold TypeScript boilerplate named after its target directory.

The package derives screaming-snake, camel and Pascal case identifiers from a
directory name, composes constant, function, interface, type, module, package,
repository and script files from fixed templates, and writes them to disk
either programmatically or via the ``p9k`` command line interface.
"""

from __future__ import annotations

from .compose import GeneratedFile, TemplateComposer
from .config import ArtifactKind, ArtifactRequest, resolve_target_directory
from .errors import EmptyNameError, P9kError, TemplateRenderingError
from .filesystem import FileSystem, LocalFileSystem
from .manifest import PackageManifest
from .naming import DerivedNames, derive_names
from .scaffold import ArtifactScaffolder
from .template import TemplateRenderer

__all__ = [
    "ArtifactKind",
    "ArtifactRequest",
    "ArtifactScaffolder",
    "DerivedNames",
    "EmptyNameError",
    "FileSystem",
    "GeneratedFile",
    "LocalFileSystem",
    "P9kError",
    "PackageManifest",
    "TemplateComposer",
    "TemplateRenderer",
    "TemplateRenderingError",
    "derive_names",
    "resolve_target_directory",
]

__version__ = "0.1.0"
