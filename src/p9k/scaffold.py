"""Write composed scaffolding into a target directory."""

from __future__ import annotations

import logging
from pathlib import Path

from .compose import GeneratedFile, TemplateComposer
from .config import ArtifactRequest, directory_name
from .filesystem import FileSystem, LocalFileSystem
from .naming import derive_names

__all__ = ["ArtifactScaffolder"]

LOGGER = logging.getLogger(__name__)


class ArtifactScaffolder:
    """Generate the requested artifacts for the directory they are written into."""

    def __init__(
        self,
        composer: TemplateComposer | None = None,
        filesystem: FileSystem | None = None,
    ) -> None:
        self.composer = composer or TemplateComposer()
        self.filesystem = filesystem or LocalFileSystem()

    def plan(self, request: ArtifactRequest, target_dir: str | Path) -> list[GeneratedFile]:
        """Return the files :meth:`create` would write, without touching the filesystem."""

        names = derive_names(directory_name(target_dir))
        LOGGER.debug(
            "derived names for %r: screaming=%s camel=%s pascal=%s",
            names.raw,
            names.screaming_snake,
            names.camel,
            names.pascal,
        )
        return self.composer.compose(request, names)

    def create(self, request: ArtifactRequest, target_dir: str | Path) -> list[Path]:
        """Create ``target_dir`` if needed and write every requested file into it.

        Existing files are overwritten. Filesystem errors propagate, and files
        written before the failure are left in place.
        """

        target_path = Path(target_dir)
        files = self.plan(request, target_path)

        if not self.filesystem.exists(target_path):
            LOGGER.info("creating directory %s", target_path)
            self.filesystem.make_directory(target_path)

        written: list[Path] = []
        for generated in files:
            destination = target_path / generated.path
            self.filesystem.write_text_file(destination, generated.content)
            LOGGER.debug("wrote %s", destination)
            written.append(destination)

        return written
