"""Typed ``package.json`` record for generated packages."""

from __future__ import annotations

import json
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["DEFAULT_VERSION", "PackageManifest"]

DEFAULT_VERSION = "1.0.0"


class PackageManifest(BaseModel):
    """Minimal npm package metadata."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1, description="Package name, taken verbatim from the directory name.")
    version: str = Field(DEFAULT_VERSION, description="Initial package version.")
    main: Optional[str] = Field(None, description="Entry point module, present when a script is generated.")
    bin: Optional[Dict[str, str]] = Field(None, description="Executables exposed by the package, keyed by command name.")

    @classmethod
    def for_project(cls, name: str, *, entry_point: str | None = None) -> "PackageManifest":
        """Build the manifest for ``name``, exposing ``entry_point`` as its executable if given."""

        if entry_point is None:
            return cls(name=name)
        return cls(name=name, main=entry_point, bin={name: entry_point})

    def to_json(self) -> str:
        payload = self.model_dump(mode="json", exclude_none=True)
        return json.dumps(payload, indent=2, ensure_ascii=False)
