"""Compose TypeScript scaffolding from the selected artifact kinds."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from .config import ArtifactKind, ArtifactRequest
from .manifest import PackageManifest
from .naming import DerivedNames
from .template import TemplateRenderer

__all__ = [
    "ENTRY_POINT",
    "GeneratedFile",
    "TemplateComposer",
]

LOGGER = logging.getLogger(__name__)

ENTRY_POINT = "main.ts"
INDEX_FILE = "index.ts"
GITIGNORE_FILE = ".gitignore"
GITIGNORE_ENTRIES = ("node_modules", ".idea")


CONSTANT_TEMPLATE = """// TODO define and constrain the {{ screaming }} constant
export const {{ screaming }}: unknown = undefined;
"""

FUNCTION_TEMPLATE = """// TODO implement the {{ camel }} function
export const {{ camel }} = () => {
  //
};
"""

FUNCTION_TEST_TEMPLATE = """import {{{ camel }}} from "./{{ raw }}.function";

// TODO test the {{ camel }} function
describe("The {{ camel }} function", () => {
  it.todo("should be tested");
});
"""

INTERFACE_TEMPLATE = """// TODO define the {{ pascal }} interface
export interface {{ pascal }} {}
"""

TYPE_TEMPLATE = """// TODO define the {{ pascal }} type
export type {{ pascal }} = unknown;
"""

GUARD_TEMPLATE = """import type {{{ pascal }}} from "./{{ raw }}.{{ kind }}";

// TODO implement the {{ pascal }} {{ kind }} guard
export const is{{ pascal }} = (value: unknown): value is {{ pascal }} => {
  throw new Error("not implemented");
};
"""

GUARD_TEST_TEMPLATE = """import type {{{ pascal }}} from "./{{ raw }}.{{ kind }}";
import {is{{ pascal }}} from "./{{ raw }}.{{ kind }}.guard";

const validExamples: {{ pascal }}[] = [];

const invalidExamples: unknown[] = [];

describe("The is{{ pascal }} {{ kind }} guard function", () => {
  describe("should return `true`", () => {
    test.each(validExamples)("when the given value, `%j`, {{ valid }}", (validExample) => {
      const result = is{{ pascal }}(validExample);

      expect(result).toStrictEqual(true);
    });
  });

  describe("should return `false`", () => {
    test.each(invalidExamples)("when the given value, `%j`, {{ invalid }}", (invalidExample) => {
      const result = is{{ pascal }}(invalidExample);

      expect(result).toStrictEqual(false);
    });
  });
});
"""

# one line per kind, in this order
EXPORT_TEMPLATES = (
    (ArtifactKind.CONSTANT, 'export {{{ screaming }}} from "./{{ raw }}.constant";'),
    (ArtifactKind.FUNCTION, 'export {{{ camel }}} from "./{{ raw }}.function";'),
    (ArtifactKind.INTERFACE, 'export type {{{ pascal }}} from "./{{ raw }}.interface";'),
    (ArtifactKind.TYPE, 'export type {{{ pascal }}} from "./{{ raw }}.type";'),
)

SCRIPT_TEMPLATE = """#!/usr/bin/env node

{{ body }}
"""

SCRIPT_CALL_BODY = """import {{{ camel }}} from "./{{ raw }}.function";

{{ camel }}();"""

SCRIPT_EMPTY_BODY = """(async () => {
  //
})();"""


@dataclass(frozen=True, slots=True)
class GeneratedFile:
    """A file produced by the composer, relative to the target directory."""

    path: str
    content: str


@dataclass(frozen=True, slots=True)
class _GuardWording:
    valid: str
    invalid: str


_GUARD_WORDING = {
    ArtifactKind.INTERFACE: _GuardWording(
        valid="implements the {{ pascal }} interface",
        invalid="does NOT implement the {{ pascal }} interface",
    ),
    ArtifactKind.TYPE: _GuardWording(
        valid="is a valid instance of the {{ pascal }} type",
        invalid="is NOT a valid instance of the {{ pascal }} type",
    ),
}


Builder = Callable[[ArtifactRequest, DerivedNames], list[GeneratedFile]]


class TemplateComposer:
    """Turn an :class:`~p9k.config.ArtifactRequest` into generated files.

    Every kind has its own builder. Builders receive the whole request so the
    ``module``, ``package`` and ``script`` variants can depend on which sibling
    kinds were selected. Composition is pure: the same inputs always produce
    the same files in the same order.
    """

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()
        self._builders: dict[ArtifactKind, Builder] = {
            ArtifactKind.CONSTANT: self._constant,
            ArtifactKind.FUNCTION: self._function,
            ArtifactKind.INTERFACE: self._interface,
            ArtifactKind.MODULE: self._module,
            ArtifactKind.PACKAGE: self._package,
            ArtifactKind.REPOSITORY: self._repository,
            ArtifactKind.SCRIPT: self._script,
            ArtifactKind.TYPE: self._type,
        }

    def compose(self, request: ArtifactRequest, names: DerivedNames) -> list[GeneratedFile]:
        """Return the files for every kind enabled in ``request``."""

        files: list[GeneratedFile] = []
        for kind in request.enabled():
            generated = self.build(kind, request, names)
            LOGGER.debug("composed %s: %s", kind.value, ", ".join(item.path for item in generated))
            files.extend(generated)
        return files

    def build(self, kind: ArtifactKind, request: ArtifactRequest, names: DerivedNames) -> list[GeneratedFile]:
        """Return the files contributed by a single ``kind``."""

        return self._builders[ArtifactKind(kind)](request, names)

    def _render(self, template: str, names: DerivedNames, **extra: str) -> str:
        context = {**names.context(), **extra}
        return self.renderer.render_string(template, context)

    def _constant(self, request: ArtifactRequest, names: DerivedNames) -> list[GeneratedFile]:
        return [GeneratedFile(f"{names.raw}.constant.ts", self._render(CONSTANT_TEMPLATE, names))]

    def _function(self, request: ArtifactRequest, names: DerivedNames) -> list[GeneratedFile]:
        return [
            GeneratedFile(f"{names.raw}.function.ts", self._render(FUNCTION_TEMPLATE, names)),
            GeneratedFile(f"{names.raw}.function.test.ts", self._render(FUNCTION_TEST_TEMPLATE, names)),
        ]

    def _interface(self, request: ArtifactRequest, names: DerivedNames) -> list[GeneratedFile]:
        return self._declaration(ArtifactKind.INTERFACE, INTERFACE_TEMPLATE, names)

    def _type(self, request: ArtifactRequest, names: DerivedNames) -> list[GeneratedFile]:
        return self._declaration(ArtifactKind.TYPE, TYPE_TEMPLATE, names)

    def _declaration(self, kind: ArtifactKind, template: str, names: DerivedNames) -> list[GeneratedFile]:
        wording = _GUARD_WORDING[kind]
        stem = f"{names.raw}.{kind.value}"
        test_context = {
            "kind": kind.value,
            "valid": self._render(wording.valid, names),
            "invalid": self._render(wording.invalid, names),
        }
        return [
            GeneratedFile(f"{stem}.ts", self._render(template, names)),
            GeneratedFile(f"{stem}.guard.ts", self._render(GUARD_TEMPLATE, names, kind=kind.value)),
            GeneratedFile(f"{stem}.guard.test.ts", self._render(GUARD_TEST_TEMPLATE, names, **test_context)),
        ]

    def _module(self, request: ArtifactRequest, names: DerivedNames) -> list[GeneratedFile]:
        lines = [
            self._render(template, names)
            for kind, template in EXPORT_TEMPLATES
            if request.is_enabled(kind)
        ]
        content = "\n".join(lines) + "\n" if lines else ""
        return [GeneratedFile(INDEX_FILE, content)]

    def _package(self, request: ArtifactRequest, names: DerivedNames) -> list[GeneratedFile]:
        entry_point = ENTRY_POINT if request.script else None
        manifest = PackageManifest.for_project(names.raw, entry_point=entry_point)
        return [GeneratedFile("package.json", manifest.to_json() + "\n")]

    def _repository(self, request: ArtifactRequest, names: DerivedNames) -> list[GeneratedFile]:
        return [GeneratedFile(GITIGNORE_FILE, "\n".join(GITIGNORE_ENTRIES) + "\n")]

    def _script(self, request: ArtifactRequest, names: DerivedNames) -> list[GeneratedFile]:
        body = SCRIPT_CALL_BODY if request.function else SCRIPT_EMPTY_BODY
        content = self._render(SCRIPT_TEMPLATE, names, body=self._render(body, names))
        return [GeneratedFile(ENTRY_POINT, content)]
