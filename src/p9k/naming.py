"""Name casing utilities for the directory-derived project name."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import EmptyNameError

__all__ = [
    "DerivedNames",
    "camel_case",
    "derive_names",
    "pascal_case",
    "screaming_snake_case",
]


_SEPARATOR = "-"


def screaming_snake_case(value: str) -> str:
    """Return ``value`` upper-cased with its first hyphen turned into an underscore.

    Only the first hyphen is replaced: ``"foo-bar-baz"`` becomes ``"FOO_BAR-BAZ"``.
    """

    return value.replace(_SEPARATOR, "_", 1).upper()


def camel_case(value: str) -> str:
    """Return the camelCase form of a hyphen separated ``value``."""

    first, *rest = value.split(_SEPARATOR)
    words = [first.lower()]
    # adjacent hyphens produce empty words
    words.extend(word[0].upper() + word[1:].lower() for word in rest if word)
    return "".join(words)


def pascal_case(value: str) -> str:
    """Return the PascalCase form of a hyphen separated ``value``."""

    camel = camel_case(value)
    if not camel:
        return camel
    return camel[0].upper() + camel[1:]


@dataclass(frozen=True, slots=True)
class DerivedNames:
    """Name forms substituted into the generated files.

    Attributes
    ----------
    raw:
        The final segment of the target directory, used verbatim for file
        names and package metadata.
    screaming_snake:
        Identifier used for the generated constant.
    camel:
        Identifier used for the generated function.
    pascal:
        Identifier used for generated interfaces, types and their guards.
    """

    raw: str
    screaming_snake: str
    camel: str
    pascal: str

    def context(self) -> dict[str, str]:
        """Return a dictionary compatible with the templating helpers."""

        return {
            "raw": self.raw,
            "screaming": self.screaming_snake,
            "camel": self.camel,
            "pascal": self.pascal,
        }


def derive_names(raw: str) -> DerivedNames:
    """Build :class:`DerivedNames` from the directory name ``raw``.

    Raises :class:`~p9k.errors.EmptyNameError` when ``raw`` is empty or
    consists only of hyphens.
    """

    if not raw:
        raise EmptyNameError(raw)

    camel = camel_case(raw)
    if not camel:
        raise EmptyNameError(raw)

    return DerivedNames(
        raw=raw,
        screaming_snake=screaming_snake_case(raw),
        camel=camel,
        pascal=pascal_case(raw),
    )
