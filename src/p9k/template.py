"""Placeholder interpolation for the generated scaffolding."""

from __future__ import annotations

import re
from typing import Any, Mapping

from .errors import TemplateRenderingError

__all__ = [
    "TemplateRenderer",
    "TemplateRenderingError",
]


_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<key>[^{}]+?)\s*}}")


class TemplateRenderer:
    """Render templates with ``{{ key }}`` placeholders.

    Single braces are left alone, so TypeScript blocks and ``export {X}``
    clauses can be written literally around a placeholder.
    """

    def render_string(self, template: str, context: Mapping[str, Any]) -> str:
        """Render ``template`` using ``context``.

        Raises :class:`TemplateRenderingError` when a placeholder has no value
        in ``context``.
        """

        def substitute(match: re.Match[str]) -> str:
            key = match.group("key")
            try:
                return str(context[key])
            except KeyError as exc:
                raise TemplateRenderingError(f"missing value for '{key}'") from exc

        return _PLACEHOLDER_PATTERN.sub(substitute, template)
