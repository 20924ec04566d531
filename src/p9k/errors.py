"""Custom exception types used by p9k."""

from __future__ import annotations


class P9kError(RuntimeError):
    """Base class for errors raised by the scaffolding utilities."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class EmptyNameError(P9kError, ValueError):
    """Raised when no usable project name can be derived from the target directory."""

    def __init__(self, raw: str = "") -> None:
        super().__init__(f"empty project name: {raw!r}")
        self.raw = raw


class TemplateRenderingError(P9kError):
    """Raised when the renderer cannot evaluate a placeholder."""


__all__ = ["EmptyNameError", "P9kError", "TemplateRenderingError"]
