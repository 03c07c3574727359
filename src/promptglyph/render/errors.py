"""Exceptions raised while compiling or rendering prompt templates."""

from __future__ import annotations


class TemplateError(Exception):
    """Base class for template failures. Carries the offending source."""

    def __init__(self, message: str, source: str) -> None:
        super().__init__(message)
        self.message = message
        self.source = source


class CompileError(TemplateError):
    """The source is not valid template grammar or calls an unknown helper."""

    def __init__(self, message: str, source: str, lineno: int | None = None) -> None:
        super().__init__(message, source)
        self.lineno = lineno

    def __str__(self) -> str:
        if self.lineno is None:
            return self.message
        return f"line {self.lineno}: {self.message}"


class RenderError(TemplateError):
    """Executing a compiled template failed (missing field or helper error)."""
