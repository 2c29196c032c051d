"""Exceptions raised by the scaffolder."""

from __future__ import annotations

from pathlib import Path


class StarterError(Exception):
    """Base class for every error raised while generating a project."""


class DestinationResetError(StarterError):
    """Raised when the destination directory cannot be emptied and recreated.

    This is fatal: no template is processed once it is raised.
    """

    def __init__(self, destination: Path, cause: BaseException) -> None:
        self.destination = destination
        self.cause = cause
        super().__init__(f"Cannot reset {destination}: {cause}")


class TemplateRenderError(StarterError):
    """Raised when a text template cannot be rendered.

    Typically a placeholder that no build parameter resolves.
    """

    def __init__(self, source: Path, message: str) -> None:
        self.source = source
        super().__init__(f"{source}: {message}")
