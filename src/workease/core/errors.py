"""Error taxonomy shared by the core utilities and the CLI."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


class WorkEaseError(Exception):
    """Base class for every error a command reports to the user."""


class NotFoundError(WorkEaseError):
    """A requested resource does not exist."""


class TemplateNotFoundError(NotFoundError):
    def __init__(self, name: str, location: str) -> None:
        super().__init__(f"Template '{name}' not found at {location}.")
        self.name = name
        self.location = location


class ManifestNotFoundError(NotFoundError):
    def __init__(self, path: Path) -> None:
        super().__init__(
            f"No package.json found at {path}. Run this command from your project root."
        )
        self.path = path


class ManifestInvalidError(WorkEaseError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}.")
        self.path = path
        self.reason = reason


class AlreadyExistsError(WorkEaseError):
    """One or more output paths are already taken."""

    def __init__(self, paths: Iterable[Path]) -> None:
        self.paths = list(paths)
        listed = ", ".join(str(p) for p in self.paths)
        super().__init__(f"Refusing to overwrite existing path(s): {listed}.")


class ValidationError(WorkEaseError, ValueError):
    """User input failed a naming or selection check."""
