"""Write instructions produced by the generators."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from workease.core.manifest import Manifest
from workease.core.naming import NameVariants


class WriteMode(str, Enum):
    CREATE = "create"
    APPEND = "append"


@dataclass(frozen=True, kw_only=True)
class FileWrite:
    """
    A single file to produce, relative to the project root.

    Attributes:
        path: Destination, relative to the project root.
        content: Text to write (``CREATE``) or to add at the end (``APPEND``).
        mode: Whether to create/overwrite the file or append to it.
        preamble: For ``APPEND``, text written before *content* when the file
            does not exist yet.
        unless_contains: For ``APPEND``, skip the write when the existing file
            already contains this marker.
    """

    path: Path
    content: str
    mode: WriteMode = WriteMode.CREATE
    preamble: str = ""
    unless_contains: str | None = None


@dataclass(kw_only=True)
class GenerationPlan:
    """
    Everything one generation command intends to do, with no side effects yet.

    Attributes:
        writes: Files to create or append to.
        directories: Empty directories to create.
        manifest: Complete manifest of a new project (``init`` only).
        dependencies: Packages to merge into an existing manifest.
        dev_dependencies: Dev packages to merge into an existing manifest.
        variants: Name variants the artifact was derived from.
        notes: Follow-up steps to show the user.
    """

    writes: list[FileWrite] = field(default_factory=list)
    directories: list[Path] = field(default_factory=list)
    manifest: Manifest | None = None
    dependencies: dict[str, str] = field(default_factory=dict)
    dev_dependencies: dict[str, str] = field(default_factory=dict)
    variants: NameVariants | None = None
    notes: list[str] = field(default_factory=list)

    def add(self, path: str | Path, content: str) -> None:
        self.writes.append(FileWrite(path=Path(path), content=content))

    def append(
        self,
        path: str | Path,
        content: str,
        *,
        preamble: str = "",
        unless_contains: str | None = None,
    ) -> None:
        self.writes.append(
            FileWrite(
                path=Path(path),
                content=content,
                mode=WriteMode.APPEND,
                preamble=preamble,
                unless_contains=unless_contains,
            )
        )

    @property
    def touches_manifest(self) -> bool:
        return bool(self.dependencies or self.dev_dependencies)

    @property
    def paths(self) -> list[Path]:
        return [w.path for w in self.writes]
