"""Applies generation plans to files on disk."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from workease.core import templates
from workease.core.errors import AlreadyExistsError
from workease.core.manifest import MANIFEST_FILENAME, Manifest
from workease.core.safety import SafetyReport, sanitize
from workease.generators.plan import FileWrite, GenerationPlan, WriteMode

logger = logging.getLogger(__name__)

ConfirmOverwrite = Callable[[Sequence[Path]], bool]


@dataclass
class ApplyResult:
    """
    Outcome of applying a plan. In simulation mode it describes what would happen.

    Attributes:
        created: Files created or overwritten.
        appended: Files extended (or started from their preamble).
        skipped: Appends dropped because the file already holds their marker.
        directories: Directories created.
        safety: Safety report for the updated manifest, when one was written.
        dry_run: Whether anything was actually written.
    """

    created: list[Path] = field(default_factory=list)
    appended: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    directories: list[Path] = field(default_factory=list)
    safety: SafetyReport | None = None
    dry_run: bool = False


def require_project(root: Path) -> Manifest:
    """Load the manifest at *root*; raises :class:`ManifestNotFoundError` outside a project."""
    return Manifest.load(root / MANIFEST_FILENAME)


def find_conflicts(root: Path, plan: GenerationPlan) -> list[Path]:
    """Relative paths of ``CREATE`` writes whose target already exists."""
    return [w.path for w in plan.writes if w.mode == WriteMode.CREATE and (root / w.path).exists()]


def _appended_text(target: Path, write: FileWrite) -> tuple[str, bool]:
    """Full new text of an append target, and whether *content* was included."""
    exists = target.exists()
    existing = target.read_text(encoding="utf-8") if exists else write.preamble
    if write.unless_contains is not None and write.unless_contains in existing:
        return existing, False
    return existing + write.content, True


def apply_plan(
    root: Path,
    plan: GenerationPlan,
    *,
    dry_run: bool = False,
    force: bool = False,
    confirm: ConfirmOverwrite | None = None,
) -> ApplyResult:
    """
    Write *plan* under *root*.

    Every conflict is resolved before the first write: existing ``CREATE``
    targets need *force* or an approving *confirm* callback, otherwise
    :class:`AlreadyExistsError` is raised and nothing is touched. Dependency
    updates are merged into ``package.json``, which then goes through the
    safety validator. With *dry_run* the same result is computed and nothing
    is written.
    """
    conflicts = [] if force else find_conflicts(root, plan)
    if conflicts and (confirm is None or not confirm(conflicts)):
        raise AlreadyExistsError(conflicts)

    manifest: Manifest | None = None
    if plan.touches_manifest:
        manifest = require_project(root)
        manifest.merge_dependencies(plan.dependencies, plan.dev_dependencies)

    result = ApplyResult(dry_run=dry_run)

    for directory in plan.directories:
        if not dry_run:
            (root / directory).mkdir(parents=True, exist_ok=True)
        result.directories.append(directory)

    for write in plan.writes:
        target = root / write.path
        if write.mode == WriteMode.CREATE:
            if not dry_run:
                templates.write(target, write.content)
            result.created.append(write.path)
            continue

        text, included = _appended_text(target, write)
        if not included:
            logger.info("%s already contains %r, not appending", write.path, write.unless_contains)
            result.skipped.append(write.path)
            if target.exists():
                continue
        if not dry_run:
            templates.write(target, text)
        if included:
            result.appended.append(write.path)

    if manifest is not None:
        result.safety = sanitize(manifest)
        if not dry_run:
            manifest.dump(root / MANIFEST_FILENAME)
        logger.debug("Merged %d dependencies into the manifest", len(plan.dependencies))

    return result
