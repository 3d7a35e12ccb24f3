"""Detection and removal of unsafe ``postinstall`` scripts.

A ``postinstall`` hook that regenerates the Prisma client runs during
``npm install``, before a schema exists, and can leave the project tree in a
broken state. Database client generation must be run by hand instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from workease.core.manifest import MANIFEST_FILENAME, Manifest

logger = logging.getLogger(__name__)

UNSAFE_POSTINSTALL_PATTERN = "prisma generate"
POSTINSTALL = "postinstall"


@dataclass(frozen=True)
class SafetyReport:
    """
    Outcome of :func:`sanitize`.

    Attributes:
        removed: Whether the ``postinstall`` script was deleted.
        command: The removed command, if any.
    """

    removed: bool
    command: str | None = None


@dataclass(frozen=True)
class ScriptAudit:
    name: str
    command: str
    safe: bool


def is_unsafe(name: str, command: str) -> bool:
    return name == POSTINSTALL and UNSAFE_POSTINSTALL_PATTERN in command


def _scripts(manifest: Manifest) -> dict:
    # Anything other than an object is treated as having no scripts.
    scripts = manifest.data.get("scripts")
    return scripts if isinstance(scripts, dict) else {}


def sanitize(manifest: Manifest) -> SafetyReport:
    """Delete ``scripts.postinstall`` from *manifest* if it regenerates the DB client."""
    scripts = _scripts(manifest)
    command = scripts.get(POSTINSTALL)

    if not isinstance(command, str) or not is_unsafe(POSTINSTALL, command):
        return SafetyReport(removed=False)

    del scripts[POSTINSTALL]
    logger.info("Removed unsafe postinstall script: %s", command)
    return SafetyReport(removed=True, command=command)


def audit_scripts(manifest: Manifest) -> list[ScriptAudit]:
    return [
        ScriptAudit(name=name, command=command, safe=not is_unsafe(name, command))
        for name, command in _scripts(manifest).items()
        if isinstance(command, str)
    ]


def check_project(root: Path, *, dry_run: bool = False) -> SafetyReport:
    """
    Sanitize ``root/package.json`` and persist the result.

    The file is rewritten only when a script was removed and *dry_run* is off.
    Raises :class:`~workease.core.errors.ManifestNotFoundError` when the
    manifest is missing.
    """
    path = root / MANIFEST_FILENAME
    manifest = Manifest.load(path)
    report = sanitize(manifest)

    if report.removed and not dry_run:
        manifest.dump(path)
    return report
