"""Core utilities: naming, templates, manifest handling and safety checks."""

from workease.core.errors import (
    AlreadyExistsError,
    ManifestInvalidError,
    ManifestNotFoundError,
    NotFoundError,
    TemplateNotFoundError,
    ValidationError,
    WorkEaseError,
)
from workease.core.manifest import Manifest
from workease.core.naming import (
    NameVariants,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
)
from workease.core.safety import SafetyReport, ScriptAudit, audit_scripts, check_project, sanitize

__all__ = [
    "AlreadyExistsError",
    "Manifest",
    "ManifestInvalidError",
    "ManifestNotFoundError",
    "NameVariants",
    "NotFoundError",
    "SafetyReport",
    "ScriptAudit",
    "TemplateNotFoundError",
    "ValidationError",
    "WorkEaseError",
    "audit_scripts",
    "check_project",
    "sanitize",
    "to_camel_case",
    "to_kebab_case",
    "to_pascal_case",
    "to_snake_case",
]
