"""Case conversion and identifier validation.

All converters are pure and idempotent: applying one to its own output returns
the output unchanged. Empty input yields empty output.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from workease.core.errors import ValidationError

_PASCAL_SEPARATORS = re.compile(r"[-_\s]+(.)?", re.DOTALL)
_CASE_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_KEBAB_RUNS = re.compile(r"[\s_]+")
_SNAKE_RUNS = re.compile(r"[\s-]+")

_IDENTIFIER = re.compile(r"[A-Za-z][A-Za-z0-9]*")
_ROUTE_NAME = re.compile(r"[A-Za-z][A-Za-z0-9 _-]*")
_PROJECT_NAME = re.compile(r"[a-z0-9_-]+")


def to_pascal_case(value: str) -> str:
    joined = _PASCAL_SEPARATORS.sub(lambda m: (m.group(1) or "").upper(), value)
    return joined[:1].upper() + joined[1:]


def to_camel_case(value: str) -> str:
    pascal = to_pascal_case(value)
    return pascal[:1].lower() + pascal[1:]


def to_kebab_case(value: str) -> str:
    spaced = _CASE_BOUNDARY.sub(r"\1-\2", value)
    return _KEBAB_RUNS.sub("-", spaced).lower()


def to_snake_case(value: str) -> str:
    spaced = _CASE_BOUNDARY.sub(r"\1_\2", value)
    return _SNAKE_RUNS.sub("_", spaced).lower()


@dataclass(frozen=True)
class NameVariants:
    """
    The four case forms derived from a single user-supplied name.

    Attributes:
        source: The name as the user typed it.
        pascal: PascalCase form, used for component and type names.
        camel: camelCase form, used for variables and Prisma delegates.
        kebab: kebab-case form, used for file names and route segments.
        snake: snake_case form.
    """

    source: str
    pascal: str
    camel: str
    kebab: str
    snake: str

    @classmethod
    def from_name(cls, name: str) -> NameVariants:
        return cls(
            source=name,
            pascal=to_pascal_case(name),
            camel=to_camel_case(name),
            kebab=to_kebab_case(name),
            snake=to_snake_case(name),
        )

    def as_variables(self, prefix: str = "name") -> dict[str, str]:
        """Template variables ``{prefix}Pascal``, ``{prefix}Camel``, ``{prefix}Kebab``, ..."""
        return {
            f"{prefix}Pascal": self.pascal,
            f"{prefix}Camel": self.camel,
            f"{prefix}Kebab": self.kebab,
            f"{prefix}Snake": self.snake,
            f"{prefix}Lower": self.source.strip().lower(),
        }


def validate_identifier(name: str, kind: str = "Name") -> str:
    """Return the stripped *name* or raise if it is not letter-first alphanumeric."""
    stripped = name.strip()
    if not stripped:
        raise ValidationError(f"{kind} is required.")
    if not _IDENTIFIER.fullmatch(stripped):
        raise ValidationError(
            f"{kind} {stripped!r} must start with a letter and contain only letters and numbers."
        )
    return stripped


def validate_route_name(name: str, kind: str = "Name") -> str:
    """Like :func:`validate_identifier` but also accepts spaces, ``-`` and ``_``."""
    stripped = name.strip()
    if not stripped:
        raise ValidationError(f"{kind} is required.")
    if not _ROUTE_NAME.fullmatch(stripped):
        raise ValidationError(
            f"{kind} {stripped!r} must start with a letter and contain only letters, "
            "numbers, spaces, hyphens and underscores."
        )
    return stripped


def validate_project_name(name: str) -> str:
    stripped = name.strip()
    if not stripped:
        raise ValidationError("Project name is required.")
    if not _PROJECT_NAME.fullmatch(stripped):
        raise ValidationError(
            f"Project name {stripped!r} must contain only lowercase letters, numbers, "
            "hyphens, and underscores."
        )
    return stripped


def normalize_route(route: str) -> str:
    """
    Strip leading/trailing slashes and empty segments: ``/a//b/`` -> ``a/b``.

    Raises:
        ValidationError: If any segment is ``..``.
    """
    parts = [p for p in route.strip().replace("\\", "/").split("/") if p and p != "."]
    if ".." in parts:
        raise ValidationError(f"Route {route!r} must be a relative path inside the project.")
    return "/".join(parts)
