"""Template loading, ``{{placeholder}}`` substitution and file output.

Templates are plain text resources shipped under ``workease/scaffold`` and
addressed by a slash-separated name without the ``.template`` suffix, e.g.
``component/component.tsx``.
"""

from __future__ import annotations

import importlib.resources as ilr
import logging
import re
from collections.abc import Mapping
from pathlib import Path

from workease.core.errors import TemplateNotFoundError

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".template"

_PLACEHOLDER = re.compile(r"\{\{([^{}]+)\}\}")


def load(name: str) -> str:
    """Read the template *name*. Raises :class:`TemplateNotFoundError` if absent."""
    resource = ilr.files("workease") / "scaffold"
    for part in f"{name}{TEMPLATE_SUFFIX}".split("/"):
        resource = resource / part

    if not resource.is_file():
        raise TemplateNotFoundError(name, str(resource))

    logger.debug("Loaded template %s", name)
    return resource.read_text(encoding="utf-8")


def substitute(template: str, variables: Mapping[str, str]) -> str:
    """
    Replace every ``{{key}}`` whose key is in *variables* with its value.

    Placeholders without a matching key are left verbatim. The scan is a single
    pass over *template*, so values that themselves contain ``{{...}}`` are
    inserted literally and never substituted again.
    """
    if not variables:
        return template

    tokens = sorted(variables, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape("{{" + key + "}}") for key in tokens))
    return pattern.sub(lambda m: variables[m.group(0)[2:-2]], template)


def placeholders(template: str) -> set[str]:
    """Keys of all ``{{key}}`` tokens present in *template*."""
    return set(_PLACEHOLDER.findall(template))


def render(name: str, variables: Mapping[str, str]) -> str:
    template = load(name)
    content = substitute(template, variables)

    unresolved = placeholders(template) - set(variables)
    if unresolved:
        logger.warning(
            "Template %s rendered with unresolved placeholders: %s",
            name,
            ", ".join(sorted(unresolved)),
        )
    return content


def write(path: Path, content: str) -> Path:
    """Write *content* to *path*, creating parent directories first. Overwrites."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.debug("Wrote %s (%d bytes)", path, len(content.encode("utf-8")))
    return path
