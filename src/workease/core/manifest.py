"""Minimal ``package.json`` model.

Only the top-level ``scripts``, ``dependencies`` and ``devDependencies`` keys
are inspected; every other key is carried through untouched.
"""

from __future__ import annotations

import copy
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from workease.core.errors import ManifestInvalidError, ManifestNotFoundError

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "package.json"
_SECTIONS = ("scripts", "dependencies", "devDependencies")


@dataclass
class Manifest:
    data: dict[str, Any] = field(default_factory=dict)

    def _section(self, key: str) -> dict[str, str]:
        section = self.data.get(key)
        if section is None:
            section = self.data[key] = {}
        return section

    @property
    def scripts(self) -> dict[str, str]:
        return self._section("scripts")

    @property
    def dependencies(self) -> dict[str, str]:
        return self._section("dependencies")

    @property
    def dev_dependencies(self) -> dict[str, str]:
        return self._section("devDependencies")

    def merge_dependencies(
        self,
        dependencies: Mapping[str, str] | None = None,
        dev_dependencies: Mapping[str, str] | None = None,
    ) -> None:
        """Add packages, replacing the version of any already listed."""
        if dependencies:
            self.dependencies.update(dependencies)
        if dev_dependencies:
            self.dev_dependencies.update(dev_dependencies)

    def copy(self) -> Manifest:
        return Manifest(copy.deepcopy(self.data))

    def to_json(self) -> str:
        return json.dumps(self.data, indent=2, ensure_ascii=False) + "\n"

    @classmethod
    def load(cls, path: Path) -> Manifest:
        if not path.is_file():
            raise ManifestNotFoundError(path)
        logger.debug("Reading manifest %s", path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except UnicodeDecodeError as exc:
            raise ManifestInvalidError(path, "not valid UTF-8") from exc
        except json.JSONDecodeError as exc:
            reason = f"invalid JSON ({exc.msg}, line {exc.lineno})"
            raise ManifestInvalidError(path, reason) from exc

        if not isinstance(data, dict):
            raise ManifestInvalidError(path, "top-level value must be an object")
        for key in _SECTIONS:
            if data.get(key) is not None and not isinstance(data[key], dict):
                raise ManifestInvalidError(path, f"'{key}' must be an object")
        return cls(data)

    def dump(self, path: Path) -> None:
        path.write_text(self.to_json(), encoding="utf-8")
        logger.debug("Wrote manifest %s", path)
