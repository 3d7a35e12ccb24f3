"""Unit tests for the package.json model and the postinstall safety validator."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from workease.core.errors import ManifestInvalidError, ManifestNotFoundError
from workease.core.manifest import Manifest
from workease.core.safety import (
    UNSAFE_POSTINSTALL_PATTERN,
    audit_scripts,
    check_project,
    sanitize,
)


def _write_manifest(root: Path, data: dict) -> Path:
    path = root / "package.json"
    path.write_text(json.dumps(data, indent=2))
    return path


class TestManifest:
    def test_sections_created_on_access(self) -> None:
        manifest = Manifest({"name": "app"})

        manifest.scripts["dev"] = "next dev"
        assert manifest.data["scripts"] == {"dev": "next dev"}

    def test_merge_dependencies(self) -> None:
        manifest = Manifest({"dependencies": {"next": "^13.0.0", "react": "^18.2.0"}})

        manifest.merge_dependencies({"next": "^14.0.0", "zod": "^3.22.4"}, {"prisma": "^5.0.0"})

        assert manifest.dependencies == {
            "next": "^14.0.0",
            "react": "^18.2.0",
            "zod": "^3.22.4",
        }
        assert manifest.dev_dependencies == {"prisma": "^5.0.0"}

    def test_merge_nothing_adds_no_sections(self) -> None:
        manifest = Manifest({"name": "app"})
        manifest.merge_dependencies()
        assert manifest.data == {"name": "app"}

    def test_round_trip_preserves_unknown_keys(self, tmp_path: Path) -> None:
        data = {"name": "app", "engines": {"node": ">=18"}, "private": True}
        path = _write_manifest(tmp_path, data)

        Manifest.load(path).dump(path)

        assert json.loads(path.read_text()) == data
        assert path.read_text().endswith("\n")

    def test_copy_is_independent(self) -> None:
        manifest = Manifest({"scripts": {"dev": "next dev"}})
        clone = manifest.copy()

        clone.scripts["build"] = "next build"
        assert "build" not in manifest.scripts

    def test_load_missing(self, tmp_path: Path) -> None:
        with pytest.raises(ManifestNotFoundError, match="No package.json found"):
            Manifest.load(tmp_path / "package.json")

    @pytest.mark.parametrize(
        ("content", "reason"),
        [
            ("{not json", "invalid JSON"),
            ("", "invalid JSON"),
            ("[1, 2]", "top-level value must be an object"),
            ('{"scripts": []}', "'scripts' must be an object"),
            ('{"dependencies": "next"}', "'dependencies' must be an object"),
        ],
    )
    def test_load_unreadable(self, tmp_path: Path, content: str, reason: str) -> None:
        path = tmp_path / "package.json"
        path.write_text(content)

        with pytest.raises(ManifestInvalidError) as excinfo:
            Manifest.load(path)
        assert excinfo.value.path == path
        assert reason in excinfo.value.reason

    def test_load_not_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "package.json"
        path.write_bytes(b'{"name": "\xff\xfe"}')

        with pytest.raises(ManifestInvalidError, match="not valid UTF-8"):
            Manifest.load(path)

    def test_load_null_section(self, tmp_path: Path) -> None:
        path = tmp_path / "package.json"
        path.write_text('{"name": "app", "scripts": null}')

        assert Manifest.load(path).scripts == {}


class TestSanitize:
    def test_removes_unsafe_postinstall(self) -> None:
        manifest = Manifest(
            {"scripts": {"dev": "next dev", "postinstall": "prisma generate && echo done"}}
        )

        report = sanitize(manifest)

        assert report.removed
        assert report.command == "prisma generate && echo done"
        assert manifest.data["scripts"] == {"dev": "next dev"}

    def test_keeps_safe_postinstall(self) -> None:
        manifest = Manifest({"scripts": {"postinstall": "echo 'Project created'"}})

        report = sanitize(manifest)

        assert not report.removed
        assert report.command is None
        assert manifest.data["scripts"] == {"postinstall": "echo 'Project created'"}

    def test_no_scripts_section(self) -> None:
        manifest = Manifest({"name": "app"})

        report = sanitize(manifest)

        assert not report.removed
        assert manifest.data == {"name": "app"}

    def test_pattern_elsewhere_is_allowed(self) -> None:
        manifest = Manifest(
            {"scripts": {"db:generate": UNSAFE_POSTINSTALL_PATTERN, "prepare": "prisma generate"}}
        )

        assert not sanitize(manifest).removed
        assert len(manifest.scripts) == 2

    def test_only_scripts_postinstall_touched(self) -> None:
        data = {
            "postinstall": "prisma generate",
            "scripts": {"build": "next build"},
            "dependencies": {"next": "^14.0.0"},
        }
        manifest = Manifest(json.loads(json.dumps(data)))

        sanitize(manifest)
        assert manifest.data == data

    @pytest.mark.parametrize(
        "data",
        [
            {"scripts": {"postinstall": 1}},
            {"scripts": {"postinstall": None}},
            {"scripts": {"postinstall": ["prisma generate"]}},
            {"scripts": []},
            {"scripts": "prisma generate"},
        ],
    )
    def test_malformed_scripts_left_unchanged(self, data: dict) -> None:
        manifest = Manifest(json.loads(json.dumps(data)))

        report = sanitize(manifest)

        assert not report.removed
        assert manifest.data == data


class TestAuditScripts:
    def test_flags_only_unsafe_postinstall(self) -> None:
        manifest = Manifest(
            {
                "scripts": {
                    "db:setup": "prisma generate && prisma db push",
                    "postinstall": "npx prisma generate",
                }
            }
        )

        audits = {a.name: a for a in audit_scripts(manifest)}

        assert audits["db:setup"].safe
        assert not audits["postinstall"].safe
        assert audits["postinstall"].command == "npx prisma generate"

    def test_skips_non_string_commands(self) -> None:
        manifest = Manifest({"scripts": {"dev": "next dev", "postinstall": 1}})

        assert [a.name for a in audit_scripts(manifest)] == ["dev"]

    def test_non_object_scripts(self) -> None:
        assert audit_scripts(Manifest({"scripts": ["next dev"]})) == []


class TestCheckProject:
    def test_rewrites_manifest(self, tmp_path: Path) -> None:
        path = _write_manifest(
            tmp_path, {"name": "app", "scripts": {"postinstall": "prisma generate"}}
        )

        report = check_project(tmp_path)

        assert report.removed
        assert json.loads(path.read_text()) == {"name": "app", "scripts": {}}

    def test_dry_run_leaves_file(self, tmp_path: Path) -> None:
        path = _write_manifest(tmp_path, {"scripts": {"postinstall": "prisma generate"}})
        before = path.read_text()

        report = check_project(tmp_path, dry_run=True)

        assert report.removed
        assert path.read_text() == before

    def test_safe_manifest_not_rewritten(self, tmp_path: Path) -> None:
        path = tmp_path / "package.json"
        path.write_text('{"scripts":{"dev":"next dev"}}')

        assert not check_project(tmp_path).removed
        assert path.read_text() == '{"scripts":{"dev":"next dev"}}'

    def test_missing_manifest(self, tmp_path: Path) -> None:
        with pytest.raises(ManifestNotFoundError):
            check_project(tmp_path)

    def test_malformed_manifest_untouched(self, tmp_path: Path) -> None:
        path = tmp_path / "package.json"
        path.write_text("{not json")

        with pytest.raises(ManifestInvalidError):
            check_project(tmp_path)
        assert path.read_text() == "{not json"
