"""Unit tests for applying generation plans to disk."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from workease.cli._renderer import apply_plan, find_conflicts, require_project
from workease.core.errors import AlreadyExistsError, ManifestNotFoundError
from workease.generators import GenerationPlan, ProjectRequest, build_project
from workease.generators.options import ProjectTemplate


def _manifest(root: Path, **extra: object) -> Path:
    path = root / "package.json"
    path.write_text(json.dumps({"name": "app", "dependencies": {"next": "^14.0.0"}, **extra}))
    return path


def _snapshot(root: Path) -> dict[str, str]:
    return {
        str(p.relative_to(root)): p.read_text() for p in sorted(root.rglob("*")) if p.is_file()
    }


class TestRequireProject:
    def test_loads_manifest(self, tmp_path: Path) -> None:
        _manifest(tmp_path)
        assert require_project(tmp_path).data["name"] == "app"

    def test_outside_project(self, tmp_path: Path) -> None:
        with pytest.raises(ManifestNotFoundError):
            require_project(tmp_path)


class TestCreate:
    def test_writes_files_and_directories(self, tmp_path: Path) -> None:
        plan = GenerationPlan(directories=[Path("public")])
        plan.add("src/components/Card.tsx", "card")
        plan.add("src/app/page.tsx", "page")

        result = apply_plan(tmp_path, plan)

        assert (tmp_path / "public").is_dir()
        assert (tmp_path / "src/components/Card.tsx").read_text() == "card"
        assert result.created == [Path("src/components/Card.tsx"), Path("src/app/page.tsx")]
        assert result.directories == [Path("public")]
        assert result.safety is None
        assert not result.dry_run

    def test_conflict_aborts_before_any_write(self, tmp_path: Path) -> None:
        existing = tmp_path / "src/app/page.tsx"
        existing.parent.mkdir(parents=True)
        existing.write_text("original")
        plan = GenerationPlan()
        plan.add("src/components/Card.tsx", "card")
        plan.add("src/app/page.tsx", "page")

        with pytest.raises(AlreadyExistsError) as excinfo:
            apply_plan(tmp_path, plan)

        assert excinfo.value.paths == [Path("src/app/page.tsx")]
        assert existing.read_text() == "original"
        assert not (tmp_path / "src/components/Card.tsx").exists()

    def test_find_conflicts_ignores_appends(self, tmp_path: Path) -> None:
        (tmp_path / "a.txt").write_text("x")
        plan = GenerationPlan()
        plan.append("a.txt", "y")

        assert find_conflicts(tmp_path, plan) == []

    def test_confirm_approves_overwrite(self, tmp_path: Path) -> None:
        (tmp_path / "a.txt").write_text("old")
        plan = GenerationPlan()
        plan.add("a.txt", "new")
        confirm = MagicMock(return_value=True)

        apply_plan(tmp_path, plan, confirm=confirm)

        confirm.assert_called_once_with([Path("a.txt")])
        assert (tmp_path / "a.txt").read_text() == "new"

    def test_confirm_declines_overwrite(self, tmp_path: Path) -> None:
        (tmp_path / "a.txt").write_text("old")
        plan = GenerationPlan()
        plan.add("a.txt", "new")

        with pytest.raises(AlreadyExistsError):
            apply_plan(tmp_path, plan, confirm=lambda paths: False)
        assert (tmp_path / "a.txt").read_text() == "old"

    def test_force_overwrites_without_asking(self, tmp_path: Path) -> None:
        (tmp_path / "a.txt").write_text("old")
        plan = GenerationPlan()
        plan.add("a.txt", "new")
        confirm = MagicMock(return_value=False)

        apply_plan(tmp_path, plan, force=True, confirm=confirm)

        confirm.assert_not_called()
        assert (tmp_path / "a.txt").read_text() == "new"


class TestAppend:
    def test_missing_file_starts_from_preamble(self, tmp_path: Path) -> None:
        plan = GenerationPlan()
        plan.append("prisma/schema.prisma", "model B {}\n", preamble="header\n")

        result = apply_plan(tmp_path, plan)

        assert (tmp_path / "prisma/schema.prisma").read_text() == "header\nmodel B {}\n"
        assert result.appended == [Path("prisma/schema.prisma")]

    def test_existing_file_extended(self, tmp_path: Path) -> None:
        schema = tmp_path / "schema.prisma"
        schema.write_text("model A {}\n")
        plan = GenerationPlan()
        plan.append(
            "schema.prisma", "model B {}\n", preamble="header\n", unless_contains="model B {"
        )

        apply_plan(tmp_path, plan)

        assert schema.read_text() == "model A {}\nmodel B {}\n"

    def test_marker_present_skips(self, tmp_path: Path) -> None:
        schema = tmp_path / "schema.prisma"
        schema.write_text("model B {}\n")
        plan = GenerationPlan()
        plan.append("schema.prisma", "model B { id Int }\n", unless_contains="model B {")

        result = apply_plan(tmp_path, plan)

        assert schema.read_text() == "model B {}\n"
        assert result.skipped == [Path("schema.prisma")]
        assert result.appended == []

    def test_marker_in_preamble_writes_preamble_only(self, tmp_path: Path) -> None:
        plan = GenerationPlan()
        plan.append(
            "schema.prisma",
            "model User {}\n",
            preamble="model User {}\n",
            unless_contains="model User",
        )

        result = apply_plan(tmp_path, plan)

        assert (tmp_path / "schema.prisma").read_text() == "model User {}\n"
        assert result.skipped == [Path("schema.prisma")]


class TestManifestUpdate:
    def test_dependencies_merged_and_sanitized(self, tmp_path: Path) -> None:
        path = _manifest(tmp_path, scripts={"postinstall": "prisma generate"})
        plan = GenerationPlan(
            dependencies={"zod": "^3.22.4"}, dev_dependencies={"prisma": "^5.0.0"}
        )

        result = apply_plan(tmp_path, plan)

        data = json.loads(path.read_text())
        assert data["dependencies"] == {"next": "^14.0.0", "zod": "^3.22.4"}
        assert data["devDependencies"] == {"prisma": "^5.0.0"}
        assert "postinstall" not in data["scripts"]
        assert result.safety is not None and result.safety.removed

    def test_missing_manifest_aborts_before_writes(self, tmp_path: Path) -> None:
        plan = GenerationPlan(dependencies={"zod": "^3.22.4"})
        plan.add("a.txt", "x")

        with pytest.raises(ManifestNotFoundError):
            apply_plan(tmp_path, plan)
        assert not (tmp_path / "a.txt").exists()

    def test_plan_without_dependencies_leaves_manifest(self, tmp_path: Path) -> None:
        path = _manifest(tmp_path, scripts={"postinstall": "prisma generate"})
        before = path.read_text()
        plan = GenerationPlan()
        plan.add("a.txt", "x")

        apply_plan(tmp_path, plan)

        assert path.read_text() == before


class TestDryRun:
    def test_nothing_written(self, tmp_path: Path) -> None:
        _manifest(tmp_path, scripts={"postinstall": "prisma generate"})
        (tmp_path / "schema.prisma").write_text("model A {}\n")
        before = _snapshot(tmp_path)
        plan = GenerationPlan(directories=[Path("public")], dependencies={"zod": "^3.22.4"})
        plan.add("src/a.ts", "a")
        plan.append("schema.prisma", "model B {}\n", unless_contains="model B {")

        result = apply_plan(tmp_path, plan, dry_run=True)

        assert _snapshot(tmp_path) == before
        assert not (tmp_path / "public").exists()
        assert result.dry_run
        assert result.created == [Path("src/a.ts")]
        assert result.appended == [Path("schema.prisma")]
        assert result.directories == [Path("public")]
        assert result.safety is not None and result.safety.removed

    def test_same_result_as_real_run(self, tmp_path: Path) -> None:
        plan = build_project(ProjectRequest(name="demo", template=ProjectTemplate.FULLSTACK))
        simulated = apply_plan(tmp_path, plan, dry_run=True)
        assert list(tmp_path.iterdir()) == []

        applied = apply_plan(tmp_path, plan)

        assert simulated.created == applied.created
        assert simulated.directories == applied.directories
        assert (tmp_path / "package.json").is_file()
        assert (tmp_path / "prisma/schema.prisma").is_file()
