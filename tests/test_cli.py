"""Integration tests for the workease CLI."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from workease.cli import app
from workease.generators.options import ProjectTemplate

runner = CliRunner()

UNSAFE_MANIFEST = {
    "name": "app",
    "scripts": {"dev": "next dev", "postinstall": "prisma generate"},
    "dependencies": {"next": "^14.0.0"},
}


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """An existing project root holding only a package.json."""
    (tmp_path / "package.json").write_text(json.dumps({"name": "app", "scripts": {}}))
    return tmp_path


def _invoke(root: Path, *args: str):
    return runner.invoke(app, ["--root", str(root), *args])


def _manifest(root: Path) -> dict:
    return json.loads((root / "package.json").read_text())


class TestInitCommand:
    @pytest.mark.parametrize("template", list(ProjectTemplate))
    def test_creates_project(self, tmp_path: Path, template: ProjectTemplate) -> None:
        result = _invoke(tmp_path, "init", "my-app", "-t", template.value, "--no-install")

        assert result.exit_code == 0, result.output
        project_dir = tmp_path / "my-app"
        assert (project_dir / "package.json").is_file()
        assert (project_dir / "src/app/page.tsx").is_file()
        assert "Done!" in result.output
        scripts = _manifest(project_dir)["scripts"]
        assert "prisma generate" not in scripts.get("postinstall", "")

    @pytest.mark.parametrize("dry_run", [False, True])
    def test_prints_name_variants(self, tmp_path: Path, dry_run: bool) -> None:
        flags = ["--dry-run"] if dry_run else []
        result = _invoke(tmp_path, *flags, "init", "my-app", "-t", "api", "--no-install")

        assert result.exit_code == 0, result.output
        assert "PascalCase" in result.output
        assert "MyApp" in result.output
        assert "my_app" in result.output

    def test_yes_uses_defaults(self, tmp_path: Path) -> None:
        result = _invoke(tmp_path, "-y", "init")

        assert result.exit_code == 0, result.output
        project_dir = tmp_path / "my-workease-app"
        assert (project_dir / "prisma/schema.prisma").is_file()
        assert (project_dir / "src/components/ui/button.tsx").is_file()

    def test_existing_directory(self, tmp_path: Path) -> None:
        (tmp_path / "my-app").mkdir()

        result = _invoke(tmp_path, "init", "my-app", "-t", "frontend", "--no-install")

        assert result.exit_code == 1
        assert "already exists" in result.output
        assert list((tmp_path / "my-app").iterdir()) == []

    def test_invalid_name(self, tmp_path: Path) -> None:
        result = _invoke(tmp_path, "init", "My App", "-t", "frontend", "--no-install")

        assert result.exit_code == 1
        assert list(tmp_path.iterdir()) == []

    def test_invalid_template(self, tmp_path: Path) -> None:
        result = _invoke(tmp_path, "init", "my-app", "-t", "bogus")

        assert result.exit_code == 2
        assert "is not a valid template" in result.output

    def test_list_templates(self, tmp_path: Path) -> None:
        result = _invoke(tmp_path, "init", "-l")

        assert result.exit_code == 0
        for template in ProjectTemplate:
            assert template.value in result.output
        assert list(tmp_path.iterdir()) == []

    def test_dry_run_writes_nothing(self, tmp_path: Path) -> None:
        result = _invoke(tmp_path, "--dry-run", "init", "my-app", "-t", "dashboard")

        assert result.exit_code == 0, result.output
        assert not (tmp_path / "my-app").exists()
        assert "Dry run complete" in result.output
        assert "package.json" in result.output

    @patch("workease.cli.app.prompt_install", return_value=False)
    @patch("workease.cli.app.prompt_template", return_value=ProjectTemplate.API)
    @patch("workease.cli.app.prompt_name", return_value="svc")
    def test_interactive(
        self, mock_name: MagicMock, mock_template: MagicMock, mock_install: MagicMock
    ) -> None:
        with runner.isolated_filesystem() as cwd:
            result = runner.invoke(app, ["init"])

            assert result.exit_code == 0, result.output
            mock_name.assert_called_once()
            mock_template.assert_called_once()
            mock_install.assert_called_once()
            assert (Path(cwd) / "svc/src/app/api/health/route.ts").is_file()
            assert not (Path(cwd) / "svc/tailwind.config.js").exists()

    @patch("workease.cli.app.subprocess.run")
    def test_install_runs_npm(self, mock_run: MagicMock, tmp_path: Path) -> None:
        result = _invoke(tmp_path, "init", "my-app", "-t", "frontend", "--install")

        assert result.exit_code == 0, result.output
        mock_run.assert_called_once()
        args, kwargs = mock_run.call_args
        assert args[0] == ["npm", "install"]
        assert kwargs["cwd"] == tmp_path / "my-app"


class TestVirtualTestCommand:
    @pytest.mark.parametrize("command", ["test", "virtual"])
    def test_simulates_without_writing(self, tmp_path: Path, command: str) -> None:
        result = _invoke(tmp_path, command)

        assert result.exit_code == 0, result.output
        assert "virtual-test-project" in result.output
        assert "Virtual test completed" in result.output
        assert list(tmp_path.iterdir()) == []

    def test_template_option(self, tmp_path: Path) -> None:
        result = _invoke(tmp_path, "test", "-t", "frontend")

        assert result.exit_code == 0, result.output
        assert "Frontend Only" in result.output


class TestCheckCommand:
    def test_removes_unsafe_postinstall(self, tmp_path: Path) -> None:
        (tmp_path / "package.json").write_text(json.dumps(UNSAFE_MANIFEST))

        result = _invoke(tmp_path, "check")

        assert result.exit_code == 0, result.output
        assert "Removed unsafe postinstall script" in result.output
        assert _manifest(tmp_path)["scripts"] == {"dev": "next dev"}

    def test_dry_run_keeps_file(self, tmp_path: Path) -> None:
        (tmp_path / "package.json").write_text(json.dumps(UNSAFE_MANIFEST))

        result = _invoke(tmp_path, "--dry-run", "safety")

        assert result.exit_code == 0, result.output
        assert "Would remove" in result.output
        assert _manifest(tmp_path) == UNSAFE_MANIFEST

    def test_clean_manifest(self, project: Path) -> None:
        result = _invoke(project, "check")

        assert result.exit_code == 0, result.output
        assert "No unsafe postinstall scripts detected" in result.output

    def test_missing_manifest(self, tmp_path: Path) -> None:
        result = _invoke(tmp_path, "check")

        assert result.exit_code == 1
        assert "No package.json found" in result.output

    @pytest.mark.parametrize("content", ["{not json", "[]", '{"scripts": []}'])
    def test_malformed_manifest_reported(self, tmp_path: Path, content: str) -> None:
        (tmp_path / "package.json").write_text(content)

        result = _invoke(tmp_path, "check")

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Error:" in result.output
        assert (tmp_path / "package.json").read_text() == content

    def test_malformed_manifest_blocks_generate(self, tmp_path: Path) -> None:
        (tmp_path / "package.json").write_text("{not json")

        result = _invoke(tmp_path, "-y", "generate", "component", "Badge")

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert not (tmp_path / "src").exists()


class TestComponentCommand:
    def test_generates_component(self, project: Path) -> None:
        result = _invoke(project, "generate", "component", "userCard", "-l", "src/components")

        assert result.exit_code == 0, result.output
        content = (project / "src/components/UserCard.tsx").read_text()
        assert "export default function UserCard(" in content
        assert "user-card" in result.output

    def test_alias(self, project: Path) -> None:
        result = _invoke(project, "-y", "g", "comp", "Badge")

        assert result.exit_code == 0, result.output
        assert (project / "src/components/Badge.tsx").is_file()

    def test_invalid_name_writes_nothing(self, project: Path) -> None:
        result = _invoke(project, "generate", "component", "123abc", "-l", "src/components")

        assert result.exit_code == 1
        assert "must start with a letter" in result.output
        assert not (project / "src").exists()

    def test_outside_project(self, tmp_path: Path) -> None:
        result = _invoke(tmp_path, "-y", "generate", "component", "Badge")

        assert result.exit_code == 1
        assert "No package.json found" in result.output
        assert not (tmp_path / "src").exists()

    def test_existing_file_refused(self, project: Path) -> None:
        target = project / "src/components/Badge.tsx"
        target.parent.mkdir(parents=True)
        target.write_text("mine")

        result = _invoke(project, "-y", "generate", "component", "Badge")

        assert result.exit_code == 1
        assert "Refusing to overwrite" in result.output
        assert target.read_text() == "mine"

    def test_force_overwrites(self, project: Path) -> None:
        target = project / "src/components/Badge.tsx"
        target.parent.mkdir(parents=True)
        target.write_text("mine")

        result = _invoke(project, "-y", "generate", "component", "Badge", "--force")

        assert result.exit_code == 0, result.output
        assert "function Badge(" in target.read_text()

    @patch("workease.cli.app.confirm_overwrite", return_value=True)
    def test_confirmed_overwrite(self, mock_confirm: MagicMock, project: Path) -> None:
        target = project / "src/components/Badge.tsx"
        target.parent.mkdir(parents=True)
        target.write_text("mine")

        result = _invoke(project, "generate", "component", "Badge", "-l", "src/components")

        assert result.exit_code == 0, result.output
        mock_confirm.assert_called_once()
        assert "function Badge(" in target.read_text()

    @patch("workease.cli.app.prompt_choice", return_value="src/components/ui")
    @patch("workease.cli.app.prompt_name", return_value="Chip")
    def test_interactive(
        self, mock_name: MagicMock, mock_choice: MagicMock, project: Path
    ) -> None:
        result = _invoke(project, "generate", "component")

        assert result.exit_code == 0, result.output
        assert (project / "src/components/ui/Chip.tsx").is_file()

    def test_dry_run(self, project: Path) -> None:
        result = _invoke(project, "--dry-run", "-y", "generate", "component", "Badge")

        assert result.exit_code == 0, result.output
        assert "Would create" in result.output
        assert not (project / "src").exists()


class TestPageAndApiCommands:
    def test_page_defaults(self, project: Path) -> None:
        result = _invoke(project, "-y", "generate", "page", "about us")

        assert result.exit_code == 0, result.output
        content = (project / "src/app/about-us/page.tsx").read_text()
        assert "AboutUsPage" in content
        assert "AboutUs page description" in content

    def test_page_options(self, project: Path) -> None:
        result = _invoke(
            project,
            "generate",
            "page",
            "Pricing",
            "--title",
            "Plans",
            "--description",
            "Our plans",
            "-r",
            "plans",
        )

        assert result.exit_code == 0, result.output
        content = (project / "src/app/plans/page.tsx").read_text()
        assert "title: 'Plans'" in content
        assert "Our plans" in content

    def test_api_methods(self, project: Path) -> None:
        result = _invoke(
            project, "generate", "api", "users", "-r", "users", "-m", "DELETE", "-m", "GET"
        )

        assert result.exit_code == 0, result.output
        content = (project / "src/app/api/users/route.ts").read_text()
        assert content.index("function GET") < content.index("function DELETE")
        assert "function POST" not in content

    def test_api_alias_defaults(self, project: Path) -> None:
        result = _invoke(project, "-y", "g", "route", "health check")

        assert result.exit_code == 0, result.output
        content = (project / "src/app/api/health-check/route.ts").read_text()
        assert "function GET" in content
        assert "function POST" in content

    def test_page_route_outside_project(self, tmp_path: Path) -> None:
        project = tmp_path / "proj"
        project.mkdir()
        (project / "package.json").write_text(json.dumps({"name": "app"}))

        result = _invoke(project, "-y", "generate", "page", "About", "-r", "../../../escaped")

        assert result.exit_code == 1
        assert "inside the project" in result.output
        assert not (tmp_path / "escaped").exists()
        assert not (project / "src").exists()

    def test_api_route_outside_project(self, tmp_path: Path) -> None:
        project = tmp_path / "proj"
        project.mkdir()
        (project / "package.json").write_text(json.dumps({"name": "app"}))

        result = _invoke(project, "-y", "generate", "api", "users", "-r", "../../escaped")

        assert result.exit_code == 1
        assert "inside the project" in result.output
        assert not (tmp_path / "escaped").exists()
        assert not (project / "src").exists()


class TestModelCommand:
    def test_generates_model(self, project: Path) -> None:
        result = _invoke(
            project, "-y", "generate", "model", "Product", "--custom", "price:float"
        )

        assert result.exit_code == 0, result.output
        schema = (project / "prisma/schema.prisma").read_text()
        assert "model User {" in schema
        assert "model Product {" in schema
        assert "Float" in schema
        assert (project / "src/types/product.ts").is_file()
        assert (project / "src/app/api/product/[id]/route.ts").is_file()
        assert (project / "src/lib/validations/product.ts").is_file()
        assert _manifest(project) == {"name": "app", "scripts": {}}

    def test_second_run_needs_force(self, project: Path) -> None:
        assert _invoke(project, "-y", "generate", "model", "Product").exit_code == 0

        refused = _invoke(project, "-y", "generate", "model", "Product")
        assert refused.exit_code == 1

        forced = _invoke(project, "-y", "generate", "model", "Product", "--force")
        assert forced.exit_code == 0, forced.output
        schema = (project / "prisma/schema.prisma").read_text()
        assert schema.count("model Product {") == 1

    def test_features_option(self, project: Path) -> None:
        result = _invoke(
            project,
            "-y",
            "generate",
            "model",
            "Order",
            "--feature",
            "seeder",
            "--feature",
            "tests",
        )

        assert result.exit_code == 0, result.output
        assert (project / "prisma/seeders/order.ts").is_file()
        assert (project / "src/__tests__/api/order.test.ts").is_file()
        assert not (project / "src/types/order.ts").exists()


class TestUiGeneratorCommands:
    def test_table(self, project: Path) -> None:
        result = _invoke(project, "-y", "generate", "table", "Product")

        assert result.exit_code == 0, result.output
        assert (project / "src/components/tables/product-table.tsx").is_file()
        assert (project / "src/hooks/use-product-table.ts").is_file()
        assert _manifest(project) == {"name": "app", "scripts": {}}

    def test_form_adds_dependencies(self, project: Path) -> None:
        result = _invoke(project, "-y", "generate", "form", "Product", "--type", "combined")

        assert result.exit_code == 0, result.output
        assert (project / "src/components/forms/product-form.tsx").is_file()
        dependencies = _manifest(project)["dependencies"]
        assert "react-hook-form" in dependencies
        assert "zod" in dependencies

    def test_dashboard_defaults(self, project: Path) -> None:
        result = _invoke(project, "-y", "generate", "dashboard")

        assert result.exit_code == 0, result.output
        assert (project / "src/components/dashboards/admin-dashboard.tsx").is_file()
        assert (project / "src/components/widgets/charts-widget.tsx").is_file()
        assert (project / "src/app/dashboard/page.tsx").is_file()
        assert "recharts" in _manifest(project)["dependencies"]

    def test_dashboard_without_charts(self, project: Path) -> None:
        result = _invoke(
            project,
            "-y",
            "generate",
            "dashboard",
            "Ops",
            "--widget",
            "stats",
            "--feature",
            "export",
        )

        assert result.exit_code == 0, result.output
        assert not (project / "src/components/widgets/charts-widget.tsx").exists()
        assert "dependencies" not in _manifest(project)

    def test_dry_run_leaves_manifest(self, project: Path) -> None:
        before = (project / "package.json").read_text()

        result = _invoke(project, "--dry-run", "-y", "generate", "form", "Product")

        assert result.exit_code == 0, result.output
        assert "Dry run complete" in result.output
        assert (project / "package.json").read_text() == before
        assert not (project / "src").exists()


class TestAuthCommand:
    def test_nextauth(self, tmp_path: Path) -> None:
        (tmp_path / "package.json").write_text(json.dumps(UNSAFE_MANIFEST))

        result = _invoke(tmp_path, "-y", "auth")

        assert result.exit_code == 0, result.output
        assert (tmp_path / "src/lib/auth.ts").is_file()
        assert (tmp_path / "src/app/api/auth/[...nextauth]/route.ts").is_file()
        assert "model User" in (tmp_path / "prisma/schema.prisma").read_text()
        manifest = _manifest(tmp_path)
        assert "next-auth" in manifest["dependencies"]
        assert "postinstall" not in manifest["scripts"]
        assert "Removed unsafe postinstall script" in result.output

    def test_existing_user_model_kept(self, project: Path) -> None:
        schema = project / "prisma/schema.prisma"
        schema.parent.mkdir()
        schema.write_text("model User {\n  id String @id\n}\n")

        result = _invoke(project, "-y", "auth", "--no-ui")

        assert result.exit_code == 0, result.output
        assert schema.read_text() == "model User {\n  id String @id\n}\n"
        assert not (project / "src/components/auth/LoginForm.tsx").exists()

    def test_other_provider(self, project: Path) -> None:
        result = _invoke(project, "auth", "--provider", "clerk")

        assert result.exit_code == 0, result.output
        assert "Clerk integration coming soon!" in result.output
        assert not (project / "src").exists()
