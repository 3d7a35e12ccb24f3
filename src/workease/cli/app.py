"""Typer CLI application for workease."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, TypeVar

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from typer import Argument, Context, Exit, Option, Typer

import workease
from workease.cli._prompts import (
    DEFAULT_PROJECT_NAME,
    confirm_overwrite,
    prompt_choice,
    prompt_choices,
    prompt_confirm,
    prompt_install,
    prompt_name,
    prompt_template,
    prompt_text,
)
from workease.cli._renderer import ApplyResult, apply_plan, find_conflicts, require_project
from workease.core.errors import ValidationError, WorkEaseError
from workease.core.manifest import Manifest
from workease.core.naming import (
    NameVariants,
    validate_identifier,
    validate_project_name,
    validate_route_name,
)
from workease.core.safety import SafetyReport, audit_scripts, check_project, sanitize
from workease.generators import (
    ApiRouteRequest,
    AuthRequest,
    ComponentRequest,
    DashboardRequest,
    FormRequest,
    GenerationPlan,
    ModelRequest,
    PageRequest,
    ProjectRequest,
    TableRequest,
    build_api_route,
    build_auth,
    build_component,
    build_dashboard,
    build_form,
    build_model,
    build_page,
    build_project,
    build_table,
)
from workease.generators.dashboard import DEFAULT_DASHBOARD_NAME
from workease.generators.options import (
    COMPONENT_LOCATIONS,
    DEFAULT_AUTH_FEATURES,
    DEFAULT_CHART_TYPES,
    DEFAULT_DASHBOARD_FEATURES,
    DEFAULT_DASHBOARD_WIDGETS,
    DEFAULT_FORM_FEATURES,
    DEFAULT_FORM_FIELDS,
    DEFAULT_HTTP_METHODS,
    DEFAULT_MODEL_FEATURES,
    DEFAULT_MODEL_FIELDS,
    DEFAULT_TABLE_COLUMNS,
    DEFAULT_TABLE_FEATURES,
    AuthFeature,
    AuthProvider,
    ChartType,
    DashboardFeature,
    DashboardWidget,
    FormFeature,
    FormField,
    FormType,
    HttpMethod,
    ModelFeature,
    ModelField,
    ProjectTemplate,
    TableColumn,
    TableFeature,
)

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
generate_app = Typer(
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Generate components, pages, API routes, models and more.",
)
app.add_typer(generate_app, name="generate")
app.add_typer(generate_app, name="g", hidden=True)

_console = Console()

T = TypeVar("T")

VIRTUAL_PROJECT_NAME = "virtual-test-project"


@dataclass
class Settings:
    """Global options shared by every command."""

    root: Path
    dry_run: bool = False
    verbose: bool = False
    assume_yes: bool = False


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: Context,
    dry_run: Annotated[
        bool, Option("--dry-run", help="Simulation mode: show what would happen, write nothing.")
    ] = False,
    verbose: Annotated[bool, Option("--verbose", "-v", help="Show debug logging.")] = False,
    assume_yes: Annotated[
        bool, Option("--yes", "-y", help="Accept the default answer of every prompt.")
    ] = False,
    root: Annotated[
        Path, Option("--root", "-C", help="Project root to operate on.", file_okay=False)
    ] = Path("."),
) -> None:
    """workease: scaffolding tool for Next.js + TypeScript + Tailwind + Prisma projects."""
    _configure_logging(verbose)
    ctx.obj = Settings(root=root, dry_run=dry_run, verbose=verbose, assume_yes=assume_yes)


def _settings(ctx: Context) -> Settings:
    if isinstance(ctx.obj, Settings):
        return ctx.obj
    return Settings(root=Path("."))


@contextmanager
def _handle_errors() -> Iterator[None]:
    try:
        yield
    except (WorkEaseError, OSError) as exc:
        _console.print(f"[bold red]Error:[/] {escape(str(exc))}")
        raise Exit(code=1) from None


def _header(settings: Settings) -> None:
    _console.print()
    _console.print(f"[bold cyan]●[/]  workease v{workease.__version__}")
    if settings.dry_run:
        _console.print("[dim]│[/]  [yellow]Dry run: no files will be written[/]")
    _console.print("[dim]│[/]")


def _answer(question: str, display: str) -> None:
    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {escape(display)}")
    _console.print("[dim]│[/]")


def _print_variants(variants: NameVariants | None) -> None:
    if variants is None:
        return
    _console.print("[bold green]◇[/]  Names")
    for label, value in (
        ("PascalCase", variants.pascal),
        ("camelCase", variants.camel),
        ("kebab-case", variants.kebab),
        ("snake_case", variants.snake),
    ):
        _console.print(f"[dim]│[/]  {label:<11} [bold]{value}[/]")
    _console.print("[dim]│[/]")


def _print_result(result: ApplyResult, overwrites: Sequence[Path] = ()) -> None:
    verb = "Would create" if result.dry_run else "Created"
    _console.print(f"[bold green]◇[/]  {'Planned files' if result.dry_run else 'Files'}")
    for path in result.directories:
        _console.print(f"[dim]│[/]  {verb:<13} {escape(path.as_posix())}/")
    for path in result.created:
        tag = " [yellow](overwrite)[/]" if path in overwrites else ""
        _console.print(f"[dim]│[/]  {verb:<13} {escape(path.as_posix())}{tag}")
    for path in result.appended:
        append_verb = "Would append" if result.dry_run else "Appended"
        _console.print(f"[dim]│[/]  {append_verb:<13} {escape(path.as_posix())}")
    for path in result.skipped:
        _console.print(f"[dim]│[/]  {'Unchanged':<13} [dim]{escape(path.as_posix())}[/]")
    _console.print("[dim]│[/]")


def _print_safety(report: SafetyReport | None, dry_run: bool = False) -> None:
    _console.print("[bold green]◇[/]  Safety analysis")
    if report is None:
        _console.print("[dim]│[/]  [dim]package.json unchanged[/]")
    elif report.removed:
        action = "Would remove" if dry_run else "Removed"
        command = escape(report.command or "")
        _console.print(
            f"[dim]│[/]  [bold red]✗[/] {action} unsafe postinstall script: {command}"
        )
        _console.print("[dim]│[/]  [dim]Run database client generation manually instead.[/]")
    else:
        _console.print("[dim]│[/]  [green]✓[/] No unsafe postinstall scripts detected")
    _console.print("[dim]│[/]")


def _print_script_audit(manifest: Manifest) -> None:
    _console.print("[bold green]◇[/]  package.json scripts")
    for audit in audit_scripts(manifest):
        status = "[green]safe[/]" if audit.safe else "[bold red]unsafe[/]"
        command = escape(audit.command)
        _console.print(f"[dim]│[/]  [cyan]{audit.name}[/]: [dim]{command}[/] {status}")
    _console.print("[dim]│[/]")


def _print_dependencies(plan: GenerationPlan, manifest: Manifest | None = None) -> None:
    dependencies = dict(plan.dependencies)
    dev_dependencies = dict(plan.dev_dependencies)
    if manifest is not None:
        dependencies.update(manifest.dependencies)
        dev_dependencies.update(manifest.dev_dependencies)
    if not dependencies and not dev_dependencies:
        return
    _console.print("[bold green]◇[/]  Dependencies")
    for name, version in {**dependencies, **dev_dependencies}.items():
        dev = " [dim](dev)[/]" if name in dev_dependencies else ""
        _console.print(f"[dim]│[/]  {name} [dim]{version}[/]{dev}")
    _console.print("[dim]│[/]")


def _print_notes(notes: Sequence[str], done: str) -> None:
    if notes:
        _console.print("[bold green]◇[/]  Next steps")
        for note in notes:
            _console.print(f"[dim]│[/]  {escape(note)}")
        _console.print("[dim]│[/]")
    _console.print(f"[bold cyan]●[/]  {done}")
    _console.print()


def _ask_name(
    settings: Settings,
    value: str | None,
    question: str,
    validate: Callable[[str], str],
    default: str | None = None,
) -> str:
    if value is not None:
        value = validate(value)
        _answer(question, value)
        return value
    if settings.assume_yes:
        if default is None:
            raise ValidationError(f"{question} is required.")
        _answer(question, default)
        return default
    return prompt_name(question, validate, default=default)


def _ask_text(settings: Settings, value: str | None, question: str, default: str) -> str:
    if value is not None:
        _answer(question, value)
        return value
    if settings.assume_yes:
        _answer(question, default)
        return default
    return prompt_text(question, default=default)


def _ask_one(
    settings: Settings, value: T | None, question: str, options: Sequence[T], default: T
) -> T:
    if value is None and not settings.assume_yes:
        return prompt_choice(question, options, default)
    chosen = default if value is None else value
    _answer(question, str(getattr(chosen, "label", chosen)))
    return chosen


def _ask_many(
    settings: Settings,
    values: Sequence[T] | None,
    question: str,
    options: Sequence[T],
    defaults: Sequence[T],
) -> list[T]:
    if not values and not settings.assume_yes:
        return prompt_choices(question, options, defaults)
    chosen = list(values) if values else list(defaults)
    _answer(question, ", ".join(str(getattr(c, "label", c)) for c in chosen) or "none")
    return chosen


def _ask_bool(settings: Settings, value: bool | None, question: str) -> bool:
    if value is None and not settings.assume_yes:
        return prompt_confirm(question, default=True)
    chosen = True if value is None else value
    _answer(question, "Yes" if chosen else "No")
    return chosen


def _identifier(kind: str) -> Callable[[str], str]:
    return lambda name: validate_identifier(name, kind)


def _route_name(kind: str) -> Callable[[str], str]:
    return lambda name: validate_route_name(name, kind)


def _execute(settings: Settings, plan: GenerationPlan, *, force: bool, done: str) -> None:
    """Apply a generator's plan at the project root, or simulate it."""
    _print_variants(plan.variants)

    if settings.dry_run:
        overwrites = find_conflicts(settings.root, plan)
        result = apply_plan(settings.root, plan, dry_run=True, force=True)
        _print_result(result, overwrites)
        _print_dependencies(plan)
        _print_safety(result.safety, dry_run=True)
        _print_notes(plan.notes, "Dry run complete. No files were written.")
        return

    confirm = None if settings.assume_yes else confirm_overwrite
    overwrites = [] if force else find_conflicts(settings.root, plan)
    result = apply_plan(settings.root, plan, force=force, confirm=confirm)
    _print_result(result, overwrites)
    _print_dependencies(plan)
    _print_safety(result.safety)
    notes = plan.notes
    if plan.touches_manifest and "npm install" not in notes:
        notes = ["npm install", *notes]
    _print_notes(notes, done)


def _print_templates() -> None:
    _console.print()
    _console.print("[bold cyan]◆[/]  Available templates")
    _console.print("[dim]│[/]")
    for t in ProjectTemplate:
        _console.print(f"[dim]│[/]  [bold cyan]{t.value:<12}[/] [bold]{t.label}[/]")
        _console.print(f"[dim]│[/]  {' ' * 12} [dim]{t.description}[/]")
        _console.print("[dim]│[/]")
    _console.print()


def _list_templates_callback(value: bool) -> None:
    if value:
        _print_templates()
        raise Exit()


def _parse_template(template_str: str | None) -> ProjectTemplate | None:
    if template_str is None:
        return None
    try:
        return ProjectTemplate(template_str)
    except ValueError:
        valid = ", ".join(f"'{t.value}'" for t in ProjectTemplate)
        _console.print()
        _console.print(f"[bold red]Error:[/] [bold]{template_str!r}[/] is not a valid template.")
        _console.print(f"[dim]Valid values:[/] {valid}")
        _print_templates()
        raise Exit(code=2) from None


def _simulate_project(plan: GenerationPlan, project_dir: Path) -> None:
    """Describe a new project without creating it."""
    manifest = (plan.manifest or Manifest()).copy()

    _print_variants(plan.variants)
    _console.print("[bold green]◇[/]  Would create directory")
    _console.print(f"[dim]│[/]  {project_dir}")
    _console.print("[dim]│[/]")
    _print_result(
        ApplyResult(
            created=plan.paths,
            directories=list(plan.directories),
            dry_run=True,
        )
    )
    _print_script_audit(manifest)
    _print_safety(sanitize(manifest), dry_run=True)
    _print_dependencies(plan, manifest)


_TemplateOption = Annotated[
    str | None,
    Option(
        "--template",
        "-t",
        help="Project template. Run with --list-templates / -l to see all options.",
        show_default=False,
    ),
]

_ListTemplatesOption = Annotated[
    bool,
    Option(
        "--list-templates",
        "-l",
        help="List all available templates and exit.",
        callback=_list_templates_callback,
        is_eager=True,
        expose_value=False,
    ),
]


@app.command()
def init(
    ctx: Context,
    project_name: Annotated[
        str | None, Argument(help="Name for the new project directory", show_default=False)
    ] = None,
    template_str: _TemplateOption = None,
    install: Annotated[
        bool | None,
        Option("--install/--no-install", help="Run npm install in the new project."),
    ] = None,
    list_templates: _ListTemplatesOption = False,
) -> None:
    """Create a new Next.js project."""
    settings = _settings(ctx)
    template = _parse_template(template_str)

    _header(settings)

    with _handle_errors():
        project_name = _ask_name(
            settings, project_name, "Project name", validate_project_name, DEFAULT_PROJECT_NAME
        )

        if template is None and not settings.assume_yes:
            template = prompt_template()
        else:
            template = template or ProjectTemplate.FULLSTACK
            _answer("Choose a project template", template.label)

        plan = build_project(ProjectRequest(name=project_name, template=template))
        project_dir = settings.root / project_name

        if settings.dry_run:
            _simulate_project(plan, project_dir)
            _print_notes(
                [f"cd {project_name}", *plan.notes], "Dry run complete. No files were written."
            )
            return

        if project_dir.exists():
            _console.print(f"[bold red]Error:[/] Directory '{project_name}' already exists.")
            raise Exit(code=1)

        _print_variants(plan.variants)
        _console.print(f"[bold green]◇[/]  Creating {project_name}/...")
        project_dir.mkdir(parents=True)
        result = apply_plan(project_dir, plan)
        _print_result(result)
        _print_safety(check_project(project_dir))

        if install is None:
            install = False if settings.assume_yes else prompt_install()
        if install:
            _npm_install(project_dir)

        steps = [f"cd {project_name}"]
        if not install:
            steps.append("npm install")
        _print_notes([*steps, *plan.notes], "Done!")


def _npm_install(project_dir: Path) -> None:
    _console.print("[bold green]◇[/]  Installing dependencies...")
    try:
        subprocess.run(["npm", "install"], cwd=project_dir, check=True)
    except subprocess.CalledProcessError as exc:
        raise WorkEaseError(f"npm install failed with exit code {exc.returncode}.") from exc
    _console.print("[dim]│[/]")


def virtual_test(
    ctx: Context,
    template: Annotated[
        ProjectTemplate, Option("--template", "-t", help="Template to simulate.")
    ] = ProjectTemplate.FULLSTACK,
) -> None:
    """Simulate project creation without touching the file system."""
    settings = _settings(ctx)
    _header(settings)
    _console.print("[bold cyan]◆[/]  Virtual test: no file operations will be performed")
    _console.print("[dim]│[/]")
    _answer("Project", VIRTUAL_PROJECT_NAME)
    _answer("Template", template.label)

    with _handle_errors():
        plan = build_project(ProjectRequest(name=VIRTUAL_PROJECT_NAME, template=template))
        _simulate_project(plan, settings.root / VIRTUAL_PROJECT_NAME)
    _print_notes([], "Virtual test completed. No files were created.")


app.command("test")(virtual_test)
app.command("virtual", hidden=True)(virtual_test)


def check(ctx: Context) -> None:
    """Check the project's package.json for unsafe scripts and remove them."""
    settings = _settings(ctx)
    _header(settings)
    _console.print("[bold cyan]◆[/]  Running safety check...")
    _console.print("[dim]│[/]")

    with _handle_errors():
        report = check_project(settings.root, dry_run=settings.dry_run)

    _print_safety(report, dry_run=settings.dry_run)
    _console.print("[bold cyan]●[/]  Project safety check completed")
    _console.print()


app.command("check")(check)
app.command("safety", hidden=True)(check)


_ForceOption = Annotated[
    bool, Option("--force", "-f", help="Overwrite existing files without asking.")
]


def component(
    ctx: Context,
    name: Annotated[str | None, Argument(help="Component name", show_default=False)] = None,
    location: Annotated[
        str | None,
        Option("--location", "-l", help="Directory for the component.", show_default=False),
    ] = None,
    force: _ForceOption = False,
) -> None:
    """Generate a React component."""
    settings = _settings(ctx)
    _header(settings)

    with _handle_errors():
        require_project(settings.root)
        name = _ask_name(settings, name, "Component name", _identifier("Component name"))
        location = _ask_one(
            settings, location, "Where should it go?", COMPONENT_LOCATIONS, COMPONENT_LOCATIONS[0]
        )
        plan = build_component(ComponentRequest(name=name, location=location))
        _execute(settings, plan, force=force, done="Component generated.")


generate_app.command("component")(component)
generate_app.command("comp", hidden=True)(component)


@generate_app.command()
def page(
    ctx: Context,
    name: Annotated[str | None, Argument(help="Page name", show_default=False)] = None,
    title: Annotated[str | None, Option("--title", help="Page title.")] = None,
    description: Annotated[str | None, Option("--description", help="Page description.")] = None,
    route: Annotated[str | None, Option("--route", "-r", help="Route path.")] = None,
    force: _ForceOption = False,
) -> None:
    """Generate an App Router page."""
    settings = _settings(ctx)
    _header(settings)

    with _handle_errors():
        require_project(settings.root)
        name = _ask_name(settings, name, "Page name", _route_name("Page name"))
        variants = NameVariants.from_name(validate_route_name(name, "Page name"))
        title = _ask_text(settings, title, "Page title", variants.pascal)
        description = _ask_text(
            settings, description, "Page description", f"{title} page description"
        )
        route = _ask_text(settings, route, "Route path", variants.kebab)
        plan = build_page(
            PageRequest(name=name, title=title, description=description, route=route)
        )
        _execute(settings, plan, force=force, done="Page generated.")


def api(
    ctx: Context,
    name: Annotated[str | None, Argument(help="API route name", show_default=False)] = None,
    route: Annotated[str | None, Option("--route", "-r", help="Route path under /api.")] = None,
    methods: Annotated[
        list[HttpMethod] | None, Option("--method", "-m", help="HTTP method (repeatable).")
    ] = None,
    force: _ForceOption = False,
) -> None:
    """Generate an API route handler."""
    settings = _settings(ctx)
    _header(settings)

    with _handle_errors():
        require_project(settings.root)
        name = _ask_name(settings, name, "API route name", _route_name("API route name"))
        variants = NameVariants.from_name(validate_route_name(name, "API route name"))
        route = _ask_text(settings, route, "Route path", variants.kebab)
        methods = _ask_many(
            settings, methods, "HTTP methods", list(HttpMethod), DEFAULT_HTTP_METHODS
        )
        plan = build_api_route(ApiRouteRequest(name=name, route=route, methods=methods))
        _execute(settings, plan, force=force, done="API route generated.")


generate_app.command("api")(api)
generate_app.command("route", hidden=True)(api)


@generate_app.command()
def model(
    ctx: Context,
    name: Annotated[str | None, Argument(help="Model name", show_default=False)] = None,
    description: Annotated[
        str | None, Option("--description", help="Model description.")
    ] = None,
    fields: Annotated[
        list[ModelField] | None, Option("--field", help="Standard field (repeatable).")
    ] = None,
    custom_fields: Annotated[
        str | None,
        Option("--custom", help='Custom fields, e.g. "title:string,views:int".'),
    ] = None,
    features: Annotated[
        list[ModelFeature] | None, Option("--feature", help="Feature to generate (repeatable).")
    ] = None,
    force: _ForceOption = False,
) -> None:
    """Generate a Prisma model with types, CRUD routes and more."""
    settings = _settings(ctx)
    _header(settings)

    with _handle_errors():
        require_project(settings.root)
        name = _ask_name(settings, name, "Model name", _identifier("Model name"))
        pascal = NameVariants.from_name(validate_identifier(name, "Model name")).pascal
        description = _ask_text(
            settings, description, "Model description", f"{pascal} data model"
        )
        fields = _ask_many(
            settings, fields, "Standard fields", list(ModelField), DEFAULT_MODEL_FIELDS
        )
        custom_fields = _ask_text(
            settings, custom_fields, "Custom fields (name:type, comma separated)", ""
        )
        features = _ask_many(
            settings, features, "Features", list(ModelFeature), DEFAULT_MODEL_FEATURES
        )
        plan = build_model(
            ModelRequest(
                name=name,
                description=description,
                fields=fields,
                custom_fields=custom_fields,
                features=features,
            )
        )
        _execute(settings, plan, force=force, done="Model generated.")


@generate_app.command()
def table(
    ctx: Context,
    model_name: Annotated[
        str | None, Argument(help="Model the table lists", show_default=False)
    ] = None,
    name: Annotated[str | None, Option("--name", help="Table component name.")] = None,
    features: Annotated[
        list[TableFeature] | None, Option("--feature", help="Table feature (repeatable).")
    ] = None,
    columns: Annotated[
        list[TableColumn] | None, Option("--column", help="Column to show (repeatable).")
    ] = None,
    force: _ForceOption = False,
) -> None:
    """Generate a data table with its data hook."""
    settings = _settings(ctx)
    _header(settings)

    with _handle_errors():
        require_project(settings.root)
        model_name = _ask_name(settings, model_name, "Model name", _identifier("Model name"))
        pascal = NameVariants.from_name(validate_identifier(model_name, "Model name")).pascal
        name = _ask_text(settings, name, "Table component name", f"{pascal}Table")
        features = _ask_many(
            settings, features, "Table features", list(TableFeature), DEFAULT_TABLE_FEATURES
        )
        columns = _ask_many(
            settings, columns, "Columns", list(TableColumn), DEFAULT_TABLE_COLUMNS
        )
        plan = build_table(
            TableRequest(model=model_name, name=name, features=features, columns=columns)
        )
        _execute(settings, plan, force=force, done="Data table generated.")


@generate_app.command()
def form(
    ctx: Context,
    model_name: Annotated[
        str | None, Argument(help="Model the form edits", show_default=False)
    ] = None,
    form_type: Annotated[FormType | None, Option("--type", help="Form type.")] = None,
    fields: Annotated[
        list[FormField] | None, Option("--field", help="Form field (repeatable).")
    ] = None,
    features: Annotated[
        list[FormFeature] | None, Option("--feature", help="Form feature (repeatable).")
    ] = None,
    force: _ForceOption = False,
) -> None:
    """Generate a form with validation."""
    settings = _settings(ctx)
    _header(settings)

    with _handle_errors():
        require_project(settings.root)
        model_name = _ask_name(settings, model_name, "Model name", _identifier("Model name"))
        form_type = _ask_one(settings, form_type, "Form type", list(FormType), FormType.CREATE)
        fields = _ask_many(settings, fields, "Form fields", list(FormField), DEFAULT_FORM_FIELDS)
        features = _ask_many(
            settings, features, "Form features", list(FormFeature), DEFAULT_FORM_FEATURES
        )
        plan = build_form(
            FormRequest(model=model_name, form_type=form_type, fields=fields, features=features)
        )
        _execute(settings, plan, force=force, done="Form generated.")


@generate_app.command()
def dashboard(
    ctx: Context,
    name: Annotated[str | None, Argument(help="Dashboard name", show_default=False)] = None,
    widgets: Annotated[
        list[DashboardWidget] | None, Option("--widget", help="Widget (repeatable).")
    ] = None,
    charts: Annotated[
        list[ChartType] | None, Option("--chart", help="Chart type (repeatable).")
    ] = None,
    features: Annotated[
        list[DashboardFeature] | None, Option("--feature", help="Dashboard feature (repeatable).")
    ] = None,
    force: _ForceOption = False,
) -> None:
    """Generate an admin dashboard with widgets."""
    settings = _settings(ctx)
    _header(settings)

    with _handle_errors():
        require_project(settings.root)
        name = _ask_name(
            settings,
            name,
            "Dashboard name",
            _identifier("Dashboard name"),
            default=DEFAULT_DASHBOARD_NAME,
        )
        widgets = _ask_many(
            settings, widgets, "Widgets", list(DashboardWidget), DEFAULT_DASHBOARD_WIDGETS
        )
        if DashboardWidget.CHARTS in widgets:
            charts = _ask_many(
                settings, charts, "Chart types", list(ChartType), DEFAULT_CHART_TYPES
            )
        features = _ask_many(
            settings, features, "Features", list(DashboardFeature), DEFAULT_DASHBOARD_FEATURES
        )
        plan = build_dashboard(
            DashboardRequest(
                name=name, widgets=widgets, chart_types=charts or [], features=features
            )
        )
        _execute(settings, plan, force=force, done="Dashboard generated.")


@app.command()
def auth(
    ctx: Context,
    provider: Annotated[
        AuthProvider | None, Option("--provider", "-p", help="Authentication provider.")
    ] = None,
    features: Annotated[
        list[AuthFeature] | None, Option("--with", help="Auth feature (repeatable).")
    ] = None,
    database: Annotated[
        bool | None,
        Option("--database/--no-database", help="Add user models to the Prisma schema."),
    ] = None,
    ui: Annotated[
        bool | None, Option("--ui/--no-ui", help="Generate login form and sign-in page.")
    ] = None,
    force: _ForceOption = False,
) -> None:
    """Set up authentication."""
    settings = _settings(ctx)
    _header(settings)

    with _handle_errors():
        require_project(settings.root)
        provider = _ask_one(
            settings,
            provider,
            "Choose authentication provider",
            list(AuthProvider),
            AuthProvider.NEXTAUTH,
        )
        if provider != AuthProvider.NEXTAUTH:
            plan = build_auth(AuthRequest(provider=provider, features=[]))
            for note in plan.notes:
                _console.print(f"[bold yellow]▲[/]  {escape(note)}")
            _console.print()
            return

        features = _ask_many(
            settings, features, "Auth features", list(AuthFeature), DEFAULT_AUTH_FEATURES
        )
        database = _ask_bool(settings, database, "Include database models for users?")
        ui = _ask_bool(settings, ui, "Generate auth UI components (login form, sign-in page)?")
        plan = build_auth(
            AuthRequest(
                provider=provider, features=features, include_database=database, include_ui=ui
            )
        )
        _execute(settings, plan, force=force, done="Authentication system generated.")
