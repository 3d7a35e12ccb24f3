"""New project skeleton."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from workease.core import templates
from workease.core.manifest import MANIFEST_FILENAME, Manifest
from workease.core.naming import NameVariants, validate_project_name
from workease.generators.options import ProjectTemplate
from workease.generators.plan import GenerationPlan

BASE_SCRIPTS: dict[str, str] = {
    "dev": "next dev",
    "build": "next build",
    "start": "next start",
    "lint": "next lint",
}

DATABASE_SCRIPTS: dict[str, str] = {
    "db:generate": "prisma generate",
    "db:setup": "prisma generate && prisma db push",
    "db:check": "prisma validate && echo 'Schema is valid'",
}

BASE_DEPS: dict[str, str] = {
    "next": "^14.0.0",
    "react": "^18.2.0",
    "react-dom": "^18.2.0",
}

BASE_DEV_DEPS: dict[str, str] = {
    "@types/node": "^20.0.0",
    "@types/react": "^18.2.0",
    "@types/react-dom": "^18.2.0",
    "eslint": "^8.45.0",
    "eslint-config-next": "^14.0.0",
    "typescript": "^5.1.0",
}

_TAILWIND_DEPS: dict[str, str] = {
    "@tailwindcss/forms": "^0.5.0",
    "tailwindcss": "^3.3.0",
    "tailwindcss-animate": "^1.0.7",
    "autoprefixer": "^10.4.0",
    "postcss": "^8.4.0",
}

_DATABASE_DEPS: dict[str, str] = {
    "@prisma/client": "^5.0.0",
    "bcryptjs": "^2.4.3",
}

_DATABASE_DEV_DEPS: dict[str, str] = {
    "prisma": "^5.0.0",
    "@types/bcryptjs": "^2.4.2",
}

_UI_DEPS: dict[str, str] = {
    "clsx": "^2.0.0",
    "tailwind-merge": "^2.0.0",
    "class-variance-authority": "^0.7.0",
    "lucide-react": "^0.400.0",
    "@radix-ui/react-slot": "^1.0.2",
    "@hookform/resolvers": "^3.3.0",
    "react-hook-form": "^7.47.0",
    "zod": "^3.22.0",
    "recharts": "^2.8.0",
}

_DASHBOARD_POSTINSTALL = (
    "echo 'Dashboard project created. Run: npm run db:setup to initialize the database'"
)

_UI_COMPONENTS = ("button", "card", "input", "badge")

_TSCONFIG: dict[str, object] = {
    "compilerOptions": {
        "lib": ["dom", "dom.iterable", "esnext"],
        "allowJs": True,
        "skipLibCheck": True,
        "strict": True,
        "noEmit": True,
        "esModuleInterop": True,
        "module": "esnext",
        "moduleResolution": "bundler",
        "resolveJsonModule": True,
        "isolatedModules": True,
        "jsx": "preserve",
        "incremental": True,
        "plugins": [{"name": "next"}],
        "baseUrl": ".",
        "paths": {"@/*": ["./src/*"]},
    },
    "include": ["next-env.d.ts", "**/*.ts", "**/*.tsx", ".next/types/**/*.ts"],
    "exclude": ["node_modules"],
}


@dataclass(kw_only=True)
class ProjectRequest:
    name: str
    template: ProjectTemplate

    def __post_init__(self) -> None:
        self.name = validate_project_name(self.name)


def build_manifest(name: str, template: ProjectTemplate) -> Manifest:
    """The ``package.json`` of a fresh project, before any safety check."""
    scripts = dict(BASE_SCRIPTS)
    dependencies = dict(BASE_DEPS)
    dev_dependencies = dict(BASE_DEV_DEPS)

    if template.uses_tailwind:
        dependencies |= _TAILWIND_DEPS
    if template.uses_database:
        scripts |= DATABASE_SCRIPTS
        dependencies |= _DATABASE_DEPS
        dev_dependencies |= _DATABASE_DEV_DEPS
    if template.has_ui_components:
        dependencies |= _UI_DEPS
    if template == ProjectTemplate.DASHBOARD:
        scripts["postinstall"] = _DASHBOARD_POSTINSTALL

    return Manifest(
        {
            "name": name,
            "version": "0.1.0",
            "private": True,
            "scripts": scripts,
            "dependencies": dependencies,
            "devDependencies": dev_dependencies,
        }
    )


def _readme(name: str, template: ProjectTemplate, scripts: dict[str, str]) -> str:
    built_with = [
        "- [Next.js](https://nextjs.org/) - React framework",
        "- [TypeScript](https://www.typescriptlang.org/) - Type safety",
    ]
    if template.uses_tailwind:
        built_with.append("- [Tailwind CSS](https://tailwindcss.com/) - Styling")
    if template.uses_database:
        built_with.append("- [Prisma](https://prisma.io/) - Database ORM")

    return templates.render(
        "project/README.md",
        {
            "projectName": name,
            "templateLabel": template.label.lower(),
            "databaseSetup": (
                templates.load("project/database-setup.md") if template.uses_database else "\n"
            ),
            "structureExtra": (
                "- `prisma/` - Database schema and migrations\n" if template.uses_database else ""
            ),
            "scriptList": "\n".join(f"- `npm run {s}` - `{c}`" for s, c in scripts.items()),
            "builtWith": "\n".join(built_with),
        },
    )


def build_project(request: ProjectRequest) -> GenerationPlan:
    """Plan every file of a new project. Paths are relative to the project directory."""
    name, template = request.name, request.template
    manifest = build_manifest(name, template)
    variables = {"projectName": name}

    plan = GenerationPlan(
        manifest=manifest,
        variants=NameVariants.from_name(name),
        directories=[Path("src/app"), Path("src/components"), Path("src/lib")],
    )
    if template.uses_database:
        plan.directories.append(Path("prisma"))

    plan.add(MANIFEST_FILENAME, manifest.to_json())
    plan.add("tsconfig.json", json.dumps(_TSCONFIG, indent=2) + "\n")
    plan.add("next.config.js", templates.load("project/next.config.js"))

    if template.uses_tailwind:
        plan.add("tailwind.config.js", templates.load("project/tailwind.config.js"))
        plan.add("postcss.config.js", templates.load("project/postcss.config.js"))
        plan.add("src/app/globals.css", templates.load("project/globals.css"))

    plan.add(
        "src/app/layout.tsx",
        templates.render(
            "project/layout.tsx",
            {
                **variables,
                "stylesImport": "import './globals.css'\n" if template.uses_tailwind else "",
                "bodyClass": ' className="min-h-screen"' if template.uses_tailwind else "",
            },
        ),
    )

    if template.has_ui_components:
        home = "project/home-database.tsx"
    elif template == ProjectTemplate.FRONTEND:
        home = "project/home-frontend.tsx"
    else:
        home = "project/home-api.tsx"
    plan.add("src/app/page.tsx", templates.render(home, variables))

    if template.has_ui_components:
        plan.add("src/lib/utils.ts", templates.load("ui/utils.ts"))
        for component in _UI_COMPONENTS:
            plan.add(f"src/components/ui/{component}.tsx", templates.load(f"ui/{component}.tsx"))

    if template.uses_database:
        plan.add(
            "src/app/api/health/route.ts",
            templates.render("project/health-route.ts", variables),
        )
        dashboard = template == ProjectTemplate.DASHBOARD
        plan.add(
            "prisma/schema.prisma",
            templates.render(
                "project/schema.prisma",
                {
                    "userRelations": "  posts     Post[]\n" if dashboard else "",
                    "extraModels": templates.load("project/post-model.prisma") if dashboard else "",
                },
            ),
        )
        plan.add(".env", templates.load("project/env"))
        plan.notes += [
            "npm run db:setup    # generate the Prisma client and create tables",
            "Always run database setup after project creation, never from an npm hook.",
        ]

    plan.add("README.md", _readme(name, template, manifest.scripts))
    plan.add(".gitignore", templates.load("project/gitignore"))
    plan.notes.append("npm run dev")
    return plan
