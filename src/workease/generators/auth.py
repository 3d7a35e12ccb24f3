"""Authentication setup. Only NextAuth.js is generated; other providers are announced."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from workease.core import templates
from workease.core.errors import ValidationError
from workease.generators.model import SCHEMA_PATH
from workease.generators.options import DEFAULT_AUTH_FEATURES, AuthFeature, AuthProvider
from workease.generators.plan import GenerationPlan

NEXTAUTH_DEPENDENCIES = {
    "next-auth": "^4.24.0",
    "@next-auth/prisma-adapter": "^1.0.7",
    "bcryptjs": "^2.4.3",
}
NEXTAUTH_DEV_DEPENDENCIES = {"@types/bcryptjs": "^2.4.6"}

_SIGN_IN_METHODS = (AuthFeature.CREDENTIALS, AuthFeature.GOOGLE, AuthFeature.GITHUB)

_OAUTH: dict[AuthFeature, tuple[str, str, str]] = {
    # feature: (provider import name, module, env prefix)
    AuthFeature.GOOGLE: ("GoogleProvider", "google", "GOOGLE"),
    AuthFeature.GITHUB: ("GitHubProvider", "github", "GITHUB"),
}

_OAUTH_LABELS: dict[AuthFeature, str] = {
    AuthFeature.GOOGLE: "Google",
    AuthFeature.GITHUB: "GitHub",
}


@dataclass(kw_only=True)
class AuthRequest:
    provider: AuthProvider = AuthProvider.NEXTAUTH
    features: Sequence[AuthFeature] = field(default_factory=lambda: list(DEFAULT_AUTH_FEATURES))
    include_database: bool = True
    include_ui: bool = True

    def __post_init__(self) -> None:
        self.features = [f for f in AuthFeature if f in self.features]
        if self.provider == AuthProvider.NEXTAUTH and not any(
            f in self.features for f in _SIGN_IN_METHODS
        ):
            raise ValidationError(
                "Select at least one sign-in method (credentials, google or github)."
            )


def _auth_options(request: AuthRequest) -> str:
    features = set(request.features)
    database = request.include_database
    credentials = AuthFeature.CREDENTIALS in features
    rbac = AuthFeature.RBAC in features

    imports: list[str] = []
    providers: list[str] = []
    if credentials:
        imports.append("import CredentialsProvider from 'next-auth/providers/credentials';")
        providers.append(
            templates.load(
                "auth/credentials-database.ts" if database else "auth/credentials-demo.ts"
            ).rstrip("\n")
        )
    for feature, (component, module, env) in _OAUTH.items():
        if feature in features:
            imports.append(f"import {component} from 'next-auth/providers/{module}';")
            providers.append(
                f"    {component}({{\n"
                f"      clientId: process.env.{env}_CLIENT_ID!,\n"
                f"      clientSecret: process.env.{env}_CLIENT_SECRET!,\n"
                "    }),"
            )

    database_imports: list[str] = []
    if database:
        database_imports += [
            "import { PrismaAdapter } from '@next-auth/prisma-adapter';",
            "import { PrismaClient } from '@prisma/client';",
        ]
        if credentials:
            database_imports.append("import bcrypt from 'bcryptjs';")

    return templates.render(
        "auth/nextauth-options.ts",
        {
            "providerImports": "".join(f"{line}\n" for line in imports),
            "databaseImports": "".join(f"{line}\n" for line in database_imports),
            "databaseSetup": "const prisma = new PrismaClient();\n" if database else "",
            "adapter": "  adapter: PrismaAdapter(prisma),\n" if database else "",
            "providers": "\n".join(providers),
            "jwtRole": (
                "        token.role = (user as { role?: string }).role ?? 'USER';\n"
                if rbac
                else ""
            ),
            "sessionRole": (
                "        (session.user as { role?: string }).role = token.role as string;\n"
                if rbac
                else ""
            ),
        },
    )


def _env_example(request: AuthRequest) -> str:
    lines: list[str] = []
    if request.include_database:
        lines.append('DATABASE_URL="file:./dev.db"')
    elif AuthFeature.CREDENTIALS in request.features:
        lines += ["DEMO_USER_EMAIL=demo@example.com", "DEMO_USER_PASSWORD=change-me"]
    for feature, (_, _, env) in _OAUTH.items():
        if feature in request.features:
            lines += [f"{env}_CLIENT_ID=", f"{env}_CLIENT_SECRET="]
    return templates.render("auth/env-example", {"providerEnv": "\n".join(lines)})


def _user_models(request: AuthRequest) -> str:
    features = set(request.features)
    extra_fields: list[str] = []
    if AuthFeature.RBAC in features:
        extra_fields.append('  role          String    @default("USER")')
    if AuthFeature.RESET in features:
        extra_fields += [
            "  resetToken    String?",
            "  resetExpires  DateTime?",
        ]
    if AuthFeature.PROFILES in features:
        extra_fields.append("  profile       Profile?")

    return templates.render(
        "auth/user-models.prisma",
        {
            "userExtraFields": "".join(f"{line}\n" for line in extra_fields),
            "extraModels": (
                templates.load("auth/profile-model.prisma")
                if AuthFeature.PROFILES in features
                else ""
            ),
        },
    )


def _login_form(request: AuthRequest) -> str:
    buttons = [
        "        <button\n"
        '          type="button"\n'
        f"          onClick={{() => signIn('{_OAUTH[feature][1]}')}}\n"
        '          className="w-full rounded-md border px-4 py-2"\n'
        "        >\n"
        f"          Continue with {_OAUTH_LABELS[feature]}\n"
        "        </button>"
        for feature in _OAUTH
        if feature in request.features
    ]
    return templates.render("auth/login-form.tsx", {"oauthButtons": "\n".join(buttons)})


def build_auth(request: AuthRequest) -> GenerationPlan:
    plan = GenerationPlan()
    if request.provider != AuthProvider.NEXTAUTH:
        name = request.provider.label.split(" - ")[0]
        plan.notes.append(f"{name} integration coming soon!")
        return plan

    features = set(request.features)
    plan.add("src/lib/auth.ts", _auth_options(request))
    plan.add(
        "src/app/api/auth/[...nextauth]/route.ts", templates.load("auth/nextauth-route.ts")
    )
    plan.add(".env.example", _env_example(request))

    if request.include_database:
        plan.append(
            SCHEMA_PATH,
            _user_models(request),
            preamble=templates.load("auth/schema-header.prisma"),
            unless_contains="model User",
        )
        if AuthFeature.REGISTRATION in features:
            plan.add(
                "src/app/api/auth/register/route.ts", templates.load("auth/register-route.ts")
            )

    if request.include_ui:
        plan.add("src/components/auth/LoginForm.tsx", _login_form(request))
        plan.add("src/app/auth/signin/page.tsx", templates.load("auth/signin-page.tsx"))

    if AuthFeature.RBAC in features:
        plan.add("src/middleware.ts", templates.load("auth/middleware.ts"))

    plan.dependencies.update(NEXTAUTH_DEPENDENCIES)
    plan.dev_dependencies.update(NEXTAUTH_DEV_DEPENDENCIES)

    plan.notes.append("npm install")
    if request.include_database:
        plan.notes += ["npx prisma db push", "npx prisma generate"]
    plan.notes += [
        "Set up environment variables (see .env.example)",
        "Restart your development server",
    ]
    return plan
