"""API route handler composed from one fragment per HTTP method."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from workease.core import templates
from workease.core.errors import ValidationError
from workease.core.naming import NameVariants, normalize_route, validate_route_name
from workease.generators.options import DEFAULT_HTTP_METHODS, HttpMethod
from workease.generators.plan import GenerationPlan


@dataclass(kw_only=True)
class ApiRouteRequest:
    name: str
    route: str | None = None
    methods: Sequence[HttpMethod] = field(default_factory=lambda: list(DEFAULT_HTTP_METHODS))

    def __post_init__(self) -> None:
        self.name = validate_route_name(self.name, "API route name")
        self.route = normalize_route(self.route or NameVariants.from_name(self.name).kebab)
        if not self.methods:
            raise ValidationError("Select at least one HTTP method.")
        # Canonical order, duplicates dropped.
        self.methods = [m for m in HttpMethod if m in set(self.methods)]


def build_api_route(request: ApiRouteRequest) -> GenerationPlan:
    variants = NameVariants.from_name(request.name)
    route = request.route or variants.kebab
    variables = {**variants.as_variables(), "route": route}

    sections = [templates.render("api/header.ts", variables)]
    sections += [templates.render(f"api/{m.value.lower()}.ts", variables) for m in request.methods]

    plan = GenerationPlan(variants=variants)
    plan.add(f"src/app/api/{route}/route.ts", "\n".join(sections))
    plan.notes += [f"{m.value} http://localhost:3000/api/{route}" for m in request.methods]
    return plan
