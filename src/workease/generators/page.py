"""App Router page."""

from __future__ import annotations

from dataclasses import dataclass

from workease.core import templates
from workease.core.naming import NameVariants, normalize_route, validate_route_name
from workease.generators.plan import GenerationPlan


@dataclass(kw_only=True)
class PageRequest:
    """
    Attributes:
        name: Page name; its PascalCase form names the page component.
        title: Metadata title. Defaults to the PascalCase name.
        description: Metadata description. Defaults to ``"<title> page description"``.
        route: Route under ``src/app``. Defaults to the kebab-case name.
    """

    name: str
    title: str | None = None
    description: str | None = None
    route: str | None = None

    def __post_init__(self) -> None:
        self.name = validate_route_name(self.name, "Page name")
        variants = NameVariants.from_name(self.name)
        if not self.title:
            self.title = variants.pascal
        if not self.description:
            self.description = f"{self.title} page description"
        self.route = normalize_route(self.route or variants.kebab)


def build_page(request: PageRequest) -> GenerationPlan:
    variants = NameVariants.from_name(request.name)
    plan = GenerationPlan(variants=variants)

    content = templates.render(
        "page/page.tsx",
        {
            **variants.as_variables(),
            "pageTitle": request.title or variants.pascal,
            "pageDescription": request.description or "",
        },
    )
    route = request.route or variants.kebab
    plan.add(f"src/app/{route}/page.tsx", content)
    plan.notes.append(f"Visit: http://localhost:3000/{route}")
    return plan
