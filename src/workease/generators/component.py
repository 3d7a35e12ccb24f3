"""React component."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath

from workease.core import templates
from workease.core.errors import ValidationError
from workease.core.naming import NameVariants, validate_identifier
from workease.generators.options import COMPONENT_LOCATIONS
from workease.generators.plan import GenerationPlan


@dataclass(kw_only=True)
class ComponentRequest:
    name: str
    location: str = COMPONENT_LOCATIONS[0]

    def __post_init__(self) -> None:
        self.name = validate_identifier(self.name, "Component name")

        location = PurePosixPath(self.location.strip().replace("\\", "/"))
        if not location.parts or location.is_absolute() or ".." in location.parts:
            raise ValidationError(
                f"Component location {self.location!r} must be a relative path inside the project."
            )
        self.location = str(location)


def build_component(request: ComponentRequest) -> GenerationPlan:
    variants = NameVariants.from_name(request.name)
    plan = GenerationPlan(variants=variants)
    plan.add(
        f"{request.location}/{variants.pascal}.tsx",
        templates.render("component/component.tsx", variants.as_variables()),
    )
    alias = request.location.removeprefix("src/")
    plan.notes.append(f"import {variants.pascal} from '@/{alias}/{variants.pascal}'")
    return plan
