"""Prisma model with optional types, CRUD routes, validation, seeder and tests."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from workease.core import templates
from workease.core.naming import NameVariants, validate_identifier
from workease.generators.options import (
    DEFAULT_MODEL_FEATURES,
    DEFAULT_MODEL_FIELDS,
    ModelFeature,
    ModelField,
)
from workease.generators.plan import GenerationPlan

logger = logging.getLogger(__name__)

SCHEMA_PATH = "prisma/schema.prisma"

_PRISMA_TYPES: dict[str, str] = {
    "string": "String",
    "int": "Int",
    "float": "Float",
    "boolean": "Boolean",
    "datetime": "DateTime",
}

_TS_TYPES: dict[str, str] = {
    "String": "string",
    "Int": "number",
    "Float": "number",
    "Boolean": "boolean",
    "DateTime": "Date",
}

_ZOD_TYPES: dict[str, str] = {
    "String": "z.string()",
    "Int": "z.number().int()",
    "Float": "z.number()",
    "Boolean": "z.boolean()",
    "DateTime": "z.coerce.date()",
}

_PRISMA_FIELDS: dict[ModelField, str] = {
    ModelField.ID: "id          String   @id @default(cuid())",
    ModelField.NAME: "name        String",
    ModelField.EMAIL: "email       String   @unique",
    ModelField.DESCRIPTION: "description String?",
    ModelField.IS_ACTIVE: "isActive    Boolean  @default(true)",
    ModelField.USER_ID: "userId      String?",
    ModelField.CREATED_AT: "createdAt   DateTime @default(now())",
    ModelField.UPDATED_AT: "updatedAt   DateTime @updatedAt",
}

# Writable fields: (typescript type, zod schema, required on create)
_WRITABLE: dict[ModelField, tuple[str, str, bool]] = {
    ModelField.NAME: ("string", 'z.string().min(1, "Name is required")', True),
    ModelField.EMAIL: ("string", 'z.string().email("Invalid email format")', True),
    ModelField.DESCRIPTION: ("string", "z.string()", False),
    ModelField.IS_ACTIVE: ("boolean", "z.boolean()", False),
    ModelField.USER_ID: ("string", "z.string()", False),
}

_SAMPLE_VALUES: dict[ModelField, str] = {
    ModelField.NAME: '"Sample {pascal} {n}"',
    ModelField.EMAIL: '"sample{n}@example.com"',
    ModelField.DESCRIPTION: '"Sample {lower} number {n}"',
    ModelField.IS_ACTIVE: "true",
}


@dataclass(frozen=True)
class CustomField:
    name: str
    prisma_type: str


def parse_custom_fields(text: str) -> list[CustomField]:
    """
    Parse ``"title:string, views:int"`` into custom fields.

    Unknown types fall back to ``String``; entries without a ``name:type`` pair
    or with an invalid field name are skipped with a warning.
    """
    fields: list[CustomField] = []
    for entry in text.split(","):
        entry = entry.strip()
        if not entry:
            continue
        name, _, kind = entry.partition(":")
        name, kind = name.strip(), kind.strip()
        if not name or not kind or not name[0].isalpha() or not name.isalnum():
            logger.warning("Skipping malformed custom field %r (expected name:type)", entry)
            continue
        fields.append(CustomField(name, _PRISMA_TYPES.get(kind.lower(), "String")))
    return fields


@dataclass(kw_only=True)
class ModelRequest:
    name: str
    description: str | None = None
    fields: Sequence[ModelField] = field(default_factory=lambda: list(DEFAULT_MODEL_FIELDS))
    custom_fields: str = ""
    features: Sequence[ModelFeature] = field(
        default_factory=lambda: list(DEFAULT_MODEL_FEATURES)
    )

    def __post_init__(self) -> None:
        self.name = validate_identifier(self.name, "Model name")
        if not self.description:
            self.description = f"{NameVariants.from_name(self.name).pascal} data model"


def _prisma_block(request: ModelRequest, custom: list[CustomField]) -> list[str]:
    lines = [f"  {_PRISMA_FIELDS[f]}" for f in ModelField if f in request.fields]
    lines += [f"  {c.name:<11} {c.prisma_type}" for c in custom]
    if ModelField.USER_ID in request.fields:
        lines.append("  user        User?    @relation(fields: [userId], references: [id])")
    return lines


def _writable(request: ModelRequest) -> list[ModelField]:
    return [f for f in _WRITABLE if f in request.fields]


def _types_file(request: ModelRequest, variants: NameVariants, custom: list[CustomField]) -> str:
    entity = ["  id: string;"]
    create: list[str] = []
    update: list[str] = []
    for f in _writable(request):
        ts_type, _, required = _WRITABLE[f]
        entity.append(f"  {f.value}{'' if required else '?'}: {ts_type};")
        create.append(f"  {f.value}{'' if required else '?'}: {ts_type};")
        update.append(f"  {f.value}?: {ts_type};")
    for c in custom:
        ts_type = _TS_TYPES[c.prisma_type]
        entity.append(f"  {c.name}: {ts_type};")
        create.append(f"  {c.name}: {ts_type};")
        update.append(f"  {c.name}?: {ts_type};")
    entity += ["  createdAt: Date;", "  updatedAt: Date;"]

    return templates.render(
        "model/types.ts",
        {
            **variants.as_variables(),
            "entityFields": "\n".join(entity),
            "createFields": "\n".join(create),
            "updateFields": "\n".join(update),
        },
    )


def _validation_file(
    request: ModelRequest, variants: NameVariants, custom: list[CustomField]
) -> str:
    create: list[str] = []
    update: list[str] = []
    for f in _writable(request):
        _, schema, required = _WRITABLE[f]
        create.append(f"  {f.value}: {schema}{'' if required else '.optional()'},")
        update.append(f"  {f.value}: {schema}.optional(),")
    for c in custom:
        schema = _ZOD_TYPES[c.prisma_type]
        create.append(f"  {c.name}: {schema},")
        update.append(f"  {c.name}: {schema}.optional(),")

    return templates.render(
        "model/validation.ts",
        {
            **variants.as_variables(),
            "createSchemaFields": "\n".join(create),
            "updateSchemaFields": "\n".join(update),
        },
    )


def _crud_files(request: ModelRequest, variants: NameVariants) -> tuple[str, str]:
    validated = ModelFeature.VALIDATION in request.features
    pascal = variants.pascal
    variables = {
        **variants.as_variables(),
        "validationImport": (
            f"import {{ create{pascal}Schema, update{pascal}Schema }} "
            f"from '@/lib/validations/{variants.kebab}';\n"
            if validated
            else ""
        ),
        "createParse": f"create{pascal}Schema.parse(body)" if validated else "body",
        "updateParse": f"update{pascal}Schema.parse(body)" if validated else "body",
        "orderBy": (
            ", orderBy: { createdAt: 'desc' }" if ModelField.CREATED_AT in request.fields else ""
        ),
    }
    return (
        templates.render("model/crud-route.ts", variables),
        templates.render("model/crud-item-route.ts", variables),
    )


def _seeder_file(request: ModelRequest, variants: NameVariants) -> str:
    samples = []
    for n in (1, 2):
        values = [
            "      "
            + f"{f.value}: "
            + _SAMPLE_VALUES[f].format(pascal=variants.pascal, lower=variants.source.lower(), n=n)
            + ","
            for f in ModelField
            if f in _SAMPLE_VALUES and f in request.fields
        ]
        samples.append("    {\n" + "\n".join(values) + ("\n" if values else "") + "    },")
    return templates.render(
        "model/seeder.ts", {**variants.as_variables(), "sampleData": "\n".join(samples)}
    )


def build_model(request: ModelRequest) -> GenerationPlan:
    variants = NameVariants.from_name(request.name)
    custom = parse_custom_fields(request.custom_fields)
    plan = GenerationPlan(variants=variants)

    model_block = templates.render(
        "model/model.prisma",
        {
            **variants.as_variables(),
            "description": request.description or "",
            "fields": "\n".join(_prisma_block(request, custom)),
        },
    )
    plan.append(
        SCHEMA_PATH,
        model_block,
        preamble=templates.load("model/schema-base.prisma"),
        unless_contains=f"model {variants.pascal} {{",
    )

    kebab = variants.kebab
    if ModelFeature.TYPES in request.features:
        plan.add(f"src/types/{kebab}.ts", _types_file(request, variants, custom))
    if ModelFeature.CRUD in request.features:
        collection, item = _crud_files(request, variants)
        plan.add(f"src/app/api/{kebab}/route.ts", collection)
        plan.add(f"src/app/api/{kebab}/[id]/route.ts", item)
    if ModelFeature.VALIDATION in request.features:
        plan.add(f"src/lib/validations/{kebab}.ts", _validation_file(request, variants, custom))
    if ModelFeature.SEEDER in request.features:
        plan.add(f"prisma/seeders/{kebab}.ts", _seeder_file(request, variants))
    if ModelFeature.TESTS in request.features:
        plan.add(
            f"src/__tests__/api/{kebab}.test.ts",
            templates.render("model/api.test.ts", variants.as_variables()),
        )

    plan.notes += [
        "npx prisma db push    # apply schema changes",
        "npx prisma generate   # update the Prisma client",
    ]
    if ModelFeature.SEEDER in request.features:
        plan.notes.append(f"Call seed{variants.pascal}() from your seed script")
    if ModelFeature.CRUD in request.features:
        plan.notes += [
            f"GET/POST        /api/{kebab}",
            f"GET/PUT/DELETE  /api/{kebab}/[id]",
        ]
    return plan
