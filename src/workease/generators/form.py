"""React Hook Form component, its value types and optional zod schema."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from workease.core import templates
from workease.core.errors import ValidationError
from workease.core.naming import NameVariants, validate_identifier
from workease.generators.options import (
    DEFAULT_FORM_FEATURES,
    DEFAULT_FORM_FIELDS,
    FormFeature,
    FormField,
    FormType,
)
from workease.generators.plan import GenerationPlan

FORM_DEPENDENCIES = {"react-hook-form": "^7.51.0"}
VALIDATION_DEPENDENCIES = {"@hookform/resolvers": "^3.3.4", "zod": "^3.22.4"}


@dataclass(frozen=True)
class _FieldSpec:
    name: str
    label: str
    ts_type: str
    default: str
    schema: str
    control: str


_INPUT_CLASS = "flex w-full rounded-md border px-3 py-2 text-sm"

_FIELDS: dict[FormField, _FieldSpec] = {
    FormField.NAME: _FieldSpec(
        "name",
        "Name",
        "string",
        "''",
        "z.string().min(1, 'Name is required')",
        "<Input id=\"name\" {...form.register('name')} />",
    ),
    FormField.EMAIL: _FieldSpec(
        "email",
        "Email",
        "string",
        "''",
        "z.string().email('Invalid email format')",
        "<Input id=\"email\" type=\"email\" {...form.register('email')} />",
    ),
    FormField.DESCRIPTION: _FieldSpec(
        "description",
        "Description",
        "string",
        "''",
        "z.string().optional()",
        "<Input id=\"description\" {...form.register('description')} />",
    ),
    FormField.IS_ACTIVE: _FieldSpec(
        "isActive",
        "Active",
        "boolean",
        "true",
        "z.boolean()",
        "<input id=\"isActive\" type=\"checkbox\" {...form.register('isActive')} />",
    ),
    FormField.CATEGORY: _FieldSpec(
        "category",
        "Category",
        "string",
        "''",
        "z.string().min(1, 'Category is required')",
        f"<select id=\"category\" className=\"{_INPUT_CLASS}\" {{...form.register('category')}}>\n"
        "          <option value=\"\">Select a category</option>\n"
        "          <option value=\"general\">General</option>\n"
        "          <option value=\"featured\">Featured</option>\n"
        "        </select>",
    ),
    FormField.PRICE: _FieldSpec(
        "price",
        "Price",
        "number",
        "0",
        "z.number().nonnegative('Price cannot be negative')",
        "<Input id=\"price\" type=\"number\" step=\"0.01\" "
        "{...form.register('price', { valueAsNumber: true })} />",
    ),
    FormField.TAGS: _FieldSpec(
        "tags",
        "Tags",
        "string",
        "''",
        "z.string().optional()",
        "<Input id=\"tags\" placeholder=\"Comma separated\" {...form.register('tags')} />",
    ),
}

_RICHTEXT_CONTROL = (
    f"<textarea id=\"description\" rows={{6}} className=\"{_INPUT_CLASS}\" "
    "{...form.register('description')} />"
)

_UPLOAD_FIELD = _FieldSpec(
    "attachment",
    "Attachment",
    "FileList | null",
    "null",
    "z.any().optional()",
    "<Input id=\"attachment\" type=\"file\" {...form.register('attachment')} />",
)

_DATE_FIELD = _FieldSpec(
    "date",
    "Date",
    "string",
    "''",
    "z.string().optional()",
    "<Input id=\"date\" type=\"date\" {...form.register('date')} />",
)

_PROPS: dict[FormType, tuple[str, list[str]]] = {
    FormType.CREATE: (
        "onSubmit, onCancel",
        [
            "  onSubmit: (values: {{formPascal}}Values) => Promise<void> | void;",
            "  onCancel?: () => void;",
        ],
    ),
    FormType.EDIT: (
        "initialValues, onSubmit, onCancel",
        [
            "  initialValues: Partial<{{formPascal}}Values>;",
            "  onSubmit: (values: {{formPascal}}Values) => Promise<void> | void;",
            "  onCancel?: () => void;",
        ],
    ),
    FormType.COMBINED: (
        "initialValues, onSubmit, onCancel",
        [
            "  initialValues?: Partial<{{formPascal}}Values>;",
            "  onSubmit: (values: {{formPascal}}Values) => Promise<void> | void;",
            "  onCancel?: () => void;",
        ],
    ),
}

_SUBMIT_LABELS: dict[FormType, str] = {
    FormType.CREATE: "'Create {{modelPascal}}'",
    FormType.EDIT: "'Update {{modelPascal}}'",
    FormType.COMBINED: "initialValues ? 'Update {{modelPascal}}' : 'Create {{modelPascal}}'",
}

_AUTOSAVE_HOOK = """
  const draftKey = '{{modelKebab}}-form-draft';
  const values = form.watch();

  useEffect(() => {
    const draft = window.localStorage.getItem(draftKey);
    if (draft) form.reset({ ...DEFAULT_VALUES, ...JSON.parse(draft) });
  }, [form]);

  useEffect(() => {
    const timer = setTimeout(() => {
      window.localStorage.setItem(draftKey, JSON.stringify(values));
    }, 1000);
    return () => clearTimeout(timer);
  }, [values]);
"""

_AUTOSAVE_CLEAR = "    window.localStorage.removeItem(draftKey);"

_WIZARD_HOOK = """
  const [step, setStep] = useState(0);
  const lastStep = STEP_COUNT - 1;
"""

_WIZARD_NAV = """\
      <div className="flex justify-between">
        <Button type="button" variant="outline" disabled={step === 0} onClick={() => setStep(step - 1)}>
          Back
        </Button>
        {step < lastStep && (
          <Button type="button" onClick={() => setStep(step + 1)}>
            Next
          </Button>
        )}
      </div>"""


@dataclass(kw_only=True)
class FormRequest:
    model: str
    form_type: FormType = FormType.CREATE
    fields: Sequence[FormField] = field(default_factory=lambda: list(DEFAULT_FORM_FIELDS))
    features: Sequence[FormFeature] = field(
        default_factory=lambda: list(DEFAULT_FORM_FEATURES)
    )

    def __post_init__(self) -> None:
        self.model = validate_identifier(self.model, "Model name")
        if not self.fields:
            raise ValidationError("Select at least one form field.")
        self.fields = [f for f in FormField if f in self.fields]


def _field_specs(request: FormRequest) -> list[_FieldSpec]:
    specs = [_FIELDS[f] for f in request.fields]
    if FormFeature.RICHTEXT in request.features:
        specs = [
            _FieldSpec(s.name, s.label, s.ts_type, s.default, s.schema, _RICHTEXT_CONTROL)
            if s.name == "description"
            else s
            for s in specs
        ]
    if FormFeature.DATEPICKER in request.features:
        specs.append(_DATE_FIELD)
    if FormFeature.UPLOAD in request.features:
        specs.append(_UPLOAD_FIELD)
    return specs


def _field_blocks(specs: list[_FieldSpec], wizard: bool) -> str:
    blocks = []
    for index, spec in enumerate(specs):
        block = templates.render(
            "form/field.tsx",
            {"fieldName": spec.name, "fieldLabel": spec.label, "control": spec.control},
        ).rstrip("\n")
        if wizard:
            block = f"      {{step === {index} && (\n{block}\n      )}}"
        blocks.append(block)
    return "\n".join(blocks)


def _form_component(
    request: FormRequest, specs: list[_FieldSpec], variables: dict[str, str]
) -> str:
    features = set(request.features)
    validated = FormFeature.VALIDATION in features
    wizard = FormFeature.WIZARD in features
    autosave = FormFeature.AUTOSAVE in features

    react_hooks = [name for name, on in (("useEffect", autosave), ("useState", wizard)) if on]
    extra_imports = []
    if react_hooks:
        extra_imports.append(f"import {{ {', '.join(react_hooks)} }} from 'react';")
    if wizard:
        extra_imports.append(f"\nconst STEP_COUNT = {len(specs)};")

    options = []
    if validated:
        options.append("    resolver: zodResolver({{modelCamel}}FormSchema),")
    if request.form_type == FormType.CREATE:
        options.append("    defaultValues: DEFAULT_VALUES,")
    else:
        options.append("    defaultValues: { ...DEFAULT_VALUES, ...initialValues },")

    prop_names, _ = _PROPS[request.form_type]
    fields = _field_blocks(specs, wizard)
    if wizard:
        fields += "\n" + _WIZARD_NAV

    fragments = {
        "resolverImport": (
            "import { zodResolver } from '@hookform/resolvers/zod';\n"
            "import { {{modelCamel}}FormSchema } from '@/lib/validations/{{modelKebab}}-form';\n"
            if validated
            else ""
        ),
        "extraImports": "".join(f"{line}\n" for line in extra_imports),
        "defaultValues": "\n".join(f"  {s.name}: {s.default}," for s in specs),
        "propNames": prop_names,
        "formOptions": "\n".join(options),
        "extraHooks": (_AUTOSAVE_HOOK if autosave else "") + (_WIZARD_HOOK if wizard else ""),
        "afterSubmit": _AUTOSAVE_CLEAR if autosave else "",
        "fields": fields,
        "submitLabel": _SUBMIT_LABELS[request.form_type],
    }
    fragments = {k: templates.substitute(v, variables) for k, v in fragments.items()}
    return templates.render("form/form.tsx", {**variables, **fragments})


def build_form(request: FormRequest) -> GenerationPlan:
    model = NameVariants.from_name(request.model)
    form = NameVariants.from_name(f"{model.pascal}Form")
    variables = {**model.as_variables("model"), "formPascal": form.pascal}
    specs = _field_specs(request)
    _, prop_fields = _PROPS[request.form_type]

    plan = GenerationPlan(variants=form)
    plan.add(
        f"src/components/forms/{model.kebab}-form.tsx",
        _form_component(request, specs, variables),
    )
    plan.add(
        f"src/types/{model.kebab}-form.ts",
        templates.render(
            "form/types.ts",
            {
                **variables,
                "valueFields": "\n".join(f"  {s.name}: {s.ts_type};" for s in specs),
                "propFields": templates.substitute("\n".join(prop_fields), variables),
            },
        ),
    )

    plan.dependencies.update(FORM_DEPENDENCIES)
    if FormFeature.VALIDATION in request.features:
        plan.add(
            f"src/lib/validations/{model.kebab}-form.ts",
            templates.render(
                "form/validation.ts",
                {
                    **variables,
                    "schemaFields": "\n".join(f"  {s.name}: {s.schema}," for s in specs),
                },
            ),
        )
        plan.dependencies.update(VALIDATION_DEPENDENCIES)

    plan.notes += [
        f"import {{ {form.pascal} }} from '@/components/forms/{model.kebab}-form';",
        f"<{form.pascal} onSubmit={{save}} />",
    ]
    return plan
