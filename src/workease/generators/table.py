"""Data table component with its data hook, filters and pagination."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from workease.core import templates
from workease.core.naming import NameVariants, validate_identifier
from workease.generators.options import (
    DEFAULT_TABLE_COLUMNS,
    DEFAULT_TABLE_FEATURES,
    TableColumn,
    TableFeature,
)
from workease.generators.plan import GenerationPlan

_ROW_TYPES: dict[TableColumn, str] = {
    TableColumn.NAME: "string",
    TableColumn.EMAIL: "string",
    TableColumn.DESCRIPTION: "string",
    TableColumn.IS_ACTIVE: "boolean",
    TableColumn.CREATED_AT: "string",
    TableColumn.UPDATED_AT: "string",
}

_CELL = "                <td className=\"p-2\">{value}</td>"
_HEADER = "            <th className=\"p-2\">{label}</th>"
_SORTABLE_HEADER = (
    "            <th className=\"p-2 cursor-pointer select-none\" "
    "onClick={{() => table.toggleSort('{column}')}}>{label}</th>"
)

_SEARCH_INPUT = """\
        <Input
          placeholder="Search {{modelLower}}..."
          value={table.query}
          onChange={(e) => table.setQuery(e.target.value)}
          className="max-w-sm"
        />"""

_FILTERS = (
    "        <{{tablePascal}}Filters filters={table.filters} onChange={table.setFilters} />"
)

_EXPORT_BUTTON = """\
        <Button variant="outline" onClick={() => exportCsv(table.rows)}>
          Export CSV
        </Button>"""

_BULK_BUTTON = """\
        {selected.length > 0 && (
          <Button variant="destructive" onClick={() => table.removeMany(selected).then(() => setSelected([]))}>
            Delete selected ({selected.length})
          </Button>
        )}"""

_EXPORT_HELPER = """
function exportCsv(rows: {{modelPascal}}Row[]) {
  if (rows.length === 0) return;
  const headers = Object.keys(rows[0]) as (keyof {{modelPascal}}Row)[];
  const lines = rows.map((row) => headers.map((h) => JSON.stringify(row[h] ?? '')).join(','));
  const blob = new Blob([[headers.join(','), ...lines].join('\\n')], { type: 'text/csv' });
  const link = document.createElement('a');
  link.href = URL.createObjectURL(blob);
  link.download = '{{tableKebab}}.csv';
  link.click();
}
"""

_ACTIONS_CELL = """\
                <td className="p-2 space-x-2 text-right">
                  <a href={`/{{modelKebab}}/${row.id}/edit`} className="underline">
                    Edit
                  </a>
                  <Button variant="ghost" size="sm" onClick={() => table.remove(row.id)}>
                    Delete
                  </Button>
                </td>"""

_PAGINATION = """
      <{{tablePascal}}Pagination
        page={table.page}
        pageSize={table.pageSize}
        total={table.total}
        onPageChange={table.setPage}
      />"""

_REALTIME_EFFECT = """
  useEffect(() => {
    const timer = setInterval(refresh, 10_000);
    return () => clearInterval(timer);
  }, [refresh]);
"""


@dataclass(kw_only=True)
class TableRequest:
    model: str
    name: str | None = None
    features: Sequence[TableFeature] = field(
        default_factory=lambda: list(DEFAULT_TABLE_FEATURES)
    )
    columns: Sequence[TableColumn] = field(default_factory=lambda: list(DEFAULT_TABLE_COLUMNS))

    def __post_init__(self) -> None:
        self.model = validate_identifier(self.model, "Model name")
        if not self.name:
            self.name = f"{NameVariants.from_name(self.model).pascal}Table"
        self.name = validate_identifier(self.name, "Table name")
        self.columns = [c for c in TableColumn if c in self.columns]


def _cell_value(column: TableColumn) -> str:
    if column == TableColumn.IS_ACTIVE:
        return "{row.isActive ? 'Active' : 'Inactive'}"
    if column in (TableColumn.CREATED_AT, TableColumn.UPDATED_AT):
        return f"{{new Date(row.{column.value}).toLocaleDateString()}}"
    return f"{{row.{column.value}}}"


def _table_component(request: TableRequest, variables: dict[str, str]) -> str:
    features = set(request.features)

    imports: list[str] = []
    toolbar: list[str] = []
    headers: list[str] = []
    cells: list[str] = []

    if TableFeature.SEARCH in features:
        imports.append("import { Input } from '@/components/ui/input';")
        toolbar.append(_SEARCH_INPUT)
    if TableFeature.FILTERING in features:
        imports.append(
            f"import {{ {variables['tablePascal']}Filters }} "
            f"from './{variables['tableKebab']}-filters';"
        )
        toolbar.append(_FILTERS)
    if TableFeature.PAGINATION in features:
        imports.append(
            f"import {{ {variables['tablePascal']}Pagination }} "
            f"from './{variables['tableKebab']}-pagination';"
        )
    if TableFeature.EXPORT in features:
        toolbar.append(_EXPORT_BUTTON)
    if TableFeature.BULK in features:
        toolbar.append(_BULK_BUTTON)
        headers.append(_HEADER.format(label=""))
        cells.append(
            '                <td className="p-2"><input type="checkbox" '
            "checked={selected.includes(row.id)} onChange={() => toggleSelected(row.id)} /></td>"
        )

    sortable = TableFeature.SORTING in features
    for column in request.columns:
        template = _SORTABLE_HEADER if sortable else _HEADER
        headers.append(template.format(column=column.value, label=column.label))
        cells.append(_CELL.format(value=_cell_value(column)))

    if TableFeature.CRUD in features:
        headers.append(_HEADER.format(label=""))
        cells.append(_ACTIONS_CELL)

    fragments = {
        "extraImports": "".join(f"{line}\n" for line in imports),
        "helpers": _EXPORT_HELPER if TableFeature.EXPORT in features else "",
        "toolbar": "\n".join(toolbar) if toolbar else "        <div />",
        "headerCells": "\n".join(headers),
        "bodyCells": "\n".join(cells),
        "footer": _PAGINATION if TableFeature.PAGINATION in features else "",
        "rowFields": "\n".join(
            f"  {c.value}: {_ROW_TYPES[c]};" for c in request.columns if c in _ROW_TYPES
        ),
        "columnCount": str(len(headers)),
    }
    # Fragments carry their own placeholders, resolved before insertion.
    fragments = {k: templates.substitute(v, variables) for k, v in fragments.items()}
    return templates.render("table/table.tsx", {**variables, **fragments})


def build_table(request: TableRequest) -> GenerationPlan:
    model = NameVariants.from_name(request.model)
    table = NameVariants.from_name(request.name or f"{model.pascal}Table")
    variables = {**model.as_variables("model"), **table.as_variables("table")}
    features = set(request.features)

    plan = GenerationPlan(variants=table)
    plan.add(
        f"src/components/tables/{table.kebab}.tsx", _table_component(request, variables)
    )
    plan.add(
        f"src/hooks/use-{table.kebab}.ts",
        templates.render(
            "table/hook.ts",
            {
                **variables,
                "realtimeEffect": _REALTIME_EFFECT if TableFeature.REALTIME in features else "",
            },
        ),
    )
    if TableFeature.FILTERING in features:
        plan.add(
            f"src/components/tables/{table.kebab}-filters.tsx",
            templates.render("table/filters.tsx", variables),
        )
    if TableFeature.PAGINATION in features:
        plan.add(
            f"src/components/tables/{table.kebab}-pagination.tsx",
            templates.render("table/pagination.tsx", variables),
        )

    plan.notes += [
        f"import {{ {table.pascal} }} from '@/components/tables/{table.kebab}';",
        f"<{table.pascal} />",
    ]
    return plan
