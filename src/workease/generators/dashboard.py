"""Admin dashboard with widget components and a ``/dashboard`` page."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from workease.core import templates
from workease.core.errors import ValidationError
from workease.core.naming import NameVariants, validate_identifier
from workease.generators.options import (
    DEFAULT_CHART_TYPES,
    DEFAULT_DASHBOARD_FEATURES,
    DEFAULT_DASHBOARD_WIDGETS,
    ChartType,
    DashboardFeature,
    DashboardWidget,
)
from workease.generators.plan import GenerationPlan

DEFAULT_DASHBOARD_NAME = "AdminDashboard"

CHART_DEPENDENCIES = {"recharts": "^2.12.0"}
THEME_DEPENDENCIES = {"next-themes": "^0.3.0"}

_WIDGET_BODIES: dict[DashboardWidget, str] = {
    DashboardWidget.STATS: """\
        <div className="grid gap-4 sm:grid-cols-2 lg:grid-cols-4">
          {[
            { label: 'Total users', value: '1,234' },
            { label: 'Revenue', value: '$12,345' },
            { label: 'Orders', value: '567' },
            { label: 'Conversion', value: '3.2%' },
          ].map((stat) => (
            <div key={stat.label} className="rounded-lg border p-4">
              <p className="text-sm text-muted-foreground">{stat.label}</p>
              <p className="text-2xl font-bold">{stat.value}</p>
              <p className="text-xs text-muted-foreground">Last {range}</p>
            </div>
          ))}
        </div>""",
    DashboardWidget.ACTIVITY: """\
        <ul className="space-y-3">
          {['New user registered', 'Order #1024 shipped', 'Settings updated'].map((event) => (
            <li key={event} className="flex items-center justify-between text-sm">
              <span>{event}</span>
              <span className="text-muted-foreground">just now</span>
            </li>
          ))}
        </ul>""",
    DashboardWidget.TABLES: """\
        <table className="w-full text-sm">
          <thead>
            <tr className="border-b text-left">
              <th className="p-2">Item</th>
              <th className="p-2">Status</th>
            </tr>
          </thead>
          <tbody>
            {['Alpha', 'Beta', 'Gamma'].map((item) => (
              <tr key={item} className="border-b">
                <td className="p-2">{item}</td>
                <td className="p-2">Active</td>
              </tr>
            ))}
          </tbody>
        </table>""",
    DashboardWidget.USERS: """\
        <ul className="divide-y">
          {['alice@example.com', 'bob@example.com'].map((email) => (
            <li key={email} className="flex items-center justify-between py-2 text-sm">
              <span>{email}</span>
              <button className="underline">Manage</button>
            </li>
          ))}
        </ul>""",
    DashboardWidget.SETTINGS: """\
        <form className="space-y-3 text-sm">
          <label className="flex items-center gap-2">
            <input type="checkbox" defaultChecked /> Email notifications
          </label>
          <label className="flex items-center gap-2">
            <input type="checkbox" /> Maintenance mode
          </label>
        </form>""",
    DashboardWidget.ACTIONS: """\
        <div className="flex flex-wrap gap-2">
          {['New user', 'New order', 'Export report'].map((action) => (
            <button key={action} className="rounded-md border px-3 py-2 text-sm">
              {action}
            </button>
          ))}
        </div>""",
    DashboardWidget.NOTIFICATIONS: """\
        <ul className="space-y-2 text-sm">
          {['Server load is high', 'Backup completed'].map((message) => (
            <li key={message} className="rounded-md bg-muted p-2">
              {message}
            </li>
          ))}
        </ul>""",
}

# recharts components each chart needs, beyond the ones every chart shares.
_CHART_IMPORTS: dict[ChartType, tuple[str, ...]] = {
    ChartType.LINE: ("LineChart", "Line"),
    ChartType.BAR: ("BarChart", "Bar"),
    ChartType.AREA: ("AreaChart", "Area"),
    ChartType.PIE: ("PieChart", "Pie"),
    ChartType.DONUT: ("PieChart", "Pie"),
}

_CARTESIAN = """\
            <{chart} data={{SAMPLE_DATA}}>
              <CartesianGrid strokeDasharray="3 3" />
              <XAxis dataKey="name" />
              <YAxis />
              <Tooltip />
              <{series} type="monotone" dataKey="value" />
            </{chart}>"""

_RADIAL = """\
            <PieChart>
              <Tooltip />
              <Pie data={{SAMPLE_DATA}} dataKey="value" nameKey="name"{inner} outerRadius={{80}} />
            </PieChart>"""

_CHART_LABELS: dict[ChartType, str] = {
    ChartType.LINE: "Trend",
    ChartType.BAR: "By category",
    ChartType.AREA: "Growth",
    ChartType.PIE: "Distribution",
    ChartType.DONUT: "Progress",
}


@dataclass(kw_only=True)
class DashboardRequest:
    name: str = DEFAULT_DASHBOARD_NAME
    widgets: Sequence[DashboardWidget] = field(
        default_factory=lambda: list(DEFAULT_DASHBOARD_WIDGETS)
    )
    chart_types: Sequence[ChartType] = field(default_factory=lambda: list(DEFAULT_CHART_TYPES))
    features: Sequence[DashboardFeature] = field(
        default_factory=lambda: list(DEFAULT_DASHBOARD_FEATURES)
    )

    def __post_init__(self) -> None:
        self.name = validate_identifier(self.name or DEFAULT_DASHBOARD_NAME, "Dashboard name")
        if not self.widgets:
            raise ValidationError("Select at least one dashboard widget.")
        self.widgets = [w for w in DashboardWidget if w in self.widgets]
        self.chart_types = [c for c in ChartType if c in self.chart_types]
        if DashboardWidget.CHARTS in self.widgets and not self.chart_types:
            raise ValidationError("Select at least one chart type for the charts widget.")


def title_of(variants: NameVariants) -> str:
    """``admin-dashboard`` -> ``Admin Dashboard``."""
    return " ".join(word.capitalize() for word in variants.kebab.split("-") if word)


def _chart_body(chart: ChartType) -> str:
    if chart == ChartType.PIE:
        return _RADIAL.format(inner="")
    if chart == ChartType.DONUT:
        return _RADIAL.format(inner=" innerRadius={50}")
    chart_component, series = _CHART_IMPORTS[chart]
    return _CARTESIAN.format(chart=chart_component, series=series)


def _charts_widget(chart_types: Sequence[ChartType]) -> str:
    imports: list[str] = []
    for chart in chart_types:
        imports += [name for name in _CHART_IMPORTS[chart] if name not in imports]
    charts = [
        templates.render(
            "dashboard/chart.tsx",
            {"chartLabel": _CHART_LABELS[chart], "chartBody": _chart_body(chart)},
        ).rstrip("\n")
        for chart in chart_types
    ]
    return templates.render(
        "dashboard/charts-widget.tsx",
        {"chartImports": "".join(f", {name}" for name in imports), "charts": "\n".join(charts)},
    )


def _dashboard_component(request: DashboardRequest, variants: NameVariants) -> str:
    features = set(request.features)
    responsive = DashboardFeature.RESPONSIVE in features
    theme = DashboardFeature.THEME in features
    realtime = DashboardFeature.REALTIME in features
    customizable = DashboardFeature.CUSTOMIZABLE in features

    hooks: list[str] = []
    if theme:
        hooks.append("  const { theme, setTheme } = useTheme();")
    if realtime:
        hooks += [
            "  const [tick, setTick] = useState(0);",
            "  React.useEffect(() => {",
            "    const timer = setInterval(() => setTick((t) => t + 1), 30_000);",
            "    return () => clearInterval(timer);",
            "  }, []);",
        ]
    if customizable:
        hooks += [
            "  const [hidden, setHidden] = useState<string[]>([]);",
            "  const toggleWidget = (id: string) =>",
            "    setHidden((current) =>",
            "      current.includes(id) ? current.filter((w) => w !== id) : [...current, id]",
            "    );",
        ]

    actions: list[str] = []
    if DashboardFeature.FILTERING in features:
        actions.append(
            "          <select\n"
            '            className="h-9 rounded-md border px-2 text-sm"\n'
            "            value={range}\n"
            "            onChange={(e) => setRange(e.target.value as typeof range)}\n"
            "          >\n"
            '            <option value="7d">Last 7 days</option>\n'
            '            <option value="30d">Last 30 days</option>\n'
            '            <option value="90d">Last 90 days</option>\n'
            "          </select>"
        )
    if customizable:
        actions += [
            "          <Button variant=\"ghost\" size=\"sm\" "
            f"onClick={{() => toggleWidget('{w.value}')}}>\n"
            f"            {w.component.removesuffix('Widget')}\n"
            "          </Button>"
            for w in request.widgets
        ]
    if DashboardFeature.EXPORT in features:
        actions.append(
            '          <Button variant="outline" onClick={() => window.print()}>\n'
            "            Export\n"
            "          </Button>"
        )
    if theme:
        actions.append(
            "          <Button variant=\"outline\" "
            "onClick={() => setTheme(theme === 'dark' ? 'light' : 'dark')}>\n"
            "            Toggle theme\n"
            "          </Button>"
        )

    key = " key={`${range}-${tick}`}" if realtime else ""
    widgets: list[str] = []
    for widget in request.widgets:
        element = f"<{widget.component}{key} range={{range}} />"
        if customizable:
            element = f"{{!hidden.includes('{widget.value}') && {element}}}"
        widgets.append(f"        {element}")
    grid = "grid gap-4 md:grid-cols-2 xl:grid-cols-3" if responsive else "grid grid-cols-3 gap-4"

    return templates.render(
        "dashboard/dashboard.tsx",
        {
            **variants.as_variables(),
            "nameTitle": title_of(variants),
            "themeImport": "import { useTheme } from 'next-themes';\n" if theme else "",
            "widgetImports": "".join(
                f"import {{ {w.component} }} from '@/components/widgets/{w.value}-widget';\n"
                for w in request.widgets
            ),
            "themeHook": "\n".join(hooks),
            "layoutClass": "space-y-6 p-4 md:p-8" if responsive else "space-y-6 p-8",
            "headerActions": "\n".join(actions),
            "widgets": f'      <div className="{grid}">\n' + "\n".join(widgets) + "\n      </div>",
        },
    )


def build_dashboard(request: DashboardRequest) -> GenerationPlan:
    variants = NameVariants.from_name(request.name)
    plan = GenerationPlan(variants=variants)

    plan.add(
        f"src/components/dashboards/{variants.kebab}.tsx",
        _dashboard_component(request, variants),
    )
    for widget in request.widgets:
        path = f"src/components/widgets/{widget.value}-widget.tsx"
        if widget == DashboardWidget.CHARTS:
            plan.add(path, _charts_widget(request.chart_types))
            continue
        plan.add(
            path,
            templates.render(
                "dashboard/widget.tsx",
                {
                    "widgetPascal": widget.component,
                    "widgetLabel": widget.label,
                    "body": _WIDGET_BODIES[widget],
                },
            ),
        )
    plan.add(
        "src/app/dashboard/page.tsx",
        templates.render(
            "dashboard/page.tsx", {**variants.as_variables(), "nameTitle": title_of(variants)}
        ),
    )

    if DashboardWidget.CHARTS in request.widgets:
        plan.dependencies.update(CHART_DEPENDENCIES)
    if DashboardFeature.THEME in request.features:
        plan.dependencies.update(THEME_DEPENDENCIES)
    plan.notes.append("Visit: http://localhost:3000/dashboard")
    return plan
