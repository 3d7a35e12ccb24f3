"""Enums for generator choices and feature flags."""

from __future__ import annotations

from enum import Enum


class ProjectTemplate(str, Enum):
    """Available project templates."""

    FULLSTACK = "fullstack"
    FRONTEND = "frontend"
    API = "api"
    DASHBOARD = "dashboard"

    @property
    def label(self) -> str:
        labels: dict[ProjectTemplate, str] = {
            ProjectTemplate.FULLSTACK: "Full Stack App",
            ProjectTemplate.FRONTEND: "Frontend Only",
            ProjectTemplate.API: "API Only",
            ProjectTemplate.DASHBOARD: "Dashboard",
        }
        return labels[self]

    @property
    def description(self) -> str:
        descriptions: dict[ProjectTemplate, str] = {
            ProjectTemplate.FULLSTACK: "Next.js + TypeScript + Tailwind + Prisma, UI components.",
            ProjectTemplate.FRONTEND: "Next.js + TypeScript + Tailwind, no database.",
            ProjectTemplate.API: "Next.js API routes + TypeScript + Prisma, no styling.",
            ProjectTemplate.DASHBOARD: "Admin panel with auth-ready Prisma schema and CRUD.",
        }
        return descriptions[self]

    @property
    def uses_database(self) -> bool:
        return self in (ProjectTemplate.FULLSTACK, ProjectTemplate.API, ProjectTemplate.DASHBOARD)

    @property
    def uses_tailwind(self) -> bool:
        return self in (
            ProjectTemplate.FULLSTACK,
            ProjectTemplate.FRONTEND,
            ProjectTemplate.DASHBOARD,
        )

    @property
    def has_ui_components(self) -> bool:
        return self in (ProjectTemplate.FULLSTACK, ProjectTemplate.DASHBOARD)


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class ModelField(str, Enum):
    """Standard fields offered by the model generator."""

    ID = "id"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"
    NAME = "name"
    EMAIL = "email"
    DESCRIPTION = "description"
    IS_ACTIVE = "isActive"
    USER_ID = "userId"

    @property
    def label(self) -> str:
        labels: dict[ModelField, str] = {
            ModelField.ID: "id (Primary Key)",
            ModelField.CREATED_AT: "createdAt (Timestamp)",
            ModelField.UPDATED_AT: "updatedAt (Timestamp)",
            ModelField.NAME: "name (String)",
            ModelField.EMAIL: "email (String)",
            ModelField.DESCRIPTION: "description (Text)",
            ModelField.IS_ACTIVE: "isActive (Boolean)",
            ModelField.USER_ID: "userId (Foreign Key)",
        }
        return labels[self]


class ModelFeature(str, Enum):
    CRUD = "crud"
    TYPES = "types"
    VALIDATION = "validation"
    SEEDER = "seeder"
    TESTS = "tests"

    @property
    def label(self) -> str:
        labels: dict[ModelFeature, str] = {
            ModelFeature.CRUD: "CRUD API routes",
            ModelFeature.TYPES: "TypeScript types",
            ModelFeature.VALIDATION: "Validation schemas",
            ModelFeature.SEEDER: "Database seeder",
            ModelFeature.TESTS: "Test files",
        }
        return labels[self]


class TableFeature(str, Enum):
    PAGINATION = "pagination"
    SORTING = "sorting"
    FILTERING = "filtering"
    SEARCH = "search"
    CRUD = "crud"
    BULK = "bulk"
    EXPORT = "export"
    REALTIME = "realtime"

    @property
    def label(self) -> str:
        labels: dict[TableFeature, str] = {
            TableFeature.PAGINATION: "Pagination",
            TableFeature.SORTING: "Sorting",
            TableFeature.FILTERING: "Filtering",
            TableFeature.SEARCH: "Search",
            TableFeature.CRUD: "CRUD Actions (Edit, Delete)",
            TableFeature.BULK: "Bulk Operations",
            TableFeature.EXPORT: "Export to CSV",
            TableFeature.REALTIME: "Real-time Updates",
        }
        return labels[self]


class TableColumn(str, Enum):
    ID = "id"
    NAME = "name"
    EMAIL = "email"
    DESCRIPTION = "description"
    IS_ACTIVE = "isActive"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    @property
    def label(self) -> str:
        labels: dict[TableColumn, str] = {
            TableColumn.ID: "ID",
            TableColumn.NAME: "Name",
            TableColumn.EMAIL: "Email",
            TableColumn.DESCRIPTION: "Description",
            TableColumn.IS_ACTIVE: "Status",
            TableColumn.CREATED_AT: "Created",
            TableColumn.UPDATED_AT: "Updated",
        }
        return labels[self]


class FormType(str, Enum):
    CREATE = "create"
    EDIT = "edit"
    COMBINED = "combined"

    @property
    def label(self) -> str:
        labels: dict[FormType, str] = {
            FormType.CREATE: "Create Form - For creating new records",
            FormType.EDIT: "Edit Form - For updating existing records",
            FormType.COMBINED: "Combined Form - Handles both create and edit",
        }
        return labels[self]


class FormField(str, Enum):
    NAME = "name"
    EMAIL = "email"
    DESCRIPTION = "description"
    IS_ACTIVE = "isActive"
    CATEGORY = "category"
    PRICE = "price"
    TAGS = "tags"

    @property
    def label(self) -> str:
        labels: dict[FormField, str] = {
            FormField.NAME: "Name",
            FormField.EMAIL: "Email",
            FormField.DESCRIPTION: "Description",
            FormField.IS_ACTIVE: "Active",
            FormField.CATEGORY: "Category",
            FormField.PRICE: "Price",
            FormField.TAGS: "Tags",
        }
        return labels[self]


class FormFeature(str, Enum):
    VALIDATION = "validation"
    UPLOAD = "upload"
    AUTOSAVE = "autosave"
    WIZARD = "wizard"
    RICHTEXT = "richtext"
    DATEPICKER = "datepicker"

    @property
    def label(self) -> str:
        labels: dict[FormFeature, str] = {
            FormFeature.VALIDATION: "Client-side validation",
            FormFeature.UPLOAD: "File upload support",
            FormFeature.AUTOSAVE: "Auto-save drafts",
            FormFeature.WIZARD: "Multi-step wizard",
            FormFeature.RICHTEXT: "Rich text editor",
            FormFeature.DATEPICKER: "Date/time pickers",
        }
        return labels[self]


class DashboardWidget(str, Enum):
    STATS = "stats"
    ACTIVITY = "activity"
    CHARTS = "charts"
    TABLES = "tables"
    USERS = "users"
    SETTINGS = "settings"
    ACTIONS = "actions"
    NOTIFICATIONS = "notifications"

    @property
    def label(self) -> str:
        labels: dict[DashboardWidget, str] = {
            DashboardWidget.STATS: "Overview Stats Cards",
            DashboardWidget.ACTIVITY: "Recent Activity Feed",
            DashboardWidget.CHARTS: "Charts & Analytics",
            DashboardWidget.TABLES: "Data Tables",
            DashboardWidget.USERS: "User Management Panel",
            DashboardWidget.SETTINGS: "Settings Panel",
            DashboardWidget.ACTIONS: "Quick Actions Bar",
            DashboardWidget.NOTIFICATIONS: "Notifications Center",
        }
        return labels[self]

    @property
    def component(self) -> str:
        """PascalCase component name of the widget's generated file."""
        return self.value[:1].upper() + self.value[1:] + "Widget"


class ChartType(str, Enum):
    LINE = "line"
    BAR = "bar"
    PIE = "pie"
    AREA = "area"
    DONUT = "donut"

    @property
    def label(self) -> str:
        labels: dict[ChartType, str] = {
            ChartType.LINE: "Line Chart (Time series)",
            ChartType.BAR: "Bar Chart (Categories)",
            ChartType.PIE: "Pie Chart (Distribution)",
            ChartType.AREA: "Area Chart (Trends)",
            ChartType.DONUT: "Donut Chart (Progress)",
        }
        return labels[self]


class DashboardFeature(str, Enum):
    REALTIME = "realtime"
    EXPORT = "export"
    THEME = "theme"
    CUSTOMIZABLE = "customizable"
    RESPONSIVE = "responsive"
    FILTERING = "filtering"

    @property
    def label(self) -> str:
        labels: dict[DashboardFeature, str] = {
            DashboardFeature.REALTIME: "Real-time data updates",
            DashboardFeature.EXPORT: "Export to PDF/Excel",
            DashboardFeature.THEME: "Dark/Light theme toggle",
            DashboardFeature.CUSTOMIZABLE: "Customizable layout",
            DashboardFeature.RESPONSIVE: "Mobile responsive",
            DashboardFeature.FILTERING: "Data filtering",
        }
        return labels[self]


class AuthProvider(str, Enum):
    NEXTAUTH = "nextauth"
    CLERK = "clerk"
    SUPABASE = "supabase"
    CUSTOM = "custom"

    @property
    def label(self) -> str:
        labels: dict[AuthProvider, str] = {
            AuthProvider.NEXTAUTH: "NextAuth.js - Popular, flexible, secure",
            AuthProvider.CLERK: "Clerk - Managed auth service",
            AuthProvider.SUPABASE: "Supabase Auth - Open source alternative",
            AuthProvider.CUSTOM: "Custom JWT - Build your own",
        }
        return labels[self]


class AuthFeature(str, Enum):
    CREDENTIALS = "credentials"
    GOOGLE = "google"
    GITHUB = "github"
    REGISTRATION = "registration"
    RESET = "reset"
    VERIFICATION = "verification"
    PROFILES = "profiles"
    RBAC = "rbac"

    @property
    def label(self) -> str:
        labels: dict[AuthFeature, str] = {
            AuthFeature.CREDENTIALS: "Email/Password login",
            AuthFeature.GOOGLE: "Google OAuth",
            AuthFeature.GITHUB: "GitHub OAuth",
            AuthFeature.REGISTRATION: "User registration",
            AuthFeature.RESET: "Password reset",
            AuthFeature.VERIFICATION: "Email verification",
            AuthFeature.PROFILES: "User profiles",
            AuthFeature.RBAC: "Role-based access",
        }
        return labels[self]


# Pre-selected entries of the interactive multi-select prompts.
DEFAULT_HTTP_METHODS = (HttpMethod.GET, HttpMethod.POST)
DEFAULT_MODEL_FIELDS = (ModelField.ID, ModelField.CREATED_AT, ModelField.UPDATED_AT)
DEFAULT_MODEL_FEATURES = (ModelFeature.CRUD, ModelFeature.TYPES, ModelFeature.VALIDATION)
DEFAULT_TABLE_FEATURES = (
    TableFeature.PAGINATION,
    TableFeature.SORTING,
    TableFeature.FILTERING,
    TableFeature.SEARCH,
    TableFeature.CRUD,
)
DEFAULT_TABLE_COLUMNS = (TableColumn.NAME, TableColumn.IS_ACTIVE, TableColumn.CREATED_AT)
DEFAULT_FORM_FIELDS = (FormField.NAME, FormField.DESCRIPTION, FormField.IS_ACTIVE)
DEFAULT_FORM_FEATURES = (FormFeature.VALIDATION,)
DEFAULT_DASHBOARD_WIDGETS = (
    DashboardWidget.STATS,
    DashboardWidget.ACTIVITY,
    DashboardWidget.CHARTS,
    DashboardWidget.TABLES,
    DashboardWidget.ACTIONS,
)
DEFAULT_CHART_TYPES = (ChartType.LINE, ChartType.BAR)
DEFAULT_DASHBOARD_FEATURES = (
    DashboardFeature.THEME,
    DashboardFeature.RESPONSIVE,
    DashboardFeature.FILTERING,
)
DEFAULT_AUTH_FEATURES = (AuthFeature.CREDENTIALS, AuthFeature.REGISTRATION, AuthFeature.PROFILES)

COMPONENT_LOCATIONS = ("src/components", "src/components/ui", "src/app/components")
