"""Generators turn a validated request into a :class:`GenerationPlan` without touching disk."""

from workease.generators.api_route import ApiRouteRequest, build_api_route
from workease.generators.auth import AuthRequest, build_auth
from workease.generators.component import ComponentRequest, build_component
from workease.generators.dashboard import DashboardRequest, build_dashboard
from workease.generators.form import FormRequest, build_form
from workease.generators.model import ModelRequest, build_model, parse_custom_fields
from workease.generators.page import PageRequest, build_page
from workease.generators.plan import FileWrite, GenerationPlan, WriteMode
from workease.generators.project import ProjectRequest, build_manifest, build_project
from workease.generators.table import TableRequest, build_table

__all__ = [
    "ApiRouteRequest",
    "AuthRequest",
    "ComponentRequest",
    "DashboardRequest",
    "FileWrite",
    "FormRequest",
    "GenerationPlan",
    "ModelRequest",
    "PageRequest",
    "ProjectRequest",
    "TableRequest",
    "WriteMode",
    "build_api_route",
    "build_auth",
    "build_component",
    "build_dashboard",
    "build_form",
    "build_manifest",
    "build_model",
    "build_page",
    "build_project",
    "build_table",
    "parse_custom_fields",
]
