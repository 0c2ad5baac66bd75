"""Pydantic models."""

from routescope.models.error import ErrorDetail
from routescope.models.route_analysis import (
    ExportInfo,
    ParseError,
    ResponseSchema,
    RouteAnalysis,
    RouteOptions,
    RouteTableSummary,
)
from routescope.models.routes_api import (
    AnalyzeDirectoryRequest,
    AnalyzeFileRequest,
    RouteTableResponse,
)

__all__ = [
    "AnalyzeDirectoryRequest",
    "AnalyzeFileRequest",
    "ErrorDetail",
    "ExportInfo",
    "ParseError",
    "ResponseSchema",
    "RouteAnalysis",
    "RouteOptions",
    "RouteTableResponse",
    "RouteTableSummary",
]
