"""Request/response models for the routes API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from routescope.models.route_analysis import RouteAnalysis, RouteTableSummary


class AnalyzeFileRequest(BaseModel):
    path: str = Field(description="Route file to analyze")
    routes_dir: Optional[str] = Field(
        default=None,
        description="Routes root; inferred from the file path when omitted",
    )
    include_options: Optional[bool] = Field(
        default=None,
        description="Parse the exported options object; defaults to ROUTESCOPE_INCLUDE_OPTIONS",
    )


class AnalyzeDirectoryRequest(BaseModel):
    routes_dir: Optional[str] = Field(
        default=None,
        description="Routes root; defaults to ROUTESCOPE_ROUTES_DIR",
    )
    include_options: Optional[bool] = None


class RouteTableResponse(BaseModel):
    """Response from POST /api/routes/analyze-directory."""

    routes_dir: str
    routes: list[RouteAnalysis] = Field(default_factory=list, description="Sorted by url_path")
    summary: RouteTableSummary = Field(default_factory=RouteTableSummary)
