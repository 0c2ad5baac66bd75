"""Route analysis endpoints."""

import logging

from fastapi import APIRouter, HTTPException

from routescope.models.error import ErrorDetail
from routescope.models.route_analysis import RouteAnalysis
from routescope.models.routes_api import (
    AnalyzeDirectoryRequest,
    AnalyzeFileRequest,
    RouteTableResponse,
)
from routescope.services import analyzer_config, route_analyzer_service
from routescope.services.route_options_parser import parse_route_options

router = APIRouter()
logger = logging.getLogger(__name__)


def _options_parser(include_options: bool | None):
    if include_options is None:
        include_options = analyzer_config.include_options_default()
    return parse_route_options if include_options else None


def _require_within_configured_root(path: str) -> None:
    """With ROUTESCOPE_ROUTES_DIR set, only paths inside it may be analyzed."""
    allowed_root = analyzer_config.default_routes_dir()
    if allowed_root and not route_analyzer_service.is_within_root(path, allowed_root):
        logger.warning("routes_path_outside_root path=%r root=%s", path, allowed_root)
        raise HTTPException(status_code=403, detail="path is outside ROUTESCOPE_ROUTES_DIR")


@router.post(
    "/routes/analyze-file",
    response_model=RouteAnalysis,
    responses={400: {"model": ErrorDetail}, 403: {"model": ErrorDetail}},
)
def analyze_file(body: AnalyzeFileRequest):
    """Analyze one route file. Read failures are reported in the record's errors."""
    path = body.path.strip()
    if not path:
        raise HTTPException(status_code=400, detail="path is required")
    _require_within_configured_root(path)
    routes_dir = (body.routes_dir or "").strip() or route_analyzer_service.infer_routes_root(path)
    return route_analyzer_service.analyze_file(
        path,
        routes_dir,
        options_parser=_options_parser(body.include_options),
    )


@router.post(
    "/routes/analyze-directory",
    response_model=RouteTableResponse,
    responses={400: {"model": ErrorDetail}, 403: {"model": ErrorDetail}},
)
def analyze_directory(body: AnalyzeDirectoryRequest):
    """Analyze every route file under a routes directory. A missing directory yields an empty table."""
    routes_dir = (body.routes_dir or "").strip() or analyzer_config.default_routes_dir()
    if not routes_dir:
        raise HTTPException(
            status_code=400,
            detail="routes_dir is required (or set ROUTESCOPE_ROUTES_DIR)",
        )
    _require_within_configured_root(routes_dir)
    routes = route_analyzer_service.analyze_directory(
        routes_dir,
        options_parser=_options_parser(body.include_options),
    )
    logger.info("routes_table_served routes_dir=%s count=%s", routes_dir, len(routes))
    return RouteTableResponse(
        routes_dir=routes_dir,
        routes=routes,
        summary=route_analyzer_service.summarize_routes(routes),
    )
