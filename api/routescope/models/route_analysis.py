"""Route analysis models: one record per analyzed route file."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


ExportKind = Literal["variable", "function", "default", "named"]
ExportValueType = Literal["handler", "options"]


class ExportInfo(BaseModel):
    """Exported symbol detected in a route file."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Exported identifier")
    kind: ExportKind = Field(description="variable | function | default | named")
    value_type: Optional[ExportValueType] = Field(
        default=None,
        description="handler | options; null when the export has no routing role",
    )


class ParseError(BaseModel):
    """Non-fatal problem recorded while analyzing a file."""

    model_config = ConfigDict(frozen=True)

    message: str
    line: Optional[int] = Field(default=None, ge=1)
    column: Optional[int] = Field(default=None, ge=1)


class ResponseSchema(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status_code: int = Field(ge=100, le=599)
    schema_ref: str = Field(alias="schema", description="Schema expression as written in source")
    description: Optional[str] = None


class RouteOptions(BaseModel):
    """Metadata declared by an exported ``options`` object literal."""

    model_config = ConfigDict(frozen=True)

    tags: Optional[list[str]] = None
    summary: Optional[str] = None
    description: Optional[str] = None
    request_schema: Optional[str] = None
    response_schemas: list[ResponseSchema] = Field(default_factory=list)


class RouteAnalysis(BaseModel):
    """Effective routing facts for a single route file."""

    model_config = ConfigDict(frozen=True)

    file_path: str = Field(description="Path as given to the analyzer")
    url_path: str = Field(min_length=1, pattern=r"^/", description="Canonical URL path")
    method: str = Field(default="", description="Upper-cased HTTP verb or empty when unresolved")
    has_handler: bool = False
    has_options: bool = False
    options: Optional[RouteOptions] = None
    exports: list[ExportInfo] = Field(default_factory=list, description="First-seen order across passes")
    errors: list[ParseError] = Field(default_factory=list)


class RouteTableSummary(BaseModel):
    route_count: int = Field(default=0, ge=0)
    handler_count: int = Field(default=0, ge=0)
    missing_handler_count: int = Field(default=0, ge=0)
    error_count: int = Field(default=0, ge=0, description="Routes with at least one error")
    by_method: dict[str, int] = Field(default_factory=dict, description="Unresolved routes count as UNRESOLVED")
    dynamic_route_count: int = Field(default=0, ge=0)
    catch_all_route_count: int = Field(default=0, ge=0)
