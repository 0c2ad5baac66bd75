"""Resolve the bound HTTP method of a route file from its classified exports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from routescope.models.route_analysis import ExportInfo
from routescope.services.export_classifier import is_http_method

DEFAULT_METHOD = "GET"


@dataclass(frozen=True)
class MethodResolution:
    method: str = ""
    has_handler: bool = False
    has_options: bool = False


def handler_verb(export: ExportInfo) -> str:
    """Verb served by a handler export; non-verb handlers (``handler``) serve GET."""
    if is_http_method(export.name):
        return export.name.upper()
    return DEFAULT_METHOD


def resolve_method(exports: Iterable[ExportInfo]) -> MethodResolution:
    """Fold exports in order. The first export that binds a method wins.

    A default export only becomes the handler when nothing before it did.
    """
    method = ""
    has_handler = False
    has_options = False
    for export in exports:
        if export.value_type == "options":
            has_options = True
        elif export.value_type == "handler":
            has_handler = True
            if not method:
                method = handler_verb(export)
        elif export.kind == "default" and not has_handler:
            has_handler = True
            if not method:
                method = DEFAULT_METHOD
    return MethodResolution(method=method, has_handler=has_handler, has_options=has_options)
