"""Export classifier: tag exported declarations in route source text by role.

Four textual scans run over the unmodified file text, in this order:

1. value exports      ``export const get = ...``
2. function exports   ``export async function post(...)``
3. default export     ``export default ...``
4. named re-exports   ``export { get, schema as options }``

The scans are regex searches, not a parse. Declarations inside comments or
string literals are matched like any other text.
"""

from __future__ import annotations

import re

from routescope.models.route_analysis import ExportInfo

HTTP_METHODS: tuple[str, ...] = ("get", "post", "put", "patch", "delete", "head", "options")
OPTIONS_EXPORT = "options"
HANDLER_EXPORT = "handler"

EXPORT_CONST_RE = re.compile(r"export\s+const\s+(\w+)\s*[=:]")
EXPORT_FUNCTION_RE = re.compile(r"export\s+(?:async\s+)?function\s+(\w+)\s*\(")
EXPORT_DEFAULT_RE = re.compile(r"export\s+default\s+")
EXPORT_NAMED_RE = re.compile(r"export\s*\{\s*([^}]+)\s*\}")
ALIAS_SPLIT = " as "


def is_http_method(name: str) -> bool:
    return name.lower() in HTTP_METHODS


def _classify_value_export(name: str) -> ExportInfo:
    if name == OPTIONS_EXPORT:
        return ExportInfo(name=name, kind="variable", value_type="options")
    if is_http_method(name) or name == HANDLER_EXPORT:
        return ExportInfo(name=name, kind="variable", value_type="handler")
    return ExportInfo(name=name, kind="variable")


def _classify_function_export(name: str) -> ExportInfo:
    # `options` is treated as a verb here, not as metadata.
    if is_http_method(name) or name == HANDLER_EXPORT:
        return ExportInfo(name=name, kind="function", value_type="handler")
    return ExportInfo(name=name, kind="function")


def _classify_named_export(name: str) -> ExportInfo:
    # Bare `handler` gets no role in a re-export list.
    if name == OPTIONS_EXPORT:
        return ExportInfo(name=name, kind="named", value_type="options")
    if is_http_method(name):
        return ExportInfo(name=name, kind="named", value_type="handler")
    return ExportInfo(name=name, kind="named")


def scan_value_exports(source: str) -> list[ExportInfo]:
    return [_classify_value_export(m.group(1)) for m in EXPORT_CONST_RE.finditer(source)]


def scan_function_exports(source: str) -> list[ExportInfo]:
    return [_classify_function_export(m.group(1)) for m in EXPORT_FUNCTION_RE.finditer(source)]


def scan_default_export(source: str) -> list[ExportInfo]:
    if EXPORT_DEFAULT_RE.search(source):
        return [ExportInfo(name="default", kind="default")]
    return []


def named_export_names(group: str) -> list[str]:
    """Exported names of one ``export { ... }`` body; aliases keep the local name."""
    names: list[str] = []
    for entry in group.split(","):
        name = entry.split(ALIAS_SPLIT, 1)[0].strip()
        if name:
            names.append(name)
    return names


def scan_named_exports(source: str) -> list[ExportInfo]:
    out: list[ExportInfo] = []
    for match in EXPORT_NAMED_RE.finditer(source):
        out.extend(_classify_named_export(name) for name in named_export_names(match.group(1)))
    return out


EXPORT_PASSES = (
    scan_value_exports,
    scan_function_exports,
    scan_default_export,
    scan_named_exports,
)


def classify_exports(source: str) -> list[ExportInfo]:
    """Run every export pass in order and return the tagged exports in first-seen order."""
    exports: list[ExportInfo] = []
    for scan in EXPORT_PASSES:
        exports.extend(scan(source))
    return exports
