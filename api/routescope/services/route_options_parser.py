"""Options metadata pass: read the exported ``options`` object literal of a route file.

Handles the shape route files declare, e.g.::

    export const options = {
      tags: ["Admin", "Health"],
      summary: "Admin health check",
      body: t.Object({ name: t.String() }),
      response: { 200: t.String(), 404: t.Null() },
      responseDescription: "OK",
    } satisfies RouteOptions;

Like the export classifier this is lexical: balanced-brace extraction plus a
split on top-level commas. Values that are not plain literals are kept as
their source text.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from routescope.models.route_analysis import ResponseSchema, RouteOptions

OPTIONS_DECL_RE = re.compile(r"export\s+const\s+options\b\s*(?::[^=]*)?=\s*")
STRING_LITERAL_RE = re.compile(r"""(["'`])((?:\\.|(?!\1).)*)\1""", re.DOTALL)
STATUS_CODE_RE = re.compile(r"^[\"']?(\d{3})[\"']?$")
WHITESPACE_RE = re.compile(r"\s+")

_OPENERS = {"{": "}", "[": "]", "(": ")"}
_CLOSERS = set(_OPENERS.values())
_QUOTES = {'"', "'", "`"}


def _skip_string(text: str, start: int) -> int:
    """Index just past the string literal opening at ``start``."""
    quote = text[start]
    i = start + 1
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            return i + 1
        i += 1
    return len(text)


def extract_braced_block(text: str, start: int) -> Optional[str]:
    """Return the body between the ``{`` at ``start`` and its matching ``}``."""
    if start >= len(text) or text[start] != "{":
        return None
    depth = 0
    i = start
    while i < len(text):
        ch = text[i]
        if ch in _QUOTES:
            i = _skip_string(text, i)
            continue
        if ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            depth -= 1
            if depth == 0:
                return text[start + 1 : i]
        i += 1
    return None


def split_top_level(body: str) -> list[str]:
    """Split an object/array body on commas that are not nested or quoted."""
    parts: list[str] = []
    depth = 0
    current_start = 0
    i = 0
    while i < len(body):
        ch = body[i]
        if ch in _QUOTES:
            i = _skip_string(body, i)
            continue
        if ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            depth -= 1
        elif ch == "," and depth == 0:
            parts.append(body[current_start:i])
            current_start = i + 1
        i += 1
    parts.append(body[current_start:])
    return [part.strip() for part in parts if part.strip()]


def _split_entry(entry: str) -> tuple[str, str]:
    """``key: value`` -> (key, value). Shorthand entries (``summary``) have an empty value."""
    depth = 0
    i = 0
    while i < len(entry):
        ch = entry[i]
        if ch in _QUOTES:
            i = _skip_string(entry, i)
            continue
        if ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            depth -= 1
        elif ch == ":" and depth == 0:
            key = entry[:i].strip().strip("\"'")
            return key, entry[i + 1 :].strip()
        i += 1
    return entry.strip().strip("\"'"), ""


def object_entries(body: str) -> dict[str, str]:
    entries: dict[str, str] = {}
    for part in split_top_level(body):
        if part.startswith("..."):
            continue
        key, value = _split_entry(part)
        if key and key not in entries:
            entries[key] = value
    return entries


def string_value(expr: str) -> Optional[str]:
    text = expr.strip()
    match = STRING_LITERAL_RE.fullmatch(text)
    if not match:
        return None
    return re.sub(r"\\(.)", r"\1", match.group(2))


def string_list_value(expr: str) -> Optional[list[str]]:
    text = expr.strip()
    if not (text.startswith("[") and text.endswith("]")):
        return None
    values: list[str] = []
    for item in split_top_level(text[1:-1]):
        value = string_value(item)
        if value is not None:
            values.append(value)
    return values


def _collapse(expr: str) -> str:
    return WHITESPACE_RE.sub(" ", expr).strip()


def _object_body(expr: str) -> Optional[str]:
    text = expr.strip()
    if not text.startswith("{"):
        return None
    return extract_braced_block(text, 0)


def _response_schemas(expr: str, response_description: Optional[str]) -> list[ResponseSchema]:
    body = _object_body(expr)
    if body is None:
        return []
    schemas: list[ResponseSchema] = []
    described = False
    for key, value in object_entries(body).items():
        match = STATUS_CODE_RE.match(key)
        if not match or not value:
            continue
        status_code = int(match.group(1))
        if status_code < 100 or status_code > 599:
            continue
        description = None
        if response_description and not described and 200 <= status_code < 300:
            description = response_description
            described = True
        schemas.append(ResponseSchema(status_code=status_code, schema=_collapse(value), description=description))
    return schemas


def parse_route_options(source: str) -> Optional[RouteOptions]:
    """Parse the first ``export const options = {...}`` literal; ``None`` when there is none."""
    for decl in OPTIONS_DECL_RE.finditer(source):
        body = extract_braced_block(source, decl.end())
        if body is None:
            continue
        entries = object_entries(body)
        detail: dict[str, str] = {}
        detail_body = _object_body(entries.get("detail", ""))
        if detail_body is not None:
            detail = object_entries(detail_body)

        def _pick(key: str, parse: Any) -> Any:
            value = parse(entries[key]) if entries.get(key) else None
            if value is None and detail.get(key):
                value = parse(detail[key])
            return value

        response_description = string_value(entries.get("responseDescription", ""))
        request_schema = entries.get("body")
        return RouteOptions(
            tags=_pick("tags", string_list_value),
            summary=_pick("summary", string_value),
            description=_pick("description", string_value),
            request_schema=_collapse(request_schema) if request_schema else None,
            response_schemas=_response_schemas(entries.get("response", ""), response_description),
        )
    return None
