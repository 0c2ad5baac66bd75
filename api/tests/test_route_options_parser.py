from __future__ import annotations

from routescope.services.route_options_parser import (
    extract_braced_block,
    parse_route_options,
    split_top_level,
    string_value,
)

HEALTH_ROUTE = """import { t } from "elysia";
import type { RouteMethod, RouteOptions } from "../types";

export const method = "get" satisfies RouteMethod;

export const handler = () => "OK";

export const options = {
  tags: ["Admin", 'Health'],
  summary: "Admin health check",
  description: "Check if the admin server is running, {really}",
  response: {
    200: t.String({ example: "OK" }),
    404: t.Object({
      message: t.String(),
    }),
  },
  responseDescription: "OK",
} satisfies RouteOptions;
"""


def test_parses_tags_summary_description_and_responses() -> None:
    options = parse_route_options(HEALTH_ROUTE)
    assert options is not None
    assert options.tags == ["Admin", "Health"]
    assert options.summary == "Admin health check"
    assert options.description == "Check if the admin server is running, {really}"
    assert options.request_schema is None
    assert [(r.status_code, r.schema_ref, r.description) for r in options.response_schemas] == [
        (200, 't.String({ example: "OK" })', "OK"),
        (404, "t.Object({ message: t.String(), })", None),
    ]


def test_response_schema_serializes_as_schema() -> None:
    options = parse_route_options(HEALTH_ROUTE)
    assert options is not None
    payload = options.model_dump(mode="json", by_alias=True)
    assert payload["response_schemas"][0]["schema"] == 't.String({ example: "OK" })'


def test_request_body_and_typed_declaration() -> None:
    source = (
        "export const options: RouteOptions = {\n"
        "  body: t.Object({\n    name: t.String(),\n  }),\n"
        "  detail: { summary: 'Create user', tags: ['Users'] },\n"
        "};\n"
    )
    options = parse_route_options(source)
    assert options is not None
    assert options.request_schema == "t.Object({ name: t.String(), })"
    assert options.summary == "Create user"
    assert options.tags == ["Users"]
    assert options.response_schemas == []


def test_top_level_values_win_over_detail() -> None:
    source = 'export const options = { summary: "top", detail: { summary: "nested" } };'
    options = parse_route_options(source)
    assert options is not None
    assert options.summary == "top"


def test_missing_or_non_literal_options() -> None:
    assert parse_route_options("export const handler = () => 1;") is None
    assert parse_route_options("export const options = buildOptions();") is None
    assert parse_route_options("export const options = { summary: 'unterminated'") is None


def test_non_literal_values_are_left_empty() -> None:
    options = parse_route_options("export const options = { summary: SUMMARY, tags: TAGS };")
    assert options is not None
    assert options.summary is None
    assert options.tags is None


def test_lexical_helpers() -> None:
    text = "{ a: '}', b: [1, 2], c: f(x, y) } tail"
    assert extract_braced_block(text, 0) == " a: '}', b: [1, 2], c: f(x, y) "
    assert split_top_level(" a: '}', b: [1, 2], c: f(x, y) ") == ["a: '}'", "b: [1, 2]", "c: f(x, y)"]
    assert string_value('"say \\"hi\\""') == 'say "hi"'
    assert string_value("`tpl`") == "tpl"
    assert string_value("t.String()") is None
