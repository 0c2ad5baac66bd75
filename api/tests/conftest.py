"""Pytest configuration and fixtures."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _reset_analyzer_env() -> None:
    # Env-driven config is read at call time; keep each test hermetic.
    for key in (
        "ROUTESCOPE_ROUTES_DIR",
        "ROUTESCOPE_MAX_WORKERS",
        "ROUTESCOPE_INCLUDE_OPTIONS",
        "ROUTESCOPE_LOG_LEVEL",
    ):
        os.environ.pop(key, None)


def _write_route(root: Path, relative: str, source: str) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(source, encoding="utf-8")
    return path


@pytest.fixture
def routes_dir(tmp_path: Path) -> Path:
    """A small routes tree in the shape of an Elysia file-router backend."""
    root = tmp_path / "src" / "routes"
    _write_route(
        root,
        "index.ts",
        'import type { RouteMethod } from "../types";\n\n'
        'export const method = "get" satisfies RouteMethod;\n\n'
        'export const handler = ({ redirect }) => redirect("/health");\n',
    )
    _write_route(
        root,
        "health.ts",
        'import { t } from "elysia";\n\n'
        'export const handler = () => "OK";\n\n'
        "export const options = {\n"
        '  tags: ["Health"],\n'
        '  summary: "Health check",\n'
        '  description: "Check if the server is running",\n'
        "  response: {\n"
        '    200: t.String({ example: "OK" }),\n'
        "  },\n"
        '  responseDescription: "OK",\n'
        "} satisfies RouteOptions;\n",
    )
    _write_route(
        root,
        "users/[id].ts",
        "export async function delete(ctx) {\n  return null;\n}\n",
    )
    _write_route(
        root,
        "posts/[...slug].tsx",
        "const post = () => null;\nexport { post };\n",
    )
    _write_route(root, "testing/index.ts", "export const get = (app) => app;\n")
    _write_route(root, "_middleware.ts", "export default (app) => app;\n")
    _write_route(root, "_shared/util.ts", "export const get = 1;\n")
    _write_route(root, ".hidden/secret.ts", "export const get = 1;\n")
    _write_route(root, "notes.md", "export const get = 1;\n")
    return root


@pytest.fixture
def write_route():
    return _write_route
