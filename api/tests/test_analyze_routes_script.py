"""Tests for the analyze_routes.py CLI."""

import json
import os
import sys
from pathlib import Path

_api_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.join(_api_dir, "scripts"))

from analyze_routes import main


def test_human_table_lists_routes_in_order(routes_dir: Path, capsys) -> None:
    assert main([str(routes_dir)]) == 0
    out = capsys.readouterr().out
    assert "routes=5, handlers=5, missing_handlers=0, with_errors=0" in out
    lines = [line for line in out.splitlines() if line.startswith("  ")]
    assert [line.split()[1] for line in lines] == ["/", "/health", "/posts/*slug", "/testing", "/users/:id"]
    assert lines[1].split()[0] == "GET"
    assert "[options]" in lines[1]


def test_json_output_and_file(routes_dir: Path, tmp_path: Path, capsys) -> None:
    out_path = tmp_path / "reports" / "routes.json"
    assert main([str(routes_dir), "--json", "--include-options", "--output", str(out_path)]) == 0
    printed = json.loads(capsys.readouterr().out)
    written = json.loads(out_path.read_text(encoding="utf-8"))
    assert printed == written
    assert printed["summary"]["route_count"] == 5
    health = next(r for r in printed["routes"] if r["url_path"] == "/health")
    assert health["options"]["response_schemas"][0]["schema"] == 't.String({ example: "OK" })'


def test_single_file_target(routes_dir: Path, capsys) -> None:
    target = routes_dir / "users" / "[id].ts"
    assert main([str(target), "--json", "--routes-dir", str(routes_dir)]) == 0
    report = json.loads(capsys.readouterr().out)
    assert [r["url_path"] for r in report["routes"]] == ["/users/:id"]
    assert report["routes"][0]["method"] == "DELETE"


def test_fail_on_missing_handler(tmp_path: Path, write_route, capsys) -> None:
    root = tmp_path / "routes"
    write_route(root, "ok.ts", "export const get = h;\n")
    write_route(root, "empty.ts", "export const schema = {};\n")
    assert main([str(root)]) == 0
    assert main([str(root), "--fail-on-missing-handler"]) == 1
    assert "[no-handler]" in capsys.readouterr().out


def test_fail_on_errors(tmp_path: Path, write_route, capsys) -> None:
    root = tmp_path / "routes"
    write_route(root, "ok.ts", "export const get = h;\n")
    (root / "broken.ts").write_bytes(b"\xff\xfe")
    assert main([str(root), "--fail-on-errors"]) == 1
    assert "Failed to read file" in capsys.readouterr().out


def test_missing_directory_prints_empty_table(tmp_path: Path, capsys) -> None:
    assert main([str(tmp_path / "nope"), "--fail-on-errors"]) == 0
    assert "no routes found" in capsys.readouterr().out
