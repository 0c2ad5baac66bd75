#!/usr/bin/env python3
"""Print the static routing table of a file-system routes directory (or one route file)."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

_api_dir = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(_api_dir))

from dotenv import load_dotenv

from routescope.models.route_analysis import RouteAnalysis
from routescope.services import analyzer_config, route_analyzer_service
from routescope.services.route_options_parser import parse_route_options


def _row_flags(row: RouteAnalysis) -> str:
    flags = []
    if not row.has_handler:
        flags.append("no-handler")
    if row.has_options:
        flags.append("options")
    if row.errors:
        flags.append(f"errors={len(row.errors)}")
    return ",".join(flags)


def _print_human_table(routes_dir: str, routes: list[RouteAnalysis]) -> None:
    summary = route_analyzer_service.summarize_routes(routes)
    print("Route Table")
    print("===========")
    print(f"routes_dir: {routes_dir}")
    print(
        "counts: "
        f"routes={summary.route_count}, "
        f"handlers={summary.handler_count}, "
        f"missing_handlers={summary.missing_handler_count}, "
        f"with_errors={summary.error_count}"
    )
    if not routes:
        print("no routes found")
        return
    width = max(len(row.url_path) for row in routes)
    for row in routes:
        method = row.method or "?"
        line = f"  {method:<7} {row.url_path:<{width}}  {row.file_path}"
        flags = _row_flags(row)
        if flags:
            line += f"  [{flags}]"
        print(line)
        for error in row.errors:
            print(f"      ! {error.message}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Static analysis of file-system route definitions")
    parser.add_argument("target", help="Routes directory, or a single route file")
    parser.add_argument("--routes-dir", type=str, default="", help="Routes root used for URL paths of a single file")
    parser.add_argument("--json", action="store_true", help="Print full JSON report")
    parser.add_argument("--output", type=str, default="", help="Write full report JSON to path")
    parser.add_argument("--include-options", action="store_true", help="Parse exported options metadata")
    parser.add_argument("--max-workers", type=int, default=None, help="Parallel file analyses")
    parser.add_argument("--fail-on-errors", action="store_true", help="Exit 1 when any file has errors")
    parser.add_argument(
        "--fail-on-missing-handler",
        action="store_true",
        help="Exit 1 when any route has no handler export",
    )
    parser.add_argument("--verbose", action="store_true", help="Log per-file analysis")
    args = parser.parse_args(argv)

    load_dotenv()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else analyzer_config.log_level(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    include_options = args.include_options or analyzer_config.include_options_default()
    options_parser = parse_route_options if include_options else None
    target = Path(args.target)
    if target.is_file():
        routes_dir = args.routes_dir or route_analyzer_service.infer_routes_root(args.target)
        routes = [
            route_analyzer_service.analyze_file(args.target, routes_dir, options_parser=options_parser)
        ]
    else:
        routes_dir = args.target
        routes = route_analyzer_service.analyze_directory(
            routes_dir,
            options_parser=options_parser,
            max_workers=args.max_workers,
        )

    report = {
        "routes_dir": routes_dir,
        "routes": [row.model_dump(mode="json", by_alias=True) for row in routes],
        "summary": route_analyzer_service.summarize_routes(routes).model_dump(mode="json"),
    }

    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(report, indent=2) + "\n", encoding="utf-8")

    if args.json:
        print(json.dumps(report, indent=2))
    else:
        _print_human_table(routes_dir, routes)

    if args.fail_on_errors and any(row.errors for row in routes):
        return 1
    if args.fail_on_missing_handler and any(not row.has_handler for row in routes):
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
