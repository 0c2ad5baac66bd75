"""Route analyzer service: static routing table of a file-system routes directory.

Nothing here executes route code. Each file is analyzed from its path and text
alone, so files are independent and may be analyzed concurrently.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path, PurePosixPath
from typing import Callable, Iterable, Optional

from routescope.models.route_analysis import (
    ParseError,
    RouteAnalysis,
    RouteOptions,
    RouteTableSummary,
)
from routescope.services import analyzer_config
from routescope.services.export_classifier import classify_exports
from routescope.services.method_resolver import resolve_method
from routescope.services.path_converter import ROUTE_FILE_EXTENSIONS, file_path_to_url_path

logger = logging.getLogger(__name__)

OptionsParser = Callable[[str], Optional[RouteOptions]]

ROUTES_DIR_MARKERS: tuple[str, ...] = ("/routes/", "/routes-admin/")
SKIPPED_NAME_PREFIXES: tuple[str, ...] = (".", "_")
UNRESOLVED_METHOD = "UNRESOLVED"


def _read_source(file_path: str) -> tuple[str | None, str | None]:
    try:
        return Path(file_path).read_text(encoding="utf-8"), None
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        return None, str(exc)


def analyze_file(
    file_path: str,
    routes_root: str,
    *,
    options_parser: OptionsParser | None = None,
) -> RouteAnalysis:
    """Analyze one route file. Never raises; problems are returned in ``errors``."""
    url_path = file_path_to_url_path(file_path, routes_root)
    source, read_error = _read_source(file_path)
    if source is None:
        logger.warning("route_file_read_failed path=%s error=%s", file_path, read_error)
        return RouteAnalysis(
            file_path=file_path,
            url_path=url_path,
            errors=[ParseError(message=f"Failed to read file: {read_error}")],
        )

    exports = classify_exports(source)
    resolution = resolve_method(exports)

    options: RouteOptions | None = None
    errors: list[ParseError] = []
    if options_parser is not None and resolution.has_options:
        try:
            options = options_parser(source)
        except Exception as exc:
            logger.warning("route_options_parse_failed path=%s error=%s", file_path, exc)
            errors.append(ParseError(message=f"Failed to parse options: {exc}"))

    logger.debug(
        "route_file_analyzed path=%s url=%s method=%s exports=%s",
        file_path,
        url_path,
        resolution.method or "-",
        len(exports),
    )
    return RouteAnalysis(
        file_path=file_path,
        url_path=url_path,
        method=resolution.method,
        has_handler=resolution.has_handler,
        has_options=resolution.has_options,
        options=options,
        exports=exports,
        errors=errors,
    )


def discover_route_files(routes_root: str) -> list[str]:
    """Route files below ``routes_root``; hidden and ``_``-prefixed entries are skipped at every level."""
    files: list[str] = []

    def _walk(directory: Path) -> None:
        try:
            entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
        except OSError as exc:
            logger.warning("route_dir_list_failed path=%s error=%s", directory, exc)
            return
        for entry in entries:
            if entry.name.startswith(SKIPPED_NAME_PREFIXES):
                continue
            if entry.is_dir():
                _walk(entry)
            elif entry.suffix in ROUTE_FILE_EXTENSIONS:
                files.append(str(entry))

    _walk(Path(routes_root))
    return files


def analyze_directory(
    routes_root: str,
    *,
    options_parser: OptionsParser | None = None,
    max_workers: int | None = None,
) -> list[RouteAnalysis]:
    """Analyze every route file under ``routes_root``, sorted by ``url_path``.

    A missing root, or one that is not a directory, yields an empty list.
    """
    root = Path(routes_root)
    if not root.exists() or not root.is_dir():
        logger.info("routes_dir_not_found path=%s", routes_root)
        return []

    files = discover_route_files(routes_root)
    workers = max_workers if max_workers is not None else analyzer_config.max_workers()
    workers = max(1, int(workers))

    def _analyze(path: str) -> RouteAnalysis:
        return analyze_file(path, routes_root, options_parser=options_parser)

    if workers == 1 or len(files) < 2:
        analyses = [_analyze(path) for path in files]
    else:
        with ThreadPoolExecutor(max_workers=min(workers, len(files))) as ex:
            analyses = list(ex.map(_analyze, files))

    # Stable: equal url_paths keep discovery order.
    analyses.sort(key=lambda row: row.url_path)
    logger.info(
        "routes_dir_analyzed path=%s files=%s with_errors=%s",
        routes_root,
        len(analyses),
        sum(1 for row in analyses if row.errors),
    )
    return analyses


def infer_routes_root(file_path: str) -> str:
    """Guess the routes root of a file analyzed on its own."""
    normalized = file_path.replace("\\", "/")
    for marker in ROUTES_DIR_MARKERS:
        idx = normalized.find(marker)
        if idx >= 0:
            return normalized[: idx + len(marker)]
    parent = str(PurePosixPath(normalized).parent)
    return "" if parent == "." else parent


def is_within_root(path: str, root: str) -> bool:
    """True when ``path`` resolves to ``root`` or somewhere below it."""
    try:
        return Path(path).resolve().is_relative_to(Path(root).resolve())
    except (OSError, ValueError):
        return False


def summarize_routes(analyses: Iterable[RouteAnalysis]) -> RouteTableSummary:
    route_count = 0
    handler_count = 0
    error_count = 0
    dynamic = 0
    catch_all = 0
    by_method: dict[str, int] = {}
    for row in analyses:
        route_count += 1
        if row.has_handler:
            handler_count += 1
        if row.errors:
            error_count += 1
        key = row.method or UNRESOLVED_METHOD
        by_method[key] = by_method.get(key, 0) + 1
        segments = [segment for segment in row.url_path.split("/") if segment]
        if any(segment.startswith(":") for segment in segments):
            dynamic += 1
        if any(segment.startswith("*") for segment in segments):
            catch_all += 1
    return RouteTableSummary(
        route_count=route_count,
        handler_count=handler_count,
        missing_handler_count=route_count - handler_count,
        error_count=error_count,
        by_method=dict(sorted(by_method.items())),
        dynamic_route_count=dynamic,
        catch_all_route_count=catch_all,
    )
