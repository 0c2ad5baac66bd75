"""File-system route path -> URL path conversion.

``users/[id].ts`` becomes ``/users/:id``, ``posts/[...slug].ts`` becomes
``/posts/*slug`` and ``index`` segments are elided.
"""

from __future__ import annotations

from pathlib import PurePosixPath

# Stripping order matters: only the first matching suffix is removed.
ROUTE_FILE_EXTENSIONS: tuple[str, ...] = (".ts", ".tsx")
INDEX_SEGMENT = "index"
CATCH_ALL_MARKER = "..."


def _posix(value: str) -> str:
    return str(value or "").replace("\\", "/")


def relative_route_path(file_path: str, routes_root: str) -> str:
    """Path of ``file_path`` below ``routes_root``; ``file_path`` verbatim when it is not below it."""
    raw = _posix(file_path)
    try:
        relative = PurePosixPath(raw).relative_to(PurePosixPath(_posix(routes_root)))
    except ValueError:
        return raw
    text = str(relative)
    return "" if text == "." else text


def strip_route_extension(path: str) -> str:
    for suffix in ROUTE_FILE_EXTENSIONS:
        if path.endswith(suffix):
            return path[: -len(suffix)]
    return path


def url_segment(segment: str) -> str | None:
    """Translate one path segment; ``None`` means the segment is elided."""
    if segment == INDEX_SEGMENT:
        return None
    if segment.startswith("[") and segment.endswith("]") and len(segment) >= 2:
        param = segment[1:-1]
        if param.startswith(CATCH_ALL_MARKER):
            return "*" + param[len(CATCH_ALL_MARKER):]
        return ":" + param
    return segment


def file_path_to_url_path(file_path: str, routes_root: str) -> str:
    """Convert a route file path to its canonical URL path.

    The result always starts with ``/`` and only the root path ``/`` ends with one.
    """
    without_ext = strip_route_extension(relative_route_path(file_path, routes_root))

    url_path = "/"
    for segment in without_ext.split("/"):
        if not segment:
            continue
        translated = url_segment(segment)
        if translated is None:
            continue
        url_path += translated + "/"

    if len(url_path) > 1 and url_path.endswith("/"):
        url_path = url_path[:-1]
    return url_path
