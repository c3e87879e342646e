"""Path template helpers: prefix joining and translation to OpenAPI templates."""

import re
from typing import List

_BRACE_PARAM = re.compile(r"\{([^{}/]+)\}")
_BRACE_CONVERTER = re.compile(r"\{([^{}:/]+):[^{}/]*\}")
_ANGLE_PARAM = re.compile(r"<(?:[^<>/]+:)?([^<>:/]+)>")


def join_path(prefix: str, path: str) -> str:
    """Join a prefix and a route path, collapsing empty segments.

    Args:
        prefix: The prefix path (e.g., "", "/", "/api", "/api/")
        path: The route path (e.g., "/", "/list", "/{id}")

    Returns:
        An absolute path without duplicated or trailing separators

    Examples:
        join_path("", "/users") -> "/users"
        join_path("/", "users") -> "/users"
        join_path("/api", "/users") -> "/api/users"
        join_path("/api/", "//users/") -> "/api/users"
        join_path("/api", "/") -> "/api"
    """
    segments = [s for s in f"{prefix}/{path}".split("/") if s]
    return "/" + "/".join(segments)


def transform_path_params_with_colon(path: str) -> str:
    """Translate colon-style parameters (``/users/:id``) to ``/users/{id}``.

    Each segment is handled on its own, so the root path and trailing
    slashes are preserved and the translation is idempotent.
    """
    segments = path.split("/")
    for i, segment in enumerate(segments):
        if segment.startswith(":"):
            segments[i] = "{" + segment[1:] + "}"
    return "/".join(segments)


def transform_path_params_with_converters(path: str) -> str:
    """Strip converters from brace-style parameters: ``{id:int}`` -> ``{id}``."""
    return _BRACE_CONVERTER.sub(r"{\1}", path)


def transform_path_params_with_angle_brackets(path: str) -> str:
    """Translate ``<id>`` and ``<int:id>`` parameters to ``{id}``."""
    return _ANGLE_PARAM.sub(r"{\1}", path)


def identity(path: str) -> str:
    return path


def find_path_params(path: str) -> List[str]:
    """Return the distinct ``{name}`` placeholders of an OpenAPI path, sorted."""
    return sorted(set(_BRACE_PARAM.findall(path)))
