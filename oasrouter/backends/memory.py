"""
In-process routing library with colon-style path parameters.

``MemoryRouter`` needs no web framework: requests are dispatched by calling
``dispatch`` directly, which makes it suitable for tests and for embedding
the router in event-driven runtimes.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple, Union

from ..paths import transform_path_params_with_colon
from .base import RouterAdapter


@dataclass
class Request:
    """Represents an HTTP request."""

    method: str
    path: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None
    query_params: Dict[str, str] = field(default_factory=dict)
    path_params: Dict[str, str] = field(default_factory=dict)


@dataclass
class Response:
    """Represents an HTTP response."""

    status_code: int
    body: Union[bytes, str] = b""
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def content_type(self) -> Optional[str]:
        return self.headers.get("Content-Type")


Handler = Callable[[Request], Response]


@dataclass
class MemoryRoute:
    method: str
    path: str
    handler: Handler
    param_names: List[str] = field(default_factory=list)


def _is_param(segment: str) -> bool:
    return segment.startswith(":") or (segment.startswith("{") and segment.endswith("}"))


def _param_name(segment: str) -> str:
    return segment[1:] if segment.startswith(":") else segment[1:-1]


def _split(path: str) -> List[str]:
    return [s for s in path.split("/") if s]


class RouteNode:
    """A node in the route trie structure.

    Each node represents a path segment and can have:
    - static_children: Dict mapping exact segment strings to child nodes
    - param_child: Single child node matching any segment (e.g., :id or {id})
    - routes: Dict mapping HTTP methods to the routes ending at this node
    """

    def __init__(self):
        self.static_children: Dict[str, "RouteNode"] = {}
        self.param_child: Optional["RouteNode"] = None
        self.routes: Dict[str, MemoryRoute] = {}

    def add_route(self, segments: List[str], route: MemoryRoute) -> None:
        """Add a route to the trie, replacing any route with the same method."""
        if not segments:
            self.routes[route.method] = route
            return

        segment = segments[0]
        if _is_param(segment):
            if self.param_child is None:
                self.param_child = RouteNode()
            child = self.param_child
        else:
            child = self.static_children.setdefault(segment, RouteNode())
        child.add_route(segments[1:], route)

    def match(self, segments: List[str], method: str) -> Optional[Tuple[MemoryRoute, List[str]]]:
        """Match a path against the trie.

        Returns:
            Tuple of (route, parameter values in path order) if matched, None otherwise
        """
        if not segments:
            route = self.routes.get(method)
            return (route, []) if route else None

        segment = segments[0]
        remaining = segments[1:]

        # Static segments are more specific than parameters
        if segment in self.static_children:
            result = self.static_children[segment].match(remaining, method)
            if result:
                return result

        if self.param_child:
            result = self.param_child.match(remaining, method)
            if result:
                route, values = result
                return route, [segment] + values

        return None

    def has_path(self, segments: List[str]) -> bool:
        """Check if any route exists at this path (regardless of method)."""
        if not segments:
            return bool(self.routes)

        segment = segments[0]
        remaining = segments[1:]
        if segment in self.static_children and self.static_children[segment].has_path(remaining):
            return True
        return bool(self.param_child and self.param_child.has_path(remaining))


class MemoryRouter:
    """Routes requests to handlers registered on colon-style paths."""

    def __init__(self):
        self._route_tree = RouteNode()

    def add(self, method: str, path: str, handler: Handler) -> MemoryRoute:
        segments = _split(path)
        route = MemoryRoute(
            method=method.upper(),
            path=path,
            handler=handler,
            param_names=[_param_name(s) for s in segments if _is_param(s)],
        )
        self._route_tree.add_route(segments, route)
        return route

    def match(self, method: str, path: str) -> Optional[Tuple[MemoryRoute, Dict[str, str]]]:
        result = self._route_tree.match(_split(path), method.upper())
        if result is None:
            return None
        route, values = result
        return route, dict(zip(route.param_names, values))

    def dispatch(self, request: Request) -> Response:
        """Call the handler matching the request; 404 or 405 when there is none."""
        result = self.match(request.method, request.path)
        if result is None:
            if self._route_tree.has_path(_split(request.path)):
                return Response(405, b"Method Not Allowed", {"Content-Type": "text/plain"})
            return Response(404, b"Not Found", {"Content-Type": "text/plain"})

        route, path_params = result
        request.path_params = path_params
        return route.handler(request)


class MemoryAdapter(RouterAdapter):
    """Adapter for MemoryRouter."""

    def __init__(self, router: Optional[MemoryRouter] = None):
        self.router = router if router is not None else MemoryRouter()

    def add_route(self, method: str, path: str, handler: Handler) -> MemoryRoute:
        return self.router.add(method, path, handler)

    def swagger_handler(self, content_type: str, body: bytes) -> Handler:
        def handler(request: Request) -> Response:
            return Response(200, body, {"Content-Type": content_type})

        return handler

    def transform_path_to_oas_path(self, path: str) -> str:
        return transform_path_params_with_colon(path)
