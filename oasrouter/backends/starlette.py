"""
Adapter for Starlette applications.

Starlette paths use braces, optionally with a converter (``/users/{id:int}``).
The converter is dropped in the OpenAPI path.
"""

from typing import Any, Callable, Union

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Route, Router

from ..paths import transform_path_params_with_converters
from .base import RouterAdapter


class StarletteAdapter(RouterAdapter):
    """Registers endpoints on a Starlette application or router."""

    def __init__(self, app: Union[Starlette, Router]):
        self.router: Router = app.router if isinstance(app, Starlette) else app

    def add_route(self, method: str, path: str, handler: Callable[..., Any]) -> Route:
        """Add a Route, replacing a route registered on the same path and methods."""
        route = Route(path, endpoint=handler, methods=[method])
        self.router.routes[:] = [
            existing for existing in self.router.routes
            if not (
                isinstance(existing, Route)
                and existing.path == route.path
                and existing.methods == route.methods
            )
        ]
        self.router.routes.append(route)
        return route

    def swagger_handler(self, content_type: str, body: bytes) -> Callable[[Request], Any]:
        async def endpoint(request: Request) -> Response:
            # an explicit header keeps Starlette from appending a charset
            return Response(content=body, headers={"content-type": content_type})

        return endpoint

    def transform_path_to_oas_path(self, path: str) -> str:
        return transform_path_params_with_converters(path)
