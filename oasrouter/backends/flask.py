"""
Adapter for Flask applications.

Flask paths use angle brackets (``/users/<int:id>``), translated to
``/users/{id}`` in the OpenAPI path.
"""

from typing import Any, Callable

from flask import Flask, Response
from werkzeug.routing import Rule

from ..paths import transform_path_params_with_angle_brackets
from .base import RouterAdapter


class FlaskAdapter(RouterAdapter):
    """Registers view functions on a Flask application.

    Each (method, path) pair gets its own endpoint, named ``"<METHOD> <path>"``.
    Registering the pair again swaps the view function of that endpoint.
    """

    def __init__(self, app: Flask):
        self.app = app

    def add_route(self, method: str, path: str, handler: Callable[..., Any]) -> Rule:
        endpoint = f"{method} {path}"
        if endpoint in self.app.view_functions:
            self.app.view_functions[endpoint] = handler
        else:
            self.app.add_url_rule(path, endpoint=endpoint, view_func=handler, methods=[method])
        return next(self.app.url_map.iter_rules(endpoint))

    def swagger_handler(self, content_type: str, body: bytes) -> Callable[..., Response]:
        def view() -> Response:
            return Response(body, status=200, content_type=content_type)

        return view

    def transform_path_to_oas_path(self, path: str) -> str:
        return transform_path_params_with_angle_brackets(path)
