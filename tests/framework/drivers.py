"""
Drivers for the routing libraries under test.

A driver owns one application of its routing library. It creates adapters
over that application, builds handlers in the library's calling convention
and sends requests to it, so tests can be written once for every backend.
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from oasrouter.backends.base import RouterAdapter
from oasrouter.backends.memory import MemoryAdapter, MemoryRouter, Request, Response


@dataclass
class HttpResponse:
    """Response returned by a driver, with lower-case header names."""

    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def content_type(self) -> Optional[str]:
        return self.headers.get('content-type')

    @property
    def text(self) -> str:
        return self.body.decode('utf-8')

    def json(self) -> Any:
        return json.loads(self.body)


class BackendDriver(ABC):
    """Abstract interface of a routing library driver."""

    name: str = ''

    @abstractmethod
    def create_adapter(self) -> RouterAdapter:
        """Create an adapter over the application of this driver."""
        pass

    @abstractmethod
    def param(self, name: str) -> str:
        """Return a path parameter segment in the library's own syntax."""
        pass

    @abstractmethod
    def text_handler(self, text: str) -> Callable[..., Any]:
        """Build a handler answering 200 with ``text``."""
        pass

    @abstractmethod
    def get(self, path: str) -> HttpResponse:
        """Send a GET request to the application."""
        pass


class MemoryDriver(BackendDriver):
    """Driver that dispatches requests on a MemoryRouter directly."""

    name = 'memory'

    def __init__(self):
        self.backend = MemoryRouter()

    def create_adapter(self) -> MemoryAdapter:
        return MemoryAdapter(self.backend)

    def param(self, name: str) -> str:
        return f":{name}"

    def text_handler(self, text: str) -> Callable[[Request], Response]:
        def handler(request: Request) -> Response:
            return Response(200, text.encode('utf-8'), {'Content-Type': 'text/plain'})

        return handler

    def get(self, path: str) -> HttpResponse:
        response = self.backend.dispatch(Request(method='GET', path=path))
        body = response.body.encode('utf-8') if isinstance(response.body, str) else response.body
        return HttpResponse(
            status_code=response.status_code,
            headers={k.lower(): v for k, v in response.headers.items()},
            body=body,
        )


class StarletteDriver(BackendDriver):
    """Driver that sends requests to a Starlette application through its TestClient."""

    name = 'starlette'

    def __init__(self):
        from starlette.applications import Starlette

        self.app = Starlette()

    def create_adapter(self) -> RouterAdapter:
        from oasrouter.backends.starlette import StarletteAdapter

        return StarletteAdapter(self.app)

    def param(self, name: str) -> str:
        return f"{{{name}}}"

    def text_handler(self, text: str) -> Callable[..., Any]:
        from starlette.responses import PlainTextResponse

        def endpoint(request):
            return PlainTextResponse(text)

        return endpoint

    def get(self, path: str) -> HttpResponse:
        from starlette.testclient import TestClient

        response = TestClient(self.app).get(path)
        return HttpResponse(
            status_code=response.status_code,
            headers={k.lower(): v for k, v in response.headers.items()},
            body=response.content,
        )


class FlaskDriver(BackendDriver):
    """Driver that sends requests to a Flask application through its test client."""

    name = 'flask'

    def __init__(self):
        from flask import Flask

        self.app = Flask(__name__)

    def create_adapter(self) -> RouterAdapter:
        from oasrouter.backends.flask import FlaskAdapter

        return FlaskAdapter(self.app)

    def param(self, name: str) -> str:
        return f"<{name}>"

    def text_handler(self, text: str) -> Callable[..., Any]:
        def view(**path_params):
            return text

        return view

    def get(self, path: str) -> HttpResponse:
        response = self.app.test_client().get(path)
        return HttpResponse(
            status_code=response.status_code,
            headers={k.lower(): v for k, v in response.headers.items()},
            body=response.data,
        )
