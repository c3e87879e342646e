"""
Adapter interface between the router and an HTTP routing library.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable


class RouterAdapter(ABC):
    """Abstract base class for routing library adapters.

    An adapter registers handlers on the wrapped routing library, builds the
    handlers that serve the generated documentation, and translates the
    library's path syntax to OpenAPI path templates.
    """

    @abstractmethod
    def add_route(self, method: str, path: str, handler: Callable[..., Any]) -> Any:
        """
        Register a handler on the routing library.

        Args:
            method: Upper-case HTTP method
            path: Route path in the library's own syntax
            handler: Handler in the library's own calling convention

        Returns:
            The route object of the library, returned unchanged to the caller
        """
        pass

    @abstractmethod
    def swagger_handler(self, content_type: str, body: bytes) -> Callable[..., Any]:
        """
        Build a handler that always answers 200 with ``body`` and ``content_type``.

        Args:
            content_type: Exact value of the Content-Type header
            body: Bytes to serve

        Returns:
            Handler in the library's own calling convention
        """
        pass

    @abstractmethod
    def transform_path_to_oas_path(self, path: str) -> str:
        """
        Translate a route path in the library's syntax to an OpenAPI path template.

        Args:
            path: Route path, e.g. ``/users/:id``

        Returns:
            OpenAPI path, e.g. ``/users/{id}``
        """
        pass
