"""Router that registers routes on a routing library and documents them in OpenAPI."""

import copy
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

from .backends.base import RouterAdapter
from .document import DEFAULT_OPENAPI_VERSION, Document, Operation
from .documentation import (
    JSON_CONTENT_TYPE,
    YAML_CONTENT_TYPE,
    ValidationContext,
    json_to_yaml,
    marshal_json,
    validate_document,
    validate_operation,
)
from .exceptions import (
    InfoRequiredError,
    InvalidDocumentationPathError,
    OpenAPIRequiredError,
    TitleRequiredError,
    VersionRequiredError,
)
from .models import Definitions, HTTPMethod, MethodLike, method_name
from .operation import build_operation
from .paths import join_path

logger = logging.getLogger(__name__)

DEFAULT_JSON_DOCUMENTATION_PATH = "/documentation/json"
DEFAULT_YAML_DOCUMENTATION_PATH = "/documentation/yaml"


@dataclass
class Options:
    """Options used to create a Router.

    Attributes:
        openapi: Skeleton of the document. Info title and version are required.
        context: Validation settings. Defaults to ``ValidationContext()``.
        json_documentation_path: Path of the JSON document. Defaults to /documentation/json.
        yaml_documentation_path: Path of the YAML document. Defaults to /documentation/yaml.
        path_prefix: Prefix added to every route path.
    """

    openapi: Optional[Document] = None
    context: Optional[ValidationContext] = None
    json_documentation_path: str = ""
    yaml_documentation_path: str = ""
    path_prefix: str = ""


@dataclass
class SubRouterOptions:
    path_prefix: str = ""


def generate_new_valid_openapi(openapi: Optional[Document]) -> Document:
    """Fill the defaults of the document skeleton and check its required fields."""
    if openapi is None:
        raise OpenAPIRequiredError()
    if not openapi.openapi:
        openapi.openapi = DEFAULT_OPENAPI_VERSION
    if openapi.paths is None:
        openapi.paths = {}

    if openapi.info is None:
        raise InfoRequiredError()
    if not openapi.info.title:
        raise TitleRequiredError()
    if not openapi.info.version:
        raise VersionRequiredError()
    return openapi


def _documentation_path(path: str, default: str) -> str:
    if not path:
        return default
    if not path.startswith("/"):
        raise InvalidDocumentationPathError(path)
    return path


class Router:
    """Registers routes on a routing library and describes them in an OpenAPI document.

    Routers created with ``sub_router`` share the same document, so a route
    added on any of them is visible in the document of all of them.

    Example:
        router = Router(MemoryAdapter(MemoryRouter()), Options(
            openapi=Document(info=Info(title="My API", version="1.0.0")),
        ))

        @router.get("/users/:id")
        def get_user(request):
            return Response(200, "...")

        router.generate_and_expose_openapi()
        # serves GET /documentation/json and GET /documentation/yaml
    """

    def __init__(self, adapter: RouterAdapter, options: Optional[Options] = None):
        """Initialize a router.

        Args:
            adapter: Adapter of the routing library routes are registered on
            options: Document skeleton, validation context, documentation paths and prefix

        Raises:
            ConfigurationError: if the document skeleton or a documentation path is invalid
        """
        options = options if options is not None else Options()

        self.adapter = adapter
        self.document = generate_new_valid_openapi(options.openapi)
        self.context = options.context if options.context is not None else ValidationContext()
        self.json_documentation_path = _documentation_path(
            options.json_documentation_path, DEFAULT_JSON_DOCUMENTATION_PATH
        )
        self.yaml_documentation_path = _documentation_path(
            options.yaml_documentation_path, DEFAULT_YAML_DOCUMENTATION_PATH
        )
        self.path_prefix = options.path_prefix

    def sub_router(self, adapter: RouterAdapter, options: Optional[SubRouterOptions] = None) -> "Router":
        """Create a router that writes into the same document.

        The new router keeps the document, validation context and
        documentation paths of this one, with its own adapter and prefix.

        Example:
            api = router.sub_router(MemoryAdapter(api_backend), SubRouterOptions(path_prefix="/api"))
            api.add_route("GET", "/users", list_users)
            # documented as /api/users
        """
        options = options if options is not None else SubRouterOptions()

        router = copy.copy(self)
        router.adapter = adapter
        router.path_prefix = options.path_prefix
        logger.debug(f"Created sub router with prefix '{router.path_prefix}'")
        return router

    def add_route(
        self,
        method: MethodLike,
        path: str,
        handler: Callable[..., Any],
        definitions: Optional[Definitions] = None,
    ) -> Any:
        """Register a route whose operation is built from ``definitions``.

        Returns:
            The route object of the routing library

        Raises:
            ResolutionError: if a schema of the definitions cannot be generated
            OpenAPIValidationError: if the built operation is not valid
        """
        definitions = definitions if definitions is not None else Definitions()

        _, oas_path = self._paths(path)
        schemas: Dict[str, Any] = {}
        operation = build_operation(definitions, oas_path, schemas)
        return self._add_route(method, path, handler, operation, schemas)

    def add_raw_route(
        self,
        method: MethodLike,
        path: str,
        handler: Callable[..., Any],
        operation: Optional[Operation] = None,
    ) -> Any:
        """Register a route with an operation built by the caller.

        Without an operation, the route is documented with the default response only.

        Returns:
            The route object of the routing library

        Raises:
            OpenAPIValidationError: if the operation is not valid
        """
        return self._add_route(method, path, handler, operation, {})

    def generate_and_expose_openapi(self) -> None:
        """Validate the document and serve it as JSON and YAML.

        The document is captured now: routes added later are served only
        after calling this method again.

        Raises:
            OpenAPIValidationError: if the document is not valid
            GenerationError: if the document cannot be serialized
        """
        validate_document(self.document, self.context)

        json_document = marshal_json(self.document)
        self._register(
            HTTPMethod.GET.value,
            self.json_documentation_path,
            self.adapter.swagger_handler(JSON_CONTENT_TYPE, json_document),
        )

        yaml_document = json_to_yaml(json_document)
        self._register(
            HTTPMethod.GET.value,
            self.yaml_documentation_path,
            self.adapter.swagger_handler(YAML_CONTENT_TYPE, yaml_document),
        )

        logger.info(
            f"Exposed OpenAPI documentation at {self.json_documentation_path} "
            f"and {self.yaml_documentation_path}"
        )

    def get(self, path: str, definitions: Optional[Definitions] = None):
        """Decorator to register a GET route handler."""
        return self._route_decorator(HTTPMethod.GET, path, definitions)

    def post(self, path: str, definitions: Optional[Definitions] = None):
        """Decorator to register a POST route handler."""
        return self._route_decorator(HTTPMethod.POST, path, definitions)

    def put(self, path: str, definitions: Optional[Definitions] = None):
        """Decorator to register a PUT route handler."""
        return self._route_decorator(HTTPMethod.PUT, path, definitions)

    def patch(self, path: str, definitions: Optional[Definitions] = None):
        """Decorator to register a PATCH route handler."""
        return self._route_decorator(HTTPMethod.PATCH, path, definitions)

    def delete(self, path: str, definitions: Optional[Definitions] = None):
        """Decorator to register a DELETE route handler."""
        return self._route_decorator(HTTPMethod.DELETE, path, definitions)

    def _route_decorator(self, method: HTTPMethod, path: str, definitions: Optional[Definitions]):
        def decorator(func: Callable[..., Any]):
            self.add_route(method, path, func, definitions)
            return func

        return decorator

    def _paths(self, path: str) -> Tuple[str, str]:
        """Return the prefixed route path and its OpenAPI translation."""
        route_path = join_path(self.path_prefix, path)
        return route_path, self.adapter.transform_path_to_oas_path(route_path)

    def _add_route(
        self,
        method: MethodLike,
        path: str,
        handler: Callable[..., Any],
        operation: Optional[Operation],
        schemas: Dict[str, Any],
    ) -> Any:
        method = method_name(method)
        if operation is not None:
            validate_operation(self.document, method, operation, self.context, schemas)
        else:
            operation = Operation()

        route_path, oas_path = self._paths(path)
        if self.document.get_operation(oas_path, method) is not None:
            logger.warning(f"Replacing operation {method} {oas_path}")
        self.document.add_operation(oas_path, method, operation)
        self.document.add_schemas(schemas)

        logger.debug(f"Registered {method} {route_path} as {oas_path}")
        return self.adapter.add_route(method, route_path, handler)

    def _register(self, method: str, path: str, handler: Callable[..., Any]) -> Any:
        """Register a handler on the routing library only, leaving the document untouched."""
        return self.adapter.add_route(method, join_path(self.path_prefix, path), handler)
