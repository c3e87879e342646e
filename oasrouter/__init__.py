"""
Declare HTTP routes once and get a validated OpenAPI document for them.

Routes are registered on the routing library of your choice through an
adapter, while their parameters, request bodies and responses are described
with backend-agnostic definitions. Schemas are generated from Python types
with pydantic, and the resulting document is served as JSON and YAML.
"""

from .backends import MemoryAdapter, MemoryRouter, RouterAdapter
from .document import Document, Info, Operation
from .documentation import ValidationContext
from .exceptions import (
    ConfigurationError,
    CookiesError,
    GenerationError,
    HeadersError,
    InfoRequiredError,
    InvalidDocumentationPathError,
    InvalidParameterCategoryError,
    OpenAPIRequiredError,
    OpenAPIRouterError,
    OpenAPIValidationError,
    PathParamsError,
    QuerystringError,
    RequestBodyError,
    ResolutionError,
    ResponsesError,
    TitleRequiredError,
    VersionRequiredError,
)
from .models import ContentValue, Definitions, HTTPMethod, Parameter, SchemaValue
from .router import (
    DEFAULT_JSON_DOCUMENTATION_PATH,
    DEFAULT_YAML_DOCUMENTATION_PATH,
    Options,
    Router,
    SubRouterOptions,
)

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    "Router",
    "Options",
    "SubRouterOptions",
    "DEFAULT_JSON_DOCUMENTATION_PATH",
    "DEFAULT_YAML_DOCUMENTATION_PATH",
    "Document",
    "Info",
    "Operation",
    "ValidationContext",
    "Definitions",
    "Parameter",
    "ContentValue",
    "SchemaValue",
    "HTTPMethod",
    "RouterAdapter",
    "MemoryAdapter",
    "MemoryRouter",
    "OpenAPIRouterError",
    "ConfigurationError",
    "OpenAPIRequiredError",
    "InfoRequiredError",
    "TitleRequiredError",
    "VersionRequiredError",
    "InvalidDocumentationPathError",
    "ResolutionError",
    "RequestBodyError",
    "ResponsesError",
    "PathParamsError",
    "QuerystringError",
    "HeadersError",
    "CookiesError",
    "OpenAPIValidationError",
    "GenerationError",
    "InvalidParameterCategoryError",
]
