"""
Exceptions raised while building and publishing the OpenAPI document.
"""
from typing import Optional


class OpenAPIRouterError(Exception):
    """Base exception for every error raised by the router."""

    message = "openapi router error"

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail
        super().__init__(f"{self.message}: {detail}" if detail else self.message)


class ConfigurationError(OpenAPIRouterError):
    """Raised when the router is constructed with invalid options."""

    message = "invalid router configuration"


class OpenAPIRequiredError(ConfigurationError):
    """Raised when no OpenAPI skeleton is passed to the router."""

    message = "openapi is required"


class InfoRequiredError(ConfigurationError):
    """Raised when the OpenAPI skeleton has no info object."""

    message = "openapi info is required"


class TitleRequiredError(ConfigurationError):
    """Raised when the info object has an empty title."""

    message = "openapi info title is required"


class VersionRequiredError(ConfigurationError):
    """Raised when the info object has an empty version."""

    message = "openapi info version is required"


class InvalidDocumentationPathError(ConfigurationError):
    """Raised when a documentation path does not start with '/'."""

    message = "invalid documentation path"

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"{path!r}, path should start with '/'")


class ResolutionError(OpenAPIRouterError):
    """Raised when a section of the route definitions cannot be turned into a schema.

    The underlying failure is always chained as ``__cause__``.
    """

    message = "errors generating schema"


class RequestBodyError(ResolutionError):
    message = "errors generating request body schema"


class ResponsesError(ResolutionError):
    message = "errors generating responses schema"


class PathParamsError(ResolutionError):
    message = "errors generating path parameters schema"


class QuerystringError(ResolutionError):
    message = "errors generating querystring schema"


class HeadersError(ResolutionError):
    message = "errors generating headers schema"


class CookiesError(ResolutionError):
    message = "errors generating cookies schema"


class OpenAPIValidationError(OpenAPIRouterError):
    """Raised when an operation or the whole document is not valid OpenAPI."""

    message = "fails to validate openapi"


class GenerationError(OpenAPIRouterError):
    """Raised when the document cannot be serialized to JSON or converted to YAML."""

    message = "fail to generate openapi"


class InvalidParameterCategoryError(OpenAPIRouterError, ValueError):
    """Raised when parameters are resolved for an unknown category."""

    message = "invalid param type"
