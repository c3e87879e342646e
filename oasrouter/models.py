"""
Declarative route definitions used to describe an operation.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class HTTPMethod(Enum):
    """Enumeration of supported HTTP methods."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"


MethodLike = Union[HTTPMethod, str]


def method_name(method: MethodLike) -> str:
    """Return the upper-case method name for an HTTPMethod or a string."""
    if isinstance(method, HTTPMethod):
        return method.value
    return HTTPMethod(method.upper()).value


# Parameter categories, named after the OpenAPI ``in`` field.
PATH = "path"
QUERY = "query"
HEADER = "header"
COOKIE = "cookie"

PARAMETER_CATEGORIES = (PATH, QUERY, HEADER, COOKIE)


@dataclass
class SchemaValue:
    """A value to be reflected into a JSON schema.

    ``value`` may be a type (a pydantic model, a dataclass, ``str``,
    ``List[int]``...) or an instance, in which case its type is used.
    ``None`` produces an empty schema.
    """

    value: Any = None
    allow_additional_properties: bool = False


# Maps a content type (e.g. "application/json") to its schema.
Content = Dict[str, SchemaValue]

SecurityRequirement = Dict[str, List[str]]


@dataclass
class Parameter:
    """A single path, query, header or cookie parameter.

    If both ``content`` and ``schema`` are given, ``content`` wins.
    """

    content: Optional[Content] = None
    schema: Optional[SchemaValue] = None
    description: str = ""


@dataclass
class ContentValue:
    """Content of a request body or of a response."""

    content: Content = field(default_factory=dict)
    description: str = ""


@dataclass
class Definitions:
    """Everything needed to describe an operation of a route."""

    path_params: Dict[str, Parameter] = field(default_factory=dict)
    querystring: Dict[str, Parameter] = field(default_factory=dict)
    headers: Dict[str, Parameter] = field(default_factory=dict)
    cookies: Dict[str, Parameter] = field(default_factory=dict)
    request_body: Optional[ContentValue] = None
    responses: Dict[int, ContentValue] = field(default_factory=dict)
    security: List[SecurityRequirement] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    summary: str = ""
    description: str = ""
    deprecated: bool = False
    extensions: Dict[str, Any] = field(default_factory=dict)
