"""
Builds OpenAPI operations from route definitions.

The operation is assembled in a local object together with the schema
definitions it references. Nothing here touches the shared document; the
router registers both only once the whole operation has been built.
"""

import logging
from typing import Any, Dict, Optional

from pydantic import PydanticUserError

from .document import Operation
from .exceptions import (
    CookiesError,
    HeadersError,
    InvalidParameterCategoryError,
    PathParamsError,
    QuerystringError,
    RequestBodyError,
    ResponsesError,
)
from .models import (
    COOKIE,
    HEADER,
    PARAMETER_CATEGORIES,
    PATH,
    QUERY,
    ContentValue,
    Definitions,
    Parameter,
    SchemaValue,
)
from .paths import find_path_params
from .schema import resolve_content, resolve_schema

logger = logging.getLogger(__name__)

_PARAMETER_ERRORS = {
    PATH: PathParamsError,
    QUERY: QuerystringError,
    HEADER: HeadersError,
    COOKIE: CookiesError,
}


def build_operation(definitions: Definitions, oas_path: str, schemas: Dict[str, Any]) -> Operation:
    """Build the operation described by ``definitions`` for the OpenAPI path ``oas_path``.

    Schema definitions referenced by the operation are added to ``schemas``.

    When ``definitions`` declares no path parameters, one required string
    parameter is derived from each ``{name}`` placeholder of ``oas_path``.
    Explicit path parameters replace the derived ones entirely.

    Raises:
        RequestBodyError, ResponsesError, PathParamsError, QuerystringError,
        HeadersError, CookiesError: if a schema of that section cannot be
        generated. The pydantic error is chained as the cause.
    """
    operation = Operation(
        tags=list(definitions.tags),
        summary=definitions.summary,
        description=definitions.description,
        deprecated=definitions.deprecated,
        extensions=dict(definitions.extensions),
    )
    operation.add_security_requirements(definitions.security)

    try:
        operation.request_body = resolve_request_body(definitions.request_body, schemas)
    except PydanticUserError as err:
        raise RequestBodyError(str(err)) from err

    try:
        resolve_responses(definitions.responses, operation, schemas)
    except PydanticUserError as err:
        raise ResponsesError(str(err)) from err

    path_params = definitions.path_params
    if not path_params:
        path_params = {
            name: Parameter(schema=SchemaValue(str))
            for name in find_path_params(oas_path)
        }

    for category, parameters in (
        (PATH, path_params),
        (QUERY, definitions.querystring),
        (HEADER, definitions.headers),
        (COOKIE, definitions.cookies),
    ):
        try:
            resolve_parameters(category, parameters, operation, schemas)
        except PydanticUserError as err:
            raise _PARAMETER_ERRORS[category](str(err)) from err

    return operation


def resolve_request_body(
    request_body: Optional[ContentValue], schemas: Dict[str, Any]
) -> Optional[Dict[str, Any]]:
    if request_body is None:
        return None

    resolved: Dict[str, Any] = {}
    if request_body.description:
        resolved["description"] = request_body.description
    resolved["content"] = resolve_content(request_body.content, schemas)
    return resolved


def resolve_responses(
    responses: Dict[int, ContentValue], operation: Operation, schemas: Dict[str, Any]
) -> None:
    """Replace the default response of ``operation`` with ``responses``, if any."""
    if not responses:
        return

    operation.responses = {}
    for status_code in sorted(responses, key=str):
        value = responses[status_code]
        response: Dict[str, Any] = {"description": value.description}
        content = resolve_content(value.content, schemas)
        if content:
            response["content"] = content
        operation.add_response(status_code, response)


def resolve_parameters(
    category: str,
    parameters: Dict[str, Parameter],
    operation: Operation,
    schemas: Dict[str, Any],
) -> None:
    """Add ``parameters`` of ``category`` to ``operation``, sorted by name."""
    if category not in PARAMETER_CATEGORIES:
        raise InvalidParameterCategoryError(repr(category))

    for name in sorted(parameters):
        value = parameters[name]
        parameter: Dict[str, Any] = {"in": category, "name": name}
        if value.description:
            parameter["description"] = value.description
        if category == PATH:
            parameter["required"] = True

        if value.content is not None:
            if value.schema is not None:
                logger.warning(
                    f"Parameter '{name}' in {category} has both content and schema, "
                    f"the schema is ignored"
                )
            parameter["content"] = resolve_content(value.content, schemas)
        else:
            parameter["schema"] = resolve_schema(value.schema, schemas)

        operation.add_parameter(parameter)
