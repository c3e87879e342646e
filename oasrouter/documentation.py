"""
Validation and serialization of the OpenAPI document.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict

import yaml
from openapi_spec_validator import OpenAPIV30SpecValidator, OpenAPIV31SpecValidator

from .document import Document, Operation
from .exceptions import GenerationError, OpenAPIValidationError

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
YAML_CONTENT_TYPE = "text/plain"


@dataclass
class ValidationContext:
    """Settings handed to the OpenAPI validator.

    Attributes:
        base_uri: Base URI used to resolve relative ``$ref`` targets.
    """

    base_uri: str = ""


def _check(spec: Dict[str, Any], context: ValidationContext) -> None:
    version = str(spec.get("openapi", ""))
    validator_class = OpenAPIV31SpecValidator if version.startswith("3.1") else OpenAPIV30SpecValidator
    validator = validator_class(spec, base_uri=context.base_uri)
    error = next(iter(validator.iter_errors()), None)
    if error is not None:
        raise OpenAPIValidationError(error.message)


def validate_document(document: Document, context: ValidationContext) -> None:
    """Validate the whole document.

    Raises:
        OpenAPIValidationError: if the document is not valid OpenAPI
    """
    try:
        _check(document.to_dict(), context)
    except OpenAPIValidationError as err:
        logger.error(f"OpenAPI document is not valid: {err.detail}")
        raise


def validate_operation(
    document: Document,
    method: str,
    operation: Operation,
    context: ValidationContext,
    schemas: Dict[str, Any],
) -> None:
    """Validate a single operation without touching ``document``.

    The operation is placed in a throwaway document that shares the info and
    components of ``document``, with ``schemas`` added to the components.

    Raises:
        OpenAPIValidationError: if the operation is not valid OpenAPI
    """
    components = dict(document.components)
    if schemas:
        components["schemas"] = {**components.get("schemas", {}), **schemas}

    spec: Dict[str, Any] = {
        "openapi": document.openapi,
        "info": document.info.to_dict() if document.info is not None else {},
        "paths": {"/": {method.lower(): operation.to_dict()}},
    }
    if components:
        spec["components"] = components
    _check(spec, context)


def marshal_json(document: Document) -> bytes:
    """Serialize the document to compact UTF-8 JSON.

    Raises:
        GenerationError: if the document holds values JSON cannot encode
    """
    try:
        data = json.dumps(document.to_dict(), separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError) as err:
        raise GenerationError(f"json marshal: {err}") from err
    return data.encode("utf-8")


def json_to_yaml(data: bytes) -> bytes:
    """Convert a JSON document to YAML, keeping the key order.

    Raises:
        GenerationError: if ``data`` is not JSON or cannot be dumped as YAML
    """
    try:
        return yaml.safe_dump(json.loads(data), sort_keys=False, allow_unicode=True).encode("utf-8")
    except (ValueError, yaml.YAMLError) as err:
        raise GenerationError(f"yaml marshal: {err}") from err
