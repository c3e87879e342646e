"""
Reflection of Python types into OpenAPI 3.0 schemas.

pydantic produces JSON Schema (draft 2020-12). The helpers below rewrite the
parts OpenAPI 3.0 does not accept and move nested definitions out of the
schema so they can be stored in ``components.schemas``.
"""

import logging
from typing import Any, Dict, List, Optional, get_origin

from pydantic import TypeAdapter

logger = logging.getLogger(__name__)

REF_TEMPLATE = "#/components/schemas/{model}"

# Keys whose values are data, not schemas.
_LITERAL_KEYS = {"default", "example", "enum"}


def _annotation_for(value: Any) -> Any:
    """Return the type to reflect: the value itself if it is a type, else its type."""
    if isinstance(value, type) or get_origin(value) is not None:
        return value
    return type(value)


def reflect_schema(
    value: Any,
    allow_additional_properties: bool = False,
    definitions: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Reflect ``value`` into an OpenAPI 3.0 schema.

    Nested model definitions are added to ``definitions`` and referenced as
    ``#/components/schemas/<Name>``. When ``definitions`` is not given they
    are discarded.

    Errors raised by pydantic (e.g. ``PydanticSchemaGenerationError`` for an
    unsupported type) are not caught.
    """
    adapter: TypeAdapter[Any] = TypeAdapter(_annotation_for(value))
    schema = adapter.json_schema(ref_template=REF_TEMPLATE)

    nested = schema.pop("$defs", {})
    if definitions is not None and nested:
        logger.debug(f"Collected schema definitions: {sorted(nested)}")
        for name, definition in nested.items():
            definitions[name] = to_openapi_schema(definition, allow_additional_properties)

    return to_openapi_schema(schema, allow_additional_properties)


def to_openapi_schema(schema: Any, allow_additional_properties: bool = False) -> Any:
    """Convert a pydantic JSON schema to an OpenAPI 3.0 compliant schema."""
    if not isinstance(schema, dict):
        return schema

    converted: Dict[str, Any] = {}
    for key, value in schema.items():
        if key in _LITERAL_KEYS:
            converted[key] = value
        elif key == "anyOf" and isinstance(value, list):
            converted.update(_convert_any_of(value, allow_additional_properties))
        elif key in ("exclusiveMinimum", "exclusiveMaximum") and _is_number(value):
            # 3.0 uses a boolean flag next to minimum/maximum
            bound = "minimum" if key == "exclusiveMinimum" else "maximum"
            converted[bound] = value
            converted[key] = True
        elif key == "const":
            converted.setdefault("enum", [value])
        elif key == "examples" and isinstance(value, list):
            if value:
                converted["example"] = value[0]
        elif key in ("properties", "patternProperties") and isinstance(value, dict):
            converted[key] = {
                name: to_openapi_schema(sub, allow_additional_properties)
                for name, sub in value.items()
            }
        elif isinstance(value, dict):
            converted[key] = to_openapi_schema(value, allow_additional_properties)
        elif isinstance(value, list):
            converted[key] = [
                to_openapi_schema(item, allow_additional_properties) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            converted[key] = value

    if "properties" in converted:
        if allow_additional_properties:
            if converted.get("additionalProperties") is False:
                del converted["additionalProperties"]
        else:
            converted.setdefault("additionalProperties", False)

    return converted


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _convert_any_of(items: List[Any], allow_additional_properties: bool) -> Dict[str, Any]:
    """Turn ``anyOf: [T, {"type": "null"}]`` into ``T`` with ``nullable: true``."""
    non_null = [item for item in items if not (isinstance(item, dict) and item.get("type") == "null")]
    converted = [to_openapi_schema(item, allow_additional_properties) for item in non_null]

    if len(non_null) == len(items):
        return {"anyOf": converted}

    if len(converted) == 1:
        result = converted[0]
        if "$ref" in result:
            # siblings of $ref are ignored in 3.0
            return {"allOf": [result], "nullable": True}
        result["nullable"] = True
        return result

    return {"anyOf": converted, "nullable": True}
