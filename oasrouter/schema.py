"""Resolution of schema values and content maps into OpenAPI objects."""

from typing import Any, Dict, Optional

from .models import Content, SchemaValue
from .reflection import reflect_schema


def resolve_schema(schema_value: Optional[SchemaValue], definitions: Dict[str, Any]) -> Dict[str, Any]:
    """Return the schema of ``schema_value``; an empty schema when there is no value.

    Reflection errors propagate unchanged.
    """
    if schema_value is None or schema_value.value is None:
        return {}
    return reflect_schema(
        schema_value.value,
        schema_value.allow_additional_properties,
        definitions,
    )


def resolve_content(content: Content, definitions: Dict[str, Any]) -> Dict[str, Dict[str, Any]]:
    """Resolve each content type of ``content`` into a media type object."""
    return {
        content_type: {"schema": resolve_schema(schema_value, definitions)}
        for content_type, schema_value in content.items()
    }
