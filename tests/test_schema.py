"""
Tests for schema reflection and resolution of content maps.
"""

from typing import Dict, List, Literal, Optional

import pytest
from pydantic import BaseModel, Field, PydanticSchemaGenerationError

from oasrouter.models import SchemaValue
from oasrouter.reflection import reflect_schema, to_openapi_schema
from oasrouter.schema import resolve_content, resolve_schema


class Address(BaseModel):
    street: str


class User(BaseModel):
    name: str = Field(..., description="The user's name")
    age: Optional[int] = None
    address: Address


class Unsupported:
    pass


class TestResolveSchema:
    """Test resolution of schema values."""

    def test_missing_schema_value_is_empty_schema(self):
        assert resolve_schema(None, {}) == {}

    def test_schema_value_without_value_is_empty_schema(self):
        assert resolve_schema(SchemaValue(), {}) == {}

    def test_builtin_type(self):
        assert resolve_schema(SchemaValue(str), {}) == {"type": "string"}

    def test_instance_is_reflected_by_type(self):
        assert resolve_schema(SchemaValue(""), {}) == {"type": "string"}
        assert resolve_schema(SchemaValue(42), {}) == {"type": "integer"}

    def test_generic_type(self):
        assert resolve_schema(SchemaValue(List[int]), {}) == {
            "type": "array",
            "items": {"type": "integer"},
        }

    def test_model_schema(self):
        definitions = {}
        schema = resolve_schema(SchemaValue(User), definitions)

        assert schema["type"] == "object"
        assert schema["required"] == ["name", "address"]
        assert schema["additionalProperties"] is False
        assert schema["properties"]["name"]["description"] == "The user's name"
        assert schema["properties"]["address"] == {"$ref": "#/components/schemas/Address"}

    def test_nested_models_are_collected(self):
        definitions = {}
        resolve_schema(SchemaValue(User), definitions)

        assert list(definitions) == ["Address"]
        assert definitions["Address"]["properties"]["street"]["type"] == "string"
        assert definitions["Address"]["additionalProperties"] is False

    def test_additional_properties_allowed(self):
        definitions = {}
        schema = resolve_schema(SchemaValue(User, allow_additional_properties=True), definitions)

        assert "additionalProperties" not in schema
        assert "additionalProperties" not in definitions["Address"]

    def test_unsupported_type_raises(self):
        with pytest.raises(PydanticSchemaGenerationError):
            resolve_schema(SchemaValue(Unsupported), {})


class TestOpenAPIConversion:
    """Test rewriting of JSON Schema keywords OpenAPI 3.0 does not accept."""

    def test_optional_becomes_nullable(self):
        schema = reflect_schema(User)
        age = schema["properties"]["age"]

        assert "anyOf" not in age
        assert age["type"] == "integer"
        assert age["nullable"] is True
        assert age["default"] is None

    def test_optional_reference_is_wrapped(self):
        converted = to_openapi_schema({
            "anyOf": [{"$ref": "#/components/schemas/Address"}, {"type": "null"}],
        })
        assert converted == {
            "allOf": [{"$ref": "#/components/schemas/Address"}],
            "nullable": True,
        }

    def test_union_without_null_is_kept(self):
        converted = to_openapi_schema({"anyOf": [{"type": "string"}, {"type": "integer"}]})
        assert converted == {"anyOf": [{"type": "string"}, {"type": "integer"}]}

    def test_exclusive_bounds_become_flags(self):
        class Price(BaseModel):
            amount: float = Field(..., gt=0, lt=1000)

        amount = reflect_schema(Price)["properties"]["amount"]
        assert amount["minimum"] == 0
        assert amount["exclusiveMinimum"] is True
        assert amount["maximum"] == 1000
        assert amount["exclusiveMaximum"] is True

    def test_const_becomes_enum(self):
        schema = reflect_schema(Literal["on"])
        assert "const" not in schema
        assert schema["enum"] == ["on"]

    def test_examples_become_example(self):
        assert to_openapi_schema({"type": "string", "examples": ["a", "b"]}) == {
            "type": "string",
            "example": "a",
        }

    def test_property_names_are_not_rewritten(self):
        converted = to_openapi_schema({
            "type": "object",
            "properties": {"const": {"type": "string"}},
        })
        assert converted["properties"] == {"const": {"type": "string"}}

    def test_default_values_are_not_rewritten(self):
        converted = to_openapi_schema({"type": "object", "default": {"anyOf": 1}})
        assert converted["default"] == {"anyOf": 1}

    def test_definitions_discarded_without_target(self):
        schema = reflect_schema(User)
        assert "$defs" not in schema

    def test_dict_of_models(self):
        definitions = {}
        schema = reflect_schema(Dict[str, Address], definitions=definitions)

        assert schema["type"] == "object"
        assert schema["additionalProperties"] == {"$ref": "#/components/schemas/Address"}
        assert "Address" in definitions


class TestResolveContent:
    """Test resolution of content maps."""

    def test_each_content_type_gets_a_schema(self):
        content = resolve_content({
            "application/json": SchemaValue(str),
            "text/plain": SchemaValue(),
        }, {})

        assert content == {
            "application/json": {"schema": {"type": "string"}},
            "text/plain": {"schema": {}},
        }

    def test_empty_content(self):
        assert resolve_content({}, {}) == {}
