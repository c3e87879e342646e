"""
In-memory OpenAPI document and operation objects.

Both objects keep the fields the router writes and know how to render
themselves as plain dictionaries in a stable key order, so that the
serialized document is identical across runs.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .models import SecurityRequirement

DEFAULT_OPENAPI_VERSION = "3.0.0"
DEFAULT_RESPONSE = "default"


def default_responses() -> Dict[str, Dict[str, Any]]:
    """The responses of an operation that declares none."""
    return {DEFAULT_RESPONSE: {"description": ""}}


@dataclass
class Info:
    """The info object of the document. Title and version are required."""

    title: str = ""
    version: str = ""
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        info: Dict[str, Any] = {"title": self.title}
        if self.description:
            info["description"] = self.description
        info["version"] = self.version
        return info


@dataclass
class Operation:
    """The description of one (method, path) route."""

    parameters: List[Dict[str, Any]] = field(default_factory=list)
    request_body: Optional[Dict[str, Any]] = None
    responses: Dict[str, Dict[str, Any]] = field(default_factory=default_responses)
    security: Optional[List[SecurityRequirement]] = None
    tags: List[str] = field(default_factory=list)
    summary: str = ""
    description: str = ""
    deprecated: bool = False
    extensions: Dict[str, Any] = field(default_factory=dict)

    def add_parameter(self, parameter: Dict[str, Any]) -> None:
        self.parameters.append(parameter)

    def add_response(self, status_code: int, response: Dict[str, Any]) -> None:
        """Add a response, defaulting its description to the empty string.

        A description is required by OpenAPI, so it is never left unset.
        """
        response.setdefault("description", "")
        self.responses[str(status_code)] = response

    def add_security_requirements(self, requirements: List[SecurityRequirement]) -> None:
        if requirements and self.security is None:
            self.security = []
        for requirement in requirements:
            self.security.append(dict(requirement))

    def to_dict(self) -> Dict[str, Any]:
        operation: Dict[str, Any] = {}
        if self.tags:
            operation["tags"] = list(self.tags)
        if self.summary:
            operation["summary"] = self.summary
        if self.description:
            operation["description"] = self.description
        if self.parameters:
            operation["parameters"] = list(self.parameters)
        if self.request_body is not None:
            operation["requestBody"] = self.request_body
        operation["responses"] = dict(self.responses)
        if self.security is not None:
            operation["security"] = list(self.security)
        if self.deprecated:
            operation["deprecated"] = True
        operation.update(self.extensions)
        return operation


@dataclass
class Document:
    """The OpenAPI document shared by a router and all of its sub-routers."""

    info: Optional[Info] = None
    openapi: str = ""
    paths: Optional[Dict[str, Dict[str, Operation]]] = None
    components: Dict[str, Any] = field(default_factory=dict)
    servers: List[Dict[str, Any]] = field(default_factory=list)

    def get_operation(self, path: str, method: str) -> Optional[Operation]:
        return (self.paths or {}).get(path, {}).get(method.lower())

    def add_operation(self, path: str, method: str, operation: Operation) -> None:
        """Set the operation at (path, method), replacing any previous one."""
        if self.paths is None:
            self.paths = {}
        self.paths.setdefault(path, {})[method.lower()] = operation

    def add_schemas(self, schemas: Dict[str, Any]) -> None:
        if schemas:
            self.components.setdefault("schemas", {}).update(schemas)

    def to_dict(self) -> Dict[str, Any]:
        document: Dict[str, Any] = {
            "openapi": self.openapi,
            "info": self.info.to_dict() if self.info is not None else {},
        }
        if self.servers:
            document["servers"] = list(self.servers)
        document["paths"] = {
            path: {method: operation.to_dict() for method, operation in operations.items()}
            for path, operations in (self.paths or {}).items()
        }
        if self.components:
            document["components"] = self.components
        return document
