"""
Basic usage example for oasrouter.

This example demonstrates:
- Route registration on the in-memory router
- Path parameters derived from the route path
- Request bodies and responses described with pydantic models
- Serving the generated OpenAPI document
"""

import json
import logging
from typing import List

from pydantic import BaseModel

from oasrouter import ContentValue, Definitions, Document, Info, Options, Parameter, Router, SchemaValue
from oasrouter.backends import MemoryAdapter, MemoryRouter, Request, Response


class User(BaseModel):
    id: str
    name: str
    email: str


class CreateUser(BaseModel):
    name: str
    email: str


# In-memory data store for this example
users_db = {
    "1": {"id": "1", "name": "Alice", "email": "alice@example.com"},
    "2": {"id": "2", "name": "Bob", "email": "bob@example.com"},
}

backend = MemoryRouter()
router = Router(MemoryAdapter(backend), Options(
    openapi=Document(info=Info(title="Users API", version="1.0.0", description="Manage users")),
))


@router.get("/users", Definitions(
    tags=["users"],
    summary="List users",
    querystring={"limit": Parameter(schema=SchemaValue(int), description="Maximum number of users")},
    responses={200: ContentValue(content={"application/json": SchemaValue(List[User])})},
))
def list_users(request: Request) -> Response:
    limit = int(request.query_params.get("limit", len(users_db)))
    users = list(users_db.values())[:limit]
    return Response(200, json.dumps(users), {"Content-Type": "application/json"})


@router.post("/users", Definitions(
    tags=["users"],
    summary="Create a user",
    request_body=ContentValue(content={"application/json": SchemaValue(CreateUser)}),
    responses={
        201: ContentValue(content={"application/json": SchemaValue(User)}, description="Created"),
        400: ContentValue(description="Invalid user"),
    },
))
def create_user(request: Request) -> Response:
    data = CreateUser.model_validate_json(request.body or b"{}")
    new_id = str(len(users_db) + 1)
    user = User(id=new_id, **data.model_dump())
    users_db[new_id] = user.model_dump()
    return Response(201, user.model_dump_json(), {"Content-Type": "application/json"})


@router.get("/users/:user_id", Definitions(
    tags=["users"],
    summary="Get a user",
    responses={
        200: ContentValue(content={"application/json": SchemaValue(User)}),
        404: ContentValue(description="User not found"),
    },
))
def get_user(request: Request) -> Response:
    user = users_db.get(request.path_params["user_id"])
    if user is None:
        return Response(404, b"Not Found", {"Content-Type": "text/plain"})
    return Response(200, json.dumps(user), {"Content-Type": "application/json"})


router.generate_and_expose_openapi()


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    print(backend.dispatch(Request(method="GET", path="/users/1")).body)
    print(backend.dispatch(Request(method="GET", path="/documentation/yaml")).body.decode("utf-8"))
