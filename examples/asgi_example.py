"""
Example: documenting a Starlette application.

Routes are registered on the Starlette application through the adapter,
and the OpenAPI document is served at /documentation/json and
/documentation/yaml.

Run with:
    uvicorn examples.asgi_example:app --reload
"""

from pydantic import BaseModel
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse

from oasrouter import ContentValue, Definitions, Document, Info, Options, Parameter, Router, SchemaValue
from oasrouter.backends.starlette import StarletteAdapter


class Item(BaseModel):
    """Item model for demonstration."""
    name: str
    price: float
    description: str = ""


items = {1: Item(name="Widget", price=9.99)}

app = Starlette()
router = Router(StarletteAdapter(app), Options(
    openapi=Document(info=Info(title="Items API", version="1.0.0")),
    path_prefix="/api",
))


async def get_item(request: Request):
    item = items.get(request.path_params["item_id"])
    if item is None:
        return JSONResponse({"detail": "Item not found"}, status_code=404)
    return JSONResponse(item.model_dump())


router.add_route("GET", "/items/{item_id:int}", get_item, Definitions(
    summary="Get an item",
    path_params={"item_id": Parameter(schema=SchemaValue(int))},
    responses={
        200: ContentValue(content={"application/json": SchemaValue(Item)}),
        404: ContentValue(description="Item not found"),
    },
))

router.generate_and_expose_openapi()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8000)
