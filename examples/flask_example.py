"""
Example: documenting a Flask application with two routers.

The admin routes live on a sub-router with their own prefix. Both routers
write into the same document.

Run with:
    flask --app examples.flask_example run
"""

from flask import Flask, jsonify

from oasrouter import Definitions, Document, Info, Options, Router, SubRouterOptions
from oasrouter.backends.flask import FlaskAdapter

app = Flask(__name__)

router = Router(FlaskAdapter(app), Options(
    openapi=Document(info=Info(title="Flask API", version="1.0.0")),
))
router.document.components["securitySchemes"] = {
    "bearerAuth": {"type": "http", "scheme": "bearer"},
}
admin = router.sub_router(FlaskAdapter(app), SubRouterOptions(path_prefix="/admin"))


@router.get("/health", Definitions(summary="Health check"))
def health():
    return jsonify(status="ok")


@admin.delete("/users/<int:user_id>", Definitions(
    summary="Delete a user",
    security=[{"bearerAuth": []}],
))
def delete_user(user_id):
    return "", 204


router.generate_and_expose_openapi()
