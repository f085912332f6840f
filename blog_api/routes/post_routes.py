from flask import Blueprint, g, jsonify, request

from blog_api.context import get_context
from blog_api.errors import NotFound, ValidationError
from blog_api.routes.guards import session_required
from blog_api.schemas.post_schema import PostResponseSchema
from blog_api.services.post_service import CoverUpload

post_bp = Blueprint("posts", __name__)


def _read_post_form():
    """Return ``(fields, cover)`` from a multipart form or a JSON body."""
    content_type = (request.content_type or "").lower()

    if "multipart/form-data" in content_type:
        fields = request.form
        cover = None
        file = request.files.get("file")
        if file and file.filename:
            cover = CoverUpload(
                filename=file.filename,
                data=file.read(),
                content_type=file.mimetype or None,
            )
        return fields, cover

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Invalid JSON body")
    return data, None


def _parse_post_id(value):
    # JSON booleans and floats are not ids.
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value.strip())
    raise ValidationError("Invalid post id")


@post_bp.route("/post", methods=["POST"])
@session_required
def create_post():
    fields, cover = _read_post_form()

    post = get_context().posts.create(
        g.identity,
        fields.get("title"),
        fields.get("summary"),
        fields.get("content"),
        cover,
    )
    return jsonify(PostResponseSchema().dump(post)), 201


@post_bp.route("/post", methods=["PUT"])
@session_required
def update_post():
    fields, cover = _read_post_form()

    post = get_context().posts.update(
        g.identity,
        _parse_post_id(fields.get("id")),
        fields.get("title"),
        fields.get("summary"),
        fields.get("content"),
        cover,
    )
    return jsonify(PostResponseSchema().dump(post)), 200


@post_bp.route("/post", methods=["GET"])
def list_posts():
    posts = get_context().posts.list_recent()
    return jsonify(PostResponseSchema(many=True).dump(posts)), 200


@post_bp.route("/post/<post_id>", methods=["GET"])
def get_post(post_id):
    try:
        post = get_context().posts.get_by_id(_parse_post_id(post_id))
    except (NotFound, ValidationError):
        return jsonify(None), 404
    return jsonify(PostResponseSchema().dump(post)), 200
