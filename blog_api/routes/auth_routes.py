from flask import Blueprint, g, jsonify, request
from flask_jwt_extended import set_access_cookies, unset_jwt_cookies

from blog_api.context import get_context
from blog_api.routes.guards import session_required
from blog_api.schemas.user_schema import UserResponseSchema


auth_bp = Blueprint("auth", __name__)


def _json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None
    return data


@auth_bp.route("/register", methods=["POST"])
def register():
    data = _json_body()
    if data is None:
        return jsonify({"error": "Invalid JSON body"}), 400

    user = get_context().auth.register(
        data.get("username"),
        data.get("password"),
    )
    return jsonify(UserResponseSchema().dump(user)), 201


@auth_bp.route("/login", methods=["POST"])
def login():
    data = _json_body()
    if data is None:
        return jsonify({"error": "Invalid JSON body"}), 400

    user, token = get_context().auth.login(
        data.get("username"),
        data.get("password"),
    )
    response = jsonify(UserResponseSchema().dump(user))
    set_access_cookies(response, token)
    return response, 200


@auth_bp.route("/profile", methods=["GET"])
@session_required
def profile():
    return jsonify(g.identity.to_dict()), 200


@auth_bp.route("/logout", methods=["POST"])
def logout():
    response = jsonify("ok")
    unset_jwt_cookies(response)
    return response, 200
