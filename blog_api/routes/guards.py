from functools import wraps

from flask import current_app, g, request

from blog_api.context import get_context


def session_required(fn):
    """Verify the session cookie and expose the caller as ``g.identity``."""

    @wraps(fn)
    def wrapper(*args, **kwargs):
        token = request.cookies.get(current_app.config["JWT_ACCESS_COOKIE_NAME"])
        g.identity = get_context().auth.verify(token)
        return fn(*args, **kwargs)

    return wrapper
