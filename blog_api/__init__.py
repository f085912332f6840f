import logging

from flask import Flask

from blog_api.config import Config
from blog_api.context import EXTENSION_KEY, AppContext
from blog_api.db import db
from blog_api.errors import register_error_handlers
from blog_api.extensions.extensions import cors, jwt, ma
from blog_api.routes.auth_routes import auth_bp
from blog_api.routes.main_routes import main_bp
from blog_api.routes.post_routes import post_bp
from blog_api.storage import build_blob_store


def create_app(config_overrides=None, blob_store=None):
    """
    Build the Flask application.

    ``config_overrides`` is applied on top of :class:`Config`; ``blob_store``
    replaces the backend selected by ``BLOB_STORE_BACKEND``.
    """
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app.logger.setLevel(app.config["LOG_LEVEL"])

    db.init_app(app)
    jwt.init_app(app)
    ma.init_app(app)
    cors.init_app(
        app,
        origins=app.config["CORS_ALLOWED_ORIGINS"],
        supports_credentials=True,
    )

    if blob_store is None:
        blob_store = build_blob_store(app.config)
    app.extensions[EXTENSION_KEY] = AppContext.build(app.config, blob_store)

    register_error_handlers(app)
    app.register_blueprint(main_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(post_bp)

    with app.app_context():
        db.create_all()

    app.logger.info(
        "Blog API ready (blob store: %s)", blob_store.backend_name or type(blob_store).__name__
    )
    return app
