from dataclasses import dataclass

from flask import current_app

from blog_api.services.auth_service import AuthService
from blog_api.services.post_service import PostService
from blog_api.storage.base import BlobStore


EXTENSION_KEY = "blog_api"


@dataclass
class AppContext:
    """Services shared by every request, built once by the app factory."""

    blob_store: BlobStore
    auth: AuthService
    posts: PostService

    @classmethod
    def build(cls, config, blob_store):
        return cls(
            blob_store=blob_store,
            auth=AuthService(),
            posts=PostService(blob_store, list_limit=config["POSTS_LIST_LIMIT"]),
        )


def get_context() -> AppContext:
    return current_app.extensions[EXTENSION_KEY]
