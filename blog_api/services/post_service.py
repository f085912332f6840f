import logging
import time
from typing import NamedTuple

from werkzeug.utils import secure_filename

from blog_api.errors import Forbidden, NotFound, ValidationError
from blog_api.repositories import post_repository

logger = logging.getLogger(__name__)


class CoverUpload(NamedTuple):
    filename: str
    data: bytes
    content_type: str | None = None


def _blob_name(filename: str) -> str:
    safe_name = secure_filename(filename or "") or "cover"
    return f"{int(time.time() * 1000)}_{safe_name}"


def _require_fields(title, summary, content):
    if title is None or summary is None or content is None:
        raise ValidationError("title, summary and content are required")


class PostService:
    def __init__(self, blob_store, list_limit: int = 20):
        self._blob_store = blob_store
        self._list_limit = list_limit

    def _upload_cover(self, cover: CoverUpload) -> str:
        name = _blob_name(cover.filename)
        return self._blob_store.upload(cover.data, name, cover.content_type)

    def list_recent(self, limit=None):
        return post_repository.list_recent(self._list_limit if limit is None else limit)

    def get_by_id(self, post_id):
        post = post_repository.get_by_id(post_id)
        if post is None:
            raise NotFound("Post not found")
        return post

    def create(self, identity, title, summary, content, cover=None):
        _require_fields(title, summary, content)

        # Upload before writing so a failed upload leaves no post behind.
        cover_url = self._upload_cover(cover) if cover else None

        post = post_repository.create_post(
            author_id=identity.user_id,
            title=title,
            summary=summary,
            content=content,
            cover_url=cover_url,
        )
        logger.info("User %s created post %s", identity.user_id, post.id)
        return post

    def update(self, identity, post_id, title, summary, content, cover=None):
        post = self.get_by_id(post_id)
        if post.author_id != identity.user_id:
            logger.warning(
                "User %s tried to edit post %s owned by %s",
                identity.user_id, post.id, post.author_id,
            )
            raise Forbidden()

        _require_fields(title, summary, content)

        new_cover_url = self._upload_cover(cover) if cover else None

        post.title = title
        post.summary = summary
        post.content = content
        if new_cover_url:
            post.cover_url = new_cover_url

        post_repository.save(post)
        logger.info("User %s updated post %s", identity.user_id, post.id)
        return post
