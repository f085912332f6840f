from sqlalchemy.orm import joinedload

from blog_api.db import db
from blog_api.models.post_model import Post


def create_post(author_id, title, summary, content, cover_url=None):
    post = Post(
        author_id=author_id,
        title=title,
        summary=summary,
        content=content,
        cover_url=cover_url,
    )
    db.session.add(post)
    db.session.commit()
    return post


def get_by_id(post_id: int):
    return db.session.get(Post, post_id, options=[joinedload(Post.author)])


def list_recent(limit: int):
    return (
        Post.query
        .options(joinedload(Post.author))
        .order_by(Post.created_at.desc(), Post.id.desc())
        .limit(limit)
        .all()
    )


def save(post):
    db.session.add(post)
    db.session.commit()
    return post
