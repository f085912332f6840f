from sqlalchemy.exc import IntegrityError

from blog_api.db import db
from blog_api.errors import DuplicateUsername
from blog_api.models.user_model import User


def get_by_username(username: str):
    return User.query.filter_by(username=username).first()


def create_user(username, password_hash):
    user = User(
        username=username,
        password_hash=password_hash,
    )
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError as e:
        # Lost a registration race on the unique username constraint.
        db.session.rollback()
        raise DuplicateUsername() from e
    return user
