import logging
from dataclasses import dataclass

from flask_jwt_extended import create_access_token, decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt import PyJWTError
from werkzeug.security import check_password_hash, generate_password_hash

from blog_api.errors import (
    DuplicateUsername,
    InvalidCredentials,
    InvalidToken,
    ValidationError,
)
from blog_api.repositories import user_repository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    user_id: int
    username: str
    issued_at: int

    def to_dict(self):
        return {
            "id": self.user_id,
            "username": self.username,
            "iat": self.issued_at,
        }


def _require_non_empty_string(value):
    return isinstance(value, str) and value.strip()


class AuthService:
    """Registration, password checks and session tokens."""

    def register(self, username, password):
        if not _require_non_empty_string(username) or not _require_non_empty_string(password):
            raise ValidationError("Missing fields")

        username = username.strip()
        if user_repository.get_by_username(username):
            raise DuplicateUsername()

        user = user_repository.create_user(
            username=username,
            password_hash=generate_password_hash(password),
        )
        logger.info("Registered user %s (id=%s)", user.username, user.id)
        return user

    def login(self, username, password):
        """Check credentials and return ``(user, token)``."""
        if not _require_non_empty_string(username) or not isinstance(password, str):
            raise InvalidCredentials()

        user = user_repository.get_by_username(username.strip())
        if not user or not check_password_hash(user.password_hash, password):
            logger.info("Rejected login for %s", username.strip())
            raise InvalidCredentials()

        token = create_access_token(
            identity=str(user.id),
            additional_claims={"username": user.username},
        )
        return user, token

    def verify(self, token) -> Identity:
        if not token:
            raise InvalidToken("No token provided")

        try:
            claims = decode_token(token)
            return Identity(
                user_id=int(claims["sub"]),
                username=claims["username"],
                issued_at=claims["iat"],
            )
        except (PyJWTError, JWTExtendedException, KeyError, ValueError) as e:
            logger.info("Rejected session token: %s", type(e).__name__)
            raise InvalidToken() from e
