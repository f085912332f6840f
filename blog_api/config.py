import os
from datetime import timedelta

from dotenv import load_dotenv


load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_optional_int(name: str):
    value = os.getenv(name, "").strip()
    if not value:
        return None
    return int(value)


def _token_expiry():
    # False disables the exp claim entirely.
    minutes = _env_optional_int("JWT_ACCESS_TOKEN_EXPIRES_MINUTES")
    if minutes is None:
        return False
    return timedelta(minutes=minutes)


def parse_cors_origins(raw: str, client_url: str = "") -> list:
    # Credentialed CORS cannot use a wildcard origin.
    default_origins = [
        r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
    ]
    origins = []
    if client_url.strip():
        origins.append(client_url.strip().rstrip("/"))
    for item in raw.split(","):
        item = item.strip().rstrip("/")
        if item and item != "*" and item not in origins:
            origins.append(item)
    return origins + [origin for origin in default_origins if origin not in origins]


class Config:
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///blog.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    POSTS_LIST_LIMIT = int(os.getenv("POSTS_LIST_LIMIT", "20"))

    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "dev-secret")
    JWT_TOKEN_LOCATION = ["cookies"]
    JWT_ACCESS_COOKIE_NAME = "token"
    JWT_ACCESS_TOKEN_EXPIRES = _token_expiry()
    JWT_COOKIE_CSRF_PROTECT = False

    # Cross-site cookies for HTTPS requests from frontend.
    JWT_COOKIE_SAMESITE = os.getenv("JWT_COOKIE_SAMESITE", "None")
    JWT_COOKIE_SECURE = _env_bool("JWT_COOKIE_SECURE", True)

    CORS_ALLOWED_ORIGINS = parse_cors_origins(
        os.getenv("CORS_ALLOWED_ORIGINS", ""),
        os.getenv("CLIENT_URL", ""),
    )

    BLOB_STORE_BACKEND = os.getenv("BLOB_STORE_BACKEND", "minio").strip().lower()

    MINIO_ENDPOINT = os.getenv("MINIO_ENDPOINT", "localhost:9000")
    MINIO_ACCESS_KEY = os.getenv("MINIO_ACCESS_KEY", "admin")
    MINIO_SECRET_KEY = os.getenv("MINIO_SECRET_KEY", "supersecret")
    MINIO_BUCKET = os.getenv("MINIO_BUCKET", "covers")
    MINIO_SECURE = _env_bool("MINIO_SECURE", False)
    MINIO_CONNECT_TIMEOUT = float(os.getenv("MINIO_CONNECT_TIMEOUT", "5"))
    MINIO_READ_TIMEOUT = float(os.getenv("MINIO_READ_TIMEOUT", "20"))
    MINIO_HTTP_POOL_MAXSIZE = int(os.getenv("MINIO_HTTP_POOL_MAXSIZE", "32"))
    MINIO_PUBLIC_BASE_URL = os.getenv(
        "MINIO_PUBLIC_BASE_URL",
        "http://127.0.0.1:9000"
    )

    S3_BUCKET = os.getenv("S3_BUCKET", "")
    S3_REGION = os.getenv("S3_REGION", "us-east-1")
    S3_ACCESS_KEY_ID = os.getenv("S3_ACCESS_KEY_ID") or None
    S3_SECRET_ACCESS_KEY = os.getenv("S3_SECRET_ACCESS_KEY") or None
    S3_ENDPOINT_URL = os.getenv("S3_ENDPOINT_URL") or None
    S3_PUBLIC_BASE_URL = os.getenv("S3_PUBLIC_BASE_URL", "").strip()
