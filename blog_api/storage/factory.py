from blog_api.extensions.minio_client import build_minio_client
from blog_api.extensions.s3_client import build_s3_client
from blog_api.storage.minio_store import MinioBlobStore
from blog_api.storage.s3_store import S3BlobStore


def _minio_store(config):
    return MinioBlobStore(
        client=build_minio_client(config),
        bucket=config["MINIO_BUCKET"],
        public_base_url=config["MINIO_PUBLIC_BASE_URL"],
    )


def _s3_store(config):
    if not config.get("S3_BUCKET"):
        raise ValueError("S3_BUCKET must be set when BLOB_STORE_BACKEND is 's3'")
    return S3BlobStore(
        client=build_s3_client(config),
        bucket=config["S3_BUCKET"],
        region=config.get("S3_REGION") or "us-east-1",
        public_base_url=config.get("S3_PUBLIC_BASE_URL", ""),
    )


BACKENDS = {
    "minio": _minio_store,
    "s3": _s3_store,
}


def build_blob_store(config):
    backend = (config.get("BLOB_STORE_BACKEND") or "").strip().lower()
    factory = BACKENDS.get(backend)
    if factory is None:
        raise ValueError(
            f"Unknown BLOB_STORE_BACKEND {backend!r}; expected one of {sorted(BACKENDS)}"
        )
    return factory(config)
