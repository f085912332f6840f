import io
import logging
from threading import Lock
from urllib.parse import quote

from minio.error import S3Error

from blog_api.errors import UploadFailed
from blog_api.storage.base import BlobStore

logger = logging.getLogger(__name__)


class MinioBlobStore(BlobStore):
    """Blob store backed by a MinIO (S3-compatible) bucket."""

    backend_name = "minio"

    def __init__(self, client, bucket: str, public_base_url: str):
        self._client = client
        self._bucket = bucket
        self._public_base_url = public_base_url.rstrip("/")
        self._bucket_ready = False
        self._bucket_lock = Lock()

    def _ensure_bucket(self):
        with self._bucket_lock:
            if self._bucket_ready:
                return
            if not self._client.bucket_exists(self._bucket):
                self._client.make_bucket(self._bucket)
            self._bucket_ready = True

    def url_for(self, name: str) -> str:
        return f"{self._public_base_url}/{self._bucket}/{quote(name)}"

    def upload(self, data: bytes, name: str, content_type: str | None = None) -> str:
        try:
            self._ensure_bucket()
            self._client.put_object(
                bucket_name=self._bucket,
                object_name=name,
                data=io.BytesIO(data),
                length=len(data),
                content_type=content_type or "application/octet-stream",
            )
        except S3Error as e:
            logger.error(f"MinIO rejected upload of {name}: {e.code}")
            raise UploadFailed() from e
        except Exception as e:
            logger.error(f"MinIO upload of {name} failed: {str(e)}")
            raise UploadFailed() from e

        logger.info(f"Uploaded {name} ({len(data)} bytes) to MinIO bucket {self._bucket}")
        return self.url_for(name)
