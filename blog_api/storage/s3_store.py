import logging
from urllib.parse import quote

from botocore.exceptions import BotoCoreError, ClientError

from blog_api.errors import UploadFailed
from blog_api.storage.base import BlobStore

logger = logging.getLogger(__name__)


class S3BlobStore(BlobStore):
    """Blob store backed by an Amazon S3 bucket."""

    backend_name = "s3"

    def __init__(self, client, bucket: str, region: str, public_base_url: str = ""):
        self._client = client
        self._bucket = bucket
        self._region = region
        self._public_base_url = public_base_url.rstrip("/")

    def url_for(self, name: str) -> str:
        if self._public_base_url:
            return f"{self._public_base_url}/{quote(name)}"
        return f"https://{self._bucket}.s3.{self._region}.amazonaws.com/{quote(name)}"

    def upload(self, data: bytes, name: str, content_type: str | None = None) -> str:
        try:
            self._client.put_object(
                Bucket=self._bucket,
                Key=name,
                Body=data,
                ContentType=content_type or "application/octet-stream",
            )
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "")
            logger.error(f"S3 rejected upload of {name}: {error_code}")
            raise UploadFailed() from e
        except BotoCoreError as e:
            logger.error(f"S3 upload of {name} failed: {str(e)}")
            raise UploadFailed() from e

        logger.info(f"Uploaded {name} ({len(data)} bytes) to S3 bucket {self._bucket}")
        return self.url_for(name)
