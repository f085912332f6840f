import unittest
from unittest.mock import patch

from botocore.exceptions import ClientError, EndpointConnectionError

from blog_api.errors import UploadFailed
from blog_api.storage import build_blob_store
from blog_api.storage.minio_store import MinioBlobStore
from blog_api.storage.s3_store import S3BlobStore


class FakeMinio:
    def __init__(self, bucket_exists=True, fail_with=None):
        self._bucket_exists = bucket_exists
        self.fail_with = fail_with
        self.made_buckets = []
        self.bucket_checks = 0
        self.put_calls = []

    def bucket_exists(self, bucket_name):
        self.bucket_checks += 1
        return self._bucket_exists

    def make_bucket(self, bucket_name):
        self.made_buckets.append(bucket_name)
        self._bucket_exists = True

    def put_object(self, **kwargs):
        if self.fail_with is not None:
            raise self.fail_with
        kwargs["body"] = kwargs["data"].read()
        self.put_calls.append(kwargs)


class FakeS3:
    def __init__(self, fail_with=None):
        self.fail_with = fail_with
        self.put_calls = []

    def put_object(self, **kwargs):
        if self.fail_with is not None:
            raise self.fail_with
        self.put_calls.append(kwargs)
        return {"ETag": '"abc"'}


class TestMinioBlobStore(unittest.TestCase):
    def test_upload_puts_object_and_returns_public_url(self):
        client = FakeMinio()
        store = MinioBlobStore(client, "covers", "http://127.0.0.1:9000/")

        url = store.upload(b"bytes", "1700000000000_cover.png", "image/png")

        self.assertEqual(url, "http://127.0.0.1:9000/covers/1700000000000_cover.png")
        call = client.put_calls[0]
        self.assertEqual(call["bucket_name"], "covers")
        self.assertEqual(call["object_name"], "1700000000000_cover.png")
        self.assertEqual(call["length"], 5)
        self.assertEqual(call["body"], b"bytes")
        self.assertEqual(call["content_type"], "image/png")

    def test_upload_creates_missing_bucket_once(self):
        client = FakeMinio(bucket_exists=False)
        store = MinioBlobStore(client, "covers", "http://minio")

        store.upload(b"a", "a.png")
        store.upload(b"b", "b.png")

        self.assertEqual(client.made_buckets, ["covers"])
        self.assertEqual(client.bucket_checks, 1)
        self.assertEqual(client.put_calls[0]["content_type"], "application/octet-stream")

    def test_upload_wraps_put_failure(self):
        error = RuntimeError("write timed out")
        store = MinioBlobStore(FakeMinio(fail_with=error), "covers", "http://minio")

        with self.assertRaises(UploadFailed):
            store.upload(b"a", "a.png")

    def test_upload_wraps_connection_failure(self):
        client = FakeMinio()

        def unreachable(bucket_name):
            raise ConnectionRefusedError("minio down")

        client.bucket_exists = unreachable
        store = MinioBlobStore(client, "covers", "http://minio")

        with self.assertRaises(UploadFailed):
            store.upload(b"a", "a.png")


class TestS3BlobStore(unittest.TestCase):
    def test_upload_returns_virtual_hosted_url(self):
        client = FakeS3()
        store = S3BlobStore(client, "blog-covers", "eu-west-1")

        url = store.upload(b"bytes", "1700000000000_cover.png", "image/png")

        self.assertEqual(
            url,
            "https://blog-covers.s3.eu-west-1.amazonaws.com/1700000000000_cover.png",
        )
        self.assertEqual(
            client.put_calls[0],
            {
                "Bucket": "blog-covers",
                "Key": "1700000000000_cover.png",
                "Body": b"bytes",
                "ContentType": "image/png",
            },
        )

    def test_upload_uses_public_base_url(self):
        store = S3BlobStore(FakeS3(), "blog-covers", "eu-west-1", "https://cdn.example.com/")
        self.assertEqual(
            store.upload(b"x", "a b.png"),
            "https://cdn.example.com/a%20b.png",
        )

    def test_upload_wraps_client_error(self):
        error = ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "denied"}},
            "PutObject",
        )
        store = S3BlobStore(FakeS3(fail_with=error), "blog-covers", "eu-west-1")

        with self.assertRaises(UploadFailed):
            store.upload(b"x", "a.png")

    def test_upload_wraps_connection_error(self):
        error = EndpointConnectionError(endpoint_url="https://s3.eu-west-1.amazonaws.com")
        store = S3BlobStore(FakeS3(fail_with=error), "blog-covers", "eu-west-1")

        with self.assertRaises(UploadFailed):
            store.upload(b"x", "a.png")


class TestBuildBlobStore(unittest.TestCase):
    def _config(self, **overrides):
        config = {
            "BLOB_STORE_BACKEND": "minio",
            "MINIO_ENDPOINT": "localhost:9000",
            "MINIO_ACCESS_KEY": "admin",
            "MINIO_SECRET_KEY": "supersecret",
            "MINIO_BUCKET": "covers",
            "MINIO_SECURE": False,
            "MINIO_CONNECT_TIMEOUT": 5.0,
            "MINIO_READ_TIMEOUT": 20.0,
            "MINIO_HTTP_POOL_MAXSIZE": 4,
            "MINIO_PUBLIC_BASE_URL": "http://127.0.0.1:9000",
            "S3_BUCKET": "blog-covers",
            "S3_REGION": "eu-west-1",
            "S3_ACCESS_KEY_ID": "key",
            "S3_SECRET_ACCESS_KEY": "secret",
            "S3_ENDPOINT_URL": None,
            "S3_PUBLIC_BASE_URL": "",
        }
        config.update(overrides)
        return config

    def test_selects_minio(self):
        store = build_blob_store(self._config(BLOB_STORE_BACKEND="minio"))
        self.assertIsInstance(store, MinioBlobStore)
        self.assertEqual(store.backend_name, "minio")

    def test_selects_s3(self):
        with patch("blog_api.storage.factory.build_s3_client", return_value=FakeS3()) as build:
            store = build_blob_store(self._config(BLOB_STORE_BACKEND="S3"))
        self.assertIsInstance(store, S3BlobStore)
        build.assert_called_once()

    def test_s3_requires_bucket(self):
        with self.assertRaises(ValueError):
            build_blob_store(self._config(BLOB_STORE_BACKEND="s3", S3_BUCKET=""))

    def test_unknown_backend(self):
        with self.assertRaises(ValueError):
            build_blob_store(self._config(BLOB_STORE_BACKEND="ftp"))


if __name__ == "__main__":
    unittest.main()
