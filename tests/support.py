import os
import tempfile
import unittest

from blog_api.errors import UploadFailed
from blog_api.storage.base import BlobStore


TEST_JWT_SECRET = "test-secret-key-that-is-long-enough-for-hs256"


class FakeBlobStore(BlobStore):
    backend_name = "fake"

    def __init__(self):
        self.uploads = []
        self.fail = False

    def upload(self, data, name, content_type=None):
        if self.fail:
            raise UploadFailed()
        self.uploads.append({"data": data, "name": name, "content_type": content_type})
        return f"https://blobs.example.test/covers/{name}"


class AppTestCase(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        db_fd, cls.db_path = tempfile.mkstemp(suffix=".db")
        os.close(db_fd)

        from blog_api import create_app
        from blog_api.context import get_context
        from blog_api.db import db

        cls.blob_store = FakeBlobStore()
        cls.app = create_app(
            {
                "TESTING": True,
                "SQLALCHEMY_DATABASE_URI": f"sqlite:///{cls.db_path}",
                "JWT_SECRET_KEY": TEST_JWT_SECRET,
                "JWT_ACCESS_TOKEN_EXPIRES": False,
                "JWT_COOKIE_SECURE": False,
                "JWT_COOKIE_SAMESITE": "Lax",
                "LOG_LEVEL": "WARNING",
            },
            blob_store=cls.blob_store,
        )
        cls.db = db
        with cls.app.app_context():
            cls.ctx = get_context()

    @classmethod
    def tearDownClass(cls):
        with cls.app.app_context():
            cls.db.engine.dispose()
        if os.path.exists(cls.db_path):
            os.remove(cls.db_path)

    def setUp(self):
        with self.app.app_context():
            self.db.drop_all()
            self.db.create_all()
        self.blob_store.uploads.clear()
        self.blob_store.fail = False
        self.client = self.app.test_client()
