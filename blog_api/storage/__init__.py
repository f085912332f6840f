from blog_api.storage.base import BlobStore
from blog_api.storage.factory import build_blob_store

__all__ = ["BlobStore", "build_blob_store"]
