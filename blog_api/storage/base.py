from abc import ABC, abstractmethod


class BlobStore(ABC):
    """
    Object storage that accepts bytes under a name and hands back a public URL.

    Implementations raise ``UploadFailed`` for any vendor or network failure so
    callers never see SDK-specific exceptions.
    """

    backend_name = ""

    @abstractmethod
    def upload(self, data: bytes, name: str, content_type: str | None = None) -> str:
        """
        Store ``data`` as ``name``.

        Args:
            data: raw file contents
            name: object name, unique per upload
            content_type: MIME type recorded with the object

        Returns:
            URL the object can be fetched from

        Raises:
            UploadFailed: the object could not be stored
        """
        pass
