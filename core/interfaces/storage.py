from abc import ABC, abstractmethod
from pathlib import Path


class BaseStorageClient(ABC):
    """
    Abstract interface for object storage

    Implementations:
    - S3StorageClient (AWS S3, LocalStack, S3-compatible OSS)

    Upload responses are dicts carrying an "info" mapping with the HTTP status:
        {"info": {"http_code": 200, "url": "..."}, ...}
    Transport failures raise ClientTransportError.
    """

    @abstractmethod
    async def connect(self) -> None:
        """Initialize storage client"""

    @abstractmethod
    async def upload_file(self, bucket: str, key: str, path: str | Path) -> dict:
        """
        Upload a local file

        Args:
            bucket: Bucket name
            key: Object key
            path: Local file to upload

        Returns:
            Response dict with "info" (http_code, url)
        """

    @abstractmethod
    async def put_object(self, bucket: str, key: str, data: bytes) -> dict:
        """
        Upload in-memory bytes

        Args:
            bucket: Bucket name
            key: Object key
            data: Object content

        Returns:
            Response dict with "info" (http_code, url)
        """

    @abstractmethod
    async def close(self) -> None:
        """Close client"""
