"""
S3-compatible implementation of storage client

Works with AWS S3, LocalStack, and S3-compatible vendors (Aliyun OSS)
"""

import logging
from pathlib import Path

import aioboto3
from botocore.exceptions import BotoCoreError, ClientError

from config.settings import get_settings
from core.exceptions import ClientTransportError
from core.interfaces.storage import BaseStorageClient

logger = logging.getLogger(__name__)


class S3StorageClient(BaseStorageClient):
    """
    S3 implementation

    Features:
    - Any S3-compatible endpoint (set `endpoint` in storage.yaml)
    - Responses normalized to {"info": {"http_code", "url"}, "etag", "request_id"}
    - botocore errors surfaced as ClientTransportError
    """

    def __init__(self):
        self.settings = get_settings()
        self.session = aioboto3.Session()
        self.client = None

    async def connect(self) -> None:
        """Initialize S3 client"""
        try:
            # Create client context manager
            self.client = self.session.client(
                "s3",
                region_name=self.settings.STORAGE_REGION,
                endpoint_url=self.settings.STORAGE_ENDPOINT,
                aws_access_key_id=self.settings.STORAGE_ACCESS_KEY_ID,
                aws_secret_access_key=self.settings.STORAGE_ACCESS_KEY_SECRET,
            )

            # Enter async context
            self.client = await self.client.__aenter__()

            logger.info(f"✓ Connected to object storage: {self.settings.STORAGE_ENDPOINT or 'AWS'}")
        except Exception as e:
            logger.error(f"✗ Failed to connect to object storage: {e}")
            raise

    async def upload_file(self, bucket: str, key: str, path: str | Path) -> dict:
        """
        Upload a local file to S3

        The file object is streamed as the request body.

        Args:
            bucket: S3 bucket name
            key: Object key (path)
            path: Local file to upload

        Returns:
            Normalized response dict
        """
        if not self.client:
            raise RuntimeError("S3 client not connected")

        try:
            with open(path, "rb") as body:
                raw = await self.client.put_object(Bucket=bucket, Key=key, Body=body)
        except (ClientError, BotoCoreError, OSError) as e:
            logger.error(f"✗ S3 upload error for {key}: {e}")
            raise ClientTransportError(str(e), details={"bucket": bucket, "key": key}) from e

        logger.debug(f"Uploaded to S3: s3://{bucket}/{key}")
        return self._normalize_response(bucket, key, raw)

    async def put_object(self, bucket: str, key: str, data: bytes) -> dict:
        """
        Upload bytes to S3

        Args:
            bucket: S3 bucket name
            key: Object key (path)
            data: Object content

        Returns:
            Normalized response dict
        """
        if not self.client:
            raise RuntimeError("S3 client not connected")

        try:
            raw = await self.client.put_object(Bucket=bucket, Key=key, Body=data)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"✗ S3 put error for {key}: {e}")
            raise ClientTransportError(str(e), details={"bucket": bucket, "key": key}) from e

        logger.debug(f"Put {len(data)} bytes to S3: s3://{bucket}/{key}")
        return self._normalize_response(bucket, key, raw)

    @staticmethod
    def _normalize_response(bucket: str, key: str, raw: dict) -> dict:
        metadata = raw.get("ResponseMetadata", {})
        return {
            "info": {
                "http_code": metadata.get("HTTPStatusCode"),
                "url": f"s3://{bucket}/{key}",
            },
            "etag": raw.get("ETag"),
            "request_id": metadata.get("RequestId"),
        }

    async def close(self) -> None:
        """Close client"""
        if self.client:
            try:
                await self.client.__aexit__(None, None, None)
                logger.info("✓ Object storage connection closed")
            except Exception as e:
                logger.error(f"Error closing S3 client: {e}")
            finally:
                self.client = None
