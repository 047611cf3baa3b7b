"""
Client factory - Auto-create clients based on configuration

Dependency injection pattern for cloud-agnostic code
"""

import logging

from config.settings import get_settings
from core.interfaces.storage import BaseStorageClient
from core.uploader import ObjectUploader

logger = logging.getLogger(__name__)


def create_storage_client() -> BaseStorageClient:
    """
    Create storage client based on STORAGE_PROVIDER config

    Returns:
        BaseStorageClient: S3-compatible client for oss, aws and localstack

    Examples:
        >>> # .env: STORAGE_PROVIDER=oss
        >>> client = create_storage_client()  # Returns S3StorageClient
        >>> await client.connect()
    """
    settings = get_settings()
    provider = settings.STORAGE_PROVIDER.lower()

    if provider in ["oss", "aws", "localstack"]:
        from providers.aws.s3 import S3StorageClient

        logger.info(f"✓ Creating S3StorageClient ({provider})")
        return S3StorageClient()

    else:
        raise ValueError(
            f"Unsupported storage provider: {provider}. "
            f"Supported: oss, aws, localstack"
        )


def create_uploader(client: BaseStorageClient | None = None) -> ObjectUploader:
    """
    Create an uploader bound to the configured destination

    Args:
        client: Storage client to use (created from config when omitted).
            The caller owns its connect()/close() lifecycle.

    Returns:
        ObjectUploader

    Examples:
        >>> client = create_storage_client()
        >>> await client.connect()
        >>> uploader = create_uploader(client)
        >>> result = await uploader.upload_server_file("/tmp/report.pdf")
    """
    settings = get_settings()
    destination = settings.storage_destination

    if client is None:
        client = create_storage_client()

    logger.info(
        f"Creating ObjectUploader (bucket={destination.bucket}, dir={destination.directory_prefix})"
    )
    return ObjectUploader(client, destination)
