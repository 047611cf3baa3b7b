"""
Unit tests for factory pattern

Tests that correct client implementations are created based on config
"""

from unittest.mock import patch

import pytest

from core.models.upload import DestinationConfig
from core.uploader import ObjectUploader
from factory.client_factory import create_storage_client, create_uploader
from providers.aws.s3 import S3StorageClient


@pytest.mark.unit
class TestStorageClientFactory:
    """Test storage client factory"""

    @pytest.mark.parametrize("provider", ["oss", "aws", "localstack", "OSS"])
    @patch("factory.client_factory.get_settings")
    def test_s3_compatible_providers(self, mock_settings, provider):
        """Test that S3-compatible providers create S3StorageClient"""
        mock_settings.return_value.STORAGE_PROVIDER = provider

        client = create_storage_client()

        assert isinstance(client, S3StorageClient)

    @pytest.mark.parametrize("provider", ["gcp", "azure"])
    @patch("factory.client_factory.get_settings")
    def test_providers_without_client_are_rejected(self, mock_settings, provider):
        """Test that providers with no S3-compatible client raise ValueError"""
        mock_settings.return_value.STORAGE_PROVIDER = provider

        with pytest.raises(ValueError, match="Supported: oss, aws, localstack"):
            create_storage_client()

    @patch("factory.client_factory.get_settings")
    def test_unsupported_provider_raises_error(self, mock_settings):
        """Test that unsupported provider raises ValueError"""
        mock_settings.return_value.STORAGE_PROVIDER = "invalid"

        with pytest.raises(ValueError, match="Unsupported storage provider"):
            create_storage_client()


@pytest.mark.unit
class TestUploaderFactory:
    """Test uploader factory"""

    @patch("factory.client_factory.get_settings")
    def test_uses_injected_client_and_configured_destination(
        self, mock_settings, fake_client, destination
    ):
        mock_settings.return_value.storage_destination = destination

        uploader = create_uploader(fake_client)

        assert isinstance(uploader, ObjectUploader)
        assert uploader.client is fake_client
        assert uploader.destination == destination

    @patch("factory.client_factory.get_settings")
    def test_creates_client_when_omitted(self, mock_settings):
        mock_settings.return_value.STORAGE_PROVIDER = "localstack"
        mock_settings.return_value.storage_destination = DestinationConfig(
            directory_prefix="storage", domain="http://localhost:4566", bucket="uploads-local"
        )

        uploader = create_uploader()

        assert isinstance(uploader.client, S3StorageClient)
        assert uploader.destination.bucket == "uploads-local"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
