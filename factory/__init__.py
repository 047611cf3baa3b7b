"""Factory package - Dependency injection for cloud-agnostic code"""

from .client_factory import create_storage_client, create_uploader

__all__ = [
    "create_storage_client",
    "create_uploader",
]
