"""Interfaces module - Abstract base classes for cloud services"""

from .storage import BaseStorageClient

__all__ = [
    "BaseStorageClient",
]
