"""Models module - Pydantic data models"""

from .upload import DestinationConfig, UploadedFile, UploadFailure, UploadResult

__all__ = [
    "UploadedFile",
    "DestinationConfig",
    "UploadResult",
    "UploadFailure",
]
