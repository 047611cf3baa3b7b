"""
Upload models

Pydantic models for the upload adapter:
- UploadedFile: Handle for a file already written to disk (HTTP upload)
- DestinationConfig: Where objects go and how their URLs are built
- UploadResult: Metadata describing a stored object
- UploadFailure: Tagged failure returned by the base64 upload
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class UploadedFile(BaseModel):
    """
    Uploaded file handle

    Mirrors what a web framework exposes for a multipart upload
    """

    path: Path = Field(description="Location of the file on disk")
    origin_name: str | None = Field(default=None, description="Client-side filename")
    mime_type: str | None = Field(default=None, description="Declared MIME type")
    extension: str = Field(description="Declared extension, without the dot")
    size: int = Field(ge=0, description="Size in bytes")

    @classmethod
    def from_path(
        cls,
        path: str | Path,
        origin_name: str | None = None,
        mime_type: str | None = None,
    ) -> "UploadedFile":
        """Build a handle for an existing local file"""
        file_path = Path(path)
        return cls(
            path=file_path,
            origin_name=origin_name or file_path.name,
            mime_type=mime_type,
            extension=file_path.suffix.lstrip("."),
            size=file_path.stat().st_size,
        )


class DestinationConfig(BaseModel):
    """
    Destination for uploaded objects

    Object keys are built as directory_prefix + path_separator + save_name,
    public URLs as domain + path_separator + object key.
    """

    model_config = ConfigDict(frozen=True)

    directory_prefix: str = Field(description="Directory prefix inside the bucket")
    path_separator: str = Field(default="/", description="Separator between key parts")
    domain: str = Field(description="Public domain base for object URLs")
    bucket: str = Field(description="Bucket name")

    def object_key(self, save_name: str) -> str:
        """Object key (save path) for a saved filename"""
        return f"{self.directory_prefix}{self.path_separator}{save_name}"

    def public_url(self, save_path: str) -> str:
        """Public URL for an object key"""
        return f"{self.domain}{self.path_separator}{save_path}"


class UploadResult(BaseModel):
    """
    Metadata for a stored object

    `key` is only set by the file-list upload (index or form field name).
    """

    key: int | str | None = Field(default=None, description="Caller-side key of the source")
    origin_name: str | None = Field(default=None, description="Original filename or path")
    save_name: str = Field(description="Stored filename (unique_id.extension)")
    save_path: str = Field(description="Object key inside the bucket")
    url: str = Field(description="Public URL of the object")
    unique_id: str = Field(description="Content hash or random token plus timestamp")
    size: int = Field(description="Size in bytes")
    mime_type: str | None = Field(default=None, description="Declared MIME type")
    extension: str = Field(description="Extension, without the dot")

    def to_dict(self) -> dict:
        """Convert to a plain dict, dropping unset optional fields"""
        return self.model_dump(exclude_none=True)


class UploadFailure(BaseModel):
    """Tagged failure for the status-flag style upload"""

    success: Literal[False] = False
    message: str = Field(min_length=1, description="Human-readable failure reason")
