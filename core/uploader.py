"""
Object uploader - builds object keys and metadata, delegates bytes to a storage client

Three upload paths:
- upload_files: uploaded-file handles (raises StorageError)
- upload_base64: base64 / data-URL payloads (returns UploadFailure, never raises)
- upload_server_file: server-local path (raises StorageError)
"""

import base64
import binascii
import logging
from collections.abc import Callable, Mapping, Sequence
from datetime import datetime
from pathlib import Path

from core.exceptions import ClientTransportError, NotAFileError, StorageError, ValidationError
from core.interfaces.storage import BaseStorageClient
from core.models.upload import DestinationConfig, UploadedFile, UploadFailure, UploadResult
from core.utils.keys import (
    content_unique_id,
    estimate_base64_size,
    random_unique_id,
    save_name,
    split_base64_payload,
)

logger = logging.getLogger(__name__)

SUCCESS_HTTP_CODE = 200


def check_response(response: object) -> None:
    """
    Validate a storage client response

    Raises:
        ClientTransportError: If "info" is missing or http_code is not 200
    """
    info = response.get("info") if isinstance(response, Mapping) else None
    if not isinstance(info, Mapping) or info.get("http_code") != SUCCESS_HTTP_CODE:
        raise ClientTransportError(str(response))


class ObjectUploader:
    """
    Upload adapter over an injected storage client

    Example:
        >>> uploader = ObjectUploader(client, DestinationConfig(
        ...     directory_prefix="uploads", domain="https://cdn.example.com", bucket="media"
        ... ))
        >>> result = await uploader.upload_server_file("/tmp/report.pdf")
        >>> result.url
        'https://cdn.example.com/uploads/<sha256><YYYYMMDDHHMMSS>.pdf'
    """

    def __init__(
        self,
        client: BaseStorageClient,
        destination: DestinationConfig,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.client = client
        self.destination = destination
        self.clock = clock

    async def upload_files(
        self, files: Sequence[UploadedFile] | Mapping[int | str, UploadedFile]
    ) -> list[UploadResult]:
        """
        Upload uploaded-file handles, in order

        Args:
            files: Handles as a list (key = index) or mapping (key = field name)

        Returns:
            One UploadResult per file, in input order

        Raises:
            StorageError: On the first file that fails. Nothing is returned for
                files uploaded before it.
        """
        items = files.items() if isinstance(files, Mapping) else enumerate(files)
        results = []

        for key, file in items:
            try:
                unique_id = content_unique_id(file.path, self.clock())
            except OSError as e:
                logger.error(f"✗ Cannot read upload source {file.path}: {e}")
                raise StorageError(str(e)) from e

            name = save_name(unique_id, file.extension)
            object_key = self.destination.object_key(name)

            await self._send_file(object_key, file.path)

            results.append(
                UploadResult(
                    key=key,
                    origin_name=file.origin_name,
                    save_name=name,
                    save_path=object_key,
                    url=self.destination.public_url(object_key),
                    unique_id=unique_id,
                    size=file.size,
                    mime_type=file.mime_type,
                    extension=file.extension,
                )
            )
            logger.info(f"✓ Uploaded {file.origin_name or file.path} → {object_key}")

        return results

    async def upload_base64(self, options: Mapping[str, str]) -> UploadResult | UploadFailure:
        """
        Upload a base64 payload

        Args:
            options: {"base64": raw or data-URL string, "extension": "png"}

        Returns:
            UploadResult on success, UploadFailure otherwise (never raises)
        """
        try:
            payload, extension = self._require_base64_options(options)
        except ValidationError as e:
            logger.warning(f"Rejected base64 upload: {e.message}")
            return UploadFailure(message=e.message)

        encoded = split_base64_payload(payload)
        try:
            data = base64.b64decode(encoded)
        except (binascii.Error, ValueError) as e:
            logger.warning(f"Rejected base64 upload: {e}")
            return UploadFailure(message=f"invalid base64 payload: {e}")

        unique_id = random_unique_id(self.clock())
        name = save_name(unique_id, extension)
        object_key = self.destination.object_key(name)

        try:
            response = await self.client.put_object(self.destination.bucket, object_key, data)
            check_response(response)
        except StorageError as e:
            logger.warning(f"✗ Base64 upload to {object_key} failed: {e.message}")
            return UploadFailure(message=e.message)
        except Exception as e:
            message = str(e) or type(e).__name__
            logger.error(f"✗ Base64 upload to {object_key} failed: {message}")
            return UploadFailure(message=message)

        logger.info(f"✓ Uploaded base64 payload → {object_key}")
        return UploadResult(
            save_name=name,
            save_path=object_key,
            url=self.destination.public_url(object_key),
            unique_id=unique_id,
            size=estimate_base64_size(encoded),
            extension=extension,
        )

    async def upload_server_file(self, path: str | Path) -> UploadResult:
        """
        Upload a file that already lives on the server

        Args:
            path: Local file path

        Returns:
            UploadResult (origin_name is the resolved path)

        Raises:
            NotAFileError: If path is not a regular file (no client call made)
            StorageError: If hashing or the upload fails
        """
        file_path = Path(path)
        if not file_path.is_file():
            raise NotAFileError("not a valid file", details={"path": str(path)})

        real_path = file_path.resolve()
        extension = real_path.suffix.lstrip(".")
        try:
            unique_id = content_unique_id(real_path, self.clock())
            size = real_path.stat().st_size
        except OSError as e:
            raise StorageError(str(e)) from e

        name = save_name(unique_id, extension)
        object_key = self.destination.object_key(name)

        await self._send_file(object_key, real_path)

        logger.info(f"✓ Uploaded server file {real_path} → {object_key}")
        return UploadResult(
            origin_name=str(real_path),
            save_name=name,
            save_path=object_key,
            url=self.destination.public_url(object_key),
            unique_id=unique_id,
            size=size,
            extension=extension,
        )

    async def _send_file(self, object_key: str, path: Path) -> None:
        """Upload a local file and check the response; any failure surfaces as StorageError"""
        try:
            response = await self.client.upload_file(self.destination.bucket, object_key, path)
            check_response(response)
        except StorageError:
            raise
        except Exception as e:
            logger.error(f"✗ Upload to {object_key} failed: {e}")
            raise ClientTransportError(str(e) or type(e).__name__) from e

    @staticmethod
    def _require_base64_options(options: Mapping[str, str]) -> tuple[str, str]:
        """Return (payload, extension) or raise ValidationError"""
        if not options.get("base64"):
            raise ValidationError("base64 option is required")
        if not isinstance(options["base64"], str):
            raise ValidationError("base64 option must be a string")
        if not options.get("extension"):
            raise ValidationError("extension option is required")
        return options["base64"], options["extension"]
