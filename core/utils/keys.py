"""
Object key helpers

Unique ids come in two flavours:
- content ids: sha256(file) + timestamp (file and server uploads)
- random ids: timestamp + random token (base64 uploads, content not hashed)
"""

import hashlib
import uuid
from datetime import datetime
from pathlib import Path

TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"
HASH_CHUNK_SIZE = 1024 * 1024  # 1MB


def timestamp(now: datetime) -> str:
    """Format a datetime as YYYYMMDDHHMMSS"""
    return now.strftime(TIMESTAMP_FORMAT)


def file_sha256(path: str | Path) -> str:
    """
    Hex SHA-256 of a file, read in chunks

    Args:
        path: File to hash

    Returns:
        64-char hex digest

    Raises:
        OSError: If the file can't be read
    """
    digest = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(HASH_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def content_unique_id(path: str | Path, now: datetime) -> str:
    """Content hash of the file followed by the timestamp"""
    return file_sha256(path) + timestamp(now)


def random_unique_id(now: datetime) -> str:
    """Timestamp followed by a random token"""
    return timestamp(now) + uuid.uuid4().hex


def save_name(unique_id: str, extension: str) -> str:
    """Stored filename for a unique id"""
    return f"{unique_id}.{extension}"


def split_base64_payload(payload: str) -> str:
    """
    Strip a data-URL prefix from a base64 payload

    Example:
        >>> split_base64_payload("data:image/png;base64,AAAA")
        'AAAA'
        >>> split_base64_payload("AAAA")
        'AAAA'
    """
    _, sep, encoded = payload.partition(",")
    return encoded if sep else payload


def estimate_base64_size(encoded: str) -> int:
    """
    Approximate decoded size of a base64 string

    Uses len - (len / 8) * 2, i.e. 3/4 of the encoded length without the
    padding correction. Kept as-is so reported sizes match existing records.
    """
    length = len(encoded)
    return int(length - (length / 8) * 2)
