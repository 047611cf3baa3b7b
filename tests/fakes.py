"""Shared test doubles and constants"""

from datetime import datetime
from unittest.mock import AsyncMock

from core.interfaces.storage import BaseStorageClient

FIXED_NOW = datetime(2022, 3, 7, 19, 54, 0)
FIXED_TIMESTAMP = "20220307195400"
OK_RESPONSE = {"info": {"http_code": 200, "url": "s3://media/key"}}


class FakeStorageClient(BaseStorageClient):
    """In-memory storage client recording every call"""

    def __init__(self):
        self.upload_file_mock = AsyncMock(return_value=OK_RESPONSE)
        self.put_object_mock = AsyncMock(return_value=OK_RESPONSE)

    async def connect(self) -> None:
        pass

    async def upload_file(self, bucket, key, path) -> dict:
        return await self.upload_file_mock(bucket, key, path)

    async def put_object(self, bucket, key, data) -> dict:
        return await self.put_object_mock(bucket, key, data)

    async def close(self) -> None:
        pass
