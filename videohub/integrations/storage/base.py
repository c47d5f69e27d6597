from typing import BinaryIO


class StorageProvider:
    name: str = "base"

    def put_object(self, bucket: str, key: str, body: BinaryIO, content_type: str) -> None:
        raise NotImplementedError

    def presign_get(self, bucket: str, key: str, expires_in: int) -> str:
        raise NotImplementedError
