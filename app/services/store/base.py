import os
import secrets
from abc import ABC, abstractmethod
from datetime import datetime, timezone

from fastapi import UploadFile


def generate_image_key(filename: str | None, prefix: str = "cars") -> str:
    ext = os.path.splitext(filename or "")[1].lower()
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S_%f")
    return f"{prefix}/{timestamp}_{secrets.token_hex(4)}{ext}"


class ImageStorage(ABC):
    """Where listing images live. Implementations return the public URL of an upload."""

    @abstractmethod
    async def upload(self, file: UploadFile) -> str:
        ...

    @abstractmethod
    async def delete(self, url: str) -> None:
        ...
