from pathlib import Path

import anyio
from fastapi import UploadFile
from loguru import logger

from app.core.exceptions import ImageStorageError
from app.services.store.base import ImageStorage, generate_image_key


class LocalImageStorage(ImageStorage):
    """Images on the local disk under ``root``, served by the web server at ``base_url``"""

    def __init__(self, root: Path, base_url: str) -> None:
        self.root = Path(root)
        self.base_url = base_url.rstrip("/")

    async def upload(self, file: UploadFile) -> str:
        key = generate_image_key(file.filename)
        path = anyio.Path(self.root / key)
        try:
            await path.parent.mkdir(parents=True, exist_ok=True)
            await path.write_bytes(await file.read())
        except OSError as e:
            logger.exception(f"Failed to store image {key}")
            raise ImageStorageError("Image upload failed") from e
        logger.info(f"Stored image {path}")
        return f"{self.base_url}/{key}"

    async def delete(self, url: str) -> None:
        prefix = f"{self.base_url}/"
        if not url.startswith(prefix):
            logger.warning(f"Not a local image: {url}")
            return
        try:
            await anyio.Path(self.root / url[len(prefix):]).unlink(missing_ok=True)
        except OSError as e:
            logger.exception(f"Failed to delete image {url}")
            raise ImageStorageError("Image delete failed") from e
