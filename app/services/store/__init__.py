from loguru import logger

from app.core.config import settings
from app.services.store.base import ImageStorage
from app.services.store.local import LocalImageStorage
from app.services.store.s3 import S3ImageStorage

_image_storage: "ImageStorage | None" = None


def get_image_storage() -> ImageStorage:
    """Lazy singleton, also used as a FastAPI dependency"""
    global _image_storage
    if _image_storage is None:
        if settings.s3_enabled:
            _image_storage = S3ImageStorage(
                bucket=settings.S3_BUCKET_NAME,
                access_key=settings.S3_ACCESS_KEY,
                secret_key=settings.S3_SECRET_KEY,
                endpoint_url=settings.S3_ENDPOINT_URL,
                region_name=settings.S3_REGION,
                addressing_style=settings.S3_ADDRESSING_STYLE,
                public_base_url=settings.S3_PUBLIC_BASE_URL,
            )
            logger.info(f"Image storage: s3 bucket {settings.S3_BUCKET_NAME}")
        else:
            _image_storage = LocalImageStorage(settings.media_root, settings.media_url)
            logger.info(f"Image storage: local directory {settings.media_root}")
    return _image_storage
