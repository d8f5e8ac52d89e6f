from typing import Optional

import anyio
import boto3
from botocore.client import Config
from botocore.exceptions import BotoCoreError, ClientError
from fastapi import UploadFile
from loguru import logger

from app.core.exceptions import ImageStorageError
from app.services.store.base import ImageStorage, generate_image_key


class S3ImageStorage(ImageStorage):
    """
    S3-compatible image storage (AWS S3, MinIO, Contabo).
    Objects are uploaded public-read and addressed through ``public_base_url``.
    """

    def __init__(
        self,
        bucket: str,
        access_key: str,
        secret_key: str,
        endpoint_url: Optional[str] = None,
        region_name: Optional[str] = None,
        addressing_style: str = "path",
        public_base_url: Optional[str] = None,
    ) -> None:
        self.bucket = bucket
        if public_base_url:
            self.public_base_url = public_base_url.rstrip("/")
        elif endpoint_url:
            self.public_base_url = f"{endpoint_url.rstrip('/')}/{bucket}"
        else:
            self.public_base_url = f"https://{bucket}.s3.amazonaws.com"

        cfg = Config(
            signature_version="s3v4",
            s3={"addressing_style": addressing_style},
        )
        session = boto3.session.Session()
        self.client = session.client(
            "s3",
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
            endpoint_url=endpoint_url,
            region_name=region_name,
            config=cfg,
        )

    def build_public_url(self, key: str) -> str:
        return f"{self.public_base_url}/{key}"

    def key_from_url(self, url: str) -> Optional[str]:
        prefix = f"{self.public_base_url}/"
        return url[len(prefix):] if url.startswith(prefix) else None

    async def upload(self, file: UploadFile) -> str:
        key = generate_image_key(file.filename)
        extra_args = {
            "ContentType": file.content_type or "application/octet-stream",
            "ACL": "public-read",
        }

        def _do_upload() -> None:
            file.file.seek(0)
            self.client.upload_fileobj(
                Fileobj=file.file,
                Bucket=self.bucket,
                Key=key,
                ExtraArgs=extra_args,
            )

        try:
            await anyio.to_thread.run_sync(_do_upload)
        except (BotoCoreError, ClientError) as e:
            logger.exception(f"Failed to upload {key} to bucket {self.bucket}")
            raise ImageStorageError("Image upload failed") from e

        logger.info(f"Uploaded s3://{self.bucket}/{key}")
        return self.build_public_url(key)

    async def delete(self, url: str) -> None:
        key = self.key_from_url(url)
        if key is None:
            logger.warning(f"Not an object of bucket {self.bucket}: {url}")
            return
        try:
            await anyio.to_thread.run_sync(
                lambda: self.client.delete_object(Bucket=self.bucket, Key=key)
            )
        except (BotoCoreError, ClientError) as e:
            logger.exception(f"Failed to delete s3://{self.bucket}/{key}")
            raise ImageStorageError("Image delete failed") from e
        logger.info(f"Deleted s3://{self.bucket}/{key}")
