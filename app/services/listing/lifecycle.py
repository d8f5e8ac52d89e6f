from typing import Any, Dict, List, Optional

from fastapi import UploadFile
from loguru import logger

from app.core.config import settings
from app.core.exceptions import InvalidReferenceError, ValidationError
from app.models.car import Car
from app.models.catalog.brand import Brand
from app.models.catalog.model import CarModel
from app.models.user import User
from app.schemas.car import CarCreate
from app.services.listing.car_service import CarService
from app.services.store.base import ImageStorage


class ListingLifecycleService:
    """
    Create/update/delete of listings across the catalog, the image storage
    and the car store.

    Images are uploaded before anything is written to the database. When a later
    step fails, the images uploaded by the same request are removed again.
    """

    @staticmethod
    async def validate_references(brand_id: int, model_id: int) -> None:
        if not await Brand.exists(id=brand_id):
            raise InvalidReferenceError("Brand not found")
        model = await CarModel.get_or_none(id=model_id)
        if not model:
            raise InvalidReferenceError("Model not found")
        if model.brand_id != brand_id:
            raise InvalidReferenceError("Model does not belong to the selected brand")

    @staticmethod
    def validate_files(files: List[UploadFile]) -> None:
        if len(files) > settings.MAX_UPLOAD_IMAGES:
            raise ValidationError(f"You can upload at most {settings.MAX_UPLOAD_IMAGES} images at once")
        for file in files:
            if file.content_type not in settings.ALLOWED_IMAGE_TYPES:
                raise ValidationError(
                    f"Unsupported image type '{file.content_type}' for {file.filename}"
                )

    @staticmethod
    async def _discard(urls: List[str], storage: ImageStorage) -> None:
        for url in urls:
            try:
                await storage.delete(url)
            except Exception:
                logger.exception(f"Orphaned image left in storage: {url}")

    @staticmethod
    async def _upload_all(files: List[UploadFile], storage: ImageStorage) -> List[str]:
        """Upload sequentially, no retry. A failure removes what was already uploaded."""
        urls: List[str] = []
        try:
            for file in files:
                urls.append(await storage.upload(file))
        except Exception:
            await ListingLifecycleService._discard(urls, storage)
            raise
        return urls

    @staticmethod
    async def create_listing(
        data: CarCreate,
        files: List[UploadFile],
        user: User,
        storage: ImageStorage
    ) -> Car:
        await ListingLifecycleService.validate_references(data.brand, data.model)
        CarService.ensure_min_images(len(files))
        ListingLifecycleService.validate_files(files)
        await CarService.ensure_unique(data.stock_code, data.plate_number)

        urls = await ListingLifecycleService._upload_all(files, storage)
        try:
            return await CarService.create_car(data, urls, created_by=user)
        except Exception:
            await ListingLifecycleService._discard(urls, storage)
            raise

    @staticmethod
    async def update_listing(
        car_id: int,
        changes: Dict[str, Any],
        files: List[UploadFile],
        remove_images: Optional[List[str]],
        storage: ImageStorage
    ) -> Car:
        car = await CarService.get_car(car_id)

        if "brand" in changes or "model" in changes:
            await ListingLifecycleService.validate_references(
                changes.get("brand", car.brand_id),
                changes.get("model", car.model_id),
            )
        ListingLifecycleService.validate_files(files)
        await CarService.ensure_unique(
            changes.get("stock_code"), changes.get("plate_number"), exclude_id=car_id
        )

        urls = await ListingLifecycleService._upload_all(files, storage)
        try:
            return await CarService.update_car(car_id, changes, urls, remove_images or [])
        except Exception:
            await ListingLifecycleService._discard(urls, storage)
            raise

    @staticmethod
    async def delete_listing(car_id: int) -> None:
        # images stay in storage
        await CarService.delete_car(car_id)
