from typing import Any, Dict, List, Optional
from loguru import logger
from tortoise.exceptions import IntegrityError
from tortoise.expressions import Q

from app.core.config import settings
from app.core.exceptions import DuplicateKeyError, NotFoundError, ValidationError
from app.models.car import Car
from app.models.user import User
from app.schemas.car import CarCreate, CarFilter
from app.schemas.common import page_count
from app.services.listing.images import merge_images

RELATED = ("brand", "model", "created_by")

# request field -> column
_REFERENCE_COLUMNS = {"brand": "brand_id", "model": "model_id"}


def _to_columns(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {_REFERENCE_COLUMNS.get(key, key): value for key, value in fields.items()}


class CarService:
    @staticmethod
    def ensure_min_images(count: int) -> None:
        if count < settings.MIN_CAR_IMAGES:
            raise ValidationError(f"Please upload at least {settings.MIN_CAR_IMAGES} images")

    @staticmethod
    async def ensure_unique(
        stock_code: Optional[str],
        plate_number: Optional[str],
        exclude_id: Optional[int] = None
    ) -> None:
        """Raise DuplicateKeyError naming the colliding identifier (stock code first)"""
        conditions = []
        if stock_code:
            conditions.append(Q(stock_code=stock_code))
        if plate_number:
            conditions.append(Q(plate_number=plate_number))
        if not conditions:
            return

        query = Car.filter(Q(*conditions, join_type=Q.OR))
        if exclude_id is not None:
            query = query.exclude(id=exclude_id)

        clashes = await query.values_list("stock_code", "plate_number")
        if not clashes:
            return
        if stock_code and any(code == stock_code for code, _ in clashes):
            raise DuplicateKeyError("Stock code already exists")
        raise DuplicateKeyError("Plate number already exists")

    @staticmethod
    async def _save_or_duplicate(car: Car, exclude_id: Optional[int] = None) -> None:
        # unique indexes decide, a lost race gets the same duplicate message
        try:
            await car.save()
        except IntegrityError:
            await CarService.ensure_unique(car.stock_code, car.plate_number, exclude_id)
            raise

    @staticmethod
    async def get_car(car_id: int) -> Car:
        car = await Car.get_or_none(id=car_id).prefetch_related(*RELATED)
        if not car:
            raise NotFoundError("Car not found")
        return car

    @staticmethod
    async def create_car(data: CarCreate, images: List[str], created_by: User) -> Car:
        """Persist a new listing and return it with brand, model and creator expanded"""
        CarService.ensure_min_images(len(images))
        await CarService.ensure_unique(data.stock_code, data.plate_number)

        car = Car(
            **_to_columns(data.model_dump()),
            images=list(images),
            created_by=created_by
        )
        await CarService._save_or_duplicate(car)

        logger.info(f"Car {car.stock_code} created by {created_by.email} with {len(images)} images")
        return await CarService.get_car(car.id)

    @staticmethod
    async def update_car(
        car_id: int,
        changes: Dict[str, Any],
        new_images: List[str] = (),
        remove_images: List[str] = ()
    ) -> Car:
        """
        Apply a partial update. Fields missing from ``changes`` are left untouched;
        the image list is recomputed from the current one.
        """
        car = await Car.get_or_none(id=car_id)
        if not car:
            raise NotFoundError("Car not found")

        if changes.get("stock_code") or changes.get("plate_number"):
            await CarService.ensure_unique(
                changes.get("stock_code"), changes.get("plate_number"), exclude_id=car_id
            )

        images = merge_images(car.images or [], remove_images, new_images)

        for column, value in _to_columns(changes).items():
            setattr(car, column, value)
        car.images = images
        await CarService._save_or_duplicate(car, exclude_id=car_id)

        if len(images) < settings.MIN_CAR_IMAGES:
            logger.warning(f"Car {car.stock_code} now has only {len(images)} images")
        logger.info(f"Car {car.stock_code} updated: fields={sorted(changes)}, "
                    f"+{len(new_images)} / -{len(remove_images)} images")
        return await CarService.get_car(car_id)

    @staticmethod
    async def delete_car(car_id: int) -> None:
        deleted = await Car.filter(id=car_id).delete()
        if not deleted:
            raise NotFoundError("Car not found")
        logger.info(f"Car {car_id} deleted")

    @staticmethod
    async def list_cars(
        filters: Optional[CarFilter] = None,
        page: int = 1,
        page_size: int = 20
    ) -> tuple[list[Car], int, int]:
        """Return one page of cars (newest first), the filtered total and the page count"""
        query = Car.all()
        if filters:
            criteria = {key: value for key, value in filters.model_dump().items() if value not in (None, "")}
            query = query.filter(**_to_columns(criteria))

        total = await query.count()
        cars = await (
            query.order_by("-created_at", "-id")
            .offset((page - 1) * page_size)
            .limit(page_size)
            .prefetch_related(*RELATED)
        )
        return cars, total, page_count(total, page_size)
