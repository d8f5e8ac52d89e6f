from typing import List, Optional
from loguru import logger
from tortoise.exceptions import IntegrityError

from app.core.exceptions import ConflictError, DuplicateKeyError, NotFoundError
from app.models.car import Car
from app.models.catalog.brand import Brand
from app.models.catalog.model import CarModel
from app.schemas.catalog.model import CarModelCreate, CarModelUpdate

DUPLICATE_MODEL = "Model already exists for this brand"


async def _get_brand_or_404(brand_id: int) -> Brand:
    brand = await Brand.get_or_none(id=brand_id)
    if not brand:
        raise NotFoundError("Brand not found")
    return brand


async def create_car_model(data: CarModelCreate) -> CarModel:
    brand = await _get_brand_or_404(data.brand)

    if await CarModel.exists(name=data.name, brand_id=brand.id):
        raise DuplicateKeyError(DUPLICATE_MODEL)
    try:
        model = await CarModel.create(name=data.name, brand=brand)
    except IntegrityError:
        raise DuplicateKeyError(DUPLICATE_MODEL)

    logger.info(f"Model created: {brand.name} {model.name}")
    return model


async def get_car_models(brand_id: Optional[int] = None) -> List[CarModel]:
    qs = CarModel.all()
    if brand_id is not None:
        qs = qs.filter(brand_id=brand_id)
    return await qs.order_by("name", "id").prefetch_related("brand")


async def get_car_model(model_id: int) -> CarModel:
    model = await CarModel.get_or_none(id=model_id).prefetch_related("brand")
    if not model:
        raise NotFoundError("Model not found")
    return model


async def update_car_model(model_id: int, data: CarModelUpdate) -> CarModel:
    model = await get_car_model(model_id)
    changes = data.model_dump(exclude_unset=True, exclude_none=True)

    brand_id = model.brand_id
    if "brand" in changes:
        brand_id = (await _get_brand_or_404(changes["brand"])).id
        if brand_id != model.brand_id:
            car_count = await Car.filter(model_id=model_id).count()
            if car_count > 0:
                raise ConflictError(
                    f"Cannot move model to another brand. It is used by {car_count} cars."
                )
    name = changes.get("name", model.name)

    if await CarModel.filter(name=name, brand_id=brand_id).exclude(id=model_id).exists():
        raise DuplicateKeyError(DUPLICATE_MODEL)

    model.name = name
    model.brand_id = brand_id
    try:
        await model.save()
    except IntegrityError:
        raise DuplicateKeyError(DUPLICATE_MODEL)

    logger.info(f"Model {model_id} updated: {changes}")
    return await get_car_model(model_id)


async def delete_car_model(model_id: int) -> None:
    model = await get_car_model(model_id)

    car_count = await Car.filter(model_id=model_id).count()
    if car_count > 0:
        raise ConflictError(f"Cannot delete model. It is used by {car_count} cars.")

    await model.delete()
    logger.info(f"Model deleted: {model.brand.name} {model.name}")
