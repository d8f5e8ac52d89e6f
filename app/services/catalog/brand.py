from typing import List
from loguru import logger
from tortoise.exceptions import IntegrityError

from app.core.exceptions import ConflictError, DuplicateKeyError, NotFoundError
from app.models.catalog.brand import Brand
from app.models.catalog.model import CarModel
from app.schemas.catalog.brand import BrandCreate, BrandUpdate


async def create_brand(data: BrandCreate) -> Brand:
    if await Brand.exists(name=data.name):
        raise DuplicateKeyError("Brand already exists")
    try:
        brand = await Brand.create(name=data.name, category=data.category)
    except IntegrityError:
        # lost a race against a concurrent insert; the unique index decided
        raise DuplicateKeyError("Brand already exists")
    logger.info(f"Brand created: {brand.name} ({brand.category.value})")
    return brand


async def get_all_brands() -> List[Brand]:
    return await Brand.all().order_by("name")


async def get_brand(brand_id: int) -> Brand:
    brand = await Brand.get_or_none(id=brand_id)
    if not brand:
        raise NotFoundError("Brand not found")
    return brand


async def update_brand(brand_id: int, data: BrandUpdate) -> Brand:
    brand = await get_brand(brand_id)
    changes = data.model_dump(exclude_unset=True, exclude_none=True)

    new_name = changes.get("name")
    if new_name and await Brand.filter(name=new_name).exclude(id=brand_id).exists():
        raise DuplicateKeyError("Brand already exists")

    brand.update_from_dict(changes)
    try:
        await brand.save()
    except IntegrityError:
        raise DuplicateKeyError("Brand already exists")
    logger.info(f"Brand {brand_id} updated: {changes}")
    return brand


async def delete_brand(brand_id: int) -> None:
    brand = await get_brand(brand_id)

    model_count = await CarModel.filter(brand_id=brand_id).count()
    if model_count > 0:
        raise ConflictError(f"Cannot delete brand. It has {model_count} associated models.")

    try:
        await brand.delete()
    except IntegrityError:
        raise ConflictError("Cannot delete brand. It is still referenced by cars.")
    logger.info(f"Brand deleted: {brand.name}")
