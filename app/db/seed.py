"""
Load the reference catalogue (brands, models, dropdown vocabularies).

    python -m app.db.seed

Existing brands and models are kept, missing ones are added; dropdown lists are
replaced with the fixture values.
"""
from loguru import logger
from tortoise import run_async

from app.core.database import DatabaseManager
from app.db.fixtures.catalog import BRANDS, DROPDOWNS
from app.models import Brand, CarModel
from app.services.catalog.dropdown import update_dropdown
from app.services.init_service import InitService


async def seed_catalog(brands=BRANDS, dropdowns=DROPDOWNS) -> dict:
    created_brands = created_models = 0

    for entry in brands:
        brand, created = await Brand.get_or_create(
            name=entry["name"], defaults={"category": entry["category"]}
        )
        created_brands += created
        for model_name in entry["models"]:
            _, created = await CarModel.get_or_create(name=model_name, brand=brand)
            created_models += created
        logger.info(f"Brand {brand.name} ({brand.category.value}): {len(entry['models'])} models")

    for field_name, options in dropdowns.items():
        await update_dropdown(field_name, options)

    return {"brands": created_brands, "models": created_models, "dropdowns": len(dropdowns)}


async def main():
    await DatabaseManager.init()
    await InitService.init_roles()
    await InitService.create_default_users()
    stats = await seed_catalog()
    logger.success(
        f"Catalogue seeded: {stats['brands']} new brands, {stats['models']} new models, "
        f"{stats['dropdowns']} dropdowns"
    )


if __name__ == "__main__":
    run_async(main())
