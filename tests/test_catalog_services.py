import pytest

from app.core.exceptions import (ConflictError, DuplicateKeyError, InvalidArgumentError,
                                 NotFoundError, ValidationError)
from app.enums.brand_category import BrandCategory
from app.models import Brand, CarModel, DropdownOption
from app.schemas.catalog.brand import BrandCreate, BrandUpdate
from app.schemas.catalog.model import CarModelCreate, CarModelUpdate
from app.services.catalog import brand as brand_service
from app.services.catalog import model as model_service
from app.services.catalog import dropdown as dropdown_service


@pytest.mark.asyncio
async def test_create_brand_trims_name():
    brand = await brand_service.create_brand(BrandCreate(name="  Hyundai  ", category="luxury"))
    assert brand.name == "Hyundai"
    assert brand.category == BrandCategory.luxury


@pytest.mark.asyncio
async def test_create_brand_duplicate_name(toyota: Brand):
    with pytest.raises(DuplicateKeyError):
        await brand_service.create_brand(BrandCreate(name="Toyota"))


@pytest.mark.asyncio
async def test_brand_names_are_case_sensitive(toyota: Brand):
    brand = await brand_service.create_brand(BrandCreate(name="TOYOTA"))
    assert brand.id != toyota.id


@pytest.mark.asyncio
async def test_brands_sorted_by_name():
    for name in ["Skoda", "Audi", "Mahindra"]:
        await brand_service.create_brand(BrandCreate(name=name))
    brands = await brand_service.get_all_brands()
    assert [b.name for b in brands] == ["Audi", "Mahindra", "Skoda"]


@pytest.mark.asyncio
async def test_update_brand_rejects_taken_name(toyota: Brand):
    kia = await Brand.create(name="Kia", category=BrandCategory.regular)
    with pytest.raises(DuplicateKeyError):
        await brand_service.update_brand(kia.id, BrandUpdate(name="Toyota"))

    updated = await brand_service.update_brand(kia.id, BrandUpdate(category="luxury"))
    assert updated.name == "Kia"
    assert updated.category == BrandCategory.luxury


@pytest.mark.asyncio
async def test_delete_brand_without_models(toyota: Brand):
    await brand_service.delete_brand(toyota.id)
    assert not await Brand.exists(id=toyota.id)


@pytest.mark.asyncio
async def test_delete_brand_with_models_reports_count(toyota: Brand):
    await CarModel.create(name="Camry", brand=toyota)
    await CarModel.create(name="Fortuner", brand=toyota)

    with pytest.raises(ConflictError) as exc:
        await brand_service.delete_brand(toyota.id)

    assert "2 associated models" in exc.value.message
    assert await Brand.exists(id=toyota.id)


@pytest.mark.asyncio
async def test_delete_unknown_brand():
    with pytest.raises(NotFoundError):
        await brand_service.delete_brand(999)


@pytest.mark.asyncio
async def test_create_model_for_unknown_brand():
    with pytest.raises(NotFoundError):
        await model_service.create_car_model(CarModelCreate(name="Camry", brand=999))


@pytest.mark.asyncio
async def test_model_name_unique_per_brand(toyota: Brand, camry: CarModel):
    with pytest.raises(DuplicateKeyError):
        await model_service.create_car_model(CarModelCreate(name=" Camry ", brand=toyota.id))

    # another brand may reuse the name
    lexus = await Brand.create(name="Lexus", category=BrandCategory.luxury)
    model = await model_service.create_car_model(CarModelCreate(name="Camry", brand=lexus.id))
    assert model.brand_id == lexus.id


@pytest.mark.asyncio
async def test_models_filtered_by_brand_and_sorted(toyota: Brand):
    honda = await Brand.create(name="Honda", category=BrandCategory.regular)
    for name in ["Innova", "Camry", "Glanza"]:
        await CarModel.create(name=name, brand=toyota)
    await CarModel.create(name="City", brand=honda)

    models = await model_service.get_car_models(brand_id=toyota.id)
    assert [m.name for m in models] == ["Camry", "Glanza", "Innova"]
    assert all(m.brand.name == "Toyota" for m in models)
    assert len(await model_service.get_car_models()) == 4


@pytest.mark.asyncio
async def test_update_model_move_to_brand_with_same_name(toyota: Brand, camry: CarModel):
    lexus = await Brand.create(name="Lexus", category=BrandCategory.luxury)
    await CarModel.create(name="Camry", brand=lexus)

    with pytest.raises(DuplicateKeyError):
        await model_service.update_car_model(camry.id, CarModelUpdate(brand=lexus.id))

    renamed = await model_service.update_car_model(camry.id, CarModelUpdate(name="Camry Hybrid"))
    assert renamed.name == "Camry Hybrid"
    assert renamed.brand.id == toyota.id


@pytest.mark.asyncio
async def test_update_dropdown_creates_then_replaces():
    created = await dropdown_service.update_dropdown("fuel_type", ["Petrol", "Diesel"])
    assert created.options == ["Petrol", "Diesel"]

    replaced = await dropdown_service.update_dropdown("fuel_type", ["CNG"])
    assert replaced.options == ["CNG"]

    stored = await DropdownOption.get(field_name="fuel_type")
    assert stored.options == ["CNG"]
    assert await DropdownOption.all().count() == 1


@pytest.mark.asyncio
async def test_update_dropdown_unknown_field():
    with pytest.raises(InvalidArgumentError):
        await dropdown_service.update_dropdown("colour", ["Red"])


@pytest.mark.asyncio
async def test_update_dropdown_rejects_blank_options():
    with pytest.raises(ValidationError):
        await dropdown_service.update_dropdown("ownership", ["1st Owner", "  "])


@pytest.mark.asyncio
async def test_get_dropdown_not_configured():
    with pytest.raises(NotFoundError):
        await dropdown_service.get_dropdown("transmission")


@pytest.mark.asyncio
async def test_delete_model_used_by_cars(listed_camry):
    with pytest.raises(ConflictError) as exc:
        await model_service.delete_car_model(listed_camry.model_id)

    assert exc.value.message == "Cannot delete model. It is used by 1 cars."
    assert await CarModel.exists(id=listed_camry.model_id)


@pytest.mark.asyncio
async def test_model_used_by_cars_keeps_its_brand(listed_camry):
    lexus = await Brand.create(name="Lexus", category=BrandCategory.luxury)

    with pytest.raises(ConflictError) as exc:
        await model_service.update_car_model(listed_camry.model_id, CarModelUpdate(brand=lexus.id))
    assert exc.value.message == "Cannot move model to another brand. It is used by 1 cars."

    renamed = await model_service.update_car_model(
        listed_camry.model_id, CarModelUpdate(name="Camry Hybrid", brand=listed_camry.brand_id)
    )
    assert renamed.name == "Camry Hybrid"
