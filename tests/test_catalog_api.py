import pytest
from httpx import AsyncClient

from app.models import Brand, CarModel
from helpers import auth


@pytest.mark.asyncio
async def test_create_brand_trims_name(client: AsyncClient, admin_token: str):
    response = await client.post(
        "/brands", headers=auth(admin_token), json={"name": "  Mahindra ", "category": "regular"}
    )

    assert response.status_code == 201
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "Brand added successfully"
    assert data["brand"]["name"] == "Mahindra"
    assert "createdAt" in data["brand"]


@pytest.mark.asyncio
async def test_create_duplicate_brand(client: AsyncClient, admin_token: str, toyota: Brand):
    response = await client.post("/brands", headers=auth(admin_token), json={"name": "Toyota"})

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Brand already exists"}


@pytest.mark.asyncio
async def test_create_brand_rejects_blank_name(client: AsyncClient, admin_token: str):
    response = await client.post("/brands", headers=auth(admin_token), json={"name": "   "})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_catalog_writes_need_admin(client: AsyncClient, agent_token: str, toyota: Brand):
    response = await client.post("/brands", headers=auth(agent_token), json={"name": "Kia"})
    assert response.status_code == 403
    assert response.json() == {"success": False, "message": "Admin privileges required"}

    response = await client.post(
        "/models", headers=auth(agent_token), json={"name": "Corolla", "brand": toyota.id}
    )
    assert response.status_code == 403

    response = await client.put(
        "/dropdowns/fuel_type", headers=auth(agent_token), json={"options": ["Petrol"]}
    )
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_agent_reads_catalog(client: AsyncClient, agent_token: str, camry: CarModel):
    response = await client.get("/brands", headers=auth(agent_token))
    assert response.status_code == 200
    assert [brand["name"] for brand in response.json()["brands"]] == ["Toyota"]

    response = await client.get("/models", headers=auth(agent_token))
    assert response.status_code == 200
    models = response.json()["models"]
    assert models[0]["name"] == "Camry"
    assert models[0]["brand"]["name"] == "Toyota"


@pytest.mark.asyncio
async def test_list_brands_sorted(client: AsyncClient, admin_token: str):
    for name in ("Tata", "Audi", "Maruti"):
        await client.post("/brands", headers=auth(admin_token), json={"name": name})

    response = await client.get("/brands", headers=auth(admin_token))

    assert [brand["name"] for brand in response.json()["brands"]] == ["Audi", "Maruti", "Tata"]


@pytest.mark.asyncio
async def test_update_brand(client: AsyncClient, admin_token: str, toyota: Brand):
    response = await client.put(
        f"/brands/{toyota.id}", headers=auth(admin_token), json={"category": "luxury"}
    )

    assert response.status_code == 200
    assert response.json()["brand"]["category"] == "luxury"
    assert response.json()["brand"]["name"] == "Toyota"


@pytest.mark.asyncio
async def test_delete_brand_with_models(client: AsyncClient, admin_token: str, camry: CarModel):
    response = await client.delete(f"/brands/{camry.brand_id}", headers=auth(admin_token))

    assert response.status_code == 409
    assert response.json()["message"] == "Cannot delete brand. It has 1 associated models."
    assert await Brand.exists(id=camry.brand_id)


@pytest.mark.asyncio
async def test_delete_brand(client: AsyncClient, admin_token: str, toyota: Brand):
    response = await client.delete(f"/brands/{toyota.id}", headers=auth(admin_token))
    assert response.status_code == 200

    response = await client.get(f"/brands/{toyota.id}", headers=auth(admin_token))
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Brand not found"}


@pytest.mark.asyncio
async def test_create_model_for_unknown_brand(client: AsyncClient, admin_token: str):
    response = await client.post("/models", headers=auth(admin_token), json={"name": "X", "brand": 404})

    assert response.status_code == 404
    assert response.json()["message"] == "Brand not found"


@pytest.mark.asyncio
async def test_create_duplicate_model(client: AsyncClient, admin_token: str, camry: CarModel):
    response = await client.post(
        "/models", headers=auth(admin_token), json={"name": "Camry", "brand": camry.brand_id}
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Model already exists for this brand"


@pytest.mark.asyncio
async def test_list_models_by_brand(client: AsyncClient, admin_token: str, camry: CarModel):
    honda = await Brand.create(name="Honda")
    await CarModel.create(name="City", brand=honda)

    response = await client.get(f"/models?brand={honda.id}", headers=auth(admin_token))

    assert [model["name"] for model in response.json()["models"]] == ["City"]


@pytest.mark.asyncio
async def test_delete_model(client: AsyncClient, admin_token: str, camry: CarModel):
    response = await client.delete(f"/models/{camry.id}", headers=auth(admin_token))
    assert response.status_code == 200
    assert not await CarModel.exists(id=camry.id)


@pytest.mark.asyncio
async def test_dropdown_create_and_replace(client: AsyncClient, admin_token: str, agent_token: str):
    response = await client.put(
        "/dropdowns/fuel_type", headers=auth(admin_token), json={"options": ["Petrol", " Diesel "]}
    )
    assert response.status_code == 200
    assert response.json()["dropdown"]["options"] == ["Petrol", "Diesel"]

    response = await client.put(
        "/dropdowns/fuel_type", headers=auth(admin_token), json={"options": ["CNG"]}
    )
    assert response.status_code == 200

    response = await client.get("/dropdowns/fuel_type", headers=auth(agent_token))
    assert response.status_code == 200
    dropdown = response.json()["dropdown"]
    assert dropdown["field_name"] == "fuel_type"
    assert dropdown["options"] == ["CNG"]
    assert "updatedAt" in dropdown


@pytest.mark.asyncio
async def test_dropdown_unknown_field(client: AsyncClient, admin_token: str):
    response = await client.put(
        "/dropdowns/colour", headers=auth(admin_token), json={"options": ["Red"]}
    )

    assert response.status_code == 400
    assert response.json()["message"].startswith("Unknown dropdown field 'colour'")


@pytest.mark.asyncio
async def test_dropdown_not_configured(client: AsyncClient, agent_token: str):
    response = await client.get("/dropdowns/transmission", headers=auth(agent_token))

    assert response.status_code == 404
    assert response.json()["message"] == "Dropdown options not found"


@pytest.mark.asyncio
async def test_list_dropdowns(client: AsyncClient, admin_token: str):
    await client.put("/dropdowns/transmission", headers=auth(admin_token), json={"options": ["Manual"]})
    await client.put("/dropdowns/fuel_type", headers=auth(admin_token), json={"options": ["Petrol"]})

    response = await client.get("/dropdowns", headers=auth(admin_token))

    fields = [d["field_name"] for d in response.json()["dropdowns"]]
    assert fields == ["fuel_type", "transmission"]


@pytest.mark.asyncio
async def test_delete_model_used_by_cars(client: AsyncClient, admin_token: str, listed_camry):
    response = await client.delete(f"/models/{listed_camry.model_id}", headers=auth(admin_token))

    assert response.status_code == 409
    assert response.json() == {
        "success": False,
        "message": "Cannot delete model. It is used by 1 cars.",
    }


@pytest.mark.asyncio
async def test_move_model_used_by_cars(client: AsyncClient, admin_token: str, listed_camry):
    honda = await Brand.create(name="Honda")

    response = await client.put(
        f"/models/{listed_camry.model_id}", headers=auth(admin_token), json={"brand": honda.id}
    )

    assert response.status_code == 409
    assert (await CarModel.get(id=listed_camry.model_id)).brand_id == listed_camry.brand_id


@pytest.mark.asyncio
async def test_malformed_body_uses_error_shape(client: AsyncClient, admin_token: str):
    response = await client.post("/brands", headers=auth(admin_token), json={"category": "regular"})

    assert response.status_code == 422
    assert response.json() == {"success": False, "message": "name: Field required"}
