import pytest
from decimal import Decimal
from typing import AsyncGenerator
from httpx import AsyncClient, ASGITransport
from tortoise import Tortoise

from app.main import app
from app.core.database import TORTOISE_MODULES
from app.core.security.auth import create_access_token
from app.enums.brand_category import BrandCategory
from app.enums.user_role import UserRole
from app.models import Brand, Car, CarModel, User
from app.services.init_service import InitService
from app.services.store import get_image_storage
from app.services.store.local import LocalImageStorage


@pytest.fixture(scope="function", autouse=True)
async def initialize_tests():
    """Fresh in-memory database for every test"""
    await Tortoise.init(db_url="sqlite://:memory:", modules=TORTOISE_MODULES)
    await Tortoise.generate_schemas()
    await InitService.init_roles()
    yield
    await Tortoise.close_connections()


@pytest.fixture
def image_storage(tmp_path) -> LocalImageStorage:
    storage = LocalImageStorage(tmp_path, "/media")
    app.dependency_overrides[get_image_storage] = lambda: storage
    yield storage
    app.dependency_overrides.pop(get_image_storage, None)


@pytest.fixture
async def client(image_storage) -> AsyncGenerator:
    """Async HTTP client bound to the app"""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def test_admin() -> User:
    return await InitService.create_user("admin@example.com", "adminpass123", UserRole.admin)


@pytest.fixture
async def test_agent() -> User:
    return await InitService.create_user("agent@example.com", "agentpass123", UserRole.agent)


@pytest.fixture
async def test_outsider() -> User:
    """Authenticated account without a dealership role"""
    return await User.create(email="outsider@example.com", password_hash="x")


@pytest.fixture
async def admin_token(test_admin: User) -> str:
    token_data = await create_access_token(test_admin)
    return token_data["access_token"]


@pytest.fixture
async def agent_token(test_agent: User) -> str:
    token_data = await create_access_token(test_agent)
    return token_data["access_token"]


@pytest.fixture
async def outsider_token(test_outsider: User) -> str:
    token_data = await create_access_token(test_outsider)
    return token_data["access_token"]


@pytest.fixture
async def toyota() -> Brand:
    return await Brand.create(name="Toyota", category=BrandCategory.regular)


@pytest.fixture
async def camry(toyota: Brand) -> CarModel:
    return await CarModel.create(name="Camry", brand=toyota)


@pytest.fixture
async def listed_camry(camry: CarModel, test_agent: User) -> Car:
    """A listing that references the Camry model"""
    return await Car.create(
        stock_code="STK-100", plate_number="KA01MM0100", brand_id=camry.brand_id, model=camry,
        variant="2.5 Hybrid", year_of_manufacture=2022, registration_year=2022,
        fuel_type="Hybrid", transmission="Automatic", km=12000, price=Decimal("3600000"),
        ownership="1st Owner", registration_state="KA", rto="KA01",
        images=[f"/media/cars/seed{i}.jpg" for i in range(4)], created_by=test_agent,
    )
