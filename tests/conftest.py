import random

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from aldar.config import Settings
from aldar.core.security import hash_password
from aldar.main import create_app
from aldar.models import PropertyType
from aldar.seed import seed_storage
from aldar.services.sessions import MemorySessionStore
from aldar.services.storage import MemStorage

ADMIN_PASSWORD = "admin123"
VISITOR_PASSWORD = "visitor123"


@pytest.fixture
def settings():
    return Settings(_env_file=None, SEED_SAMPLE_DATA=False, PASSWORD_HASH_ROUNDS=4, LOG_JSON=False)


@pytest.fixture
def storage(settings):
    """Fresh store with the admin account, six sample listings and three approved testimonials."""
    store = MemStorage(rng=random.Random(1234))
    seed_storage(store, settings)
    return store


@pytest.fixture
def visitor(storage):
    return storage.create_user({
        "username": "visitor",
        "password_hash": hash_password(VISITOR_PASSWORD, rounds=4),
        "name": "زائر",
        "email": "visitor@example.com",
    })


@pytest.fixture
def sessions():
    return MemorySessionStore()


@pytest.fixture
def app(settings, storage, sessions):
    return create_app(settings=settings, storage=storage, sessions=sessions)


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def admin_client(client):
    response = await client.post("/api/login", json={"username": "admin", "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return client


@pytest_asyncio.fixture
async def visitor_client(client, visitor):
    response = await client.post("/api/login", json={"username": "visitor", "password": VISITOR_PASSWORD})
    assert response.status_code == 200
    return client


@pytest.fixture
def property_data():
    """Store-level (snake_case) field set for a complete listing."""
    def build(**overrides):
        data = {
            "title": "شقة للبيع",
            "description": "شقة واسعة في حي هادئ قريبة من الخدمات",
            "type": PropertyType.apartment,
            "price": 750000,
            "city": "الرياض",
            "neighborhood": "حي النرجس",
            "address": "شارع الثمامة، حي النرجس",
            "bedrooms": 3,
            "bathrooms": 2,
            "area": 200.0,
            "features": ["مصعد", "موقف سيارات"],
            "images": ["https://example.com/1.jpg"],
        }
        data.update(overrides)
        return data
    return build


@pytest.fixture
def property_payload():
    """Request body (camelCase) for POST /api/properties."""
    def build(**overrides):
        payload = {
            "title": "فيلا حديثة",
            "description": "فيلا حديثة بتشطيبات فاخرة وحديقة خاصة",
            "type": "villa",
            "price": 1900000,
            "isRental": False,
            "city": "الرياض",
            "neighborhood": "حي الياسمين",
            "address": "طريق الملك عبدالعزيز، حي الياسمين",
            "bedrooms": 4,
            "bathrooms": 3,
            "area": 350,
            "features": ["حديقة"],
            "images": ["https://example.com/villa.jpg"],
        }
        payload.update(overrides)
        return payload
    return build
