import os

# модуль main создаёт приложение при импорте и читает настройки из окружения
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./restaurant_pos.db")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

import restaurant_pos.models  # noqa: F401
from restaurant_pos.config import Settings
from restaurant_pos.db.base import Base
from restaurant_pos.db.session import sync_database_url
from restaurant_pos.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'pos.db'}",
        SECRET_KEY="test-secret",
        BCRYPT_ROUNDS=4,
        REQUEST_TIMEOUT_SECONDS=10,
    )


@pytest.fixture
def app(settings):
    engine = create_engine(sync_database_url(settings.DATABASE_URL))
    Base.metadata.create_all(engine)
    engine.dispose()
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def menu(client):
    response = client.post("/menus", json={
        "name": "Lunch",
        "category": "Mains",
        "start_date": "2026-01-01T00:00:00Z",
        "end_date": "2026-12-31T00:00:00Z",
    })
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture
def food(client, menu):
    response = client.post("/foods", json={
        "name": "Pizza",
        "price": 12.5,
        "food_image": "pizza.jpg",
        "menu_id": menu["id"],
    })
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture
def table(client):
    response = client.post("/tables", json={"table_number": 7, "number_of_guests": 4})
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture
def placed_order(client, food, table):
    """Заказ из двух позиций: существующее блюдо и блюдо, которого нет в базе."""
    response = client.post("/orderItems", json={
        "table_id": table["id"],
        "order_items": [
            {"food_id": food["id"], "quantity": "S", "unit_price": 12.499},
            {"food_id": "missing-food", "quantity": "L", "unit_price": 3},
        ],
    })
    assert response.status_code == 200, response.text
    return response.json()
