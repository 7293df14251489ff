"""API test fixtures — fresh stores + FastAPI test clients per test.

Invariants:
    - Every test gets freshly seeded stores (3 products, 3 users)
    - Store dependencies overridden on the app; the registry is patched too
      so readiness probes see the same store the routes use
    - Lifespan is not run by ASGITransport, so nothing here touches logging setup
"""

import pytest
from httpx import ASGITransport, AsyncClient

import practice_api.infrastructure.memory_store as store_module
from practice_api.core.domain_types import ServiceName
from practice_api.infrastructure.memory_store import (
    build_store, get_product_store, get_user_store,
)
from practice_api.main import products_app, users_app


@pytest.fixture
def product_store():
    return build_store(ServiceName.PRODUCTS, seed=True)


@pytest.fixture
def user_store():
    return build_store(ServiceName.USERS, seed=True)


@pytest.fixture
def registry(monkeypatch):
    """Isolated store registry for the duration of one test."""
    stores = {}
    monkeypatch.setattr(store_module, "_stores", stores)
    return stores


@pytest.fixture
async def products_client(product_store, registry):
    registry[ServiceName.PRODUCTS] = product_store
    products_app.dependency_overrides[get_product_store] = lambda: product_store
    async with AsyncClient(
        transport=ASGITransport(app=products_app), base_url="http://test",
    ) as c:
        yield c
    products_app.dependency_overrides.clear()


@pytest.fixture
async def users_client(user_store, registry):
    registry[ServiceName.USERS] = user_store
    users_app.dependency_overrides[get_user_store] = lambda: user_store
    async with AsyncClient(
        transport=ASGITransport(app=users_app), base_url="http://test",
    ) as c:
        yield c
    users_app.dependency_overrides.clear()
