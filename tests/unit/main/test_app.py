from __future__ import annotations

import pytest
from dependency_injector import providers

from src.main import app as module_app
from src.main.app import create_app
from src.main.container import get_container
from tests.conftest import FakeMongoDatabase


@pytest.mark.asyncio
async def test_create_app_initializes_lifespan() -> None:
    app = create_app()
    stub_db = FakeMongoDatabase()
    get_container().mongo_database.override(providers.Object(stub_db))

    assert app.title == "Sales Trend Service"

    async with app.router.lifespan_context(app):
        assert app.state.started_at is not None
        assert stub_db.indexes_created is True

    assert stub_db.closed is True
    # Ensure module-level app is instantiated
    assert isinstance(module_app.app, type(app))


def test_create_app_registers_routes() -> None:
    app = create_app()
    paths = set(app.openapi()["paths"])
    assert {"/health", "/info", "/predictions", "/predictions/products"} <= paths
