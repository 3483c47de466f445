"""
HTTP fixtures

Each test gets a fresh app lifespan: singletons reset, the snapshot file moved
to tmp_path and the clock pinned, so every test starts from the seed data.
"""

from dependency_injector import providers
from fastapi.testclient import TestClient
import pytest

from festival_ledger.main import app
from festival_ledger.platform.config.di import container
from festival_ledger.service.festival.driven_adapter.persistence.json_snapshot_file_persister import (
    JsonSnapshotFilePersister,
)


@pytest.fixture
def isolated_container(snapshot_path, clock):
    container.reset_singletons()
    container.snapshot_persister.override(
        providers.Singleton(JsonSnapshotFilePersister, path=snapshot_path)
    )
    container.clock.override(providers.Object(clock))
    try:
        yield container
    finally:
        container.snapshot_persister.reset_override()
        container.clock.reset_override()
        container.reset_singletons()


@pytest.fixture
def client(isolated_container):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sold_ticket(client) -> str:
    response = client.post(
        '/api/box-office/sale', json={'show_id': 'IMP25-S01', 'price': 18.0, 'quantity': 1}
    )
    assert response.status_code == 201
    return response.json()['tickets'][0]['tid']
