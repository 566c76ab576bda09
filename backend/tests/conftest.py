import pytest
from fastapi.testclient import TestClient

from gamesapi.main import create_app
from gamesapi.store import GameStore


@pytest.fixture
def store():
    return GameStore()


@pytest.fixture
def client(store):
    return TestClient(create_app(store))
