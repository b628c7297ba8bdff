import pytest
from fastapi.testclient import TestClient

from todo_api.main import create_app
from todo_api.services import DataService, TodoService, UserService
from todo_api.settings import Settings
from todo_api.store import InMemoryDataStore


@pytest.fixture
def client():
    """Client for an app whose store starts empty."""
    app = create_app(Settings(initialize_sample_data=False))
    with TestClient(app) as c:
        yield c


@pytest.fixture
def seeded_client():
    """Client for an app whose store starts with the sample data."""
    app = create_app(Settings(initialize_sample_data=True))
    with TestClient(app) as c:
        yield c


@pytest.fixture
def store():
    return InMemoryDataStore().initialize(False)


@pytest.fixture
def users(store):
    return UserService(store)


@pytest.fixture
def todos(store, users):
    return TodoService(store, users)


@pytest.fixture
def data(store):
    return DataService(store, Settings(initialize_sample_data=False))
