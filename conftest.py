import pytest

from app import create_app
from config import Config
from store import Store


@pytest.fixture
def store():
    with Store(":memory:") as s:
        yield s


@pytest.fixture
def app(store):
    app = create_app(store, Config(database=":memory:"))
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
