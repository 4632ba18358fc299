import pytest
from fastapi.testclient import TestClient

from cafe_web import create_app


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def book(client):
    """Post a reservation through the form endpoint."""

    def _book(name="Ana", time="2025-12-01T19:00", guests="2 People", as_json=False):
        fields = {"name": name, "time": time, "guests": guests}
        if as_json:
            return client.post("/reservations", json=fields)
        return client.post("/reservations", data=fields)

    return _book
