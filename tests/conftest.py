"""
Pytest fixtures shared by the analytics and API tests.
"""

import pytest
from fastapi.testclient import TestClient

from analytics.table import Table, parse_table
from storage import tables

SAMPLE_CSV = "\n".join(
    [
        "id,height,weight,city",
        "1,150,50,Lima",
        "2,160,60,Quito",
        "3,170,70,Lima",
        "4,180,80,Bogota",
        "",
    ]
)


@pytest.fixture
def sample_csv() -> str:
    return SAMPLE_CSV


@pytest.fixture
def sample_table() -> Table:
    return parse_table(SAMPLE_CSV)


@pytest.fixture(autouse=True)
def reset_store():
    """Each test starts with no table and a fresh token counter."""
    tables.reset()
    yield
    tables.reset()


@pytest.fixture
def client():
    from api.main import app

    return TestClient(app)


@pytest.fixture
def uploaded(client, sample_csv):
    """Client with the sample CSV already uploaded."""
    response = client.post(
        "/upload", files={"file": ("people.csv", sample_csv.encode(), "text/csv")}
    )
    assert response.status_code == 200
    return client
