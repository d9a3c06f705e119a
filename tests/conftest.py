from unittest.mock import MagicMock

import httpx
import pytest
from fastapi.testclient import TestClient

from country_votes.main import create_app
from country_votes.storage import VoteStore

COUNTRIES = [
    {
        "name": {"common": "Chile", "official": "Republic of Chile"},
        "capital": ["Santiago"],
        "region": "Americas",
        "subregion": "South America",
    },
    {
        "name": {"common": "Peru", "official": "Republic of Peru"},
        "capital": ["Lima"],
        "region": "Americas",
        "subregion": "South America",
    },
    {
        "name": {"common": "Japan", "official": "Japan"},
        "capital": ["Tokyo"],
        "region": "Asia",
        "subregion": "Eastern Asia",
    },
]


def make_response(payload):
    response = MagicMock(spec=httpx.Response)
    response.json.return_value = payload
    response.raise_for_status = MagicMock()
    return response


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "database.json")


@pytest.fixture
def store(db_path):
    return VoteStore(db_path)


@pytest.fixture
def http_client():
    client = MagicMock(spec=httpx.Client)
    client.get.return_value = make_response(COUNTRIES)
    return client


@pytest.fixture
def client(db_path, http_client):
    app = create_app(db_path=db_path, api_url="https://countries.test/v3.1/", http_client=http_client)
    return TestClient(app)
