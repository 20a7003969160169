import json

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

import fixtures
from app import app
from page_controller import PageController
from tests.sample_data import DESCRIPTIONS, LINKS, TRUCKS


def write_json(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    data = tmp_path / "data"
    data.mkdir()
    write_json(data / "ktruckimage.json", TRUCKS)
    write_json(data / "ktruckdescription.json", DESCRIPTIONS)
    write_json(data / "links.json", LINKS)
    monkeypatch.setattr(fixtures, "DATA_DIR", data)
    return data


@pytest.fixture
def client(data_dir):
    return TestClient(app)


@pytest_asyncio.fixture
async def async_client(data_dir):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c


@pytest_asyncio.fixture
async def controller(async_client):
    return PageController(async_client)


@pytest_asyncio.fixture
async def loaded_controller(controller):
    await controller.load()
    return controller
