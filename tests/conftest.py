"""Shared fixtures: a JSON container in a temporary directory."""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from salon.container import reset_container, set_container
from salon.main import create_app
from salon.operations import catalog, customers
from salon.repositories.json_store.factory import create_json_container


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "data"


@pytest.fixture
def container(data_dir):
    container = create_json_container(str(data_dir))
    set_container(container)
    yield container
    reset_container()


@pytest.fixture
def client(container):
    return TestClient(create_app(container))


@pytest.fixture
def base_time():
    return datetime(2024, 3, 1, 10, 0)


@pytest.fixture
def cut(container):
    return catalog.create_service("カット", 40, 4500, "カット")


@pytest.fixture
def color(container):
    return catalog.create_service("カラー", 90, 8000, "カラー")


@pytest.fixture
def hanako(container):
    return customers.create_customer("山田 花子", "090-1234-5678", kana="やまだ はなこ")
