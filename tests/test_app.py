from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

import main


@pytest.fixture
def create_all_calls(monkeypatch):
    calls = []
    fake_base = SimpleNamespace(metadata=SimpleNamespace(create_all=lambda bind: calls.append(bind)))
    monkeypatch.setattr(main, "Base", fake_base)
    return calls


def test_startup_creates_tables(create_all_calls):
    with TestClient(main.app) as c:
        assert c.get("/").json() == {"status": "The Living Room Cafe API online"}
    assert create_all_calls == [main.engine]


def test_tables_not_created_without_startup(create_all_calls):
    TestClient(main.app).get("/")
    assert create_all_calls == []
