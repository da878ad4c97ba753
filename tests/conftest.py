import json

import pytest
from fastapi.testclient import TestClient

from main import app


@pytest.fixture
def client():
    # entering the client runs the lifespan, so each test gets a freshly seeded store
    with TestClient(app) as c:
        yield c


@pytest.fixture
def seed_file(tmp_path, monkeypatch):
    """Write a seed document and point QUESTIONS_FILE at it."""

    def _write(data, name="questions.json"):
        p = tmp_path / name
        p.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
        monkeypatch.setenv("QUESTIONS_FILE", str(p))
        return p

    return _write
