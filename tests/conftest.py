"""Shared fixtures: a freshly seeded store per test and a client bound to it."""

import os

os.environ.setdefault("SEED_DATA", "false")

import pytest
from fastapi.testclient import TestClient

from main import app
from service.storage import EnrollmentStore, get_store


@pytest.fixture
def store():
    store = EnrollmentStore()
    store.seed()
    return store


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
