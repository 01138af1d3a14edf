"""Pytest fixtures for the Taskboard API tests."""

import pytest
from fastapi.testclient import TestClient

from taskboard.config import Settings
from taskboard.main import create_app
from taskboard.store import TaskStore


@pytest.fixture
def settings() -> Settings:
    """Settings without the sample task or the artificial list delay."""
    return Settings(seed_sample=False, list_delay_ms=0)


@pytest.fixture
def client(settings: Settings) -> TestClient:
    """Create a test client for a fresh application."""
    return TestClient(create_app(settings))


@pytest.fixture
def store(client: TestClient) -> TaskStore:
    """The store owned by the application behind ``client``."""
    return client.app.state.store
