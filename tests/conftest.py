import pytest
from fastapi.testclient import TestClient

from app import app
from config import settings


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def chord_limit():
    original = settings.max_progression_chords
    settings.max_progression_chords = 3
    yield settings.max_progression_chords
    settings.max_progression_chords = original
