"""
Shared pytest fixtures.

Fake repository fixtures live in tests/fakes/conftest.py and are re-exported
here so every test directory can use them.
"""

import pytest
from fastapi.testclient import TestClient

from api.deps import (
    get_exercise_catalog,
    get_template_exercise_repo,
)
from backend.main import create_app
from backend.settings import Settings
from tests.fakes.conftest import (  # noqa: F401
    fake_exercise_catalog,
    fake_template_exercise_repo,
    override_dependency,
    reset_overrides,
)


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from any local .env file."""
    return Settings(environment="test", _env_file=None)


@pytest.fixture
def app(test_settings, fake_template_exercise_repo, fake_exercise_catalog):
    """App wired to fresh in-memory fakes."""
    application = create_app(settings=test_settings)
    override_dependency(application, get_template_exercise_repo, fake_template_exercise_repo)
    override_dependency(application, get_exercise_catalog, fake_exercise_catalog)
    yield application
    reset_overrides(application)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
