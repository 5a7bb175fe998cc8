"""
Pytest fixtures for workout engine tests.

Builds a test application with fake repositories wired in through
FastAPI dependency overrides. No database is required.
"""

import sys
from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from api.deps import (
    get_exercise_repo,
    get_park_repo,
    get_profile_repo,
    get_program_repo,
)
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import (
    FakeExerciseRepository,
    FakeParkRepository,
    FakeProfileRepository,
    FakeProgramRepository,
)


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings() -> Settings:
    """Test settings without database credentials."""
    return Settings(
        environment="test",
        supabase_url=None,
        supabase_service_role_key=None,
        supabase_anon_key=None,
        _env_file=None,
    )


@pytest.fixture
def app(test_settings):
    """Create test application instance."""
    return create_app(settings=test_settings)


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """Plain TestClient without repository overrides."""
    yield TestClient(app)
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Fake Repository Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def profile_repo() -> FakeProfileRepository:
    return FakeProfileRepository()


@pytest.fixture
def program_repo() -> FakeProgramRepository:
    return FakeProgramRepository()


@pytest.fixture
def exercise_repo() -> FakeExerciseRepository:
    return FakeExerciseRepository()


@pytest.fixture
def park_repo() -> FakeParkRepository:
    return FakeParkRepository()


@pytest.fixture
def client_with_fakes(
    app, profile_repo, program_repo, exercise_repo, park_repo
) -> Generator[TestClient, None, None]:
    """
    TestClient whose repositories are in-memory fakes.

    Properly cleans up dependency overrides after each test.
    """
    app.dependency_overrides[get_profile_repo] = lambda: profile_repo
    app.dependency_overrides[get_program_repo] = lambda: program_repo
    app.dependency_overrides[get_exercise_repo] = lambda: exercise_repo
    app.dependency_overrides[get_park_repo] = lambda: park_repo
    yield TestClient(app)
    app.dependency_overrides.clear()
