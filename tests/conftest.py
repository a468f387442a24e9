"""Shared fixtures: profile factory, sample tour package, API client."""
import pytest
from fastapi.testclient import TestClient

from navigator.schemas.profile import UserProfile
from navigator.schemas.quote import TourPackage


@pytest.fixture
def make_profile():
    """Build a UserProfile with sensible defaults; keyword arguments override."""
    def _make(**overrides) -> UserProfile:
        data = {"nationality": "usa", "purpose_of_stay": []}
        data.update(overrides)
        return UserProfile(**data)
    return _make


@pytest.fixture
def package() -> TourPackage:
    return TourPackage(id="pkg-1", name="Chiang Mai Highlights", code="CNX-3", duration=3, base_price_per_person=10000)


@pytest.fixture
def client():
    from navigator.main import app
    with TestClient(app) as c:
        yield c
