# ABOUTME: Shared pytest fixtures for prospect-crm tests.
# ABOUTME: Provides profile factories, a sample collection and a temporary SQLite store.

import tempfile
from collections.abc import Callable, Generator
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pytest

from prospect_crm.models import Profile, RequestStatus, ServiceRequest
from prospect_crm.storage import SQLiteKeyValueStore


@pytest.fixture
def make_request() -> Callable[..., ServiceRequest]:
    """Return a factory building ServiceRequest objects with fixed dates."""

    def _make(**fields: Any) -> ServiceRequest:
        fields.setdefault("date", datetime(2025, 6, 15, 10, 30, 0, tzinfo=UTC))
        return ServiceRequest(**fields)

    return _make


@pytest.fixture
def make_profile(make_request: Callable[..., ServiceRequest]) -> Callable[..., Profile]:
    """Return a factory building Profile objects with one request by default."""

    def _make(**fields: Any) -> Profile:
        fields.setdefault("full_name", "Jean Dupont")
        fields.setdefault("email", "jean@mail.com")
        fields.setdefault("created_at", datetime(2025, 6, 15, 10, 30, 0, tzinfo=UTC))
        fields.setdefault("requests", [make_request()])
        return Profile(**fields)

    return _make


@pytest.fixture
def sample_collection(
    make_profile: Callable[..., Profile], make_request: Callable[..., ServiceRequest]
) -> list[Profile]:
    """Create a small collection with one referrer and two referred prospects."""
    return [
        make_profile(
            id="alice",
            full_name="Alice Martin",
            email="alice@example.com",
            own_promo_code="  RefCode ",
            requests=[make_request(id="a-1", details="CV redesign")],
        ),
        make_profile(
            id="bob",
            full_name="Bob Leroy",
            email="bob@example.com",
            own_promo_code="BOB10",
            requests=[
                make_request(id="b-2", promo_code="REFCODE", status=RequestStatus.DELIVERED),
                make_request(id="b-1", promo_code="refcode", status=RequestStatus.IN_PROGRESS),
            ],
        ),
        make_profile(
            id="chloe",
            full_name="Chloe Petit",
            email="chloe@example.com",
            requests=[make_request(id="c-1", promo_code=" bob10")],
        ),
    ]


@pytest.fixture
def temp_db_path() -> Generator[Path, None, None]:
    """Create a temporary database file path inside a fresh directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "data.db"


@pytest.fixture
def store(temp_db_path: Path) -> SQLiteKeyValueStore:
    """Create an initialized SQLite key-value store."""
    kv_store = SQLiteKeyValueStore(db_path=temp_db_path)
    kv_store.init_db()
    return kv_store
