# ABOUTME: Tests for request pipeline operations.
# ABOUTME: Covers single-field updates, unconstrained transitions, no-ops and idempotence.

from collections.abc import Callable

import pytest

from prospect_crm.models import Profile, RequestStatus, ServiceRequest
from prospect_crm.pipeline import (
    SELECTABLE_STATUSES,
    set_own_promo_code,
    set_request_details,
    set_request_promo_code,
    set_status,
)


@pytest.fixture
def profile(
    make_profile: Callable[..., Profile], make_request: Callable[..., ServiceRequest]
) -> Profile:
    """Create a profile with two requests, newest first."""
    return make_profile(
        own_promo_code="JEAN",
        requests=[
            make_request(id="new", promo_code="A", details="Cover letter"),
            make_request(id="old", promo_code="B", details="CV redesign"),
        ],
    )


class TestSelectableStatuses:
    """Tests for the statuses offered by controls."""

    def test_selectable_statuses(self) -> None:
        """Test that only pending, in progress and delivered are offered."""
        assert SELECTABLE_STATUSES == (
            RequestStatus.PENDING,
            RequestStatus.IN_PROGRESS,
            RequestStatus.DELIVERED,
        )
        assert RequestStatus.CANCELLED not in SELECTABLE_STATUSES


class TestSetStatus:
    """Tests for set_status."""

    def test_updates_only_matching_request(self, profile: Profile) -> None:
        """Test that only the target request's status changes."""
        updated = set_status(profile, "old", RequestStatus.IN_PROGRESS)

        assert updated.requests[1].status == RequestStatus.IN_PROGRESS
        assert updated.requests[1].promo_code == "B"
        assert updated.requests[1].details == "CV redesign"
        assert updated.requests[0] == profile.requests[0]
        assert [r.id for r in updated.requests] == ["new", "old"]

    def test_returns_new_profile(self, profile: Profile) -> None:
        """Test that the input profile is left untouched."""
        updated = set_status(profile, "new", RequestStatus.DELIVERED)

        assert updated is not profile
        assert profile.requests[0].status == RequestStatus.PENDING
        assert updated.id == profile.id

    @pytest.mark.parametrize(
        ("start", "target"),
        [
            (RequestStatus.DELIVERED, RequestStatus.PENDING),
            (RequestStatus.PENDING, RequestStatus.DELIVERED),
            (RequestStatus.DELIVERED, RequestStatus.IN_PROGRESS),
            (RequestStatus.IN_PROGRESS, RequestStatus.PENDING),
        ],
    )
    def test_transitions_are_unconstrained(
        self, profile: Profile, start: RequestStatus, target: RequestStatus
    ) -> None:
        """Test that any selectable status can be set from any status."""
        current = set_status(profile, "new", start)
        assert set_status(current, "new", target).requests[0].status == target

    def test_unknown_request_is_noop(self, profile: Profile) -> None:
        """Test that an unknown request id returns the profile unchanged."""
        result = set_status(profile, "unknown-id", RequestStatus.DELIVERED)

        assert result == profile
        assert result.model_dump() == profile.model_dump()

    def test_idempotent(self, profile: Profile) -> None:
        """Test that applying the same status twice equals applying it once."""
        once = set_status(profile, "new", RequestStatus.DELIVERED)
        twice = set_status(once, "new", RequestStatus.DELIVERED)

        assert twice == once

    def test_accepts_status_value_string(self, profile: Profile) -> None:
        """Test that a raw status value is coerced to the enum."""
        updated = set_status(profile, "new", "IN_PROGRESS")  # type: ignore[arg-type]
        assert updated.requests[0].status is RequestStatus.IN_PROGRESS


class TestSetRequestFields:
    """Tests for set_request_promo_code and set_request_details."""

    def test_set_request_promo_code(self, profile: Profile) -> None:
        """Test that only the cited code of the target request changes."""
        updated = set_request_promo_code(profile, "new", "REFCODE")

        assert updated.requests[0].promo_code == "REFCODE"
        assert updated.requests[0].details == "Cover letter"
        assert updated.requests[1] == profile.requests[1]
        assert updated.own_promo_code == "JEAN"

    def test_set_request_details(self, profile: Profile) -> None:
        """Test that only the details of the target request change."""
        updated = set_request_details(profile, "old", "Full rebrand")

        assert updated.requests[1].details == "Full rebrand"
        assert updated.requests[1].promo_code == "B"
        assert updated.requests[0] == profile.requests[0]

    def test_unknown_request_is_noop(self, profile: Profile) -> None:
        """Test that both field updates ignore unknown ids."""
        assert set_request_promo_code(profile, "missing", "X") == profile
        assert set_request_details(profile, "missing", "X") == profile

    def test_request_date_and_id_preserved(self, profile: Profile) -> None:
        """Test that id and creation date are never modified."""
        updated = set_request_details(profile, "new", "Changed")

        assert updated.requests[0].id == "new"
        assert updated.requests[0].date == profile.requests[0].date


class TestSetOwnPromoCode:
    """Tests for set_own_promo_code."""

    def test_replaces_own_code(self, profile: Profile) -> None:
        """Test that the profile-level code is replaced and requests untouched."""
        updated = set_own_promo_code(profile, "NEWCODE")

        assert updated.own_promo_code == "NEWCODE"
        assert updated.requests == profile.requests
        assert profile.own_promo_code == "JEAN"

    def test_clearing_own_code(self, profile: Profile) -> None:
        """Test that the code can be cleared."""
        assert set_own_promo_code(profile, "").own_promo_code == ""
