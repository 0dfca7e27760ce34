# ABOUTME: Tests for promo code normalization, owner resolution and usage counting.
# ABOUTME: Covers blank codes, duplicate owners and counting across the whole collection.

from collections.abc import Callable

import pytest

from prospect_crm.models import Profile, ServiceRequest
from prospect_crm.referrals import (
    count_usage,
    find_referred_requests,
    normalize_code,
    resolve_owner,
)


class TestNormalizeCode:
    """Tests for normalize_code."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("  RefCode ", "refcode"),
            ("REFCODE", "refcode"),
            ("refcode", "refcode"),
            ("", ""),
            ("   ", ""),
            (None, ""),
        ],
    )
    def test_normalize(self, raw: str | None, expected: str) -> None:
        """Test trimming and lower-casing of codes."""
        assert normalize_code(raw) == expected


class TestResolveOwner:
    """Tests for resolve_owner."""

    def test_resolves_case_and_whitespace_insensitively(
        self, sample_collection: list[Profile]
    ) -> None:
        """Test that a cited code finds the profile owning it."""
        owner = resolve_owner("refcode", sample_collection)
        assert owner is not None
        assert owner.id == "alice"

    @pytest.mark.parametrize("code", ["refcode", "REFCODE", "  RefCode  ", "\tREFcode\n"])
    def test_normalization_is_idempotent(
        self, sample_collection: list[Profile], code: str
    ) -> None:
        """Test that resolving a code equals resolving its normalized form."""
        assert resolve_owner(code, sample_collection) == resolve_owner(
            normalize_code(code), sample_collection
        )

    def test_blank_code_has_no_owner(
        self, sample_collection: list[Profile], make_profile: Callable[..., Profile]
    ) -> None:
        """Test that blank codes never match, even profiles with blank own codes."""
        collection = [*sample_collection, make_profile(own_promo_code="   ")]

        assert resolve_owner("", collection) is None
        assert resolve_owner("   ", collection) is None
        assert resolve_owner(None, collection) is None

    def test_unknown_code_has_no_owner(self, sample_collection: list[Profile]) -> None:
        """Test that an unowned code resolves to None."""
        assert resolve_owner("NOPE", sample_collection) is None

    def test_empty_collection(self) -> None:
        """Test resolving against an empty collection."""
        assert resolve_owner("refcode", []) is None

    def test_duplicate_codes_resolve_to_first_profile(
        self, make_profile: Callable[..., Profile]
    ) -> None:
        """Test that the first profile in collection order wins, on every call."""
        first = make_profile(id="first", own_promo_code="Shared")
        second = make_profile(id="second", own_promo_code=" SHARED ")
        collection = [first, second]

        for _ in range(5):
            assert resolve_owner("shared", collection) is first

        assert resolve_owner("shared", [second, first]) is second


class TestCountUsage:
    """Tests for count_usage."""

    def test_counts_requests_across_collection(
        self, make_profile: Callable[..., Profile], make_request: Callable[..., ServiceRequest]
    ) -> None:
        """Test that a code cited once by another profile counts once."""
        referrer = make_profile(id="x", own_promo_code="  RefCode ")
        referred = make_profile(id="y", requests=[make_request(promo_code="refcode")])
        collection = [referrer, referred]

        assert resolve_owner("refcode", collection) is referrer
        assert count_usage(referrer, collection) == 1

    def test_counts_every_matching_request(self, sample_collection: list[Profile]) -> None:
        """Test that all matching requests are counted, whatever their case."""
        alice, bob, _ = sample_collection

        assert count_usage(alice, sample_collection) == 2
        assert count_usage(bob, sample_collection) == 1

    def test_blank_own_code_counts_zero(
        self, make_profile: Callable[..., Profile], make_request: Callable[..., ServiceRequest]
    ) -> None:
        """Test that a profile without a code has zero usage, even if requests cite blanks."""
        profile = make_profile(own_promo_code="", requests=[make_request(promo_code="")])
        other = make_profile(requests=[make_request(promo_code="  ")])

        assert count_usage(profile, [profile, other]) == 0

    def test_own_requests_are_counted(
        self, make_profile: Callable[..., Profile], make_request: Callable[..., ServiceRequest]
    ) -> None:
        """Test that a profile citing its own code is counted."""
        profile = make_profile(own_promo_code="SELF", requests=[make_request(promo_code="self")])
        assert count_usage(profile, [profile]) == 1

    def test_usage_reflects_current_state(
        self, make_profile: Callable[..., Profile], make_request: Callable[..., ServiceRequest]
    ) -> None:
        """Test that counts are recomputed from the collection passed in."""
        referrer = make_profile(own_promo_code="CODE")
        referred = make_profile(requests=[make_request(promo_code="")])

        assert count_usage(referrer, [referrer, referred]) == 0

        updated = referred.model_copy(
            update={"requests": [referred.requests[0].model_copy(update={"promo_code": "code"})]}
        )
        assert count_usage(referrer, [referrer, updated]) == 1


class TestFindReferredRequests:
    """Tests for find_referred_requests."""

    def test_returns_requests_with_their_profiles(self, sample_collection: list[Profile]) -> None:
        """Test that matches are returned with their owning profile in collection order."""
        alice, bob, _ = sample_collection

        referred = find_referred_requests(alice, sample_collection)

        assert [(p.id, r.id) for p, r in referred] == [("bob", "b-2"), ("bob", "b-1")]

    def test_blank_code_returns_empty(self, make_profile: Callable[..., Profile]) -> None:
        """Test that a profile without a code has no referred requests."""
        profile = make_profile(own_promo_code="")
        assert find_referred_requests(profile, [profile]) == []
