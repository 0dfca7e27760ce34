# ABOUTME: Resolves promo codes cited on requests to the profiles that own them.
# ABOUTME: Counts how often a profile's own referral code is used across the collection.

from collections.abc import Iterable

from prospect_crm.models import Profile, ServiceRequest


def normalize_code(code: str | None) -> str:
    """Normalize a promo code for comparison.

    Args:
        code: Raw code as typed or extracted, or None.

    Returns:
        The trimmed, lower-cased code. Blank input yields an empty string.
    """
    if not code:
        return ""
    return code.strip().lower()


def resolve_owner(code: str | None, collection: Iterable[Profile]) -> Profile | None:
    """Find the profile whose own promo code matches a cited code.

    When several profiles share the same normalized code, the first one in
    collection order wins.

    Args:
        code: The cited promo code.
        collection: All profiles, in canonical order.

    Returns:
        The owning Profile, or None if the code is blank or unowned.
    """
    normalized = normalize_code(code)
    if not normalized:
        return None

    for profile in collection:
        if normalize_code(profile.own_promo_code) == normalized:
            return profile
    return None


def find_referred_requests(
    profile: Profile, collection: Iterable[Profile]
) -> list[tuple[Profile, ServiceRequest]]:
    """List every request citing a profile's own promo code.

    The profile's own requests are included.

    Args:
        profile: The profile whose code is looked up.
        collection: All profiles, in canonical order.

    Returns:
        (owner of the request, request) pairs in collection order.
    """
    own_code = normalize_code(profile.own_promo_code)
    if not own_code:
        return []

    return [
        (candidate, request)
        for candidate in collection
        for request in candidate.requests
        if normalize_code(request.promo_code) == own_code
    ]


def count_usage(profile: Profile, collection: Iterable[Profile]) -> int:
    """Count how many requests in the collection cite a profile's own code.

    Args:
        profile: The profile whose code is counted.
        collection: All profiles, in canonical order.

    Returns:
        Number of matching requests, 0 when the profile has no code.
    """
    return len(find_referred_requests(profile, collection))
