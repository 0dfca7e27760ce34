# ABOUTME: Case-insensitive filtering of the profile collection.
# ABOUTME: Matches a term against names, emails and the promo codes cited on requests.

from collections.abc import Sequence

from prospect_crm.models import Profile


def filter_profiles(profiles: Sequence[Profile], term: str | None) -> list[Profile]:
    """Return profiles matching a search term, in collection order.

    A profile matches when the term appears in its full name, its email or
    the promo code of any of its requests. A blank term matches everything.

    Args:
        profiles: Profiles to filter.
        term: Search term.

    Returns:
        Matching profiles.
    """
    needle = (term or "").strip().lower()
    if not needle:
        return list(profiles)

    return [
        profile
        for profile in profiles
        if needle in profile.full_name.lower()
        or needle in profile.email.lower()
        or any(needle in request.promo_code.lower() for request in profile.requests)
    ]
