# ABOUTME: Statistics derived from profiles and their request histories.
# ABOUTME: Provides per-profile request counts and aggregated collection stats for the status command.

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel

from prospect_crm.models import Profile, RequestStatus, ServiceRequest
from prospect_crm.referrals import resolve_owner


class ProfileStats(BaseModel):
    """Request statistics for a single profile."""

    total_requests: int
    delivered_requests: int
    latest_request: ServiceRequest


def get_profile_stats(profile: Profile) -> ProfileStats:
    """Compute request statistics for a profile.

    The latest request is the first element of the request list, since new
    requests are always inserted at the front.

    Args:
        profile: The profile to summarize.

    Returns:
        ProfileStats for the profile.
    """
    requests = profile.requests
    return ProfileStats(
        total_requests=len(requests),
        delivered_requests=sum(1 for r in requests if r.status == RequestStatus.DELIVERED),
        latest_request=requests[0],
    )


def get_collection_stats(profiles: Sequence[Profile]) -> dict[str, Any]:
    """Get statistics about the whole profile collection.

    Args:
        profiles: All profiles, in canonical order.

    Returns:
        Dictionary containing:
            - total_profiles: Number of profiles
            - total_requests: Number of requests across all profiles
            - status_distribution: Dict mapping every status value to its count
            - profiles_with_code: Profiles with a non-blank own promo code
            - referral_uses: Requests whose cited code resolves to an owner
    """
    status_distribution = {status.value: 0 for status in RequestStatus}
    total_requests = 0
    referral_uses = 0

    for profile in profiles:
        for request in profile.requests:
            total_requests += 1
            status_distribution[request.status.value] += 1
            if resolve_owner(request.promo_code, profiles) is not None:
                referral_uses += 1

    return {
        "total_profiles": len(profiles),
        "total_requests": total_requests,
        "status_distribution": status_distribution,
        "profiles_with_code": sum(1 for p in profiles if p.own_promo_code.strip()),
        "referral_uses": referral_uses,
    }
