# ABOUTME: Request pipeline operations mutating one field of one request or profile.
# ABOUTME: Every operation returns a new Profile; unknown request ids are silent no-ops.

from typing import Any

from prospect_crm.models import Profile, RequestStatus

# Statuses offered by user-facing controls. Transitions between them are free.
SELECTABLE_STATUSES: tuple[RequestStatus, ...] = (
    RequestStatus.PENDING,
    RequestStatus.IN_PROGRESS,
    RequestStatus.DELIVERED,
)


def _update_request(profile: Profile, request_id: str, **changes: Any) -> Profile:
    """Replace fields of the request with the given id.

    Args:
        profile: The profile owning the request.
        request_id: Id of the request to update.
        **changes: Field values to set on the matching request.

    Returns:
        A new Profile with the request updated, or the same profile if no
        request has that id.
    """
    if not any(request.id == request_id for request in profile.requests):
        return profile

    requests = [
        request.model_copy(update=changes) if request.id == request_id else request
        for request in profile.requests
    ]
    return profile.model_copy(update={"requests": requests})


def set_status(profile: Profile, request_id: str, new_status: RequestStatus) -> Profile:
    """Set the status of one request, regardless of its current status."""
    return _update_request(profile, request_id, status=RequestStatus(new_status))


def set_request_promo_code(profile: Profile, request_id: str, code: str) -> Profile:
    """Set the promo code cited on one request."""
    return _update_request(profile, request_id, promo_code=code)


def set_request_details(profile: Profile, request_id: str, details: str) -> Profile:
    """Set the free-text details of one request."""
    return _update_request(profile, request_id, details=details)


def set_own_promo_code(profile: Profile, code: str) -> Profile:
    """Set the referral code a profile shares with others."""
    return profile.model_copy(update={"own_promo_code": code})
